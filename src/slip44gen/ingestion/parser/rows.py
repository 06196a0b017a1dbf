# SPDX-License-Identifier: Apache-2.0
"""Row extraction for the SLIP-0044 markdown table.

The registry is a single markdown table with outer pipes:

    | Coin type  | Path component (`coin_type'`) | Symbol  | Coin      |
    | ---------- | ----------------------------- | ------- | --------- |
    | 0          | 0x80000000                    | BTC     | Bitcoin   |

Everything before the header line is ignored, as is the separator row right
after it. Malformed rows are logged and skipped, never fatal.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from slip44gen.errors import TableHeaderNotFoundError
from slip44gen.metrics import ROWS

logger = logging.getLogger(__name__)

SLIP44_MARKDOWN_HEADER = (
    "| Coin type  | Path component (`coin_type'`) | Symbol  | Coin                              |"
)

# Leading empty cell, id, path component, symbol, name, trailing empty cell
EXPECTED_CELLS = 6

RESERVED_MARKER = "reserved"

# Coin types are unsigned 32-bit values
MAX_COIN_TYPE = 0xFFFFFFFF

ID_CELL = 1
PATH_CELL = 2
SYMBOL_CELL = 3
NAME_CELL = 4


@dataclass(frozen=True)
class TableRow:
    """One accepted registry row with trimmed cells."""

    coin_type: int
    path_component: str
    symbol: str
    original_name: str
    line_no: int


@dataclass
class ExtractionResult:
    rows: list[TableRow] = field(default_factory=list)
    skipped: Counter = field(default_factory=Counter)

    @property
    def skipped_total(self) -> int:
        return sum(self.skipped.values())


def _parse_coin_type(cell: str) -> Optional[int]:
    value = cell.strip()
    if not value.isascii() or not value.isdigit():
        return None
    coin_type = int(value)
    if coin_type > MAX_COIN_TYPE:
        return None
    return coin_type


def _skip(result: ExtractionResult, reason: str) -> None:
    result.skipped[reason] += 1
    ROWS.labels(outcome=reason).inc()


def extract_rows(text: str, header: str = SLIP44_MARKDOWN_HEADER) -> ExtractionResult:
    """Split registry markdown into accepted table rows.

    Args:
        text: Full markdown document
        header: Exact header line marking the start of the table

    Returns:
        ExtractionResult with accepted rows in document order and per-reason
        skip counts ("columns", "reserved", "invalid_id")

    Raises:
        TableHeaderNotFoundError: If ``header`` does not appear in ``text``
    """
    # Only \n ends a row; cells may hold other Unicode line separators
    lines = [line.rstrip("\r") for line in text.split("\n")]
    if lines and not lines[-1]:
        lines.pop()
    try:
        header_index = lines.index(header)
    except ValueError:
        raise TableHeaderNotFoundError(header) from None

    logger.info("Found header line at line %d, starting processing", header_index + 1)

    result = ExtractionResult()
    # +1 skips the header itself, +1 the separator row
    first_row = header_index + 2
    for offset, line in enumerate(lines[first_row:]):
        line_no = first_row + offset + 1
        cells = line.split("|")
        if len(cells) != EXPECTED_CELLS:
            logger.warning(
                "Skipping line %d due to incorrect number of columns (%d): %s",
                line_no,
                len(cells),
                line,
            )
            _skip(result, "columns")
            continue

        original_name = cells[NAME_CELL].strip()
        if not original_name or original_name == RESERVED_MARKER:
            logger.warning(
                "Skipping line %d due to empty or reserved name: %r", line_no, original_name
            )
            _skip(result, "reserved")
            continue

        coin_type = _parse_coin_type(cells[ID_CELL])
        if coin_type is None:
            logger.warning("Skipping line %d due to invalid ID: %r", line_no, cells[ID_CELL])
            _skip(result, "invalid_id")
            continue

        result.rows.append(
            TableRow(
                coin_type=coin_type,
                path_component=cells[PATH_CELL].strip(),
                symbol=cells[SYMBOL_CELL].strip(),
                original_name=original_name,
                line_no=line_no,
            )
        )

    logger.info(
        "Extracted %d rows (%d skipped)", len(result.rows), result.skipped_total
    )
    return result
