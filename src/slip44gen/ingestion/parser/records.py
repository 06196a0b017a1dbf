# SPDX-License-Identifier: Apache-2.0
"""Build CoinRecord objects from extracted table rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from slip44gen.domain import CoinRecord
from slip44gen.domain.coin import safe_create
from slip44gen.errors import NameNormalizationError
from slip44gen.metrics import ROWS

from .names import clean_symbol, normalize_name
from .rows import TableRow

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    records: list[CoinRecord] = field(default_factory=list)
    name_errors: list[str] = field(default_factory=list)
    invalid: int = 0


def build_record(row: TableRow, name: str, symbol: Optional[str]) -> Optional[CoinRecord]:
    """Map one row and its normalized name/symbol to a single-id CoinRecord."""
    return safe_create(
        {
            "id": row.coin_type,
            "ids": [row.coin_type],
            "path_component": row.path_component,
            "symbol": symbol,
            "name": name,
            "original_name": row.original_name,
        },
        line_no=row.line_no,
    )


def build_records(
    rows: Iterable[TableRow],
    normalizer: Callable[[str], str] = normalize_name,
) -> BuildResult:
    """Normalize and build a record for every row.

    Rows whose name cannot be normalized, or whose record fails validation,
    are logged and skipped.
    """
    result = BuildResult()
    for row in rows:
        try:
            name = normalizer(row.original_name)
        except NameNormalizationError as e:
            logger.warning("Skipping coin %d due to name error: %s", row.coin_type, e)
            result.name_errors.append(e.name)
            ROWS.labels(outcome="name_error").inc()
            continue

        record = build_record(row, name, clean_symbol(row.symbol))
        if record is None:
            result.invalid += 1
            ROWS.labels(outcome="validation_error").inc()
            continue

        logger.debug("Processing coin: %s (ID: %d)", row.original_name, row.coin_type)
        ROWS.labels(outcome="accepted").inc()
        result.records.append(record)
    return result
