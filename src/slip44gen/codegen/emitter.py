# SPDX-License-Identifier: Apache-2.0
"""Render the coin type table consumed by the ``coins!`` macro.

Each coin becomes one macro entry::

    (
        /// Coin type: 60, 61
        /// Symbol: ETH
        /// Coin: Ether
        [60,61], Ethereum, "Ether", ETH, ,
    ),

The last two slots hold the symbol. The first record owning a symbol writes it
bare, which defines the symbol constant; later records sharing it leave that
slot empty and reference the symbol as a string alias instead.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from slip44gen.domain import CoinRecord
from slip44gen.metrics import COINS_EMITTED

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_GENERATOR = "slip44gen coins generate"

_STRIPPED_CHARS = "@^'\"\\$"
_ALLOWED_PUNCTUATION = frozenset(" _-+.()")


def escape_string(value: str) -> str:
    """Make ``value`` safe inside a double-quoted string literal.

    Unsafe characters are dropped rather than escaped.
    """
    for ch in _STRIPPED_CHARS:
        value = value.replace(ch, "")
    return "".join(
        ch for ch in value if (ch.isascii() and ch.isalnum()) or ch in _ALLOWED_PUNCTUATION
    )


def _render_entry(record: CoinRecord, symbol_slot: str, alias_slot: str) -> str:
    doc = "\n        ".join(f"/// {line}" for line in record.doc_lines if line)
    ids = ",".join(str(i) for i in record.ids)
    return (
        f"    (\n        {doc}\n"
        f'        [{ids}], {record.name}, "{escape_string(record.original_name)}", '
        f"{symbol_slot}, {alias_slot},\n    ),"
    )


def render_entries(records: Iterable[CoinRecord]) -> list[str]:
    """Render entries in primary id order, applying the symbol ownership rule."""
    seen_symbols: set[str] = set()
    entries: list[str] = []
    for record in sorted(records, key=lambda r: r.id):
        symbol: Optional[str] = escape_string(record.symbol) if record.symbol else None
        if not symbol:
            symbol_slot, alias_slot = "", ""
        elif symbol in seen_symbols:
            symbol_slot, alias_slot = "", f'"{symbol}"'
        else:
            seen_symbols.add(symbol)
            symbol_slot, alias_slot = symbol, ""
        entries.append(_render_entry(record, symbol_slot, alias_slot))
    return entries


def render_table(records: Iterable[CoinRecord], generator: str = DEFAULT_GENERATOR) -> str:
    """Render the complete generated source file."""
    lines = [
        f"// Code generated by {generator}; DO NOT EDIT.",
        "use crate::coins;",
        "coins!(",
        *render_entries(records),
        ");",
    ]
    return "\n".join(lines) + "\n"


def write_table(
    records: Iterable[CoinRecord], path: PathLike, generator: str = DEFAULT_GENERATOR
) -> int:
    """Write the generated table to ``path``, replacing any existing file.

    Returns:
        Number of coin entries written

    Raises:
        OSError: If the file cannot be created or written
    """
    records = list(records)
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Writing to: %s", output_path)
    output_path.write_text(render_table(records, generator=generator), encoding="utf-8")
    COINS_EMITTED.inc(len(records))
    return len(records)
