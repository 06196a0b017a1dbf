# SPDX-License-Identifier: Apache-2.0
"""Documentation lines attached to each generated coin entry."""

from __future__ import annotations

from typing import Iterable

from slip44gen.domain import CoinRecord


def doc_lines_for(record: CoinRecord) -> list[str]:
    """Return the ids, symbol (when present) and original name lines."""
    lines = [f"Coin type: {', '.join(str(i) for i in record.ids)}"]
    if record.symbol is not None:
        lines.append(f"Symbol: {record.symbol}")
    lines.append(f"Coin: {record.original_name}")
    return lines


def annotate(records: Iterable[CoinRecord]) -> list[CoinRecord]:
    return [r.model_copy(update={"doc_lines": doc_lines_for(r)}) for r in records]
