# SPDX-License-Identifier: Apache-2.0
"""Merge registry records into the final set of coins.

Merging runs in two passes and the order matters:

1. Identity merge: records with the same (symbol, name, original name) are the
   same coin registered under several ids and collapse into one record.
2. Disambiguation: records that are still distinct but share a name get a
   symbol or id suffix.

Running disambiguation first would rename legitimate duplicates as if they
were different coins.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

from slip44gen.domain import CoinRecord
from slip44gen.errors import DuplicateNameError
from slip44gen.metrics import NAME_COLLISIONS

logger = logging.getLogger(__name__)


def merge_identities(records: Iterable[CoinRecord]) -> list[CoinRecord]:
    """Collapse records sharing symbol, name and original name.

    The first record of each group is kept and absorbs the ids of the others
    in first-seen order. Input records are not modified.
    """
    merged: dict[tuple, CoinRecord] = {}
    for record in records:
        key = record.merge_key
        existing = merged.get(key)
        if existing is None:
            merged[key] = record.model_copy(deep=True)
            continue
        for coin_type in record.ids:
            if coin_type not in existing.ids:
                existing.ids.append(coin_type)

    logger.info("Merged into %d unique coins", len(merged))
    return list(merged.values())


def _ids_suffix(record: CoinRecord) -> str:
    # Ascending, so the suffix does not depend on registry row order
    return "_".join(str(i) for i in sorted(record.ids))


def disambiguate_names(records: Iterable[CoinRecord]) -> list[CoinRecord]:
    """Rename records whose names collide.

    Every member of a colliding group becomes ``{name}_{symbol}`` if that
    symbol is its own within the group and the result is a free name.
    Otherwise it becomes ``{name}_{ids}``. Unique names are left alone.
    """
    groups: dict[str, list[CoinRecord]] = {}
    for record in records:
        groups.setdefault(record.name, []).append(record)

    taken = set(groups)
    out: list[CoinRecord] = []
    for name, group in groups.items():
        if len(group) == 1:
            out.extend(group)
            continue
        logger.info("Found duplicate coins for name: %s", name)
        NAME_COLLISIONS.inc(len(group))
        symbol_counts = Counter(r.symbol for r in group if r.symbol is not None)
        for record in group:
            new_name = None
            if record.symbol is not None and symbol_counts[record.symbol] == 1:
                new_name = f"{name}_{record.symbol}"
            if new_name is None or new_name in taken:
                new_name = f"{name}_{_ids_suffix(record)}"
            taken.add(new_name)
            out.append(record.model_copy(update={"name": new_name}))
    return out


def _finalize(record: CoinRecord) -> CoinRecord:
    ids = sorted(set(record.ids))
    return record.model_copy(update={"ids": ids, "id": ids[0]})


def merge_records(records: Iterable[CoinRecord]) -> list[CoinRecord]:
    """Run identity merge then disambiguation.

    Returns:
        Records sorted by primary id, with ``ids`` sorted ascending and ``id``
        set to the smallest of them

    Raises:
        DuplicateNameError: If two coins still share a name
    """
    merged = disambiguate_names(merge_identities(records))
    final = sorted((_finalize(r) for r in merged), key=lambda r: r.id)

    counts = Counter(r.name for r in final)
    duplicates = sorted(name for name, n in counts.items() if n > 1)
    if duplicates:
        raise DuplicateNameError(duplicates)
    return final
