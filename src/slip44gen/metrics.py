# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from prometheus_client import Counter

# Registry rows by outcome: accepted, or the reason the row was skipped
ROWS = Counter("slip44_rows_total", "Registry table rows processed", ["outcome"])

COINS_EMITTED = Counter("slip44_coins_emitted_total", "Coin entries written to the generated table")

NAME_COLLISIONS = Counter(
    "slip44_name_collisions_total", "Records renamed to resolve identifier collisions"
)

__all__ = [
    "ROWS",
    "COINS_EMITTED",
    "NAME_COLLISIONS",
]
