# SPDX-License-Identifier: Apache-2.0
"""Domain model for the coin type table."""

from .coin import CoinRecord, is_identifier, safe_create

__all__ = ["CoinRecord", "is_identifier", "safe_create"]
