# SPDX-License-Identifier: Apache-2.0
"""Display name and symbol normalization.

Registry names are free text ("Bitcoin Cash", "Crypto.org Chain", "æternity").
They are turned into identifiers by removing spaces, dropping parenthetical
qualifiers and prefixing names that start with a digit. Names that still
contain characters outside ``[A-Za-z0-9_]`` must have a curated override in
IRREGULAR_NAME_OVERRIDES; unknown ones raise NameNormalizationError so they
surface for manual curation instead of being mangled.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from slip44gen.domain import is_identifier
from slip44gen.errors import NameNormalizationError

logger = logging.getLogger(__name__)

# Applied to every name after whitespace/parenthesis cleanup
NAME_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "Ether": "Ethereum",
        "EtherClassic": "EthereumClassic",
    }
)

# Names with characters that cannot appear in an identifier
IRREGULAR_NAME_OVERRIDES: Mapping[str, str] = MappingProxyType(
    {
        "Pl^g": "Plug",
        "BitcoinMatteo'sVision": "BitcoinMatteosVision",
        "Crypto.orgChain": "CryptoOrgChain",
        "Cocos-BCX": "CocosBCX",
        "Capricoin+": "CapricoinPlus",
        "Seele-N": "SeeleN",
        "IQ-Cash": "IQCash",
        "XinFin.Network": "XinFinNetwork",
        "Unit-e": "UnitE",
        "HARMONY-ONE": "HarmonyOne",
        "ThePower.io": "ThePower",
        "evan.network": "EvanNetwork",
        "Ether-1": "EtherOne",
        "æternity": "aeternity",
        "θ": "Theta",
    }
)

SYMBOL_OVERRIDES: Mapping[str, str] = MappingProxyType(
    {
        "$DAG": "DAG",
    }
)


def _is_identifier_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch == "_"


def prefix_leading_digit(value: str) -> str:
    """Prefix ``value`` with an underscore if it starts with a digit."""
    if value[:1].isdigit():
        return "_" + value
    return value


class NameNormalizer:
    """Maps registry display names to identifier candidates.

    Args:
        extra_overrides: Additional irregular-name overrides, keyed by the
            cleaned name (spaces removed, parenthetical dropped)

    Raises:
        ValueError: If an extra override does not map to a valid identifier
    """

    def __init__(self, extra_overrides: Optional[Mapping[str, str]] = None):
        overrides = dict(IRREGULAR_NAME_OVERRIDES)
        for key, value in (extra_overrides or {}).items():
            if not is_identifier(value):
                raise ValueError(f"Override for {key!r} is not a valid identifier: {value!r}")
            overrides[key] = value
        self.overrides: Mapping[str, str] = MappingProxyType(overrides)

    def normalize(self, original_name: str) -> str:
        """Return the identifier for ``original_name``.

        Raises:
            NameNormalizationError: If the name is empty after cleanup or has
                irregular characters and no override
        """
        name = original_name.replace(" ", "")
        name = name.split("(", 1)[0]
        if not name:
            raise NameNormalizationError(original_name, "empty coin name after cleanup")
        name = prefix_leading_digit(name)
        name = NAME_ALIASES.get(name, name)

        if all(_is_identifier_char(ch) for ch in name):
            return name
        try:
            return self.overrides[name]
        except KeyError:
            raise NameNormalizationError(name) from None

    __call__ = normalize


_default_normalizer = NameNormalizer()


def normalize_name(original_name: str) -> str:
    """Normalize a display name with the built-in override tables."""
    return _default_normalizer.normalize(original_name)


def clean_symbol(raw: str) -> Optional[str]:
    """Clean a ticker cell into an identifier-safe symbol.

    Symbols with characters outside ``[A-Za-z0-9_]`` are looked up in
    SYMBOL_OVERRIDES; without an override the symbol is dropped (the coin is
    kept). A leading digit gets an underscore prefix. Returns None for an
    absent symbol.
    """
    symbol = raw.strip()
    if not symbol:
        return None
    if symbol in SYMBOL_OVERRIDES:
        symbol = SYMBOL_OVERRIDES[symbol]
    elif not all(_is_identifier_char(ch) for ch in symbol):
        logger.warning("Dropping irregular symbol %r", symbol)
        return None
    return prefix_leading_digit(symbol)
