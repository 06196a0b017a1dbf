# SPDX-License-Identifier: Apache-2.0
"""Shared test fixtures for the slip44gen test suite.

FIXTURES PROVIDED:
- registry_markdown: a small SLIP-0044 document covering the parsing edge cases
- registry_file: the same document written to a temporary file
- accepted_ids: ids of the fixture rows that survive parsing
- make_record: factory for valid CoinRecord objects with reasonable defaults
"""

from __future__ import annotations

from pathlib import Path

import pytest

from slip44gen.domain import CoinRecord

REGISTRY_MARKDOWN = """\
# SLIP-0044 : Registered coin types for BIP-0044

```
Number:  SLIP-0044
Title:   Registered coin types for BIP-0044
Type:    Standard
Status:  Accepted
```

## Registered coin types

All these constants are used as hardened derivation.

| Coin type  | Path component (`coin_type'`) | Symbol  | Coin                              |
| ---------- | ----------------------------- | ------- | --------------------------------- |
| 0          | 0x80000000                    | ₿       | Bitcoin                           |
| 1          | 0x80000001                    |         | Testnet (all coins)               |
| 2          | 0x80000002                    | LTC     | Litecoin                          |
| 10         | 0x8000000a                    | F1      | Foo                               |
| 11         | 0x8000000b                    |         | Foo                               |
| 12         | 0x8000000c                    |         | Foo                               |
| 13         | 0x8000000d                    |         | reserved                          |
| 14         | 0x8000000e                    | XX      | Totally-Unknown+Name              |
| 15         | 0x8000000f                    | 1ST     | 1st Coin                          |
| 16         | 0x80000010                    | $DAG    | Constellation Labs                |
| 17         | 0x80000011                    | UTE     | Unit-e                            |
| 18         | 0x80000012                    | LTC     | Litecoin Cash                     |
| 0x50       | 0x80000050                    | BAD     | Bad Id                            |
| 19         | 0x80000013                    | XYZ     |
| 20         | 0x80000014                    | ETC     | Ether Classic                     |
| 21         | 0x80000015                    |         | æternity                          |
| 22         | 0x80000016                    |         |                                   |
| 60         | 0x8000003c                    | ETH     | Ether                             |
| 61         | 0x8000003d                    | ETH     | Ether                             |
"""

# Ids of rows that survive extraction and normalization
ACCEPTED_IDS = [0, 1, 2, 10, 11, 12, 15, 16, 17, 18, 20, 21, 60, 61]


@pytest.fixture
def registry_markdown() -> str:
    return REGISTRY_MARKDOWN


@pytest.fixture
def accepted_ids() -> list[int]:
    return list(ACCEPTED_IDS)


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    path = tmp_path / "slip-0044.md"
    path.write_text(REGISTRY_MARKDOWN, encoding="utf-8")
    return path


@pytest.fixture
def make_record():
    """Factory for CoinRecord objects; keyword arguments override defaults."""

    def _make(coin_type: int = 0, **overrides) -> CoinRecord:
        data = {
            "id": coin_type,
            "ids": [coin_type],
            "path_component": f"0x{0x80000000 + coin_type:08x}",
            "symbol": None,
            "name": "Coin",
            "original_name": "Coin",
        }
        data.update(overrides)
        return CoinRecord(**data)

    return _make
