# SPDX-License-Identifier: Apache-2.0
"""Coin type domain model.

This module implements the CoinRecord Pydantic model, one entry of the
generated coin type table. A record is created from a single registry row,
absorbs the ids of duplicate rows while merging, and is finally rendered by
the emitter.

Usage:
    >>> from slip44gen.domain import CoinRecord
    >>> record = CoinRecord(
    ...     id=0,
    ...     ids=[0],
    ...     path_component="0x80000000",
    ...     symbol="BTC",
    ...     name="Bitcoin",
    ...     original_name="Bitcoin",
    ... )
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def is_identifier(value: str) -> bool:
    """Return True if ``value`` is usable as a generated identifier."""
    return bool(IDENTIFIER_RE.match(value))


class CoinRecord(BaseModel):
    """Pydantic model representing a single coin type in the generated table.

    ``id`` is the primary registration id and the final sort key. While the
    merger runs it holds the first-seen id; once merging finishes it equals
    ``min(ids)``.
    """

    id: int = Field(ge=0, description="Primary registration id")
    ids: List[int] = Field(description="All registration ids merged into this coin")
    path_component: str = Field(default="", description="Derivation path component, verbatim")
    symbol: Optional[str] = Field(default=None, description="Cleaned ticker symbol")
    name: str = Field(description="Identifier used in the generated table")
    original_name: str = Field(description="Display name as listed in the registry")
    doc_lines: List[str] = Field(default_factory=list, description="Rendered documentation lines")

    @field_validator("ids")
    @classmethod
    def validate_ids(cls, v: List[int]) -> List[int]:
        """Require at least one non-negative id."""
        if not v:
            raise ValueError("ids cannot be empty")
        if any(i < 0 for i in v):
            raise ValueError("ids must be non-negative")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not is_identifier(v):
            raise ValueError(f"name {v!r} is not a valid identifier")
        return v

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: Optional[str]) -> Optional[str]:
        """Convert empty strings to None and reject non-identifier symbols."""
        if v is None or v == "":
            return None
        if not is_identifier(v):
            raise ValueError(f"symbol {v!r} is not a valid identifier")
        return v

    @field_validator("original_name")
    @classmethod
    def validate_original_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("original_name cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_primary_id(self) -> "CoinRecord":
        """Ensure the primary id is one of the merged ids."""
        if self.id not in self.ids:
            raise ValueError("id must be one of ids")
        return self

    @property
    def merge_key(self) -> tuple[Optional[str], str, str]:
        """Identity used to merge rows registered under several ids."""
        return (self.symbol, self.name, self.original_name)


# Validation logging helper
_val_logger = logging.getLogger("slip44gen.coins.validation")


def safe_create(record_kwargs: dict, *, line_no: Optional[int] = None) -> Optional[CoinRecord]:
    """Safely create a CoinRecord with structured validation error logging.

    Args:
        record_kwargs: Field values for the CoinRecord constructor
        line_no: Source line of the row, for log context

    Returns:
        CoinRecord instance if validation passes, None if validation fails

    Logs:
        WARNING to the "slip44gen.coins.validation" logger with line, coin,
        field and error details
    """
    try:
        return CoinRecord(**record_kwargs)
    except ValidationError as err:
        first_error = err.errors()[0] if err.errors() else {}
        field_path = ".".join(str(loc) for loc in first_error.get("loc", []))
        error_msg = first_error.get("msg", "Unknown validation error")

        _val_logger.warning(
            "line=%s coin=%s field=%s error=%s",
            line_no if line_no is not None else "UNKNOWN",
            record_kwargs.get("original_name", "UNKNOWN"),
            field_path,
            error_msg,
        )
        return None
