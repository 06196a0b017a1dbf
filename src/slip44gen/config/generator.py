# SPDX-License-Identifier: Apache-2.0
"""Pydantic configuration model for generator jobs."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Dict, Optional

from pydantic import AfterValidator, BaseModel, Field, field_validator

from slip44gen.domain import is_identifier

CURRENT_CONFIG_VERSION = 1
MIN_SUPPORTED_VERSION = 1


def _check_identifier(value: str) -> str:
    if not is_identifier(value):
        raise ValueError(f"not a valid identifier: {value!r}")
    return value


# Validated per entry so errors carry the coin name in their location
Identifier = Annotated[str, AfterValidator(_check_identifier)]


class GeneratorConfig(BaseModel):
    """A generator job file.

    Every field except ``config_version`` is optional; unset fields fall back
    to the environment settings.
    """

    config_version: int = Field(default=CURRENT_CONFIG_VERSION, ge=1)
    source: Optional[str] = Field(default=None, description="Registry source name")
    url: Optional[str] = Field(default=None, description="Registry document URL")
    input_path: Optional[Path] = Field(default=None, description="Markdown file for the file source")
    output_path: Optional[Path] = Field(default=None, description="Generated table path")
    header: Optional[str] = Field(default=None, description="Header line marking the table start")
    timeout: Optional[float] = Field(default=None, gt=0, description="HTTP timeout (seconds)")
    name_overrides: Dict[str, Identifier] = Field(
        default_factory=dict,
        description="Extra irregular-name overrides (cleaned name -> identifier)",
    )

    class Config:
        extra = "forbid"  # Reject unknown keys

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        from slip44gen.ingestion.sources import list_sources

        available = list_sources()
        if v not in available:
            raise ValueError(f"Unknown source '{v}'. Available: {', '.join(available)}")
        return v
