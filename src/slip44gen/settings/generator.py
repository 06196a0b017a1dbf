# SPDX-License-Identifier: Apache-2.0
"""Generator settings loaded from the environment.

Environment Variables:
    SLIP44_SOURCE: Registry source name (default: github)
    SLIP44_SOURCE_URL: Registry document URL for the github source
    SLIP44_OUTPUT_PATH: Generated table location
    SLIP44_TIMEOUT: HTTP timeout in seconds
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from slip44gen.ingestion.sources.github import DEFAULT_TIMEOUT, SLIP44_MARKDOWN_URL

# Generated table lives inside the package so it ships with it
DEFAULT_OUTPUT_PATH = Path(__file__).resolve().parent.parent / "generated" / "coin.rs"


class GeneratorSettings(BaseSettings):
    """Settings for a generator run, read from SLIP44_* environment variables."""

    source: str = Field(default="github", description="Registry source name")
    source_url: str = Field(default=SLIP44_MARKDOWN_URL, description="Registry document URL")
    output_path: Path = Field(default=DEFAULT_OUTPUT_PATH, description="Generated table path")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout (seconds)")
    input_path: Optional[Path] = Field(default=None, description="Markdown file for the file source")

    class Config:
        env_prefix = "SLIP44_"
