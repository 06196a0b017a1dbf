"""
High-level helpers used by the CLI; keeps cli/coins.py thin.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from slip44gen.codegen.emitter import DEFAULT_GENERATOR, write_table
from slip44gen.domain import CoinRecord
from slip44gen.ingestion.normalizer import annotate, merge_records
from slip44gen.ingestion.parser import (
    SLIP44_MARKDOWN_HEADER,
    NameNormalizer,
    build_records,
    extract_rows,
)
from slip44gen.ingestion.sources import get as get_source

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    records: list[CoinRecord]
    rows_accepted: int
    skipped: Counter = field(default_factory=Counter)
    name_errors: list[str] = field(default_factory=list)
    output_path: Optional[Path] = None

    @property
    def coin_count(self) -> int:
        return len(self.records)


# -- 1.  fetch ---------------------------------------------------------------


def fetch_markdown(source: str, **source_cfg) -> str:
    """Fetch the registry document from the named source (blocking)."""
    return get_source(source, **source_cfg).fetch_text_sync()


# -- 2.  transform -----------------------------------------------------------


def build_coin_table(
    text: str,
    *,
    header: str = SLIP44_MARKDOWN_HEADER,
    name_overrides: Optional[Mapping[str, str]] = None,
) -> PipelineResult:
    """Run rows → names → records → merge → docs over ``text``.

    Raises:
        TableHeaderNotFoundError: If the table header is missing
    """
    extracted = extract_rows(text, header=header)
    built = build_records(extracted.rows, NameNormalizer(name_overrides))

    skipped = Counter(extracted.skipped)
    if built.name_errors:
        skipped["name_error"] += len(built.name_errors)
    if built.invalid:
        skipped["validation_error"] += built.invalid

    logger.info("Processing %d accepted rows", len(built.records))
    records = annotate(merge_records(built.records))
    return PipelineResult(
        records=records,
        rows_accepted=len(built.records),
        skipped=skipped,
        name_errors=built.name_errors,
    )


# -- 3.  run -----------------------------------------------------------------


def run_coin_pipeline(
    *,
    source: str,
    output_path: Path,
    source_cfg: Optional[dict] = None,
    header: str = SLIP44_MARKDOWN_HEADER,
    name_overrides: Optional[Mapping[str, str]] = None,
    dry_run: bool = False,
    generator: str = DEFAULT_GENERATOR,
) -> PipelineResult:
    """Fetch the registry, build the table and write it to ``output_path``.

    Network, file and header errors propagate to the caller.
    """
    text = fetch_markdown(source, **(source_cfg or {}))
    result = build_coin_table(text, header=header, name_overrides=name_overrides)

    if dry_run:
        logger.info("Dry run: skipping write of %d coins", result.coin_count)
        return result

    write_table(result.records, output_path, generator=generator)
    result.output_path = Path(output_path)
    logger.info("Successfully wrote %d coins to %s", result.coin_count, output_path)
    return result
