# SPDX-License-Identifier: Apache-2.0
"""Coins CLI commands for regenerating the coin type table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from slip44gen.config import ConfigVersionError, GeneratorConfig, load_config
from slip44gen.errors import Slip44Error
from slip44gen.ingestion.parser import SLIP44_MARKDOWN_HEADER
from slip44gen.ingestion.pipeline import PipelineResult, run_coin_pipeline
from slip44gen.ingestion.sources import list_sources
from slip44gen.settings import GeneratorSettings

console = Console()

app = typer.Typer(help="Coin type table commands.")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)-5s [%(name)s] %(message)s",
        force=True,  # Override any existing configuration
    )


def _load_settings() -> GeneratorSettings:
    try:
        return GeneratorSettings()
    except ValidationError as e:
        console.print(f"❌ Invalid SLIP44_* environment settings: {escape(str(e))}", style="red")
        raise typer.Exit(1) from e


def _load_job_config(config: Optional[Path]) -> GeneratorConfig:
    if config is None:
        return GeneratorConfig()
    try:
        return load_config(config)
    except (ConfigVersionError, FileNotFoundError, ValueError) as e:
        console.print(f"❌ Configuration error: {escape(str(e))}", style="red")
        raise typer.Exit(1) from e


def show_summary(result: PipelineResult, dry_run: bool) -> None:
    """Print accepted/skipped counts and the write outcome."""
    table = Table(title="Coin table summary", show_header=True)
    table.add_column("Outcome")
    table.add_column("Rows", justify="right")
    table.add_row("accepted", str(result.rows_accepted))
    for reason, count in sorted(result.skipped.items()):
        table.add_row(f"skipped ({reason})", str(count))
    table.add_row("coins", str(result.coin_count))
    console.print(table)

    for name in result.name_errors:
        console.print(f"⚠️  Unknown coin name needs an override: {escape(name)}", style="yellow")

    if dry_run:
        console.print(f"Dry run complete: {result.coin_count} coins, nothing written.")
    else:
        console.print(
            f"✅ Successfully wrote {result.coin_count} coins to {escape(str(result.output_path))}",
            style="green",
        )


@app.command("generate")
def generate(
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Registry source. Available: " + ", ".join(list_sources()),
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Registry document URL (github source)"),
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Local markdown file (file source)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Generated table path. Default: bundled generated/coin.rs"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML job configuration"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Build the table but skip the write"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress at INFO level"),
) -> None:
    """Regenerate the coin type table from the SLIP-0044 registry.

    Rows that cannot be parsed are skipped with a warning. Fetch, read and
    write failures abort with exit status 1.

    Examples:
        slip44gen coins generate
        slip44gen coins generate --source file --input slip-0044.md --dry-run
        slip44gen coins generate --config slip44.yaml --output src/coin.rs
    """
    _configure_logging(verbose)

    settings = _load_settings()
    job = _load_job_config(config)

    # CLI flags > YAML job > environment
    if input_path is not None and source is None:
        source = "file"
    source_name = source or job.source or settings.source
    if source_name not in list_sources():
        console.print(
            f"❌ Unknown source '{source_name}'. Available: {', '.join(list_sources())}",
            style="red",
        )
        raise typer.Exit(1)

    output_path = output or job.output_path or settings.output_path
    source_cfg = {
        "url": url or job.url or settings.source_url,
        "timeout": job.timeout or settings.timeout,
        "path": input_path or job.input_path or settings.input_path,
    }

    try:
        result = run_coin_pipeline(
            source=source_name,
            output_path=output_path,
            source_cfg=source_cfg,
            header=job.header or SLIP44_MARKDOWN_HEADER,
            name_overrides=job.name_overrides,
            dry_run=dry_run,
        )
    except httpx.HTTPError as e:
        console.print(f"❌ Failed to fetch registry: {escape(str(e))}", style="red")
        raise typer.Exit(1) from e
    except (Slip44Error, OSError, ValueError) as e:
        console.print(f"❌ {escape(str(e))}", style="red")
        raise typer.Exit(1) from e

    show_summary(result, dry_run)
