# SPDX-License-Identifier: Apache-2.0
"""slip44gen CLI package."""

from __future__ import annotations

import typer

from slip44gen.ingestion.sources import list_sources

from .coins import app as coins_app

app = typer.Typer(
    add_completion=False,
    help="Generate the coin type table from the SLIP-0044 registry.",
)
app.add_typer(coins_app, name="coins")


@app.command("sources")
def sources() -> None:
    """List available registry sources."""
    for name in list_sources():
        print(name)


__all__ = ["app"]
