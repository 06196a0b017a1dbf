"""Registry source reading a local copy of slip-0044.md.

Useful for offline regeneration and for reproducing a table from a pinned
revision of the registry.
"""

from __future__ import annotations

import logging
from pathlib import Path

import anyio

from . import register
from .base import MarkdownSourceBase

logger = logging.getLogger(__name__)


@register("file")
class LocalMarkdownSource(MarkdownSourceBase):
    """Read the registry markdown from ``path``.

    Configuration:
        path: Location of the markdown file (required)
    """

    @property
    def path(self) -> Path:
        path = self.cfg.get("path")
        if not path:
            raise ValueError("The 'file' source requires a path")
        return Path(path)

    async def _fetch_raw(self) -> str:
        """Read the file as UTF-8.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = self.path
        if not path.exists():
            raise FileNotFoundError(f"Registry file not found: {path}")
        logger.info("Reading SLIP-0044 markdown from %s", path)
        return await anyio.Path(path).read_text(encoding="utf-8")
