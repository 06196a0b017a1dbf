"""SLIP-0044 registry source backed by the satoshilabs/slips GitHub repository.

Downloads the raw ``slip-0044.md`` document. The registry is a markdown table
with one row per registered coin type:

    | Coin type  | Path component (`coin_type'`) | Symbol  | Coin     |
    | ---------- | ----------------------------- | ------- | -------- |
    | 0          | 0x80000000                    | BTC     | Bitcoin  |

Usage:
    >>> source = get("github")
    >>> text = await source.fetch_text()
"""

from __future__ import annotations

import logging

import httpx

from . import register
from .base import MarkdownSourceBase

logger = logging.getLogger(__name__)

SLIP44_MARKDOWN_URL = "https://raw.githubusercontent.com/satoshilabs/slips/master/slip-0044.md"

DEFAULT_TIMEOUT = 30.0


@register("github")
class GitHubMarkdownSource(MarkdownSourceBase):
    """Fetch the registry markdown over HTTP.

    Configuration:
        url: Document URL (default: raw slip-0044.md on GitHub)
        timeout: Request timeout in seconds (default: 30)
    """

    @property
    def url(self) -> str:
        return self.cfg.get("url") or SLIP44_MARKDOWN_URL

    @property
    def timeout(self) -> float:
        return float(self.cfg.get("timeout") or DEFAULT_TIMEOUT)

    async def _fetch_raw(self) -> str:
        """Download the registry document.

        Raises:
            httpx.HTTPStatusError: If the server answers with an error status
            httpx.RequestError: If the request fails
        """
        logger.info("Fetching SLIP-0044 markdown from %s", self.url)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(self.url)
            response.raise_for_status()
            text = response.text
        logger.info("Successfully fetched %d bytes of markdown", len(text))
        return text
