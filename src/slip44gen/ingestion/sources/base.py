from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class MarkdownSourceBase(ABC):
    """
    Abstract base class for registry document sources.

    Subclasses **must**:
      • be registered with `@register(name)`, which sets the `name` attribute.
      • implement `async _fetch_raw()` that downloads or reads the document.
    """

    #: set by the registry: source identifier used on CLI and config
    name: str

    def __init__(self, **source_cfg: Any) -> None:
        self.cfg = source_cfg

    # ---------- public API --------------------------------------------------

    async def fetch_text(self) -> str:
        """Return the registry markdown as text."""
        return await self._fetch_raw()

    # ---------- mandatory hooks for subclasses ------------------------------

    @abstractmethod
    async def _fetch_raw(self) -> str:
        """Fetch the raw markdown document."""
        ...

    # ---------- convenience -------------------------------------------------

    def fetch_text_sync(self) -> str:
        """Blocking wrapper for non-async call sites."""
        import anyio

        return anyio.run(self.fetch_text)
