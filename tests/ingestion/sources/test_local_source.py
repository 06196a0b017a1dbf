"""Unit tests for LocalMarkdownSource."""

from __future__ import annotations

import pytest

from slip44gen.ingestion.sources import get
from slip44gen.ingestion.sources.local import LocalMarkdownSource


class TestLocalMarkdownSource:
    @pytest.mark.asyncio
    async def test_reads_file(self, registry_file, registry_markdown):
        source = get("file", path=registry_file)

        assert isinstance(source, LocalMarkdownSource)
        assert await source.fetch_text() == registry_markdown

    def test_fetch_text_sync_accepts_str_path(self, registry_file, registry_markdown):
        assert LocalMarkdownSource(path=str(registry_file)).fetch_text_sync() == registry_markdown

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Registry file not found"):
            LocalMarkdownSource(path=tmp_path / "missing.md").fetch_text_sync()

    def test_path_required(self):
        with pytest.raises(ValueError, match="requires a path"):
            LocalMarkdownSource().fetch_text_sync()
