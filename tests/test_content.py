"""Tests for sitesearch.content — topic content sources."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from sitesearch.config import SiteSearchConfig
from sitesearch.content import FileContentLoader, MappingContentLoader, loader_from_config
from sitesearch.exceptions import ContentLoadError

FIXTURE_DOCS = Path(__file__).parent / "fixtures" / "site" / "docs"


class TestFileContentLoader:
    def test_loads_markdown_by_slug(self) -> None:
        body = asyncio.run(FileContentLoader(FIXTURE_DOCS).load("getting-started"))
        assert body.startswith("# Getting Started")
        assert "vitest-browser-svelte" in body

    def test_path_for(self) -> None:
        loader = FileContentLoader(FIXTURE_DOCS)
        assert loader.path_for("api-reference") == FIXTURE_DOCS / "api-reference.md"

    def test_custom_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "intro.txt").write_text("plain text", encoding="utf-8")
        loader = FileContentLoader(tmp_path, suffix=".txt")
        assert asyncio.run(loader.load("intro")) == "plain text"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ContentLoadError, match="not found"):
            asyncio.run(FileContentLoader(tmp_path).load("does-not-exist"))

    @pytest.mark.parametrize("slug", ["../secrets", "a/b", "", ".hidden"])
    def test_rejects_path_like_slugs(self, tmp_path: Path, slug: str) -> None:
        with pytest.raises(ContentLoadError, match="Invalid topic slug"):
            asyncio.run(FileContentLoader(tmp_path).load(slug))

    def test_strips_bom(self, tmp_path: Path) -> None:
        (tmp_path / "bom.md").write_bytes("\ufeff# Title\n".encode())
        assert asyncio.run(FileContentLoader(tmp_path).load("bom")) == "# Title\n"

    def test_undecodable_bytes_replaced(self, tmp_path: Path) -> None:
        (tmp_path / "latin.md").write_bytes(b"caf\xe9 test")
        body = asyncio.run(FileContentLoader(tmp_path).load("latin"))
        assert body == "caf\ufffd test"

    def test_directory_is_not_content(self, tmp_path: Path) -> None:
        (tmp_path / "folder.md").mkdir()
        with pytest.raises(ContentLoadError):
            asyncio.run(FileContentLoader(tmp_path).load("folder"))


class TestMappingContentLoader:
    def test_returns_registered_content(self) -> None:
        loader = MappingContentLoader({"a": "alpha"})
        assert asyncio.run(loader.load("a")) == "alpha"

    def test_missing_slug(self) -> None:
        with pytest.raises(ContentLoadError, match="'b'"):
            asyncio.run(MappingContentLoader({"a": "alpha"}).load("b"))

    def test_copies_mapping(self) -> None:
        contents = {"a": "alpha"}
        loader = MappingContentLoader(contents)
        contents["a"] = "changed"
        assert asyncio.run(loader.load("a")) == "alpha"


class TestLoaderFromConfig:
    def test_resolves_docs_dir(self, tmp_path: Path) -> None:
        config = SiteSearchConfig()
        config.content.docs_dir = "copy"
        config.content.suffix = ".markdown"

        loader = loader_from_config(config, tmp_path / "sitesearch.toml")

        assert loader.docs_dir == tmp_path / "copy"
        assert loader.suffix == ".markdown"
