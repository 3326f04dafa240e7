"""Tests for sitesearch.index.builder — index assembly."""

from __future__ import annotations

import asyncio
from datetime import datetime

import pytest

from sitesearch.config import IndexConfig
from sitesearch.content import MappingContentLoader
from sitesearch.exceptions import IndexBuildError
from sitesearch.index import IndexBuilder, build_index, build_index_sync
from sitesearch.types import ExampleGroup, ItemType, SearchIndex, Topic


class TestBuildIndex:
    def test_total_items_matches_items(self, index: SearchIndex) -> None:
        assert index.total_items == len(index.items) == 9

    def test_ids_unique(self, index: SearchIndex) -> None:
        ids = [item.id for item in index.items]
        assert len(ids) == len(set(ids))

    def test_generated_at_is_iso_timestamp(self, index: SearchIndex) -> None:
        stamp = datetime.fromisoformat(index.generated_at)
        assert stamp.tzinfo is not None

    def test_topics_come_first(self, index: SearchIndex) -> None:
        types = [item.type for item in index.items]
        assert types[:3] == [ItemType.TOPIC] * 3
        assert set(types[3:]) == {ItemType.EXAMPLE}

    def test_aggregation_order(self, index: SearchIndex) -> None:
        assert [item.id for item in index.items] == [
            "topic-api-reference",
            "topic-best-practices",
            "topic-ci-cd",
            "example-unit-testing-basic_test",
            "example-unit-testing-mock_test",
            "example-e2e-testing-user_journey",
            "example-components-modal_props",
            "example-quick-start-first_test",
            "example-quick-start-ssr_testing",
        ]

    def test_loaded_topic_has_full_content(self, index: SearchIndex) -> None:
        api = next(item for item in index.items if item.id == "topic-api-reference")
        assert api.content.count("mock") == 15
        assert "mock" in api.keywords
        assert "vi.fn" in api.keywords
        assert api.excerpt == "Complete reference for testing utilities...."

    def test_failed_topic_degrades(self, index: SearchIndex) -> None:
        cicd = next(item for item in index.items if item.id == "topic-ci-cd")
        assert cicd.content == "CI/CD\n\nProduction-ready testing pipelines and automation"
        assert len(cicd.keywords) == 0
        assert cicd.excerpt == "Production-ready testing pipelines and automation"

    def test_keywords_lowercase(self, index: SearchIndex) -> None:
        for item in index.items:
            assert all(k == k.lower() for k in item.keywords)
            assert len(item.keywords) == len(set(item.keywords))

    def test_repeat_builds_are_independent(
        self,
        topics: list[Topic],
        example_groups: list[ExampleGroup],
        loader: MappingContentLoader,
    ) -> None:
        first = build_index_sync(topics, example_groups, loader)
        second = build_index_sync(topics, example_groups, loader)

        assert first is not second
        assert first.items == second.items

    def test_async_entry_point(self, topics: list[Topic], loader: MappingContentLoader) -> None:
        index = asyncio.run(build_index(topics, [], loader))
        assert index.total_items == 3

    def test_empty_sources(self) -> None:
        index = build_index_sync([], [], MappingContentLoader({}))
        assert index.items == ()
        assert index.total_items == 0


class TestIndexBuilder:
    def test_uses_index_config(self, topics: list[Topic], loader: MappingContentLoader) -> None:
        builder = IndexBuilder(loader, IndexConfig(excerpt_max_chars=8))

        index = asyncio.run(builder.build(topics[:1]))

        assert index.items[0].excerpt == "Complete..."

    def test_code_excerpt_config(self) -> None:
        group = ExampleGroup(examples={"long": "a\nb\nc\nd"}, category="Unit", base_url="/u")
        builder = IndexBuilder(MappingContentLoader({}), IndexConfig(code_excerpt_lines=2))

        index = asyncio.run(builder.build([], [group]))

        assert index.items[0].excerpt == "a\nb..."

    def test_default_config(self) -> None:
        builder = IndexBuilder(MappingContentLoader({}))
        assert builder.config == IndexConfig()

    def test_broken_group_raises_build_error(self) -> None:
        group = ExampleGroup(
            examples=None,  # type: ignore[arg-type]
            category="Unit",
            base_url="/u",
        )
        builder = IndexBuilder(MappingContentLoader({}))

        with pytest.raises(IndexBuildError, match="build failed"):
            asyncio.run(builder.build([], [group]))
