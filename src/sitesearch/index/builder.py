"""Index builder for sitesearch.

Composes content loader → aggregator → immutable ``SearchIndex`` via
constructor injection.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sitesearch.config import IndexConfig
from sitesearch.exceptions import IndexBuildError, SiteSearchError
from sitesearch.index.aggregate import aggregate_examples, aggregate_topics
from sitesearch.types import SearchIndex

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sitesearch.content.base import BaseContentLoader
    from sitesearch.types import ExampleGroup, Topic

__all__ = ["IndexBuilder", "build_index", "build_index_sync"]

logger = logging.getLogger(__name__)


class IndexBuilder:
    """Builds a fresh search index from topics and example groups.

    Every call to :meth:`build` returns an independent index; nothing is
    cached between calls.

    Usage::

        builder = IndexBuilder(loader=FileContentLoader(Path("docs")))
        index = await builder.build(topics, example_groups)
    """

    def __init__(self, loader: BaseContentLoader, config: IndexConfig | None = None) -> None:
        self.loader = loader
        self.config = config or IndexConfig()

    async def build(
        self,
        topics: Sequence[Topic],
        example_groups: Sequence[ExampleGroup] = (),
    ) -> SearchIndex:
        """Aggregate all content into a new index.

        Topics come first in input order, then each example group in order.

        Args:
            topics: Documentation topics to load and index.
            example_groups: Code example groups to index.

        Returns:
            The assembled index.

        Raises:
            IndexBuildError: If aggregation fails for a reason other than a
                single topic's content load.
        """
        try:
            logger.info(
                "Building search index: %d topics, %d example groups",
                len(topics),
                len(example_groups),
            )
            items = await aggregate_topics(topics, self.loader, self.config.excerpt_max_chars)
            items.extend(
                aggregate_examples(
                    example_groups,
                    self.config.code_excerpt_lines,
                    self.config.code_excerpt_max_chars,
                )
            )
        except SiteSearchError:
            raise
        except Exception as e:
            raise IndexBuildError(f"Search index build failed: {e}") from e

        index = SearchIndex(
            items=tuple(items),
            generated_at=datetime.now(UTC).isoformat(),
        )
        logger.info("Built search index with %d items", index.total_items)
        return index


async def build_index(
    topics: Sequence[Topic],
    example_groups: Sequence[ExampleGroup],
    loader: BaseContentLoader,
    config: IndexConfig | None = None,
) -> SearchIndex:
    """Build a search index with a one-off :class:`IndexBuilder`."""
    return await IndexBuilder(loader, config).build(topics, example_groups)


def build_index_sync(
    topics: Sequence[Topic],
    example_groups: Sequence[ExampleGroup],
    loader: BaseContentLoader,
    config: IndexConfig | None = None,
) -> SearchIndex:
    """Blocking wrapper around :func:`build_index` for callers without a loop."""
    return asyncio.run(build_index(topics, example_groups, loader, config))
