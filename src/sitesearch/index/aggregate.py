"""Content aggregation — flattens topics and example groups into index items.

Topics are loaded through a content loader; a topic whose body cannot be
loaded still produces an item built from its title and description.
Example groups are in-memory dictionaries and never fail.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import TYPE_CHECKING

from sitesearch.index.extract import (
    CODE_EXCERPT_LINES,
    CODE_EXCERPT_MAX_CHARS,
    EXCERPT_MAX_CHARS,
    create_code_excerpt,
    create_excerpt,
    extract_keywords,
)
from sitesearch.types import ItemType, SearchIndexItem

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sitesearch.content.base import BaseContentLoader
    from sitesearch.types import ExampleGroup, Topic

__all__ = [
    "DOCUMENTATION_CATEGORY",
    "aggregate_examples",
    "aggregate_topics",
    "category_slug",
    "humanize_key",
]

logger = logging.getLogger(__name__)

DOCUMENTATION_CATEGORY = "Documentation"

_WORD_START_RE = re.compile(r"\b\w", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")


def humanize_key(key: str) -> str:
    """Turn a snake_case key into a display title.

    ``"form_validation_test"`` → ``"Form Validation Test"``.  Only the first
    character of each word changes case, so ``"e2e_flow"`` → ``"E2e Flow"``.
    """
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), key.replace("_", " "))


def category_slug(category: str) -> str:
    """``"Unit Testing"`` → ``"unit-testing"``."""
    return _WHITESPACE_RE.sub("-", category.lower())


def _topic_item(topic: Topic, content: str, excerpt_max_chars: int) -> SearchIndexItem:
    return SearchIndexItem(
        id=f"topic-{topic.slug}",
        title=topic.title,
        description=topic.description,
        url=f"/docs/{topic.slug}",
        type=ItemType.TOPIC,
        category=DOCUMENTATION_CATEGORY,
        content=content,
        excerpt=create_excerpt(content, excerpt_max_chars),
        keywords=extract_keywords(content),
    )


def _fallback_topic_item(topic: Topic) -> SearchIndexItem:
    return SearchIndexItem(
        id=f"topic-{topic.slug}",
        title=topic.title,
        description=topic.description,
        url=f"/docs/{topic.slug}",
        type=ItemType.TOPIC,
        category=DOCUMENTATION_CATEGORY,
        content=f"{topic.title}\n\n{topic.description}",
        excerpt=topic.description,
        keywords=(),
    )


async def aggregate_topics(
    topics: Sequence[Topic],
    loader: BaseContentLoader,
    excerpt_max_chars: int = EXCERPT_MAX_CHARS,
) -> list[SearchIndexItem]:
    """Load every topic body and turn each topic into an index item.

    Loads run concurrently; items keep the input topic order.

    Args:
        topics: Topic descriptors in display order.
        loader: Content source resolving a slug to its body.
        excerpt_max_chars: Excerpt truncation length.

    Returns:
        One item per topic.
    """
    bodies = await asyncio.gather(
        *(loader.load(topic.slug) for topic in topics),
        return_exceptions=True,
    )

    items: list[SearchIndexItem] = []
    for topic, body in zip(topics, bodies, strict=True):
        if isinstance(body, Exception):
            logger.warning("Could not load content for %s: %s", topic.slug, body)
            items.append(_fallback_topic_item(topic))
            continue
        if isinstance(body, BaseException):
            raise body
        items.append(_topic_item(topic, body, excerpt_max_chars))
        logger.debug("Indexed topic %s (%d chars)", topic.slug, len(body))

    return items


def aggregate_examples(
    groups: Iterable[ExampleGroup],
    code_excerpt_lines: int = CODE_EXCERPT_LINES,
    code_excerpt_max_chars: int = CODE_EXCERPT_MAX_CHARS,
) -> list[SearchIndexItem]:
    """Turn every example of every group into an index item.

    Entries are never skipped; a non-string value is indexed as empty code.

    Args:
        groups: Example groups in display order.
        code_excerpt_lines: Number of non-blank lines kept in excerpts.
        code_excerpt_max_chars: Code excerpt truncation length.

    Returns:
        One item per example entry.
    """
    items: list[SearchIndexItem] = []
    for group in groups:
        prefix = f"example-{category_slug(group.category)}"
        for key, code in group.examples.items():
            if not isinstance(code, str):
                logger.debug("Example %s/%s is not a string, indexing empty", group.category, key)
                code = ""
            title = humanize_key(key)
            items.append(
                SearchIndexItem(
                    id=f"{prefix}-{key}",
                    title=title,
                    description=f"{group.category} example: {title}",
                    url=group.url_overrides.get(key, group.base_url),
                    type=ItemType.EXAMPLE,
                    category=group.category,
                    content=code,
                    excerpt=create_code_excerpt(code, code_excerpt_lines, code_excerpt_max_chars),
                    keywords=extract_keywords(code),
                )
            )
        logger.debug("Indexed %d %s examples", len(group.examples), group.category)

    return items
