"""Index data contracts for sitesearch.

Frozen dataclasses that flow between the index stages:
  Topic / ExampleGroup → SearchIndexItem → SearchIndex → list[SearchResult]
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "ExampleGroup",
    "ItemType",
    "SearchIndex",
    "SearchIndexItem",
    "SearchResult",
    "Topic",
]


class ItemType(str, Enum):
    """Coarse content kind of an indexed item."""

    TOPIC = "topic"
    EXAMPLE = "example"
    CODE = "code"


@dataclass(frozen=True)
class Topic:
    """A documentation entry whose body is loaded by slug."""

    slug: str
    title: str
    description: str
    category: str = ""


@dataclass(frozen=True)
class ExampleGroup:
    """Code examples sharing a display category and base URL.

    ``url_overrides`` maps individual example keys to a more specific URL
    (e.g. a page anchor); keys without an override link to ``base_url``.
    The mappings take part in equality but not in the hash.
    """

    examples: Mapping[str, object] = field(hash=False)
    category: str
    base_url: str
    url_overrides: Mapping[str, str] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class SearchIndexItem:
    """One retrievable unit of content."""

    id: str
    title: str
    description: str
    url: str
    type: ItemType
    category: str
    content: str
    excerpt: str = ""
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class SearchResult(SearchIndexItem):
    """An index item with its relevance score attached."""

    score: int = 0

    @classmethod
    def from_item(cls, item: SearchIndexItem, score: int) -> SearchResult:
        values = {f.name: getattr(item, f.name) for f in fields(SearchIndexItem)}
        return cls(**values, score=score)


@dataclass(frozen=True)
class SearchIndex:
    """Immutable, fully built search index."""

    items: tuple[SearchIndexItem, ...]
    generated_at: str

    @property
    def total_items(self) -> int:
        return len(self.items)
