"""sitesearch — in-memory full-text search over documentation topics and code examples."""

from sitesearch.index import IndexBuilder, build_index, build_index_sync
from sitesearch.query import SearchFilter, search
from sitesearch.types import (
    ExampleGroup,
    ItemType,
    SearchIndex,
    SearchIndexItem,
    SearchResult,
    Topic,
)

__version__ = "0.1.0"

__all__ = [
    "ExampleGroup",
    "IndexBuilder",
    "ItemType",
    "SearchFilter",
    "SearchIndex",
    "SearchIndexItem",
    "SearchResult",
    "Topic",
    "__version__",
    "build_index",
    "build_index_sync",
    "search",
]
