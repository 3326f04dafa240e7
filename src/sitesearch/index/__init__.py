"""Index construction — aggregation, keyword/excerpt extraction, assembly."""

from sitesearch.index.aggregate import (
    DOCUMENTATION_CATEGORY,
    aggregate_examples,
    aggregate_topics,
    category_slug,
    humanize_key,
)
from sitesearch.index.builder import IndexBuilder, build_index, build_index_sync
from sitesearch.index.extract import (
    KEYWORD_PATTERNS,
    create_code_excerpt,
    create_excerpt,
    extract_keywords,
)

__all__ = [
    "DOCUMENTATION_CATEGORY",
    "KEYWORD_PATTERNS",
    "IndexBuilder",
    "aggregate_examples",
    "aggregate_topics",
    "build_index",
    "build_index_sync",
    "category_slug",
    "create_code_excerpt",
    "create_excerpt",
    "extract_keywords",
    "humanize_key",
]
