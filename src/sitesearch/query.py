"""Full-text query engine — filters, scores and ranks index items.

Scoring is additive and fully deterministic:

- +100 when the title contains the whole query
- +50 when the description contains the whole query
- +30 when the category contains the whole query
- per term, +5 for every occurrence in the content
- per term, +15 when any keyword contains the term
- per term, +10 when the term appears anywhere in the item's text

The last signal overlaps with the content count on purpose; rankings
depend on it.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from sitesearch.types import ItemType, SearchResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sitesearch.types import SearchIndex, SearchIndexItem

__all__ = [
    "MAX_RESULTS",
    "SearchFilter",
    "filter_items",
    "score_item",
    "search",
    "tokenize_query",
]

logger = logging.getLogger(__name__)

MAX_RESULTS = 20

TITLE_WEIGHT = 100
DESCRIPTION_WEIGHT = 50
CATEGORY_WEIGHT = 30
CONTENT_OCCURRENCE_WEIGHT = 5
KEYWORD_WEIGHT = 15
TEXT_WEIGHT = 10

_DOCS_CATEGORIES = frozenset({"Documentation", "Quick Start"})
_NON_EXAMPLE_CATEGORIES = frozenset({"Components", "Documentation", "Quick Start"})
_COMPONENTS_CATEGORY = "Components"


class SearchFilter(str, Enum):
    """Coarse category selector applied before scoring."""

    ALL = "all"
    DOCS = "docs"
    EXAMPLES = "examples"
    COMPONENTS = "components"


def tokenize_query(query: str) -> list[str]:
    """Split a query into lowercase whitespace-separated terms."""
    return query.lower().split()


def _keep(item: SearchIndexItem, selector: SearchFilter) -> bool:
    if selector is SearchFilter.DOCS:
        return item.type == ItemType.TOPIC or item.category in _DOCS_CATEGORIES
    if selector is SearchFilter.EXAMPLES:
        return item.type == ItemType.EXAMPLE and item.category not in _NON_EXAMPLE_CATEGORIES
    if selector is SearchFilter.COMPONENTS:
        return item.category == _COMPONENTS_CATEGORY
    return True


def filter_items(
    items: Sequence[SearchIndexItem],
    selector: SearchFilter | str = SearchFilter.ALL,
) -> list[SearchIndexItem]:
    """Narrow ``items`` by a filter name.

    Unknown filter names keep every item, like ``"all"``.
    """
    try:
        selector = SearchFilter(selector)
    except ValueError:
        logger.debug("Unknown search filter %r, not filtering", selector)
        return list(items)
    if selector is SearchFilter.ALL:
        return list(items)
    return [item for item in items if _keep(item, selector)]


def score_item(item: SearchIndexItem, query: str, terms: Sequence[str]) -> int:
    """Compute the relevance score of one item.

    Args:
        item: Candidate index item.
        query: The raw query string, matched whole against title,
            description and category.
        terms: Lowercase query terms from :func:`tokenize_query`.

    Returns:
        Non-negative integer score; 0 means no match.
    """
    whole = query.lower()
    score = 0

    if whole in item.title.lower():
        score += TITLE_WEIGHT
    if whole in item.description.lower():
        score += DESCRIPTION_WEIGHT
    if whole in item.category.lower():
        score += CATEGORY_WEIGHT

    content = item.content.lower()
    searchable_text = " ".join(
        (item.title, item.description, item.category, item.content, " ".join(item.keywords))
    ).lower()

    for term in terms:
        score += content.count(term) * CONTENT_OCCURRENCE_WEIGHT
    for term in terms:
        if any(term in keyword for keyword in item.keywords):
            score += KEYWORD_WEIGHT
    for term in terms:
        if term in searchable_text:
            score += TEXT_WEIGHT

    return score


def search(
    query: str,
    index: SearchIndex,
    filter: SearchFilter | str = SearchFilter.ALL,  # noqa: A002
    max_results: int = MAX_RESULTS,
) -> list[SearchResult]:
    """Search the index and return the best-scoring items.

    Args:
        query: Free-text query; blank queries return no results.
        index: Index to search; never mutated.
        filter: ``"all"``, ``"docs"``, ``"examples"`` or ``"components"``.
        max_results: Maximum number of results; negative values return none.

    Returns:
        Results with score > 0, highest score first.  Equal scores keep
        index order.
    """
    if not query.strip():
        return []

    terms = tokenize_query(query)
    candidates = filter_items(index.items, filter)

    scored = [SearchResult.from_item(item, score_item(item, query, terms)) for item in candidates]
    results = [r for r in scored if r.score > 0]
    results.sort(key=lambda r: r.score, reverse=True)

    logger.debug(
        "Query %r (filter=%s): %d/%d candidates matched",
        query,
        getattr(filter, "value", filter),
        len(results),
        len(candidates),
    )
    return results[: max(max_results, 0)]
