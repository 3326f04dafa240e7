"""JSON-ready views of the index and of search responses."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from sitesearch.exceptions import ExportError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from sitesearch.query import SearchFilter
    from sitesearch.types import SearchIndex, SearchIndexItem, SearchResult

__all__ = [
    "RESULT_FIELDS",
    "index_to_dict",
    "item_to_dict",
    "result_summary",
    "search_response",
    "write_index",
]

logger = logging.getLogger(__name__)

# Fields exposed by search responses; full content stays server-side.
RESULT_FIELDS = ("id", "title", "description", "url", "type", "category", "excerpt")


def item_to_dict(item: SearchIndexItem) -> dict[str, Any]:
    """Serialize one item (or result) with plain JSON types."""
    data = asdict(item)
    data["type"] = item.type.value
    data["keywords"] = list(item.keywords)
    return data


def index_to_dict(index: SearchIndex) -> dict[str, Any]:
    """Serialize the whole index as the ``search-index.json`` document."""
    return {
        "items": [item_to_dict(item) for item in index.items],
        "generated_at": index.generated_at,
        "total_items": index.total_items,
    }


def result_summary(result: SearchResult) -> dict[str, Any]:
    """Reduce a result to the fields a search client displays."""
    data = {name: getattr(result, name) for name in RESULT_FIELDS}
    data["type"] = result.type.value
    return data


def search_response(
    query: str,
    selector: SearchFilter | str,
    results: Sequence[SearchResult],
) -> dict[str, Any]:
    """Build the response body returned for a search request."""
    summaries = [result_summary(r) for r in results]
    return {
        "query": query,
        "filter": getattr(selector, "value", selector),
        "results": summaries,
        "total": len(summaries),
    }


def write_index(index: SearchIndex, path: Path, indent: int | None = 2) -> None:
    """Write the index document to ``path`` as UTF-8 JSON.

    Raises:
        ExportError: If the file cannot be written.
    """
    data = index_to_dict(index)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(data, indent=indent, ensure_ascii=False)
        path.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        logger.error("Failed to write search index to %s: %s", path, e)
        raise ExportError(f"Failed to write search index to {path}: {e}") from e
    logger.info("Wrote %d items to %s", index.total_items, path)
