"""In-memory content source backed by a plain mapping."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sitesearch.content.base import BaseContentLoader
from sitesearch.exceptions import ContentLoadError

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["MappingContentLoader"]

logger = logging.getLogger(__name__)


class MappingContentLoader(BaseContentLoader):
    """Serves topic bodies from an in-memory ``slug → content`` mapping."""

    def __init__(self, contents: Mapping[str, str]) -> None:
        self._contents = dict(contents)

    async def load(self, slug: str) -> str:
        try:
            return self._contents[slug]
        except KeyError:
            raise ContentLoadError(f"No content registered for topic {slug!r}") from None
