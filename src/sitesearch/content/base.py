"""Abstract base class for topic content sources."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

__all__ = ["BaseContentLoader"]

logger = logging.getLogger(__name__)


class BaseContentLoader(ABC):
    """Base class for all topic content sources.

    Subclasses resolve a topic slug to its full text body.  A failed load
    only degrades the affected topic; callers never let it abort a build.
    """

    @abstractmethod
    async def load(self, slug: str) -> str:
        """Load the raw body for a topic.

        Args:
            slug: Topic identifier (e.g. ``"api-reference"``).

        Returns:
            The full content string.

        Raises:
            ContentLoadError: If the content is missing or unreadable.
        """
