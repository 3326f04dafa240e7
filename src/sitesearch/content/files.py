"""Filesystem content source — reads ``{slug}{suffix}`` files from a directory.

Files are read in a worker thread so that several topics can be loaded
concurrently from an event loop.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import TYPE_CHECKING

from sitesearch.content.base import BaseContentLoader
from sitesearch.exceptions import ContentLoadError

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ["FileContentLoader"]

logger = logging.getLogger(__name__)

MAX_FILE_SIZE: int = 10 * 1024 * 1024  # 10 MB

# Slugs are single path segments: letters, digits, dash, underscore, dot.
_SLUG_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


class FileContentLoader(BaseContentLoader):
    """Loads topic bodies from markdown files named after their slug.

    Usage::

        loader = FileContentLoader(Path("docs"))
        body = await loader.load("getting-started")  # docs/getting-started.md
    """

    def __init__(self, docs_dir: Path, suffix: str = ".md", encoding: str = "utf-8") -> None:
        self.docs_dir = docs_dir
        self.suffix = suffix
        self.encoding = encoding

    def path_for(self, slug: str) -> Path:
        """Return the file path backing ``slug``.

        Raises:
            ContentLoadError: If the slug is not a plain file name.
        """
        if not _SLUG_RE.match(slug) or ".." in slug:
            raise ContentLoadError(f"Invalid topic slug: {slug!r}")
        return self.docs_dir / f"{slug}{self.suffix}"

    async def load(self, slug: str) -> str:
        path = self.path_for(slug)
        return await asyncio.to_thread(self._read, path)

    def _read(self, path: Path) -> str:
        if not path.is_file():
            raise ContentLoadError(f"Content file not found: {path}")

        file_size = path.stat().st_size
        if file_size > MAX_FILE_SIZE:
            msg = (
                f"Content file {path.name} ({file_size} bytes) "
                f"exceeds maximum size ({MAX_FILE_SIZE} bytes)"
            )
            raise ContentLoadError(msg)

        try:
            raw = path.read_text(encoding=self.encoding)
        except UnicodeDecodeError:
            logger.warning("Decode failed for %s, retrying with replacement", path.name)
            raw = path.read_bytes().decode(self.encoding, errors="replace")
        except OSError as e:
            raise ContentLoadError(f"Cannot read content file {path.name}: {e}") from e

        # Strip BOM if present
        if raw.startswith("\ufeff"):
            raw = raw[1:]

        logger.debug("Loaded %s: %d chars", path.name, len(raw))
        return raw
