"""Topic content sources — resolve a slug to its full text body."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitesearch.config import resolve_path
from sitesearch.content.base import BaseContentLoader
from sitesearch.content.files import FileContentLoader
from sitesearch.content.memory import MappingContentLoader

if TYPE_CHECKING:
    from pathlib import Path

    from sitesearch.config import SiteSearchConfig

__all__ = [
    "BaseContentLoader",
    "FileContentLoader",
    "MappingContentLoader",
    "loader_from_config",
]


def loader_from_config(config: SiteSearchConfig, config_path: Path) -> FileContentLoader:
    """Create the filesystem loader described by the ``[content]`` section.

    Args:
        config: Site configuration.
        config_path: Path of the config file; relative ``docs_dir`` values
            resolve against its directory.

    Returns:
        A loader reading ``{docs_dir}/{slug}{suffix}``.
    """
    return FileContentLoader(
        resolve_path(config_path, config.content.docs_dir),
        suffix=config.content.suffix,
        encoding=config.content.encoding,
    )
