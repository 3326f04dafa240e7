"""Custom exception hierarchy for sitesearch."""

__all__ = [
    "CatalogError",
    "ConfigError",
    "ContentLoadError",
    "ExportError",
    "IndexBuildError",
    "SiteSearchError",
]


class SiteSearchError(Exception):
    """Base exception for all sitesearch errors."""


class ConfigError(SiteSearchError):
    """Raised when configuration loading or validation fails."""


class CatalogError(SiteSearchError):
    """Raised when the topic/example catalog cannot be loaded."""


class ContentLoadError(SiteSearchError):
    """Raised when a topic body cannot be loaded from its content source."""


class IndexBuildError(SiteSearchError):
    """Raised when index assembly fails outside per-topic loading."""


class ExportError(SiteSearchError):
    """Raised when writing an exported index fails."""
