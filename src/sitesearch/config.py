"""Configuration system for sitesearch.

Manages site configuration via sitesearch.toml with typed dataclasses
and sensible defaults for all values.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

import tomli_w

if sys.version_info >= (3, 12):
    import tomllib
else:
    import tomli as tomllib

from sitesearch.exceptions import ConfigError

_T = TypeVar("_T")

__all__ = [
    "CONFIG_FILE",
    "ContentConfig",
    "IndexConfig",
    "OutputConfig",
    "ProjectConfig",
    "SearchConfig",
    "SiteSearchConfig",
    "default_config",
    "load_config",
    "resolve_path",
    "save_config",
]

logger = logging.getLogger(__name__)

CONFIG_FILE = "sitesearch.toml"


@dataclass
class ProjectConfig:
    """[project] section."""

    name: str = ""
    description: str = ""


@dataclass
class ContentConfig:
    """[content] section."""

    docs_dir: str = "docs"
    catalog: str = "catalog.toml"
    suffix: str = ".md"
    encoding: str = "utf-8"


@dataclass
class IndexConfig:
    """[index] section."""

    excerpt_max_chars: int = 200
    code_excerpt_lines: int = 3
    code_excerpt_max_chars: int = 150


@dataclass
class SearchConfig:
    """[search] section."""

    max_results: int = 20
    default_filter: str = "all"


@dataclass
class OutputConfig:
    """[output] section."""

    index_file: str = "search-index.json"
    indent: int = 2


@dataclass
class SiteSearchConfig:
    """Root configuration combining all sections."""

    project: ProjectConfig = field(default_factory=ProjectConfig)
    content: ContentConfig = field(default_factory=ContentConfig)
    index: IndexConfig = field(default_factory=IndexConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


_SECTION_MAP: dict[str, type] = {
    "project": ProjectConfig,
    "content": ContentConfig,
    "index": IndexConfig,
    "search": SearchConfig,
    "output": OutputConfig,
}


def default_config() -> SiteSearchConfig:
    """Return a config with all default values."""
    return SiteSearchConfig()


def _config_to_dict(config: SiteSearchConfig) -> dict[str, object]:
    """Convert SiteSearchConfig to a nested dict suitable for TOML serialization."""
    return {name: dict(vars(getattr(config, name))) for name in _SECTION_MAP}


def save_config(config: SiteSearchConfig, path: Path) -> None:
    """Save configuration to a TOML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = _config_to_dict(config)
    try:
        with path.open("wb") as f:
            tomli_w.dump(data, f)
        logger.info("Saved config to %s", path)
    except OSError as e:
        logger.error("Failed to save config to %s: %s", path, e)
        raise ConfigError(f"Failed to save config to {path}: {e}") from e


def _load_section(cls: type[_T], data: object, name: str) -> _T:
    """Load a dataclass section from a dict, ignoring unknown keys."""
    if not isinstance(data, dict):
        raise ConfigError(f"Config section [{name}] must be a table")
    known_fields = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
    filtered = {k: v for k, v in data.items() if k in known_fields}
    return cls(**filtered)


# Settings that bound result and excerpt sizes; each must be an int >= 0.
_LIMIT_KEYS = (
    ("search", "max_results"),
    ("index", "excerpt_max_chars"),
    ("index", "code_excerpt_lines"),
    ("index", "code_excerpt_max_chars"),
)


def _check_limits(config: SiteSearchConfig) -> None:
    for section, key in _LIMIT_KEYS:
        value = getattr(getattr(config, section), key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"[{section}] {key} must be a non-negative integer, got {value!r}")


def load_config(path: Path) -> SiteSearchConfig:
    """Load configuration from a TOML file.

    Missing sections or keys get default values.  Size limits must be
    non-negative integers.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = path.read_bytes()
        data = tomllib.loads(raw.decode("utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.error("Failed to load config from %s: %s", path, e)
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    config = SiteSearchConfig()
    for name, cls in _SECTION_MAP.items():
        if name in data:
            setattr(config, name, _load_section(cls, data[name], name))
    _check_limits(config)

    logger.info("Loaded config from %s", path)
    return config


def resolve_path(config_path: Path, value: str) -> Path:
    """Resolve a configured path relative to the config file's directory."""
    candidate = Path(value)
    if candidate.is_absolute():
        return candidate
    return config_path.parent / candidate
