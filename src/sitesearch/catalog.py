"""Site catalog — the topics and example groups that make up the index.

The catalog is a TOML file::

    [[topics]]
    slug = "getting-started"
    title = "Getting Started"
    description = "Setup, installation, and your first test"
    category = "Fundamentals"

    [[example_groups]]
    category = "Unit Testing"
    base_url = "/examples/unit"

    [example_groups.examples]
    basic_test = "test('x', () => {})"

    [example_groups.url_overrides]
    basic_test = "/examples/unit#basic"

Table order in the file is preserved and becomes index order.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

if sys.version_info >= (3, 12):
    import tomllib
else:
    import tomli as tomllib

from sitesearch.exceptions import CatalogError
from sitesearch.types import ExampleGroup, Topic

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ["Catalog", "load_catalog", "parse_catalog"]

logger = logging.getLogger(__name__)

_TOPIC_FIELDS = ("slug", "title", "description")
_GROUP_FIELDS = ("category", "base_url")


@dataclass(frozen=True)
class Catalog:
    """Everything the index is built from."""

    topics: tuple[Topic, ...] = ()
    example_groups: tuple[ExampleGroup, ...] = ()


def _require(entry: object, keys: tuple[str, ...], where: str) -> dict[str, object]:
    if not isinstance(entry, dict):
        raise CatalogError(f"{where} must be a table")
    missing = [k for k in keys if not isinstance(entry.get(k), str)]
    if missing:
        raise CatalogError(f"{where} is missing string field(s): {', '.join(missing)}")
    return entry


def _parse_topic(entry: object, position: int) -> Topic:
    data = _require(entry, _TOPIC_FIELDS, f"topics[{position}]")
    return Topic(
        slug=str(data["slug"]),
        title=str(data["title"]),
        description=str(data["description"]),
        category=str(data.get("category", "")),
    )


def _parse_group(entry: object, position: int) -> ExampleGroup:
    where = f"example_groups[{position}]"
    data = _require(entry, _GROUP_FIELDS, where)

    examples = data.get("examples", {})
    if not isinstance(examples, dict):
        raise CatalogError(f"{where}.examples must be a table")

    overrides = data.get("url_overrides", {})
    if not isinstance(overrides, dict) or not all(isinstance(v, str) for v in overrides.values()):
        raise CatalogError(f"{where}.url_overrides must map example keys to URL strings")

    return ExampleGroup(
        examples=dict(examples),
        category=str(data["category"]),
        base_url=str(data["base_url"]),
        url_overrides=dict(overrides),
    )


def parse_catalog(data: dict[str, object]) -> Catalog:
    """Build a :class:`Catalog` from already-decoded TOML data.

    Raises:
        CatalogError: If a topic or group is malformed.
    """
    topics = data.get("topics", [])
    groups = data.get("example_groups", [])
    if not isinstance(topics, list) or not isinstance(groups, list):
        raise CatalogError("'topics' and 'example_groups' must be arrays of tables")

    catalog = Catalog(
        topics=tuple(_parse_topic(t, i) for i, t in enumerate(topics)),
        example_groups=tuple(_parse_group(g, i) for i, g in enumerate(groups)),
    )

    slugs = [t.slug for t in catalog.topics]
    duplicates = sorted({s for s in slugs if slugs.count(s) > 1})
    if duplicates:
        raise CatalogError(f"Duplicate topic slug(s): {', '.join(duplicates)}")

    return catalog


def load_catalog(path: Path) -> Catalog:
    """Load the site catalog from a TOML file.

    Raises:
        CatalogError: If the file is missing, unreadable or malformed.
    """
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        data = tomllib.loads(path.read_bytes().decode("utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.error("Failed to load catalog from %s: %s", path, e)
        raise CatalogError(f"Failed to load catalog from {path}: {e}") from e

    catalog = parse_catalog(data)
    logger.info(
        "Loaded catalog from %s: %d topics, %d example groups",
        path,
        len(catalog.topics),
        len(catalog.example_groups),
    )
    return catalog
