"""Shared fixtures for sitesearch tests."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from sitesearch.content import MappingContentLoader
from sitesearch.index import build_index_sync
from sitesearch.types import ExampleGroup, SearchIndex, Topic

FIXTURE_SITE = Path(__file__).parent / "fixtures" / "site"

# "mock" appears exactly fifteen times, "vi.fn" once.
API_REFERENCE_MD = (
    "# API Reference\n\n"
    "Complete reference for [testing utilities](/docs/api-reference#utilities).\n\n"
    "## Spies\n\n"
    "Create a spy with vi.fn and assert on it with expect.\n\n"
    + "\n".join(f"- mock {i}" for i in range(1, 16))
    + "\n"
)

BEST_PRACTICES_MD = (
    "# Best Practices\n\n"
    "Prefer rendering the real component; reach for a mock at network boundaries.\n"
)


@pytest.fixture
def topics() -> list[Topic]:
    return [
        Topic("api-reference", "API Reference", "Complete testing utilities and helper functions"),
        Topic("best-practices", "Best Practices", "Advanced patterns and optimization techniques"),
        Topic("ci-cd", "CI/CD", "Production-ready testing pipelines and automation"),
    ]


@pytest.fixture
def loader() -> MappingContentLoader:
    """Content for every topic except ``ci-cd``, whose load fails."""
    return MappingContentLoader(
        {
            "api-reference": API_REFERENCE_MD,
            "best-practices": BEST_PRACTICES_MD,
        }
    )


@pytest.fixture
def example_groups() -> list[ExampleGroup]:
    return [
        ExampleGroup(
            examples={
                "basic_test": "test('x', () => {})",
                "mock_test": "const fn = vi.fn();\nfn('mock');\nexpect(fn).toHaveBeenCalled();",
            },
            category="Unit Testing",
            base_url="/examples/unit",
        ),
        ExampleGroup(
            examples={"user_journey": "await page.getByRole('button').click();"},
            category="E2E Testing",
            base_url="/examples/e2e",
        ),
        ExampleGroup(
            examples={"modal_props": "<Modal open={true} title='Test modal' />"},
            category="Components",
            base_url="/components",
        ),
        ExampleGroup(
            examples={
                "first_test": "test('renders', () => { render(Button); });",
                "ssr_testing": "import { render } from 'svelte/server';",
            },
            category="Quick Start",
            base_url="/docs/getting-started",
            url_overrides={"first_test": "/docs/getting-started#step-2-write-your-first-test"},
        ),
    ]


@pytest.fixture
def index(
    topics: list[Topic],
    example_groups: list[ExampleGroup],
    loader: MappingContentLoader,
) -> SearchIndex:
    """An index built from the in-memory fixtures."""
    return build_index_sync(topics, example_groups, loader)


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A writable copy of the on-disk fixture site."""
    target = tmp_path / "site"
    shutil.copytree(FIXTURE_SITE, target)
    return target
