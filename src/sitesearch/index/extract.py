"""Deterministic keyword and excerpt extraction for indexed content.

Keywords come from a fixed vocabulary of testing terms matched with
word-boundary regular expressions.  No stemming or tokenizer models:
the vocabulary below is the complete, auditable list of terms.
"""

from __future__ import annotations

import logging
import re

__all__ = [
    "CODE_EXCERPT_LINES",
    "CODE_EXCERPT_MAX_CHARS",
    "ELLIPSIS",
    "EXCERPT_MAX_CHARS",
    "KEYWORD_PATTERNS",
    "create_code_excerpt",
    "create_excerpt",
    "extract_keywords",
]

logger = logging.getLogger(__name__)

EXCERPT_MAX_CHARS = 200
CODE_EXCERPT_LINES = 3
CODE_EXCERPT_MAX_CHARS = 150
ELLIPSIS = "..."

# Word boundaries are ASCII-only: a term next to a non-ASCII letter still matches.
_FLAGS = re.IGNORECASE | re.ASCII

# One pattern per cluster of testing vocabulary.
KEYWORD_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Mocking
    re.compile(r"\b(mock|mocking|mocked|vi\.fn|vi\.mock)\b", _FLAGS),
    # Test structure
    re.compile(r"\b(test|testing|spec|describe|it|expect)\b", _FLAGS),
    re.compile(r"\b(component|render|page|locator)\b", _FLAGS),
    # Assertions
    re.compile(r"\b(assertion|toBeInTheDocument|toHaveText|toBeVisible)\b", _FLAGS),
    # Interactions
    re.compile(r"\b(click|fill|type|press|keyboard)\b", _FLAGS),
    # Frameworks
    re.compile(r"\b(svelte|sveltekit|vitest|playwright)\b", _FLAGS),
    re.compile(r"\b(browser|ssr|server|api|route)\b", _FLAGS),
    # Accessibility
    re.compile(r"\b(accessibility|a11y|aria|role)\b", _FLAGS),
    # UI elements
    re.compile(r"\b(form|input|button|modal|card)\b", _FLAGS),
    # Reactive state
    re.compile(r"\b(state|reactive|derived|effect)\b", _FLAGS),
)

# Markdown inline link: [text](url)
_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")

# Lines that never make a useful excerpt: headings, code fences, quotes.
_SKIP_PREFIXES = ("#", "```", ">")


def extract_keywords(content: str) -> tuple[str, ...]:
    """Return every vocabulary term found in ``content``.

    Matches are lowercased and de-duplicated, keeping first-match order
    (pattern by pattern, left to right within each pattern).

    Args:
        content: Markdown or source code.

    Returns:
        Tuple of unique lowercase keywords.
    """
    if not content:
        return ()
    keywords: dict[str, None] = {}
    for pattern in KEYWORD_PATTERNS:
        for match in pattern.finditer(content):
            keywords.setdefault(match.group(0).lower(), None)
    return tuple(keywords)


def create_excerpt(content: str, max_chars: int = EXCERPT_MAX_CHARS) -> str:
    """Build a one-line preview from markdown content.

    Takes the first line that is not blank, a heading, a code fence or a
    block quote, truncates it to ``max_chars`` and rewrites markdown links
    to their display text.

    Args:
        content: Markdown body.
        max_chars: Truncation length applied before link rewriting.

    Returns:
        Excerpt ending in ``"..."``; just ``"..."`` when nothing qualifies.
    """
    excerpt = ""
    for line in content.split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(_SKIP_PREFIXES):
            continue
        excerpt = trimmed
        break

    return _LINK_RE.sub(r"\1", excerpt[:max_chars]) + ELLIPSIS


def create_code_excerpt(
    code: str,
    max_lines: int = CODE_EXCERPT_LINES,
    max_chars: int = CODE_EXCERPT_MAX_CHARS,
) -> str:
    """Build a short preview from the first non-blank lines of ``code``."""
    lines = [line for line in code.split("\n") if line.strip()]
    return "\n".join(lines[:max_lines])[:max_chars] + ELLIPSIS
