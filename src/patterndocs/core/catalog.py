"""Static catalog of design-pattern topics.

The catalog is frozen configuration data built once at import time and
shared by reference. Category order follows the conventional grouping
(creational, structural, behavioral) and is significant for display.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypedDict

from patterndocs.core.types import URLPath


class PatternDict(TypedDict):
    """Dictionary representation of a pattern."""

    name: str
    url: str


class CategoryDict(TypedDict):
    """Dictionary representation of a category."""

    name: str
    patterns: list[PatternDict]


@dataclass(frozen=True)
class Pattern:
    """Navigable design-pattern topic."""

    name: str
    url: URLPath

    def to_dict(self) -> PatternDict:
        """Convert to dictionary for JSON serialization."""
        return {"name": self.name, "url": self.url}


@dataclass(frozen=True)
class Category:
    """Named group of patterns, in display order."""

    name: str
    patterns: tuple[Pattern, ...]

    def to_dict(self) -> CategoryDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "patterns": [pattern.to_dict() for pattern in self.patterns],
        }


def _pattern(name: str, url: str) -> Pattern:
    return Pattern(name=name, url=URLPath(url))


DESIGN_PATTERNS: tuple[Category, ...] = (
    Category(
        name="Creational Patterns",
        patterns=(
            _pattern("Factory Method", "/factory-method"),
            _pattern("Abstract factory", "/abstract-factory"),
            _pattern("Builder", "/builder"),
            _pattern("Prototype", "/prototype"),
            _pattern("Singleton", "/singleton"),
        ),
    ),
    Category(
        name="Structural Patterns",
        patterns=(
            _pattern("Adapter", "/adapter"),
            _pattern("Bridge", "/bridge"),
            _pattern("Composite", "/composite"),
            _pattern("Decorator", "/decorator"),
            _pattern("Facade", "/facade"),
            _pattern("Flyweight", "/flyweight"),
            _pattern("Proxy", "/proxy"),
        ),
    ),
    Category(
        name="Behavioral Patterns",
        patterns=(
            _pattern("Chain of Responsibility", "/chain-of-responsibility"),
            _pattern("Command", "/command"),
            _pattern("Iterator", "/iterator"),
            _pattern("Mediator", "/mediator"),
            _pattern("Memento", "/memento"),
            _pattern("Observer", "/observer"),
            _pattern("State", "/state"),
            _pattern("Strategy", "/strategy"),
            _pattern("Template Method", "/template-method"),
            _pattern("Visitor", "/visitor"),
        ),
    ),
)


def iter_patterns(
    categories: tuple[Category, ...] = DESIGN_PATTERNS,
) -> Iterator[Pattern]:
    """Iterate over all patterns in display order."""
    for category in categories:
        yield from category.patterns


def find_pattern(
    url: str,
    categories: tuple[Category, ...] = DESIGN_PATTERNS,
) -> Pattern | None:
    """Look up a pattern by its navigation target.

    Args:
        url: Navigation target (e.g., "/observer" or "observer")
        categories: Catalog to search

    Returns:
        Pattern if found, None otherwise
    """
    normalized = url if url.startswith("/") else f"/{url}"
    for pattern in iter_patterns(categories):
        if pattern.url == normalized:
            return pattern
    return None
