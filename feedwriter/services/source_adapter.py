"""
Source adapter — turns whatever the caller hands in into one iterator.

Handles:
  1. Sequences and other iterables (lists, tuples, generators, cursors).
  2. Mappings, whose values are the records.
  3. Pull-style sources exposing ``has_current()/current()/advance()``.

Strings and bytes are rejected: iterating them yields characters, not records.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

from feedwriter.core.exceptions import ConfigurationError


@runtime_checkable
class PullSource(Protocol):
    """Cursor-like source: check, read, then advance."""

    def has_current(self) -> bool:
        ...

    def current(self) -> Any:
        ...

    def advance(self) -> None:
        ...


def adapt_source(source: Any) -> Iterator[Any]:
    """
    Return an iterator over the records of ``source``.

    Iterators are used directly (not copied), so the feed consumes them.

    Raises:
        ConfigurationError: If ``source`` cannot be iterated as records.
    """
    if isinstance(source, (str, bytes, bytearray)):
        raise ConfigurationError(
            "source must be a collection or iterator of records",
            details={"type": type(source).__name__},
        )
    if isinstance(source, Iterator):
        return source
    if isinstance(source, Mapping):
        return iter(source.values())
    if isinstance(source, Iterable):
        return iter(source)
    if isinstance(source, PullSource):
        return _drain(source)

    raise ConfigurationError(
        "source must be a collection or iterator of records",
        details={"type": type(source).__name__},
    )


def _drain(source: PullSource) -> Iterator[Any]:
    while source.has_current():
        yield source.current()
        source.advance()
