"""
View contract.

A view accumulates canonical records during the feed pass and later renders
them into one output representation. ``View`` is the structural contract the
feed checks; ``BaseView`` is the convenience base the reference views share.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable

from feedwriter.core.exceptions import ViewCollectionError


@runtime_checkable
class View(Protocol):
    """Anything with ``collect(item)`` and ``render()`` can be fanned out to."""

    def collect(self, item: Mapping[str, Any]) -> None:
        ...

    def render(self) -> str:
        ...


class BaseView(ABC):
    """
    Base class for output-format views.

    Subclasses declare the canonical fields they depend on in
    ``required_fields``; the feed refuses a map that does not provide them.
    """

    required_fields: ClassVar[frozenset[str]] = frozenset()

    @abstractmethod
    def collect(self, item: Mapping[str, Any]) -> None:
        """Accumulate one canonical record. Must not mutate ``item``."""
        ...

    @abstractmethod
    def render(self) -> str:
        """Render everything collected so far. Idempotent."""
        ...

    def generate_feed(self) -> str:
        """Alias of ``render``."""
        return self.render()

    # ── Helpers for subclasses ────────────────────────────────────────

    def _field(self, item: Mapping[str, Any], name: str) -> Any:
        """Read ``name`` off a canonical record, failing fast when absent."""
        try:
            return item[name]
        except KeyError:
            raise ViewCollectionError(
                type(self).__name__,
                f"missing field '{name}'",
                details={"field": name, "available": list(item)},
            ) from None
