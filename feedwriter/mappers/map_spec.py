"""
Map specification: how each canonical output field is derived.

A map is an ordered table ``{output_field: entry}`` where the entry is either

  - ``FieldEntry("writer")`` — copy attribute ``writer`` off the source record
  - ``TransformEntry(fn)``   — call ``fn(record)`` and use its return value

Callers usually write the shorthand form and let ``MapSpec`` convert it::

    MapSpec({
        "date":   "date_created",                 # → FieldEntry
        "author": lambda r: r.writer.upper(),     # → TransformEntry
    })
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Union

from feedwriter.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class FieldEntry:
    """Literal alias: the canonical field is the source attribute ``source_field``."""

    source_field: str


@dataclass(frozen=True)
class TransformEntry:
    """Computed field: the canonical field is ``fn(normalized_record)``."""

    fn: Callable[[Any], Any]


MapEntry = Union[FieldEntry, TransformEntry]


class MapSpec(Mapping[str, MapEntry]):
    """
    Read-only, insertion-ordered mapping of output field → ``MapEntry``.

    Accepts the shorthand ``{name: str | callable}`` form as well as explicit
    entries; every instance is validated on construction.

    Raises:
        ConfigurationError: If ``entries`` is not a mapping, is empty, or
            holds a key/entry of an unsupported type.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Any]) -> None:
        if not isinstance(entries, Mapping):
            raise ConfigurationError(
                "map must be a mapping of output field to field name or callable",
                details={"type": type(entries).__name__},
            )
        if not entries:
            raise ConfigurationError("map must provide values")

        self._entries: dict[str, MapEntry] = {}
        for output_field, value in entries.items():
            if not isinstance(output_field, str) or not output_field:
                raise ConfigurationError(
                    "map keys must be non-empty strings",
                    details={"key": repr(output_field)},
                )
            self._entries[output_field] = _coerce_entry(output_field, value)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "MapSpec":
        """Return ``raw`` if it is already a MapSpec, else build one from it."""
        if isinstance(raw, MapSpec):
            return raw
        return cls(raw)

    def missing(self, required: Iterable[str]) -> list[str]:
        """Return the required names that have no entry, in sorted order."""
        return sorted(name for name in set(required) if name not in self._entries)

    def __getitem__(self, key: str) -> MapEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MapSpec({self._entries!r})"


# ─── Private helpers ──────────────────────────────────────────────────


def _coerce_entry(output_field: str, value: Any) -> MapEntry:
    if isinstance(value, str):
        value = FieldEntry(value)
    elif callable(value):
        value = TransformEntry(value)

    if isinstance(value, FieldEntry):
        if not isinstance(value.source_field, str) or not value.source_field:
            raise ConfigurationError(
                f"map entry for {output_field} names an empty source field",
                details={"field": output_field},
            )
        return value
    if isinstance(value, TransformEntry) and callable(value.fn):
        return value

    raise ConfigurationError(
        f"map entry for {output_field} must be a field name or a callable",
        details={"field": output_field, "type": type(value).__name__},
    )
