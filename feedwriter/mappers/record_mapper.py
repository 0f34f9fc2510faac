"""
Concrete mapper: source record → canonical record.

Applies a MapSpec to one record at a time. Literal entries copy an attribute
off the (normalized) source record; transform entries are called with the
normalized record itself, never with the partially built canonical record.
"""

from collections.abc import Mapping
from types import MappingProxyType, SimpleNamespace
from typing import Any

from feedwriter.core.exceptions import ConfigurationError, MappingError
from feedwriter.mappers.base_mapper import BaseMapper
from feedwriter.mappers.map_spec import FieldEntry, MapSpec, TransformEntry

CanonicalRecord = Mapping[str, Any]

_MISSING = object()

# Longest repr of a source record quoted in MappingError details
_ITEM_REPR_LIMIT = 200


def normalize_record(record: Any) -> Any:
    """
    Make a source record attribute-addressable.

    Mappings become a SimpleNamespace so transforms can write ``r.writer``.
    The coercion is shallow: nested mappings are left as they are.
    Any other object is returned unchanged.
    """
    if isinstance(record, Mapping):
        return SimpleNamespace(**{str(key): value for key, value in record.items()})
    return record


class RecordMapper(BaseMapper[Any, CanonicalRecord]):
    """Map arbitrary source records into canonical records using a MapSpec."""

    def __init__(self, map_spec: MapSpec) -> None:
        self._map_spec = map_spec

    @property
    def map_spec(self) -> MapSpec:
        return self._map_spec

    def map_record(self, source: Any) -> CanonicalRecord:
        """
        Build one canonical record from ``source``.

        The result is a fresh read-only mapping whose keys follow map order.

        Raises:
            MappingError: If a FieldEntry names an attribute the record lacks.
                Exceptions raised by transforms propagate unchanged.
        """
        record = normalize_record(source)
        item: dict[str, Any] = {}

        for output_field, entry in self._map_spec.items():
            if isinstance(entry, FieldEntry):
                value = getattr(record, entry.source_field, _MISSING)
                if value is _MISSING:
                    raise MappingError(
                        entry.source_field,
                        details={
                            "output_field": output_field,
                            "item": _short_repr(source),
                        },
                    )
                item[output_field] = value
            elif isinstance(entry, TransformEntry):
                item[output_field] = entry.fn(record)
            else:
                raise ConfigurationError(
                    f"map entry for {output_field} must be a field name or a callable",
                    details={"field": output_field, "type": type(entry).__name__},
                )

        return MappingProxyType(item)


def _short_repr(value: Any) -> str:
    text = repr(value)
    if len(text) > _ITEM_REPR_LIMIT:
        return text[:_ITEM_REPR_LIMIT] + "..."
    return text
