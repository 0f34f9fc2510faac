"""
Abstract base mapper.

Every mapper implements ``map_record`` (single item) and gets ``map_many``
(lazy stream) for free. Records are mapped one at a time as the stream is
consumed, so a failure surfaces only when the failing record is reached.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

SourceT = TypeVar("SourceT")
TargetT = TypeVar("TargetT")


class BaseMapper(ABC, Generic[SourceT, TargetT]):
    """Contract that every record mapper must fulfil."""

    @abstractmethod
    def map_record(self, source: SourceT) -> TargetT:
        """
        Transform a single source record into the target format.

        Raises:
            MappingError: If a field reference cannot be resolved.
        """
        ...

    def map_many(self, sources: Iterable[SourceT]) -> Iterator[TargetT]:
        """
        Lazily transform a stream of source records.

        Nothing is mapped until the result is iterated; stops at the first
        record that fails.
        """
        for source in sources:
            yield self.map_record(source)
