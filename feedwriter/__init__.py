"""
feedwriter — generate one or more views (Atom, JSON, CSV, ...) of a collection
of records through a single declarative field map.
"""

from feedwriter.core.exceptions import (
    ConfigurationError,
    FeedWriterException,
    ImmutabilityError,
    MappingError,
    UnknownViewError,
    ViewCollectionError,
)
from feedwriter.mappers.map_spec import FieldEntry, MapSpec, TransformEntry
from feedwriter.services.feed import Feed
from feedwriter.services.source_adapter import PullSource
from feedwriter.views import AtomView, BaseView, CSVView, JSONView, View

__version__ = "1.0.0"

__all__ = [
    "AtomView",
    "BaseView",
    "CSVView",
    "ConfigurationError",
    "Feed",
    "FeedWriterException",
    "FieldEntry",
    "ImmutabilityError",
    "JSONView",
    "MapSpec",
    "MappingError",
    "PullSource",
    "TransformEntry",
    "UnknownViewError",
    "View",
    "ViewCollectionError",
]
