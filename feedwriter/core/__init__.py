from feedwriter.core.exceptions import (
    FeedWriterException,
    ConfigurationError,
    MappingError,
    ViewCollectionError,
    ImmutabilityError,
    UnknownViewError,
)
from feedwriter.core.logging import setup_logging, get_logger

__all__ = [
    "FeedWriterException",
    "ConfigurationError",
    "MappingError",
    "ViewCollectionError",
    "ImmutabilityError",
    "UnknownViewError",
    "setup_logging",
    "get_logger",
]
