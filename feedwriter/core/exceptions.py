"""
Custom exception hierarchy for feedwriter.

All feedwriter exceptions inherit from FeedWriterException,
enabling consistent error handling and structured error reports.

Hierarchy:
    FeedWriterException
    ├── ConfigurationError   — Invalid feed configuration (views, map, source)
    ├── MappingError         — A map entry cannot be resolved on a source record
    ├── ViewCollectionError  — A view rejected a canonical record
    ├── ImmutabilityError    — Attempt to mutate a completed feed
    └── UnknownViewError     — Lookup of a view name that was never declared
"""

from typing import Any


class FeedWriterException(Exception):
    """
    Base exception for all feedwriter errors.

    Attributes:
        message:    Human-readable error description.
        error_code: Machine-readable error identifier (e.g. "MAPPING_ERROR").
        details:    Optional dict with extra context for debugging.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred.",
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the exception into a JSON-friendly dict."""
        payload: dict[str, Any] = {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = self.details
        return payload


# ─── Configuration Errors ────────────────────────────────────────────


class ConfigurationError(FeedWriterException):
    """Raised when a feed is constructed with an unusable configuration."""

    def __init__(
        self,
        message: str = "Invalid feed configuration.",
        error_code: str = "CONFIGURATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


# ─── Mapping Errors ──────────────────────────────────────────────────


class MappingError(FeedWriterException):
    """Raised when a literal field reference cannot be resolved on a record."""

    def __init__(
        self,
        field_name: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=f"unable to access {field_name} on input item",
            error_code="MAPPING_ERROR",
            details={**(details or {}), "field": field_name},
        )
        self.field_name = field_name


# ─── View Errors ─────────────────────────────────────────────────────


class ViewCollectionError(FeedWriterException):
    """Raised when a view cannot collect a canonical record."""

    def __init__(
        self,
        view_name: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=f"{view_name} cannot collect item: {reason}",
            error_code="VIEW_COLLECTION_ERROR",
            details={**(details or {}), "view": view_name},
        )


class UnknownViewError(FeedWriterException):
    """Raised when a caller looks up a view name that was never declared."""

    def __init__(self, name: str, known: list[str] | None = None) -> None:
        super().__init__(
            message=f"no view named '{name}'",
            error_code="UNKNOWN_VIEW",
            details={"view": name, "known_views": known or []},
        )


# ─── Immutability ────────────────────────────────────────────────────


class ImmutabilityError(FeedWriterException):
    """Raised on any attempt to assign or delete attributes on a completed feed."""

    def __init__(self, name: str) -> None:
        super().__init__(
            message=(
                f"cannot set '{name}' on Feed; views and map are fixed at "
                "construction"
            ),
            error_code="IMMUTABILITY_ERROR",
            details={"attribute": name},
        )
