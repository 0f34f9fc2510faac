"""
Feed — orchestrates validate → adapt source → map → fan out.

Composes the source adapter, the record mapper and the configured views
into one eager pass. Everything happens inside the constructor; a feed that
was constructed successfully has already delivered every record to every view.

Example:

    blog_posts = [
        {"date_created": "2013-02-14", "writer": "Brennen Bearnes", "text": "Hate."},
        {"date_created": "2013-08-31", "writer": "Brennen Bearnes", "text": "A feed thingy."},
    ]
    entry_from_post = {
        "date": "date_created",
        "author": "writer",
        "content": "text",
        "title": lambda post: post.text[:20],
        "link": lambda post: f"https://example.com/{post.date_created}",
    }

    feed = Feed(blog_posts, entry_from_post, {"atom": AtomView(), "json": JSONView()})
    print(feed.render("atom"))
"""

from collections.abc import Iterator, Mapping
from typing import Any

from feedwriter.core.exceptions import (
    ConfigurationError,
    ImmutabilityError,
    MappingError,
    UnknownViewError,
)
from feedwriter.core.logging import get_logger
from feedwriter.mappers.map_spec import MapSpec
from feedwriter.mappers.record_mapper import RecordMapper
from feedwriter.services.source_adapter import adapt_source
from feedwriter.views.base import View

logger = get_logger(__name__)


class Feed:
    """Generate one or more views of a collection in a single pass."""

    def __init__(
        self,
        source: Any,
        map_spec: Mapping[str, Any],
        views: Mapping[str, View],
    ) -> None:
        """
        Validate the configuration, then map every source record and hand it
        to every view.

        Args:
            source:   Records to map: a sequence, a mapping (its values), an
                      iterator/iterable, or a PullSource.
            map_spec: ``{output_field: source_field | callable}`` or a MapSpec.
            views:    ``{name: view}``; views receive records in this order.

        Raises:
            ConfigurationError: Before any record is read, if the views, the
                map or the source are unusable.
            MappingError:       If a record lacks a field the map references.
                Views keep whatever they collected before the failing record.
        """
        checked_views = self._validate_views(views)
        spec = MapSpec.from_mapping(map_spec)
        self._validate_requirements(checked_views, spec)

        records = adapt_source(source)

        logger.debug(
            "Feed configuration validated",
            extra={"views": list(checked_views), "map_fields": list(spec)},
        )

        object.__setattr__(self, "_map_spec", spec)
        object.__setattr__(self, "_views", checked_views)
        object.__setattr__(self, "_record_count", 0)

        self._spin(records, RecordMapper(spec))

    # ── Read surface ──────────────────────────────────────────────────

    def view(self, name: str) -> View:
        """
        Return the view registered under ``name``.

        Raises:
            UnknownViewError: If no such view was passed to the constructor.
        """
        try:
            return self._views[name]
        except KeyError:
            raise UnknownViewError(name, list(self._views)) from None

    def has_view(self, name: str) -> bool:
        return name in self._views

    def render(self, name: str) -> str:
        """Shorthand for ``feed.view(name).render()``."""
        return self.view(name).render()

    @property
    def view_names(self) -> list[str]:
        return list(self._views)

    @property
    def map_spec(self) -> MapSpec:
        return self._map_spec

    @property
    def record_count(self) -> int:
        """Number of source records delivered to the views."""
        return self._record_count

    def __contains__(self, name: object) -> bool:
        return name in self._views

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutabilityError(name)

    def __delattr__(self, name: str) -> None:
        raise ImmutabilityError(name)

    def __repr__(self) -> str:
        return (
            f"Feed(views={self.view_names!r}, map_fields={list(self._map_spec)!r}, "
            f"record_count={self._record_count})"
        )

    # ── Validation ────────────────────────────────────────────────────

    @staticmethod
    def _validate_views(views: Mapping[str, View]) -> dict[str, View]:
        if not isinstance(views, Mapping):
            raise ConfigurationError(
                "views must be a mapping of name to view",
                details={"type": type(views).__name__},
            )
        if not views:
            raise ConfigurationError("no views supplied")

        for name, view in views.items():
            if not isinstance(view, View):
                raise ConfigurationError(
                    f"view {name} must provide collect() and render()",
                    details={"view": name, "type": type(view).__name__},
                )
        return dict(views)

    @staticmethod
    def _validate_requirements(views: dict[str, View], spec: MapSpec) -> None:
        for name, view in views.items():
            required = getattr(view, "required_fields", None) or ()
            if isinstance(required, str):
                raise ConfigurationError(
                    f"required_fields of view {name} must be a set of field names",
                    details={"view": name},
                )
            missing = spec.missing(required)
            if missing:
                raise ConfigurationError(
                    f"map should provide a mapping for {missing[0]}",
                    details={"view": name, "missing_fields": missing},
                )

    # ── Map & fan-out ─────────────────────────────────────────────────

    def _spin(self, records: Iterator[Any], mapper: RecordMapper) -> None:
        """Map each record and hand the same canonical record to every view."""
        views = list(self._views.values())

        # map_many is lazy: record k is mapped only after k-1 reached every view,
        # so the failing record's index equals the delivered count.
        try:
            for item in mapper.map_many(records):
                for view in views:
                    view.collect(item)
                object.__setattr__(self, "_record_count", self._record_count + 1)
        except MappingError as exc:
            exc.details["record_index"] = self._record_count
            logger.warning(
                "Feed pass aborted",
                extra={
                    "record_index": self._record_count,
                    "field": exc.field_name,
                    "records_delivered": self._record_count,
                },
            )
            raise

        logger.info(
            "Feed completed",
            extra={"record_count": self._record_count, "views": self.view_names},
        )
