"""
JSON view: a flat array of ``{date, author}`` objects.

Values pydantic cannot serialize natively (plain objects) are written as an
object of their public attributes. Anything still unserializable is rejected
in ``collect`` so ``render`` cannot fail.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from feedwriter.core.exceptions import ViewCollectionError
from feedwriter.schemas.view_schema import JSONFeedItem
from feedwriter.views.base import BaseView

_ITEMS_ADAPTER = TypeAdapter(list[JSONFeedItem])


class JSONView(BaseView):
    """Collect the date and author of every record and render them as JSON."""

    required_fields = frozenset({"date", "author"})

    def __init__(self) -> None:
        self._items: list[JSONFeedItem] = []

    def collect(self, item: Mapping[str, Any]) -> None:
        entry = JSONFeedItem(
            date=self._field(item, "date"),
            author=self._field(item, "author"),
        )
        try:
            entry.model_dump_json(fallback=_public_fields)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise ViewCollectionError(
                type(self).__name__,
                "entry is not JSON serializable",
                details={"reason": str(exc)},
            ) from exc
        self._items.append(entry)

    def render(self) -> str:
        return _ITEMS_ADAPTER.dump_json(
            self._items, fallback=_public_fields).decode("utf-8")

    @property
    def items(self) -> list[JSONFeedItem]:
        """Collected entries, in collection order (a copy)."""
        return list(self._items)


def _public_fields(value: Any) -> dict[str, Any]:
    try:
        fields = vars(value)
    except TypeError:
        raise TypeError(f"Unable to serialize unknown type: {type(value).__name__}") from None
    return {name: field for name, field in fields.items() if not name.startswith("_")}
