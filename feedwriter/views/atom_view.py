"""
Atom view: an RFC 4287 ``<feed>`` document with one ``<entry>`` per record.

Each entry is built as soon as the record is collected; ``render`` wraps the
entries in a fresh ``<feed>`` element and serializes it.

Canonical fields used:
  - required: date, author, content, title, link
  - optional: summary (→ <summary>), id (→ <id>, defaults to the link)
"""

import xml.etree.ElementTree as element_tree
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from feedwriter.config import get_settings
from feedwriter.core.exceptions import ViewCollectionError
from feedwriter.schemas.view_schema import AtomFeedInfo
from feedwriter.utils.helpers import to_utc_datetime, utc_now
from feedwriter.views.base import BaseView

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"

_XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'
_ATOM_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class AtomView(BaseView):
    """Build an Atom feed from canonical records."""

    required_fields = frozenset({"date", "author", "content", "title", "link"})

    def __init__(
        self,
        title: str | None = None,
        feed_id: str | None = None,
        link: str | None = None,
        subtitle: str | None = None,
    ) -> None:
        settings = get_settings()
        self._info = AtomFeedInfo(
            title=title if title is not None else settings.atom_feed_title,
            id=feed_id if feed_id is not None else settings.atom_feed_id,
            link=link if link is not None else settings.atom_feed_link,
            subtitle=subtitle if subtitle is not None else settings.atom_feed_subtitle,
        )
        self._created = utc_now()
        self._entries: list[element_tree.Element] = []
        self._latest: datetime | None = None

    @property
    def info(self) -> AtomFeedInfo:
        return self._info

    def collect(self, item: Mapping[str, Any]) -> None:
        updated = self._entry_date(self._field(item, "date"))
        link = _text(self._field(item, "link"))

        entry = element_tree.Element("entry")
        element_tree.SubElement(entry, "title").text = _text(self._field(item, "title"))
        element_tree.SubElement(entry, "link", href=link, rel="alternate")
        element_tree.SubElement(entry, "id").text = _text(item.get("id", link))
        element_tree.SubElement(entry, "updated").text = updated.strftime(_ATOM_DATE_FORMAT)

        author = element_tree.SubElement(entry, "author")
        element_tree.SubElement(author, "name").text = _text(self._field(item, "author"))

        if "summary" in item:
            element_tree.SubElement(entry, "summary", type="html").text = _text(item["summary"])
        element_tree.SubElement(entry, "content", type="html").text = _text(
            self._field(item, "content"))

        self._entries.append(entry)
        if self._latest is None or updated > self._latest:
            self._latest = updated

    def render(self) -> str:
        feed = element_tree.Element("feed", xmlns=ATOM_NAMESPACE)
        element_tree.SubElement(feed, "title").text = self._info.title
        if self._info.subtitle:
            element_tree.SubElement(feed, "subtitle").text = self._info.subtitle
        if self._info.link:
            element_tree.SubElement(feed, "link", href=self._info.link, rel="alternate")
        element_tree.SubElement(feed, "id").text = self._info.id
        element_tree.SubElement(feed, "updated").text = (
            self._latest or self._created).strftime(_ATOM_DATE_FORMAT)

        feed.extend(self._entries)
        return _XML_DECLARATION + element_tree.tostring(feed, encoding="unicode")

    # ── Private helpers ───────────────────────────────────────────────

    def _entry_date(self, value: Any) -> datetime:
        try:
            return to_utc_datetime(value)
        except (ValueError, TypeError, OverflowError, OSError) as exc:
            raise ViewCollectionError(
                type(self).__name__,
                f"invalid date {value!r}",
                details={"field": "date", "reason": str(exc)},
            ) from exc


def _text(value: Any) -> str:
    return "" if value is None else str(value)
