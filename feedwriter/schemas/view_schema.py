"""
Pydantic schemas used by the reference views.

``JSONFeedItem`` is the per-record projection emitted by the JSON view;
``AtomFeedInfo`` carries the feed-level metadata of an Atom document.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JSONFeedItem(BaseModel):
    """One entry of the JSON view, projected from a canonical record."""

    model_config = ConfigDict(frozen=True)

    date: Any = Field(..., description="Canonical 'date' field, unchanged")
    author: Any = Field(..., description="Canonical 'author' field, unchanged")


class AtomFeedInfo(BaseModel):
    """Feed-level metadata for an Atom document (RFC 4287 <feed> children)."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="<feed><title>")
    id: str = Field(..., description="<feed><id>, a permanent IRI")
    link: str = Field(default="", description="<feed><link href>, omitted when empty")
    subtitle: str = Field(default="", description="<feed><subtitle>, omitted when empty")
