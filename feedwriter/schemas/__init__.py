"""
Pydantic schemas re-exported from the schemas package.
"""

from feedwriter.schemas.view_schema import AtomFeedInfo, JSONFeedItem

__all__ = [
    "AtomFeedInfo",
    "JSONFeedItem",
]
