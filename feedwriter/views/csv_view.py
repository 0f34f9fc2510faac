"""
CSV view: a header row followed by one row per collected record.
"""

import csv
import io
from collections.abc import Mapping, Sequence
from typing import Any

from feedwriter.config import get_settings
from feedwriter.views.base import BaseView


class CSVView(BaseView):
    """
    Tabular view over a fixed set of canonical columns.

    Declares no required fields, so the feed does not check its columns
    against the map; a record missing a column fails in ``collect``.
    """

    def __init__(
        self,
        columns: Sequence[str] | None = None,
        line_terminator: str = "\n",
    ) -> None:
        self._columns = list(columns) if columns else get_settings().csv_column_list
        self._line_terminator = line_terminator
        self._rows: list[list[Any]] = []

    @property
    def columns(self) -> list[str]:
        return list(self._columns)

    def collect(self, item: Mapping[str, Any]) -> None:
        self._rows.append([self._field(item, column) for column in self._columns])

    def render(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator=self._line_terminator)
        writer.writerow(self._columns)
        writer.writerows(self._rows)
        return buffer.getvalue()
