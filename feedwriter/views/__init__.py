from feedwriter.views.atom_view import AtomView
from feedwriter.views.base import BaseView, View
from feedwriter.views.csv_view import CSVView
from feedwriter.views.json_view import JSONView

__all__ = [
    "AtomView",
    "BaseView",
    "CSVView",
    "JSONView",
    "View",
]
