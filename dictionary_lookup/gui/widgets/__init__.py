"""Widgets used by the main window."""

from .result_view import ResultView
from .search_field import SearchField

__all__ = ["ResultView", "SearchField"]
