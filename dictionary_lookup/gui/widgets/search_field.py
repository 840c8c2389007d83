"""Search field with a popup menu of spelling suggestions."""

from PyQt6.QtCore import QPoint, pyqtSignal
from PyQt6.QtWidgets import QLineEdit, QMenu

from dictionary_lookup.models import Suggestions


class SearchField(QLineEdit):
    """Line edit that submits on Enter and offers alternate spellings.

    Signals:
        search_requested: Emitted with the term when the user presses Enter
            or picks a suggestion
    """

    search_requested = pyqtSignal(str)

    def __init__(self, parent=None):
        """Initialize the search field.

        Args:
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.setPlaceholderText("Search a word...")
        self.setClearButtonEnabled(True)
        self.suggestions_menu = QMenu(self)
        self.returnPressed.connect(self._on_return_pressed)

    def set_suggestions(self, suggestions: Suggestions) -> None:
        """Replace the suggestion menu and pop it up under the field.

        Args:
            suggestions: Candidate spellings in API order
        """
        self.suggestions_menu.clear()
        for term in suggestions:
            action = self.suggestions_menu.addAction(term)
            action.triggered.connect(lambda _checked=False, t=term: self._on_suggestion_chosen(t))

        if not self.suggestions_menu.isEmpty() and self.isVisible():
            self.suggestions_menu.popup(self.mapToGlobal(QPoint(0, self.height())))

    def suggestion_terms(self) -> list[str]:
        """Terms currently offered in the suggestion menu."""
        return [action.text() for action in self.suggestions_menu.actions()]

    def _on_return_pressed(self) -> None:
        term = self.text().strip()
        if term:
            self.search_requested.emit(term)

    def _on_suggestion_chosen(self, term: str) -> None:
        self.setText(term)
        self.search_requested.emit(term)
