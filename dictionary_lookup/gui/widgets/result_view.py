"""Scrollable view of decoded definitions."""

import html

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QScrollArea, QVBoxLayout, QWidget

from dictionary_lookup.models import Result
from dictionary_lookup.services.sense_formatter import format_result_html


class ResultView(QScrollArea):
    """Show the entries of one Result as wrapped rich text under a title."""

    def __init__(self, parent=None):
        """Initialize the result view.

        Args:
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.setWidgetResizable(True)

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(42, 12, 42, 12)

        self.title_label = QLabel()
        self.title_label.setTextFormat(Qt.TextFormat.RichText)

        self.body_label = QLabel()
        self.body_label.setTextFormat(Qt.TextFormat.RichText)
        self.body_label.setWordWrap(True)
        self.body_label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.body_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)

        layout.addWidget(self.title_label)
        layout.addWidget(self.body_label, 1)
        self.setWidget(container)

    def set_result(self, term: str, result: Result) -> None:
        """Render a result for a term, replacing whatever was shown.

        Args:
            term: Term shown as the page title
            result: Decoded entries and senses
        """
        self.title_label.setText(f"<h2>{html.escape(term)}</h2>")
        if result.is_empty:
            self.body_label.setText("<i>No definitions found.</i>")
        else:
            self.body_label.setText(format_result_html(result))

    def clear(self) -> None:
        self.title_label.clear()
        self.body_label.clear()
