"""Main window for the Dictionary Lookup GUI."""

import logging

from PyQt6.QtWidgets import QMainWindow, QMessageBox, QVBoxLayout, QWidget

from dictionary_lookup.config import API_KEY_ENV_VAR, DictionaryConfig
from dictionary_lookup.gui.utils import create_request_coordinator
from dictionary_lookup.gui.widgets.result_view import ResultView
from dictionary_lookup.gui.widgets.search_field import SearchField
from dictionary_lookup.models import Failure, LookupRequest, Outcome, Suggestions
from dictionary_lookup.orchestration import RequestCoordinator

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window.

    A search field on top, the definitions of the last delivered lookup
    below, and a status bar. All outcomes arrive through the
    RequestCoordinator on the UI thread:
    - Result: rendered in the result view
    - Suggestions: offered in a popup menu under the search field
    - Failure: shown in a dismissible error dialog
    """

    def __init__(self, config: DictionaryConfig, coordinator: RequestCoordinator | None = None):
        """Initialize the main window.

        Args:
            config: Application configuration
            coordinator: Optional coordinator (created from config by default)
        """
        super().__init__()
        self.config = config
        self.coordinator = coordinator or create_request_coordinator(config, self)
        self.error_dialog: QMessageBox | None = None

        self._setup_ui()
        self._connect_signals()

        if config.has_api_key:
            self.statusBar().showMessage("Application Started!", config.status_timeout_ms)
        else:
            self.statusBar().showMessage(f"{API_KEY_ENV_VAR} is not set, lookups will fail")

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle(self.config.window_title)
        self.resize(self.config.window_width, self.config.window_height)

        central = QWidget()
        layout = QVBoxLayout(central)

        self.search_field = SearchField()
        self.result_view = ResultView()

        layout.addWidget(self.search_field)
        layout.addWidget(self.result_view, 1)
        self.setCentralWidget(central)

    def _connect_signals(self) -> None:
        """Wire the search field and coordinator."""
        self.search_field.search_requested.connect(self.define)
        self.coordinator.outcome_delivered.connect(self._on_outcome_delivered)
        self.coordinator.busy_changed.connect(self._on_busy_changed)

    def define(self, term: str) -> None:
        """Start a lookup for a term.

        Args:
            term: Word typed or picked by the user
        """
        request = self.coordinator.submit(term)
        if request is None:
            if term.strip():
                self.statusBar().showMessage(
                    "A search is already in progress", self.config.status_timeout_ms
                )
            return

        logger.debug(f"User started search #{request.sequence} for <{request.term}>")
        self.statusBar().showMessage(f"Searching {request.term} ...")

    def _on_busy_changed(self, busy: bool) -> None:
        """Lock the search field while busy when submissions are rejected in flight."""
        if self.config.reject_while_in_flight:
            self.search_field.setEnabled(not busy)

    def _on_outcome_delivered(self, request: LookupRequest, outcome: Outcome) -> None:
        """Route the outcome of the latest search to its view.

        Args:
            request: The delivered request
            outcome: Result, Suggestions or Failure
        """
        self.statusBar().clearMessage()

        if isinstance(outcome, Suggestions):
            self.search_field.set_suggestions(outcome)
        elif isinstance(outcome, Failure):
            self._show_error(outcome)
        else:
            self.result_view.set_result(request.term, outcome)
            self.search_field.clear()

    def _show_error(self, failure: Failure) -> None:
        """Show a non-blocking error dialog; dismissing it clears the search field."""
        if self.error_dialog is not None:
            self.error_dialog.close()

        self.error_dialog = QMessageBox(
            QMessageBox.Icon.Critical,
            "Lookup Failed",
            failure.message,
            QMessageBox.StandardButton.Ok,
            self,
        )
        self.error_dialog.finished.connect(self._on_error_dismissed)
        self.error_dialog.open()

    def _on_error_dismissed(self, _result: int) -> None:
        self.search_field.clear()

    def closeEvent(self, event) -> None:
        """Handle window close event.

        Args:
            event: Close event
        """
        self.coordinator.shutdown()
        event.accept()
