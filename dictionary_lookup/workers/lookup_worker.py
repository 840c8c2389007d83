"""Worker thread for a single dictionary lookup."""

from PyQt6.QtCore import pyqtSignal

from dictionary_lookup.models import Failure, LookupRequest
from dictionary_lookup.services import LookupService
from dictionary_lookup.workers.base_worker import CancellableWorker


class LookupWorkerThread(CancellableWorker):
    """Worker thread running one blocking fetch + decode in the background.

    One thread is created per request. It never touches widgets; its only
    way back to the UI thread is the outcome_ready signal, which Qt queues
    onto the receiver's event loop.

    Inherits thread-safe cancellation from CancellableWorker.
    """

    outcome_ready = pyqtSignal(object, object)  # LookupRequest, Outcome

    def __init__(self, service: LookupService, request: LookupRequest, parent=None):
        """Initialize the lookup worker thread.

        Args:
            service: Lookup service performing fetch and decode
            request: Request context carried back with the outcome
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.service = service
        self.request = request

    def run(self) -> None:
        """Execute the lookup in the background thread."""
        try:
            outcome = self.service.lookup(self.request.term)
        except Exception as e:
            outcome = Failure.from_exception(e)

        if not self.check_cancelled():
            self.outcome_ready.emit(self.request, outcome)
