"""Coordinator running lookups off the UI thread."""

import itertools
import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from dictionary_lookup.models import Failure, FailureKind, LookupRequest, Outcome, RequestState
from dictionary_lookup.services import LookupService
from dictionary_lookup.workers import LookupWorkerThread

logger = logging.getLogger(__name__)

WorkerFactory = Callable[[LookupService, LookupRequest], LookupWorkerThread]


class RequestCoordinator(QObject):
    """Submit lookups for one search box and deliver one outcome per request.

    Must be created and used on the UI thread. Each submission gets a fresh
    LookupRequest with the next sequence number and its own worker thread.
    Workers hand their outcome back through a queued signal; on the UI
    thread, only the completion of the latest issued request is delivered,
    and only once. Anything older is discarded.

    With reject_while_in_flight=False (the default) a new submission
    supersedes the running one. With True, submissions are refused until
    the running request has been delivered.
    """

    outcome_delivered = pyqtSignal(object, object)  # LookupRequest, Outcome
    busy_changed = pyqtSignal(bool)

    def __init__(
        self,
        service: LookupService,
        reject_while_in_flight: bool = False,
        worker_factory: WorkerFactory | None = None,
        parent=None,
    ):
        """Initialize the request coordinator.

        Args:
            service: Lookup service executed by each worker
            reject_while_in_flight: Refuse new submissions while one is running
            worker_factory: Optional factory creating the worker thread for a request
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.service = service
        self.reject_while_in_flight = reject_while_in_flight
        self._worker_factory = worker_factory or LookupWorkerThread
        self._sequence = itertools.count(1)
        self._latest: LookupRequest | None = None
        self._workers: dict[int, LookupWorkerThread] = {}

    @property
    def latest_request(self) -> LookupRequest | None:
        """The most recently issued request, whatever its state."""
        return self._latest

    @property
    def is_busy(self) -> bool:
        """Check if the latest request is still waiting for its outcome."""
        return self._latest is not None and self._latest.is_in_flight

    @property
    def active_worker_count(self) -> int:
        """Number of worker threads whose finished signal has not been handled yet."""
        return len(self._workers)

    @property
    def running_worker_count(self) -> int:
        """Number of worker threads still executing."""
        return sum(1 for worker in self._workers.values() if worker.isRunning())

    def submit(self, word: str) -> LookupRequest | None:
        """Start a lookup for a word.

        Args:
            word: Search term; surrounding whitespace is ignored

        Returns:
            The new request, or None if the term is blank or the submission
            was rejected because another request is in flight
        """
        term = word.strip()
        if not term:
            return None

        if self.is_busy:
            if self.reject_while_in_flight:
                logger.info(f"Ignoring <{term}>, lookup for <{self._latest.term}> still running")
                return None
            self._supersede(self._latest)

        request = LookupRequest(sequence=next(self._sequence), term=term)
        request.state = RequestState.IN_FLIGHT
        self._latest = request

        worker = self._worker_factory(self.service, request)
        worker.outcome_ready.connect(self._on_outcome_ready)
        worker.finished.connect(self._on_worker_finished)
        self._workers[request.sequence] = worker

        logger.debug(f"Starting search #{request.sequence} for <{term}>")
        worker.start()
        self.busy_changed.emit(True)
        return request

    def shutdown(self, timeout_ms: int = 2000) -> None:
        """Cancel all running workers and wait for them to finish.

        Args:
            timeout_ms: Maximum time to wait for each worker
        """
        if self._latest is not None and self._latest.is_in_flight:
            self._latest.state = RequestState.SUPERSEDED

        # Workers stay referenced until their finished signal is handled
        for worker in self._workers.values():
            worker.cancel()
            if worker.isRunning():
                worker.wait(timeout_ms)

    def _supersede(self, request: LookupRequest) -> None:
        """Mark a running request as stale and cancel its worker."""
        request.state = RequestState.SUPERSEDED
        worker = self._workers.get(request.sequence)
        if worker is not None:
            worker.cancel()
        logger.debug(f"Search #{request.sequence} for <{request.term}> superseded")

    @pyqtSlot(object, object)
    def _on_outcome_ready(self, request: LookupRequest, outcome: Outcome) -> None:
        """Deliver a worker's outcome if it belongs to the latest request (UI thread)."""
        if request is not self._latest or not request.is_in_flight:
            logger.debug(f"Discarding stale outcome of search #{request.sequence}")
            return

        request.state = RequestState.DELIVERED
        self.busy_changed.emit(False)
        logger.debug(f"Delivering outcome of search #{request.sequence}: {outcome}")
        self.outcome_delivered.emit(request, outcome)

    @pyqtSlot()
    def _on_worker_finished(self) -> None:
        """Forget a worker once its thread has finished (UI thread)."""
        worker = self.sender()
        if worker is None:
            return

        # finished is emitted just before the thread exits; join before dropping it
        worker.wait()
        request = worker.request
        self._workers.pop(request.sequence, None)

        # A worker that finished without reporting must not leave its request hanging
        if request is self._latest and request.is_in_flight:
            logger.error(f"Search #{request.sequence} finished without an outcome")
            self._on_outcome_ready(
                request,
                Failure(FailureKind.INTERNAL, "The lookup stopped without producing a result"),
            )
