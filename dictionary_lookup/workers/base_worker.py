"""Base class for cancellable worker threads."""

import threading

from PyQt6.QtCore import QThread


class CancellableWorker(QThread):
    """Base class for worker threads that support cooperative cancellation.

    Subclasses should call check_cancelled() before publishing anything
    from run(). Cancellation never interrupts blocking I/O; it only stops
    the worker from reporting once that I/O returns.

    Uses threading.Event for thread-safe cancellation flag.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation of the worker.

        This sets a thread-safe flag. The worker checks it once its
        blocking work has finished.
        """
        self._cancel_event.set()

    def check_cancelled(self) -> bool:
        """Check if worker should stop processing.

        Returns:
            True if cancellation was requested
        """
        return self._cancel_event.is_set()
