"""Background worker threads for lookups."""

from .base_worker import CancellableWorker
from .lookup_worker import LookupWorkerThread

__all__ = [
    "CancellableWorker",
    "LookupWorkerThread",
]
