"""Interface protocols for Dictionary Lookup."""

from .presenter import PresenterProtocol
from .transport import Transport

__all__ = ["PresenterProtocol", "Transport"]
