"""Business logic services for Dictionary Lookup."""

from .lookup_service import LookupService
from .response_decoder import ResponseDecoder
from .transport_client import TransportClient

__all__ = [
    "TransportClient",
    "ResponseDecoder",
    "LookupService",
]
