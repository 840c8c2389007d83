"""GUI utility modules."""

from .service_factory import create_lookup_service, create_request_coordinator

__all__ = ["create_lookup_service", "create_request_coordinator"]
