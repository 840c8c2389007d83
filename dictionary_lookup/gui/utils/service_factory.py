"""Factory for creating the services behind the dictionary window."""

from dictionary_lookup.config import DictionaryConfig
from dictionary_lookup.orchestration import RequestCoordinator
from dictionary_lookup.services import LookupService, ResponseDecoder, TransportClient


def create_lookup_service(config: DictionaryConfig) -> LookupService:
    """Create the lookup service used by background workers.

    Args:
        config: Application configuration

    Returns:
        LookupService backed by the HTTPS transport
    """
    return LookupService(TransportClient(config), ResponseDecoder())


def create_request_coordinator(config: DictionaryConfig, parent=None) -> RequestCoordinator:
    """Create the coordinator for the window's search box.

    Args:
        config: Application configuration
        parent: Optional parent QObject

    Returns:
        RequestCoordinator applying the configured overlap policy
    """
    return RequestCoordinator(
        create_lookup_service(config),
        reject_while_in_flight=config.reject_while_in_flight,
        parent=parent,
    )
