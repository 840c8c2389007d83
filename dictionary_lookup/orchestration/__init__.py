"""Orchestration layer coordinating background lookups."""

from .request_coordinator import RequestCoordinator

__all__ = ["RequestCoordinator"]
