"""Protocol for the network side of a lookup."""

from typing import Protocol


class Transport(Protocol):
    """Interface for anything that can fetch the raw API response for a word.

    TransportClient is the production implementation; tests substitute
    in-memory fakes.
    """

    def fetch(self, word: str) -> bytes:
        """Fetch the raw response body for a word.

        Args:
            word: Search term exactly as the user typed it (not yet encoded)

        Returns:
            Raw response body bytes

        Raises:
            TransportError: If the network exchange fails or the status is not 2xx
            SetupError: If the transport is not configured (missing API key)
        """
        ...
