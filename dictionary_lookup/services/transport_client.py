"""HTTPS transport for the Merriam-Webster dictionary API."""

import logging
from urllib.parse import quote

import requests

from dictionary_lookup.config import DictionaryConfig
from dictionary_lookup.exceptions import SetupError, TransportError

logger = logging.getLogger(__name__)


class TransportClient:
    """Perform one HTTPS GET per lookup and return the raw response body.

    Implements the Transport protocol. Knows nothing about the dictionary
    schema. Each call goes through requests.get, which opens its own
    session and socket and closes them afterwards, so no connection is
    reused between lookups. Certificate and host name verification are
    always on.
    """

    def __init__(self, config: DictionaryConfig):
        """Initialize the transport client.

        Args:
            config: Configuration holding the API host, path, key and timeout
        """
        self.config = config

    def build_url(self, word: str) -> str:
        """Build the request URL for a word.

        The word is percent-encoded as a single path segment, so spaces,
        slashes, '?', '#' and non-ASCII characters never reach the URL raw.

        Args:
            word: Search term as typed by the user

        Returns:
            Full https URL including the key query parameter
        """
        encoded_word = quote(word, safe="")
        encoded_key = quote(self.config.api_key, safe="")
        return f"{self.config.base_url}/{encoded_word}?key={encoded_key}"

    def fetch(self, word: str) -> bytes:
        """Fetch the raw JSON body for a word.

        Args:
            word: Search term as typed by the user

        Returns:
            Response body bytes

        Raises:
            SetupError: If no API key is configured
            TransportError: On DNS, connect, TLS, read failure or a non-2xx status
        """
        if not self.config.has_api_key:
            raise SetupError(
                "No dictionary API key configured. "
                "Set the DICTIONARY_API_KEY environment variable."
            )

        url = self.build_url(word)
        logger.debug(f"Requesting {self._redact(url)}")

        try:
            response = requests.get(
                url,
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept": "application/json",
                },
                timeout=self.config.request_timeout,
                verify=True,
            )
        except requests.exceptions.SSLError as e:
            raise TransportError(f"TLS handshake with {self.config.api_host} failed: {e}") from e
        except requests.exceptions.Timeout as e:
            raise TransportError(
                f"Request to {self.config.api_host} timed out after "
                f"{self.config.request_timeout:g}s"
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Could not connect to {self.config.api_host}: {e}") from e
        except requests.RequestException as e:
            raise TransportError(f"Request to {self.config.api_host} failed: {e}") from e

        logger.debug(f"Read {len(response.content)} bytes with HTTP {response.status_code}")

        if not 200 <= response.status_code < 300:
            reason = response.reason or "error"
            raise TransportError(
                f"Dictionary API returned HTTP {response.status_code} ({reason})",
                status_code=response.status_code,
            )

        return response.content

    def _redact(self, url: str) -> str:
        """Hide the API key in a URL before it is logged."""
        if not self.config.api_key:
            return url
        return url.replace(quote(self.config.api_key, safe=""), "***")
