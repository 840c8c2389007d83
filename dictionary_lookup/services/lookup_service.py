"""Service combining the transport and decoder into a single lookup."""

import logging

from dictionary_lookup.exceptions import DictionaryLookupException
from dictionary_lookup.interfaces import Transport
from dictionary_lookup.models import Failure, Outcome

from .response_decoder import ResponseDecoder

logger = logging.getLogger(__name__)


class LookupService:
    """Fetch and decode one word, returning an outcome value (stateless service).

    Every failure is returned as a Failure instead of being raised, so the
    caller (the CLI or a background worker) always receives exactly one of
    Result, Suggestions or Failure.
    """

    def __init__(self, transport: Transport, decoder: ResponseDecoder | None = None):
        """Initialize the lookup service.

        Args:
            transport: Transport used to fetch the raw response
            decoder: Response decoder (a new ResponseDecoder by default)
        """
        self.transport = transport
        self.decoder = decoder or ResponseDecoder()

    def lookup(self, word: str) -> Outcome:
        """Look up a word.

        Args:
            word: Search term as typed by the user

        Returns:
            Result, Suggestions, or Failure
        """
        logger.debug(f"Lookup for <{word}> started")

        try:
            body = self.transport.fetch(word)
            outcome = self.decoder.decode(body)
        except DictionaryLookupException as e:
            logger.warning(f"Lookup for <{word}> failed: {e}")
            return Failure.from_exception(e)
        except Exception as e:
            logger.exception(f"Unexpected error looking up <{word}>")
            return Failure.from_exception(e)

        logger.debug(f"Lookup for <{word}> finished: {outcome}")
        return outcome
