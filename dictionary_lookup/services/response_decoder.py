"""Decoder for Merriam-Webster Collegiate API responses."""

import json
import logging
from typing import Any

from dictionary_lookup.exceptions import EntryDecodeError, SchemaError, SenseDecodeError
from dictionary_lookup.models import Entry, Result, Sense, SenseCategory, Suggestions

logger = logging.getLogger(__name__)


class ResponseDecoder:
    """Turn a raw API response body into a Result or Suggestions (stateless service).

    The API schema is loosely documented and varies between entries, so
    only the top-level shape is strict. A malformed entry is skipped and a
    malformed sense is dropped; neither fails the whole response.

    Grammar handled here:
        root      := [] | [str, ...] | [entry, ...]
        entry     := {"meta": {"id": str}?, "def": [block, ...]}
        block     := {"vd": str?, "sls": [...]?, "sseq": [[item, ...], ...]}
        item      := ["sense", sense] | ["pseq", [item, ...]] | [other, any]
        sense     := {"sn": str?, "dt": [["text", str], ...]}
    """

    def decode(self, body: bytes) -> Result | Suggestions:
        """Decode a response body.

        Args:
            body: Raw response bytes (UTF-8 JSON)

        Returns:
            Result with entries in API order, or Suggestions when the API
            answered with a list of alternate spellings

        Raises:
            SchemaError: If the body is not JSON or the root is not a
                supported array shape
        """
        try:
            document = json.loads(body)
        except (UnicodeDecodeError, ValueError, RecursionError) as e:
            raise SchemaError(f"Response is not valid JSON: {e}") from e

        if not isinstance(document, list):
            raise SchemaError(
                f"Expected a JSON array at the top level, got {type(document).__name__}"
            )

        if not document:
            return Result(entries=())

        first = document[0]

        if isinstance(first, str):
            return self._decode_suggestions(document)

        if isinstance(first, dict):
            entries = []
            for index, item in enumerate(document):
                try:
                    entries.append(self.decode_entry(item))
                except EntryDecodeError as e:
                    logger.warning(f"Skipping entry {index}: {e}")

            result = Result(entries=tuple(entries))
            logger.debug(
                f"Decoded {len(entries)} of {len(document)} entries "
                f"with {result.sense_count} senses"
            )
            return result

        raise SchemaError(f"Unsupported first element in response array: {type(first).__name__}")

    def decode_entry(self, value: Any) -> Entry:
        """Decode one element of the entry array.

        Args:
            value: Decoded JSON value of the entry

        Returns:
            Entry holding every sense found under its definition blocks

        Raises:
            EntryDecodeError: If the entry or one of its definition blocks is malformed
        """
        if not isinstance(value, dict):
            raise EntryDecodeError(f"entry is a {type(value).__name__}, not an object")

        blocks = value.get("def")
        if not isinstance(blocks, list):
            raise EntryDecodeError('missing "def" array')

        senses: list[Sense] = []
        for block in blocks:
            senses.extend(self._decode_definition_block(block))

        return Entry(senses=tuple(senses), headword=self._headword(value))

    def decode_sense(self, value: Any, category: SenseCategory) -> Sense:
        """Decode a single sense payload.

        Args:
            value: Payload of a ["sense", payload] pair
            category: Category of the enclosing definition block

        Returns:
            Sense with optional label and the first "text" of its "dt" array

        Raises:
            SenseDecodeError: If "dt" is missing or holds no text pair
        """
        if not isinstance(value, dict):
            raise SenseDecodeError(f"sense is a {type(value).__name__}, not an object")

        defining_text = value.get("dt")
        if not isinstance(defining_text, list):
            raise SenseDecodeError('sense has no "dt" array')

        text = next(
            (
                part[1]
                for part in defining_text
                if isinstance(part, list)
                and len(part) >= 2
                and part[0] == "text"
                and isinstance(part[1], str)
            ),
            None,
        )
        if text is None:
            raise SenseDecodeError('sense "dt" has no "text" element')

        label = value.get("sn")
        if not isinstance(label, str):
            label = None

        return Sense(text=text, category=category, label=label)

    def _decode_suggestions(self, document: list) -> Suggestions:
        """Decode a root array of alternate spellings."""
        if not all(isinstance(term, str) for term in document):
            raise SchemaError("Suggestion list contains non-string elements")

        logger.debug(f"No direct match, {len(document)} suggestions")
        return Suggestions(terms=tuple(document))

    def _decode_definition_block(self, block: Any) -> list[Sense]:
        """Decode every sense under one definition block, tagged with the block's category."""
        if not isinstance(block, dict):
            raise EntryDecodeError(f"definition block is a {type(block).__name__}, not an object")

        if "vd" in block:
            category = SenseCategory.VERB
        elif "sls" in block:
            category = SenseCategory.SLS
        else:
            category = SenseCategory.PLAIN

        sense_sequence = block.get("sseq")
        if not isinstance(sense_sequence, list):
            raise EntryDecodeError('definition block has no "sseq" array')

        senses: list[Sense] = []
        for group in sense_sequence:
            self._walk_sequence(group, category, senses)
        return senses

    def _walk_sequence(self, items: Any, category: SenseCategory, senses: list[Sense]) -> None:
        """Collect senses from a list of [kind, payload] pairs, recursing into "pseq".

        Args:
            items: A sense group from "sseq", or the payload of a "pseq"
            category: Category inherited from the definition block
            senses: Output list, appended in document order
        """
        if not isinstance(items, list):
            raise EntryDecodeError(f"sense sequence is a {type(items).__name__}, not an array")

        for item in items:
            if not (isinstance(item, list) and len(item) == 2 and isinstance(item[0], str)):
                raise EntryDecodeError("sense sequence element is not a [kind, payload] pair")

            kind, payload = item
            if kind == "sense":
                try:
                    senses.append(self.decode_sense(payload, category))
                except SenseDecodeError as e:
                    logger.info(f"Dropping sense: {e}")
            elif kind == "pseq":
                self._walk_sequence(payload, category, senses)

    @staticmethod
    def _headword(entry: dict) -> str | None:
        """Extract the headword from meta.id, without the homograph suffix (e.g. "cat:1")."""
        meta = entry.get("meta")
        if not isinstance(meta, dict):
            return None

        entry_id = meta.get("id")
        if not isinstance(entry_id, str) or not entry_id:
            return None

        return entry_id.split(":", 1)[0]
