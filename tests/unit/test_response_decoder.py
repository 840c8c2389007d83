"""Tests for ResponseDecoder."""

import pytest

from dictionary_lookup.exceptions import EntryDecodeError, SchemaError, SenseDecodeError
from dictionary_lookup.models import Entry, Result, Sense, SenseCategory, Suggestions
from dictionary_lookup.services.response_decoder import ResponseDecoder


@pytest.fixture
def decoder():
    return ResponseDecoder()


class TestTopLevelDispatch:
    """Tests for the shape of the root value."""

    def test_single_plain_sense(self, decoder):
        """Should decode the canonical one-entry, one-sense example."""
        body = (
            b'[{"def":[{"sseq":[[["sense",{"sn":"1","dt":[["text","a domestic carnivore"]]}]]]}]}]'
        )

        result = decoder.decode(body)

        assert result == Result(
            entries=(
                Entry(
                    senses=(
                        Sense(text="a domestic carnivore", category=SenseCategory.PLAIN, label="1"),
                    )
                ),
            )
        )

    def test_string_array_yields_suggestions(self, decoder):
        """Should return every suggestion in original order."""
        result = decoder.decode(b'["cta","cat","cot"]')

        assert isinstance(result, Suggestions)
        assert list(result) == ["cta", "cat", "cot"]

    def test_empty_array_yields_empty_result(self, decoder):
        """An empty array is a Result with no entries, not an error."""
        result = decoder.decode(b"[]")

        assert isinstance(result, Result)
        assert result.is_empty

    def test_root_object_raises(self, decoder):
        with pytest.raises(SchemaError, match="JSON array"):
            decoder.decode(b'{"def": []}')

    def test_first_element_number_raises(self, decoder):
        with pytest.raises(SchemaError, match="Unsupported first element"):
            decoder.decode(b"[1, 2, 3]")

    def test_first_element_null_raises(self, decoder):
        with pytest.raises(SchemaError):
            decoder.decode(b"[null]")

    def test_invalid_json_raises(self, decoder):
        with pytest.raises(SchemaError, match="not valid JSON"):
            decoder.decode(b"<html>Invalid API key</html>")

    def test_deeply_nested_json_raises(self, decoder):
        """Nesting beyond the parser's recursion limit is a schema error, not a crash."""
        with pytest.raises(SchemaError, match="not valid JSON"):
            decoder.decode(b"[" * 100000 + b"]" * 100000)

    def test_invalid_utf8_raises(self, decoder):
        with pytest.raises(SchemaError):
            decoder.decode(b"\x80\x81[")

    def test_mixed_suggestion_list_raises(self, decoder):
        """A suggestion list with a non-string element is a schema error."""
        with pytest.raises(SchemaError, match="non-string"):
            decoder.decode(b'["cat", 3]')

    def test_decoding_is_deterministic(self, decoder, cat_body):
        """The same bytes always produce the same entries and senses."""
        assert decoder.decode(cat_body) == decoder.decode(cat_body)


class TestEntryTolerance:
    """Tests for per-entry error handling."""

    def test_malformed_entry_is_skipped(self, decoder, make_body, make_sense_item):
        """One bad entry should not fail the whole result."""
        body = make_body(
            [
                {"def": [{"sseq": [[make_sense_item("first")]]}]},
                {"meta": {"id": "cat"}},  # no "def"
                {"def": [{"sseq": [[make_sense_item("third")]]}]},
            ]
        )

        result = decoder.decode(body)

        assert [entry.senses[0].text for entry in result.entries] == ["first", "third"]

    def test_non_object_after_first_entry_is_skipped(self, decoder, make_body, make_sense_item):
        body = make_body([{"def": [{"sseq": [[make_sense_item("only")]]}]}, "stray", 42])

        result = decoder.decode(body)

        assert len(result.entries) == 1

    def test_all_entries_malformed_gives_empty_result(self, decoder, make_body):
        result = decoder.decode(make_body([{"def": "nope"}, {"def": [{"no_sseq": []}]}]))

        assert isinstance(result, Result)
        assert result.is_empty

    def test_decode_entry_requires_object(self, decoder):
        with pytest.raises(EntryDecodeError):
            decoder.decode_entry(["def"])

    def test_malformed_sequence_item_skips_entry(self, decoder):
        with pytest.raises(EntryDecodeError, match="kind, payload"):
            decoder.decode_entry({"def": [{"sseq": [[["sense"]]]}]})

    def test_headword_strips_homograph_suffix(self, decoder, cat_body):
        result = decoder.decode(cat_body)

        assert [entry.headword for entry in result.entries] == ["cat", "cat"]

    def test_missing_meta_has_no_headword(self, decoder, make_sense_item):
        entry = decoder.decode_entry({"def": [{"sseq": [[make_sense_item()]]}]})

        assert entry.headword is None


class TestCategories:
    """Tests for definition block category tagging."""

    def test_verb_divider(self, decoder, make_sense_item):
        entry = decoder.decode_entry(
            {"def": [{"vd": "transitive verb", "sseq": [[make_sense_item(), make_sense_item()]]}]}
        )

        assert [sense.category for sense in entry.senses] == [SenseCategory.VERB] * 2

    def test_subject_status_label(self, decoder, make_sense_item):
        entry = decoder.decode_entry({"def": [{"sls": ["chiefly British"], "sseq": [[make_sense_item()]]}]})

        assert entry.senses[0].category is SenseCategory.SLS

    def test_verb_divider_wins_over_sls(self, decoder, make_sense_item):
        entry = decoder.decode_entry(
            {"def": [{"vd": "intransitive verb", "sls": ["slang"], "sseq": [[make_sense_item()]]}]}
        )

        assert entry.senses[0].category is SenseCategory.VERB

    def test_plain_block(self, decoder, make_sense_item):
        entry = decoder.decode_entry({"def": [{"sseq": [[make_sense_item()]]}]})

        assert entry.senses[0].category is SenseCategory.PLAIN

    def test_category_applies_per_block(self, decoder, cat_body):
        result = decoder.decode(cat_body)

        assert [s.category for s in result.entries[0].senses] == [SenseCategory.PLAIN] * 2
        assert [s.category for s in result.entries[1].senses] == [SenseCategory.VERB]

    def test_pseq_inherits_block_category(self, decoder, make_sense_item):
        """Senses nested in a phrase sequence keep the enclosing block's category."""
        entry = decoder.decode_entry(
            {
                "def": [
                    {
                        "sls": ["archaic"],
                        "sseq": [
                            [
                                make_sense_item("outer", sn="1"),
                                ["pseq", [make_sense_item("inner a", sn="a"), make_sense_item("inner b", sn="b")]],
                            ]
                        ],
                    }
                ]
            }
        )

        assert [s.text for s in entry.senses] == ["outer", "inner a", "inner b"]
        assert all(s.category is SenseCategory.SLS for s in entry.senses)


class TestSenseExtraction:
    """Tests for sense payload decoding."""

    def test_unknown_kinds_are_ignored(self, decoder, make_sense_item):
        entry = decoder.decode_entry(
            {
                "def": [
                    {
                        "sseq": [
                            [
                                ["sen", {"sn": "1", "sls": ["archaic"]}],
                                ["bs", {"sense": {"dt": [["text", "binding"]]}}],
                                make_sense_item("kept"),
                            ]
                        ]
                    }
                ]
            }
        )

        assert [s.text for s in entry.senses] == ["kept"]

    def test_sense_without_text_dropped_alone(self, decoder, make_body, make_sense_item):
        """A sense with no "text" in dt is dropped; siblings and the entry survive."""
        body = make_body(
            [
                {
                    "def": [
                        {
                            "sseq": [
                                [
                                    make_sense_item("before", sn="1"),
                                    ["sense", {"sn": "2", "dt": [["vis", [{"t": "an example"}]]]}],
                                    make_sense_item("after", sn="3"),
                                ]
                            ]
                        }
                    ]
                }
            ]
        )

        result = decoder.decode(body)

        assert [(s.label, s.text) for s in result.entries[0].senses] == [("1", "before"), ("3", "after")]

    def test_sense_without_dt_dropped(self, decoder, make_sense_item):
        entry = decoder.decode_entry({"def": [{"sseq": [[["sense", {"sn": "1"}], make_sense_item("ok")]]}]})

        assert [s.text for s in entry.senses] == ["ok"]

    def test_first_text_wins(self, decoder):
        sense = decoder.decode_sense(
            {"dt": [["uns", []], ["text", "first"], ["text", "second"]]}, SenseCategory.PLAIN
        )

        assert sense.text == "first"

    def test_missing_sn_gives_no_label(self, decoder):
        sense = decoder.decode_sense({"dt": [["text", "unlabeled"]]}, SenseCategory.PLAIN)

        assert sense.label is None

    def test_decode_sense_raises_without_text(self, decoder):
        with pytest.raises(SenseDecodeError):
            decoder.decode_sense({"dt": [["vis", []]]}, SenseCategory.PLAIN)

    def test_keeps_inline_tokens(self, decoder):
        """Formatting tokens are left in the text for the presentation layer."""
        sense = decoder.decode_sense({"dt": [["text", "{bc}a cat {sx|feline||}"]]}, SenseCategory.PLAIN)

        assert sense.text == "{bc}a cat {sx|feline||}"

    def test_senses_keep_document_order(self, decoder, cat_body):
        result = decoder.decode(cat_body)

        assert [s.label for s in result.entries[0].senses] == ["1 a", "2"]
