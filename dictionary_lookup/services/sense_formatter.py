"""Rendering of sense text and decoded results.

Sense text from the API carries inline tokens such as {bc} (bold colon),
{sx|word||} (synonymous cross-reference) and {it}...{/it}. These helpers
turn them into Qt rich text or plain console text.
"""

import html
import re

from dictionary_lookup.models import Entry, Result, Sense

LABEL_WIDTH = 8

_TOKEN_PATTERN = re.compile(r"\{([^{}]*)\}")

_HTML_SIMPLE = {
    "bc": "<b><tt> : </tt></b>",
    "it": "<i>",
    "/it": "</i>",
    "b": "<b>",
    "/b": "</b>",
    "wi": "<i>",
    "/wi": "</i>",
    "inf": "<sub>",
    "/inf": "</sub>",
    "sup": "<sup>",
    "/sup": "</sup>",
    "ldquo": "&ldquo;",
    "rdquo": "&rdquo;",
    "dx": " &mdash; ",
    "/dx": "",
    "dx_def": "(",
    "/dx_def": ")",
}

_PLAIN_SIMPLE = {
    "bc": ": ",
    "ldquo": "“",
    "rdquo": "”",
    "dx": " — ",
    "dx_def": "(",
    "/dx_def": ")",
}


def _replace_tokens(text: str, rich: bool) -> str:
    """Replace every {token} in already-escaped text."""
    simple = _HTML_SIMPLE if rich else _PLAIN_SIMPLE

    def substitute(match: re.Match) -> str:
        fields = match.group(1).split("|")
        name = fields[0]

        if name in simple:
            return simple[name]

        # {sx|word|sense|number}: synonymous cross-reference
        if name == "sx" and len(fields) > 1:
            return f"SEE {fields[1]}"

        if name == "dxt" and len(fields) > 1:
            return fields[1]

        # {a_link|word}, {d_link|word|id}, {i_link|...}, {et_link|...}, {mat|...}
        if name.endswith("_link") or name == "mat":
            return fields[1] if len(fields) > 1 else ""

        # Unknown tokens are dropped
        return ""

    return _TOKEN_PATTERN.sub(substitute, text)


def sense_text_to_html(text: str) -> str:
    """Convert raw sense text into Qt rich text.

    Args:
        text: Sense text with API tokens

    Returns:
        HTML-escaped text with tokens converted to markup
    """
    return _replace_tokens(html.escape(text, quote=False), rich=True).strip()


def sense_text_to_plain(text: str) -> str:
    """Convert raw sense text into plain text for the console.

    Args:
        text: Sense text with API tokens

    Returns:
        Text with tokens converted or removed and whitespace normalized
    """
    plain = _replace_tokens(text, rich=False)
    return " ".join(plain.split()).lstrip(": ").strip()


def format_sense_html(sense: Sense) -> str:
    """Render one sense as a rich text line: right-aligned label, text, (category)."""
    label = html.escape(sense.label or "").rjust(LABEL_WIDTH).replace(" ", "&nbsp;")
    return (
        f"<b><tt>{label}</tt></b>"
        f"{sense_text_to_html(sense.text)} ({sense.category})"
    )


def format_entry_html(entry: Entry) -> str:
    lines = [format_sense_html(sense) for sense in entry.senses]
    if entry.headword:
        lines.insert(0, f"<b>{html.escape(entry.headword)}</b>")
    return "<br>".join(lines)


def format_result_html(result: Result) -> str:
    """Render a whole result as rich text, entries separated by blank lines.

    Args:
        result: Decoded lookup result

    Returns:
        Rich text suitable for a QLabel
    """
    return "<br><br>".join(format_entry_html(entry) for entry in result.entries)


def format_sense_plain(sense: Sense) -> str:
    label = (sense.label or "").rjust(LABEL_WIDTH)
    return f"{label}  {sense_text_to_plain(sense.text)} ({sense.category})"
