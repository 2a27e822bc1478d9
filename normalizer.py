"""Text cleanup applied to the extracted abstract."""

from __future__ import annotations

# Distinct letters of "abstract", both cases. Leading characters from this
# set are trimmed one by one, which also eats the start of text such as
# "Cats ..." that happens to begin with them.
_LABEL_CHARS = "abstrcABSTRC"


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with one space and drop the ends."""
    return " ".join(text.split())


def strip_label(text: str) -> str:
    """Trim leading "abstract" letters (any case), then surrounding whitespace."""
    return text.lstrip(_LABEL_CHARS).strip()


def normalize_abstract(raw: str) -> str:
    """Collapse whitespace, then strip a leading "Abstract" label."""
    return strip_label(collapse_whitespace(raw))
