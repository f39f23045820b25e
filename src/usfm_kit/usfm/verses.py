# src/usfm_kit/usfm/verses.py

import re

from .errors import InvalidVerseNumberError
from .models import Footnote, Verse

# \f caller \fr reference \ft text \f*
FOOTNOTE_PATTERN = re.compile(
    r"\\f\s*([^\\]*?)\\fr\s*([^\\]*?)\\ft\s*([^\\]*?)\\f\*"
)

NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")

_MULTIPLE_SPACES = re.compile(r" {2,}")


def parse_number(token: str) -> int | None:
    """Parse an ASCII integer token, or return None."""
    if NUMBER_PATTERN.fullmatch(token) is None:
        return None
    return int(token)


def parse_verse(content: str, include_footnotes: bool = True) -> Verse:
    """Build a Verse from the content of a \\v marker.

    The first whitespace-delimited token is the verse number, the rest is
    the body.

    Raises:
        InvalidVerseNumberError: The number token is missing or not an integer.
    """
    parts = content.split(None, 1)
    if not parts:
        raise InvalidVerseNumberError("invalid verse number: ''")

    number = parse_number(parts[0])
    if number is None:
        raise InvalidVerseNumberError(f"invalid verse number: {parts[0]!r}")

    body = parts[1] if len(parts) > 1 else ""

    if not include_footnotes:
        return Verse(number=number, text=body, footnotes=[])

    return Verse(
        number=number,
        text=strip_footnotes(body),
        footnotes=extract_footnotes(body),
    )


def extract_footnotes(text: str) -> list[Footnote]:
    return [
        Footnote(
            caller=caller.strip(),
            reference=reference.strip(),
            text=note.strip(),
        )
        for caller, reference, note in FOOTNOTE_PATTERN.findall(text)
    ]


def strip_footnotes(text: str) -> str:
    """Remove footnote blocks and collapse the spaces they leave behind.

    Unterminated footnote markup does not match and is kept as-is.
    """
    cleaned = FOOTNOTE_PATTERN.sub("", text)
    cleaned = _MULTIPLE_SPACES.sub(" ", cleaned)
    return cleaned.strip()
