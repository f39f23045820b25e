# src/usfm_kit/usfm/__init__.py

"""USFM parsing for usfm-kit.

Turns USFM (Unified Standard Format Marker) text into a
Document -> Chapter -> Section -> Verse -> Footnote tree.

Design principles:
- Line oriented: one marker per line, blank lines ignored
- Lenient by default: unknown markers are skipped unless strict_mode is set
- Fail fast: no partial document is ever returned on error
- Reusable: a parser keeps no state between calls

Example:
    >>> from usfm_kit.usfm import ParseOptions, UsfmParser
    >>>
    >>> parser = UsfmParser(ParseOptions(strict_mode=True))
    >>> doc = parser.parse_file("genesis.sfm")
    >>> print(doc.id, len(doc.chapters))
"""

from .config import DEFAULT_PARSE_OPTIONS, ParseOptions
from .errors import (
    InputReadError,
    InvalidChapterNumberError,
    InvalidMarkerFormatError,
    InvalidVerseNumberError,
    NotAMarkerError,
    UnknownMarkerError,
    UsfmError,
)
from .markers import Marker, MarkerKind, tokenize
from .models import Chapter, Document, Footnote, Section, TOCEntry, Verse
from .parser import UsfmParser
from .verses import extract_footnotes, parse_verse, strip_footnotes

__all__ = [
    # Parser
    "UsfmParser",
    # Config
    "ParseOptions",
    "DEFAULT_PARSE_OPTIONS",
    # Types
    "Document",
    "TOCEntry",
    "Chapter",
    "Section",
    "Verse",
    "Footnote",
    # Tokenizer
    "Marker",
    "MarkerKind",
    "tokenize",
    # Verse parsing
    "parse_verse",
    "extract_footnotes",
    "strip_footnotes",
    # Errors
    "UsfmError",
    "NotAMarkerError",
    "InvalidMarkerFormatError",
    "InvalidChapterNumberError",
    "InvalidVerseNumberError",
    "UnknownMarkerError",
    "InputReadError",
]
