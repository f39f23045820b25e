# src/usfm_kit/usfm/markers.py

import re
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidMarkerFormatError, NotAMarkerError

MARKER_INTRODUCER = "\\"

# \tag, optional end-marker star, whitespace, content
MARKER_PATTERN = re.compile(r"^\\([a-z0-9]+)\*?\s*(.*)$")


class MarkerKind(str, Enum):
    """Markers the parser acts on. Anything else is UNKNOWN."""

    ID = "id"
    HEADER = "h"
    TOC1 = "toc1"
    TOC2 = "toc2"
    TOC3 = "toc3"
    MAIN_TITLE = "mt1"
    CHAPTER = "c"
    SECTION1 = "s1"
    SECTION2 = "s2"
    SECTION3 = "s3"
    REFERENCE = "r"
    VERSE = "v"
    UNKNOWN = ""

    @classmethod
    def from_tag(cls, tag: str) -> "MarkerKind":
        if not tag:
            return cls.UNKNOWN
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


TOC_LEVELS = {
    MarkerKind.TOC1: 1,
    MarkerKind.TOC2: 2,
    MarkerKind.TOC3: 3,
}

SECTION_LEVELS = {
    MarkerKind.SECTION1: 1,
    MarkerKind.SECTION2: 2,
    MarkerKind.SECTION3: 3,
}


@dataclass(frozen=True)
class Marker:
    """A tokenized marker line. Transient; never stored in the tree."""

    tag: str
    content: str
    line_number: int

    @property
    def kind(self) -> MarkerKind:
        return MarkerKind.from_tag(self.tag)


def tokenize(line: str, line_number: int = 0) -> Marker:
    """Split a stripped, non-empty line into its marker tag and content.

    Raises:
        NotAMarkerError: The line does not start with a backslash.
        InvalidMarkerFormatError: The line starts with a backslash but has
            no lowercase alphanumeric tag.
    """
    if not line.startswith(MARKER_INTRODUCER):
        raise NotAMarkerError("line does not start with marker")

    match = MARKER_PATTERN.match(line)
    if match is None:
        raise InvalidMarkerFormatError(f"invalid marker format: {line!r}")

    return Marker(
        tag=match.group(1),
        content=match.group(2).strip(),
        line_number=line_number,
    )
