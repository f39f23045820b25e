# src/usfm_kit/usfm/models.py

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TOCEntry:
    level: int
    text: str


@dataclass(frozen=True)
class Footnote:
    caller: str
    reference: str
    text: str


@dataclass(frozen=True)
class Verse:
    """A single \\v verse.

    Immutable once parsed. ``text`` has footnote markup removed when
    footnote extraction is enabled.
    """

    number: int
    text: str
    footnotes: list[Footnote] = field(default_factory=list)


@dataclass
class Section:
    """Verses grouped under an \\s1, \\s2 or \\s3 heading.

    An untitled level-1 section stands in for verses with no heading.
    """

    level: int
    title: str
    reference: str = ""
    verses: list[Verse] = field(default_factory=list)


@dataclass
class Chapter:
    number: int
    sections: list[Section] = field(default_factory=list)


@dataclass
class Document:
    """A parsed USFM book.

    Owned by the parse call that built it. Chapters keep source order,
    not numeric order.
    """

    id: str = ""
    header: str = ""
    main_title: str = ""
    table_of_contents: list[TOCEntry] = field(default_factory=list)
    chapters: list[Chapter] = field(default_factory=list)
    parsed_at: datetime = field(default_factory=_utcnow)
    source_file: str = ""
