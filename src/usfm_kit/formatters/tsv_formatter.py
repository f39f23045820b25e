# src/usfm_kit/formatters/tsv_formatter.py

import re
from collections.abc import Sequence

from usfm_kit.usfm.models import Document, Verse

HEADER = (
    "Book",
    "Chapter",
    "Verse",
    "Section_Title",
    "Section_Level",
    "Verse_Text",
    "Footnotes",
    "References",
)

UNKNOWN_BOOK = "UNKNOWN"

_BREAKS = re.compile(r"[\t\n\r]")
_MULTIPLE_SPACES = re.compile(r" {2,}")


class TsvFormatter:
    """One row per verse, for spreadsheets and data analysis."""

    name = "tsv"

    def format(self, documents: Sequence[Document]) -> str:
        rows = ["\t".join(HEADER)]
        for document in documents:
            book = document.id or UNKNOWN_BOOK
            for chapter in document.chapters:
                for section in chapter.sections:
                    title = clean_field(section.title)
                    references = clean_field(section.reference)
                    for verse in section.verses:
                        rows.append(
                            "\t".join(
                                (
                                    book,
                                    str(chapter.number),
                                    str(verse.number),
                                    title,
                                    str(section.level),
                                    clean_field(verse.text),
                                    clean_field(_footnotes_field(verse)),
                                    references,
                                )
                            )
                        )
        return "\n".join(rows) + "\n"


def _footnotes_field(verse: Verse) -> str:
    return "; ".join(f"{f.caller}:{f.reference}={f.text}" for f in verse.footnotes)


def clean_field(text: str) -> str:
    """Make free text safe for a single TSV cell."""
    cleaned = _BREAKS.sub(" ", text)
    cleaned = _MULTIPLE_SPACES.sub(" ", cleaned)
    return cleaned.strip()
