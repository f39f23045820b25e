# src/usfm_kit/formatters/json_formatter.py

import json
from collections.abc import Sequence
from typing import Any

from usfm_kit.usfm.models import Chapter, Document, Footnote, Section, Verse


class JsonFormatter:
    """
    Indented JSON output.
    - A single document is a bare object
    - Zero or several documents are an array
    - Empty ``reference`` and ``footnotes`` are omitted
    """

    name = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def format(self, documents: Sequence[Document]) -> str:
        if len(documents) == 1:
            payload: Any = document_to_dict(documents[0])
        else:
            payload = [document_to_dict(d) for d in documents]
        return json.dumps(payload, indent=self.indent, ensure_ascii=False)


def document_to_dict(document: Document) -> dict[str, Any]:
    return {
        "id": document.id,
        "header": document.header,
        "toc": [
            {"level": entry.level, "text": entry.text}
            for entry in document.table_of_contents
        ],
        "main_title": document.main_title,
        "chapters": [_chapter_to_dict(c) for c in document.chapters],
        "parsed_at": document.parsed_at.isoformat(),
        "source_file": document.source_file,
    }


def _chapter_to_dict(chapter: Chapter) -> dict[str, Any]:
    return {
        "number": chapter.number,
        "sections": [_section_to_dict(s) for s in chapter.sections],
    }


def _section_to_dict(section: Section) -> dict[str, Any]:
    d: dict[str, Any] = {"level": section.level, "title": section.title}
    if section.reference:
        d["reference"] = section.reference
    d["verses"] = [_verse_to_dict(v) for v in section.verses]
    return d


def _verse_to_dict(verse: Verse) -> dict[str, Any]:
    d: dict[str, Any] = {"number": verse.number, "text": verse.text}
    if verse.footnotes:
        d["footnotes"] = [_footnote_to_dict(f) for f in verse.footnotes]
    return d


def _footnote_to_dict(footnote: Footnote) -> dict[str, str]:
    return {
        "caller": footnote.caller,
        "reference": footnote.reference,
        "text": footnote.text,
    }
