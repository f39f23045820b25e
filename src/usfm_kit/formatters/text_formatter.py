# src/usfm_kit/formatters/text_formatter.py

from collections.abc import Sequence

from usfm_kit.usfm.models import Document, Section, Verse

DOCUMENT_SEPARATOR = "=" * 80
CHAPTER_RULE = "-" * 20
INDENT = "  "


class TextFormatter:
    """
    Human-readable plain text.
    - Title underlined with dashes
    - "Chapter N" headings
    - Section titles indented by level
    - "N. text [caller:reference - note]" verses
    """

    name = "txt"

    def format(self, documents: Sequence[Document]) -> str:
        lines: list[str] = []
        for i, document in enumerate(documents):
            if i > 0:
                lines.append(f"\n{DOCUMENT_SEPARATOR}\n\n")
            lines.extend(self._document(document))
        return "".join(lines)

    def _document(self, document: Document) -> list[str]:
        out: list[str] = []
        if document.main_title:
            out.append(f"{document.main_title}\n")
            out.append("-" * len(document.main_title) + "\n\n")
        if document.id:
            out.append(f"Book: {document.id}\n")
        if document.header:
            out.append(f"Header: {document.header}\n")
        out.append("\n")

        for chapter in document.chapters:
            out.append(f"Chapter {chapter.number}\n")
            out.append(f"{CHAPTER_RULE}\n\n")
            for section in chapter.sections:
                out.extend(self._section(section))
        return out

    def _section(self, section: Section) -> list[str]:
        out: list[str] = []
        if section.title:
            indent = INDENT * (section.level - 1)
            out.append(f"{indent}{section.title}\n")
            if section.reference:
                out.append(f"{indent}({section.reference})\n")
            out.append("\n")

        out.extend(f"{_verse_line(v)}\n" for v in section.verses)
        out.append("\n")
        return out


def _verse_line(verse: Verse) -> str:
    line = f"{verse.number}. {verse.text}"
    if verse.footnotes:
        notes = "; ".join(
            f"{f.caller}:{f.reference} - {f.text}" for f in verse.footnotes
        )
        line += f" [{notes}]"
    return line
