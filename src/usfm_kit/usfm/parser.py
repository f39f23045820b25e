# src/usfm_kit/usfm/parser.py

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator
from datetime import datetime, timezone
from pathlib import Path
from time import monotonic

from usfm_kit.observability import names
from usfm_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import DEFAULT_PARSE_OPTIONS, ParseOptions
from .errors import (
    InputReadError,
    InvalidChapterNumberError,
    UnknownMarkerError,
    UsfmError,
)
from .markers import SECTION_LEVELS, TOC_LEVELS, Marker, MarkerKind, tokenize
from .models import Chapter, Document, Section, TOCEntry, Verse
from .verses import parse_number, parse_verse

logger = logging.getLogger(__name__)


class _DocumentBuilder:
    """Per-call parse state: the growing document plus the open chapter
    and section.

    A chapter or section joins its parent only when it is closed.
    """

    def __init__(self, source_file: str) -> None:
        self.document = Document(
            parsed_at=datetime.now(timezone.utc),
            source_file=source_file,
        )
        self.chapter: Chapter | None = None
        self.section: Section | None = None

    def open_chapter(self, number: int) -> None:
        self._close_section()
        self._close_chapter()
        self.chapter = Chapter(number=number)

    def open_section(self, level: int, title: str) -> None:
        self._close_section()
        self.section = Section(level=level, title=title)

    def set_reference(self, reference: str) -> None:
        if self.section is not None:
            self.section.reference = reference

    def add_verse(self, verse: Verse) -> None:
        if self.section is None:
            self.section = Section(level=1, title="")
        self.section.verses.append(verse)

    def finish(self) -> Document:
        self._close_section()
        self._close_chapter()
        return self.document

    def _close_section(self) -> None:
        if self.section is None:
            return
        if self.chapter is not None:
            self.chapter.sections.append(self.section)
        else:
            logger.debug(
                "Dropping section %r with %d verses found outside any chapter",
                self.section.title,
                len(self.section.verses),
            )
        self.section = None

    def _close_chapter(self) -> None:
        if self.chapter is not None:
            self.document.chapters.append(self.chapter)
            self.chapter = None


class UsfmParser:
    """
    Line-oriented USFM parser.

    - One marker per line
    - Lenient by default: unknown and malformed markers are skipped
    - Chapter and verse numbers must always be integers
    - Safe to reuse; all parse state lives inside a single call
    """

    def __init__(
        self,
        options: ParseOptions = DEFAULT_PARSE_OPTIONS,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.options = options
        self.metrics_hook = metrics_hook

    def parse(self, lines: Iterable[str], source_file: str = "") -> Document:
        """Parse USFM lines into a Document.

        Args:
            lines: Any iterable of text lines, e.g. an open text file.
            source_file: Label stored on the document. Not validated.

        Returns:
            The fully built Document.

        Raises:
            UsfmError: On the first fatal error. No partial document is
                returned. The error carries the 1-based line number.
        """
        start = monotonic()
        logger.debug("Parsing %s", source_file or "<input>")
        try:
            document, line_count = self._parse(lines, source_file)
        except UsfmError as exc:
            self.metrics_hook.increment(
                names.USFM_PARSE_ERRORS_TOTAL, labels={"kind": type(exc).__name__}
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.USFM_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.USFM_LINES_TOTAL, line_count)
        self.metrics_hook.increment(names.USFM_DOCUMENTS_PARSED_TOTAL)
        logger.debug(
            "Parsed %s: %d lines, %d chapters",
            source_file or "<input>",
            line_count,
            len(document.chapters),
        )
        return document

    def parse_file(self, path: str | Path) -> Document:
        """Open ``path`` as UTF-8 (BOM tolerated) and parse it."""
        try:
            f = open(path, encoding="utf-8-sig")
        except OSError as exc:
            raise InputReadError(f"cannot open {path}: {exc}") from exc
        with f:
            return self.parse(f, str(path))

    def parse_string(self, text: str, source_file: str = "<string>") -> Document:
        # universal newlines, the same line breaks open() gives parse_file
        return self.parse(io.StringIO(text, newline=None), source_file)

    def _parse(
        self, lines: Iterable[str], source_file: str
    ) -> tuple[Document, int]:
        builder = _DocumentBuilder(source_file)
        line_number = 0

        for line_number, raw in _numbered(lines):
            line = raw.strip()
            if not line:
                continue

            try:
                marker = tokenize(line, line_number)
            except UsfmError as exc:
                if self.options.strict_mode:
                    raise exc.at_line(line_number) from exc
                logger.debug("Skipping line %d: %s", line_number, exc.message)
                self.metrics_hook.increment(
                    names.USFM_MARKERS_SKIPPED_TOTAL,
                    labels={"reason": "invalid_marker"},
                )
                continue

            self._dispatch(builder, marker)

        return builder.finish(), line_number

    def _dispatch(self, builder: _DocumentBuilder, marker: Marker) -> None:
        kind = marker.kind
        document = builder.document

        if kind is MarkerKind.ID:
            document.id = marker.content
        elif kind is MarkerKind.HEADER:
            document.header = marker.content
        elif kind is MarkerKind.MAIN_TITLE:
            document.main_title = marker.content
        elif kind in TOC_LEVELS:
            document.table_of_contents.append(
                TOCEntry(level=TOC_LEVELS[kind], text=marker.content)
            )
        elif kind is MarkerKind.CHAPTER:
            number = parse_number(marker.content)
            if number is None:
                raise InvalidChapterNumberError(
                    f"invalid chapter number: {marker.content!r}",
                    marker.line_number,
                )
            builder.open_chapter(number)
        elif kind in SECTION_LEVELS:
            builder.open_section(SECTION_LEVELS.get(kind, 1), marker.content)
        elif kind is MarkerKind.REFERENCE:
            if self.options.include_references:
                builder.set_reference(marker.content)
        elif kind is MarkerKind.VERSE:
            try:
                verse = parse_verse(marker.content, self.options.include_footnotes)
            except UsfmError as exc:
                raise exc.at_line(marker.line_number) from exc
            builder.add_verse(verse)
        else:
            if self.options.strict_mode:
                raise UnknownMarkerError(
                    f"unknown marker '\\{marker.tag}'",
                    marker.line_number,
                    tag=marker.tag,
                )
            logger.debug(
                "Ignoring unknown marker \\%s on line %d",
                marker.tag,
                marker.line_number,
            )
            self.metrics_hook.increment(
                names.USFM_MARKERS_SKIPPED_TOTAL, labels={"reason": "unknown_marker"}
            )


def _numbered(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs, wrapping read failures."""
    iterator = iter(lines)
    line_number = 0
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(
                f"error reading input: {exc}", line_number + 1
            ) from exc
        line_number += 1
        yield line_number, line
