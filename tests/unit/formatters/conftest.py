from datetime import datetime, timezone

import pytest

from usfm_kit.usfm.models import (
    Chapter,
    Document,
    Footnote,
    Section,
    TOCEntry,
    Verse,
)


@pytest.fixture
def genesis() -> Document:
    return Document(
        id="GEN",
        header="Genesis",
        main_title="Genesis",
        table_of_contents=[TOCEntry(level=1, text="The Book of Genesis")],
        chapters=[
            Chapter(
                number=1,
                sections=[
                    Section(
                        level=1,
                        title="The Creation",
                        reference="(John 1:1-3)",
                        verses=[
                            Verse(number=1, text="In the beginning."),
                            Verse(
                                number=2,
                                text="Formless and void.",
                                footnotes=[
                                    Footnote(caller="+", reference="1:2", text="Or empty"),
                                    Footnote(caller="+", reference="1:2b", text="Or waste"),
                                ],
                            ),
                        ],
                    ),
                    Section(
                        level=2,
                        title="The First Day",
                        verses=[Verse(number=3, text="Let there be light.")],
                    ),
                ],
            )
        ],
        parsed_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        source_file="gen.usfm",
    )


@pytest.fixture
def exodus() -> Document:
    return Document(
        id="EXO",
        chapters=[
            Chapter(
                number=1,
                sections=[Section(level=1, title="", verses=[Verse(number=1, text="Names.")])],
            )
        ],
        parsed_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
        source_file="exo.usfm",
    )
