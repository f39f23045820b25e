from pathlib import Path

import pytest

GENESIS = """\\id GEN
\\h Genesis
\\toc1 The Book of Genesis
\\mt1 Genesis

\\c 1
\\s1 The Creation
\\r (John 1:1-3)
\\p
\\v 1 In the beginning God created the heavens and the earth.
\\v 2 The earth was formless \\f + \\fr 1:2 \\ft Or empty\\f* and void.
\\c 2
\\s1 The Seventh Day
\\v 1 Thus the heavens and the earth were finished.
"""

EXODUS = """\\id EXO
\\mt1 Exodus
\\c 1
\\v 1 These are the names.
"""

UNKNOWN_MARKER = """\\id LEV
\\c 1
\\xyz not a real marker
\\v 1 Text.
"""


@pytest.fixture
def usfm_dir(tmp_path: Path) -> Path:
    """Directory holding two books in a nested layout."""
    books = tmp_path / "books"
    (books / "ot").mkdir(parents=True)
    (books / "01-GEN.usfm").write_text(GENESIS, encoding="utf-8")
    (books / "ot" / "02-EXO.SFM").write_text(EXODUS, encoding="utf-8")
    (books / "README.md").write_text("not a book", encoding="utf-8")
    return books


@pytest.fixture
def genesis_file(usfm_dir: Path) -> Path:
    return usfm_dir / "01-GEN.usfm"


@pytest.fixture
def unknown_marker_file(tmp_path: Path) -> Path:
    path = tmp_path / "lev.usfm"
    path.write_text(UNKNOWN_MARKER, encoding="utf-8")
    return path
