import logging
from pathlib import Path

logger = logging.getLogger(__name__)

USFM_EXTENSIONS = frozenset({".sfm", ".usfm"})


def is_usfm_file(path: Path) -> bool:
    return path.suffix.lower() in USFM_EXTENSIONS


def find_usfm_files(directory: Path) -> list[Path]:
    """Recursively collect USFM files under ``directory``, sorted by path."""
    return sorted(p for p in directory.rglob("*") if p.is_file() and is_usfm_file(p))


def resolve_inputs(input_path: str | Path) -> list[Path]:
    """Expand a file or directory argument into the files to parse.

    Raises:
        FileNotFoundError: If the path does not exist.
        ValueError: If a directory holds no USFM files.
    """
    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(f"cannot access input path: {path}")

    if not path.is_dir():
        return [path]

    files = find_usfm_files(path)
    if not files:
        raise ValueError(f"no USFM files found in directory: {path}")

    logger.info("Found %d USFM files", len(files))
    return files
