# src/usfm_kit/usfm/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseOptions:
    """Configuration for UsfmParser.

    Immutable. Explicit. Lenient by default.
    """

    strict_mode: bool = False  # Fail on unknown or malformed markers
    include_footnotes: bool = True  # Extract \f ... \f* blocks from verse text
    include_references: bool = True  # Attach \r content to the open section


DEFAULT_PARSE_OPTIONS = ParseOptions()
