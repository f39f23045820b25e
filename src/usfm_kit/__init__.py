__version__ = "0.1.0"

# Formatters
from .formatters import (
    Formatter,
    FormatterRegistry,
    JsonFormatter,
    TextFormatter,
    TsvFormatter,
    default_registry,
    format_documents,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsing
from .usfm import (
    DEFAULT_PARSE_OPTIONS,
    Chapter,
    Document,
    Footnote,
    ParseOptions,
    Section,
    TOCEntry,
    UsfmError,
    UsfmParser,
    Verse,
)

__all__ = [
    "__version__",
    # Formatters
    "Formatter",
    "FormatterRegistry",
    "JsonFormatter",
    "TextFormatter",
    "TsvFormatter",
    "default_registry",
    "format_documents",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsing
    "DEFAULT_PARSE_OPTIONS",
    "Chapter",
    "Document",
    "Footnote",
    "ParseOptions",
    "Section",
    "TOCEntry",
    "UsfmError",
    "UsfmParser",
    "Verse",
]
