from .base import Formatter
from .json_formatter import JsonFormatter
from .registry import FormatterRegistry, default_registry, format_documents
from .text_formatter import TextFormatter
from .tsv_formatter import TsvFormatter

__all__ = [
    "Formatter",
    "FormatterRegistry",
    "default_registry",
    "format_documents",
    "JsonFormatter",
    "TextFormatter",
    "TsvFormatter",
]
