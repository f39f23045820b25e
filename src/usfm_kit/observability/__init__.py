"""Metrics hooks for the parser and formatters.

Pass any object implementing ``MetricsHook`` to ``UsfmParser`` or
``format_documents``; ``names`` holds the metric names they emit.
"""

from . import names
from .base import MetricsHook, NoOpMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
