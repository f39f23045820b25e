import logging
from collections.abc import Iterable, Sequence
from time import monotonic

from usfm_kit.observability import names
from usfm_kit.observability.base import MetricsHook, NoOpMetricsHook
from usfm_kit.usfm.models import Document

from .base import Formatter
from .json_formatter import JsonFormatter
from .text_formatter import TextFormatter
from .tsv_formatter import TsvFormatter

logger = logging.getLogger(__name__)

BUILTIN_FORMATTERS: tuple[type[Formatter], ...] = (
    JsonFormatter,
    TextFormatter,
    TsvFormatter,
)


class FormatterRegistry:
    """Output formats by name.

    The CLI takes its ``--format`` choices and settings validation from
    ``names()``, so registering a formatter is all it takes to expose it.
    """

    def __init__(self, formatters: Iterable[Formatter] = ()) -> None:
        self._by_name: dict[str, Formatter] = {}
        for formatter in formatters:
            self.register(formatter)

    def register(self, formatter: Formatter) -> None:
        if formatter.name in self._by_name:
            raise ValueError(f"duplicate output format: {formatter.name!r}")
        self._by_name[formatter.name] = formatter
        logger.debug("Output format %s -> %s", formatter.name, type(formatter).__name__)

    def get(self, name: str) -> Formatter:
        formatter = self._by_name.get(name)
        if formatter is None:
            valid = ", ".join(self.names())
            logger.error("Unknown output format %r (valid: %s)", name, valid)
            raise KeyError(f"invalid output format: {name} (valid: {valid})")
        return formatter

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._by_name))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


def default_registry() -> FormatterRegistry:
    """Registry holding the built-in json, txt and tsv formatters."""
    return FormatterRegistry(cls() for cls in BUILTIN_FORMATTERS)


def format_documents(
    name: str,
    documents: Sequence[Document],
    registry: FormatterRegistry | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Render ``documents`` with the formatter registered as ``name``.

    Raises:
        KeyError: If no formatter is registered under ``name``.
    """
    if registry is None:
        registry = default_registry()
    formatter = registry.get(name)

    start = monotonic()
    output = formatter.format(documents)
    elapsed_ms = 1000 * (monotonic() - start)

    metrics_hook.record_latency(
        names.FORMAT_DURATION, elapsed_ms, labels={"formatter": name}
    )
    metrics_hook.increment(
        names.FORMAT_DOCUMENTS_TOTAL, len(documents), labels={"formatter": name}
    )
    return output
