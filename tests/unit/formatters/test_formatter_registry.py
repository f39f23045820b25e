from collections.abc import Sequence
from unittest.mock import Mock

import pytest

from usfm_kit.formatters.json_formatter import JsonFormatter
from usfm_kit.formatters.registry import (
    FormatterRegistry,
    default_registry,
    format_documents,
)
from usfm_kit.observability import names
from usfm_kit.usfm.models import Document


class CountingFormatter:
    name = "count"

    def format(self, documents: Sequence[Document]) -> str:
        return str(len(documents))


class TestFormatterRegistry:
    def test_formatters_given_at_construction_are_registered(self) -> None:
        counting = CountingFormatter()
        registry = FormatterRegistry([counting])

        assert registry.get("count") is counting
        assert "count" in registry

    def test_register_adds_name(self) -> None:
        registry = FormatterRegistry()

        registry.register(CountingFormatter())

        assert registry.names() == ("count",)

    def test_duplicate_name_raises(self) -> None:
        registry = FormatterRegistry([CountingFormatter()])

        with pytest.raises(ValueError, match="duplicate output format: 'count'"):
            registry.register(CountingFormatter())

    def test_unknown_name_lists_valid_formats(self) -> None:
        registry = FormatterRegistry([CountingFormatter(), JsonFormatter()])

        with pytest.raises(KeyError, match=r"invalid output format: pdf \(valid: count, json\)"):
            registry.get("pdf")

    def test_names_are_sorted(self) -> None:
        assert default_registry().names() == ("json", "tsv", "txt")

    def test_contains(self) -> None:
        registry = default_registry()

        assert "tsv" in registry
        assert "pdf" not in registry


class TestFormatDocuments:
    def test_uses_named_formatter_and_records_metrics(self) -> None:
        registry = FormatterRegistry([CountingFormatter()])
        hook = Mock()

        output = format_documents(
            "count", [Document(), Document()], registry=registry, metrics_hook=hook
        )

        assert output == "2"
        hook.record_latency.assert_called_once()
        assert hook.record_latency.call_args.args[0] == names.FORMAT_DURATION
        assert hook.record_latency.call_args.kwargs == {
            "labels": {"formatter": "count"}
        }
        hook.increment.assert_called_once_with(
            names.FORMAT_DOCUMENTS_TOTAL, 2, labels={"formatter": "count"}
        )

    def test_defaults_to_builtin_registry(self) -> None:
        assert format_documents("json", []) == "[]"

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(KeyError, match="invalid output format: pdf"):
            format_documents("pdf", [])
