import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from usfm_kit.cli.main import build_arg_parser
from usfm_kit.cli.settings import CliSettings, load_settings
from usfm_kit.formatters import default_registry
from usfm_kit.usfm.config import ParseOptions


class TestCliSettings:
    def test_defaults(self) -> None:
        settings = CliSettings()

        assert settings.format == "json"
        assert settings.output is None
        assert settings.to_parse_options() == ParseOptions()

    def test_to_parse_options(self) -> None:
        settings = CliSettings(
            strict=True, include_footnotes=False, include_references=False
        )

        assert settings.to_parse_options() == ParseOptions(
            strict_mode=True, include_footnotes=False, include_references=False
        )

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(
            ValidationError, match=r"invalid output format: pdf \(valid: json, tsv, txt\)"
        ):
            CliSettings(format="pdf")

    @pytest.mark.parametrize("name", default_registry().names())
    def test_accepts_every_registered_format(self, name: str) -> None:
        assert CliSettings(format=name).format == name

    def test_cli_format_choices_come_from_registry(self) -> None:
        format_action = next(
            a for a in build_arg_parser()._actions if a.dest == "format"
        )

        assert tuple(format_action.choices) == default_registry().names()

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValidationError):
            CliSettings(colour=True)  # type: ignore[call-arg]

    def test_rejects_verbose_and_quiet(self) -> None:
        with pytest.raises(ValidationError, match="cannot use both"):
            CliSettings(verbose=True, quiet=True)

    @pytest.mark.parametrize(
        "kwargs, level",
        [
            ({}, logging.INFO),
            ({"verbose": True}, logging.DEBUG),
            ({"quiet": True}, logging.WARNING),
        ],
    )
    def test_log_level(self, kwargs: dict, level: int) -> None:
        assert CliSettings(**kwargs).log_level() == level


class TestLoadSettings:
    def test_without_file_uses_overrides(self) -> None:
        settings = load_settings(None, {"format": "tsv", "strict": None})

        assert settings.format == "tsv"
        assert settings.strict is False

    def test_reads_yaml_file(self, tmp_path: Path) -> None:
        config = tmp_path / "usfmp.yaml"
        config.write_text("format: txt\nstrict: true\ninclude_footnotes: false\n")

        settings = load_settings(config)

        assert settings.format == "txt"
        assert settings.strict is True
        assert settings.include_footnotes is False

    def test_overrides_beat_file(self, tmp_path: Path) -> None:
        config = tmp_path / "usfmp.yaml"
        config.write_text("format: txt\nstrict: true\n")

        settings = load_settings(config, {"format": "json", "strict": None})

        assert settings.format == "json"
        assert settings.strict is True

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config = tmp_path / "empty.yaml"
        config.write_text("")

        assert load_settings(config) == CliSettings()

    def test_non_mapping_file_raises(self, tmp_path: Path) -> None:
        config = tmp_path / "list.yaml"
        config.write_text("- json\n- txt\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_settings(config)
