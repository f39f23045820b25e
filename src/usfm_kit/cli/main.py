# src/usfm_kit/cli/main.py

"""Command line entry point: ``usfmp INPUT [options]``."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import yaml

from usfm_kit import __version__
from usfm_kit.formatters import default_registry, format_documents
from usfm_kit.usfm import Document, UsfmError, UsfmParser

from .files import resolve_inputs
from .settings import CliSettings, load_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(message)s"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="usfmp",
        description=(
            "Parse USFM (Unified Standard Format Marker) files, a markup "
            "format for biblical texts, and output them as JSON, plain text "
            "or TSV. INPUT may be a single file or a directory of .sfm/.usfm "
            "files."
        ),
    )
    parser.add_argument("input", help="input file or directory")
    parser.add_argument(
        "-f",
        "--format",
        choices=default_registry().names(),
        default=None,
        help="output format (default: json)",
    )
    parser.add_argument(
        "-o", "--output", default=None, help="output file (default: stdout)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=None, help="verbose output"
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=None,
        help="quiet mode - minimal output",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="strict mode - fail on unknown or malformed markers",
    )
    parser.add_argument(
        "--no-footnotes",
        dest="include_footnotes",
        action="store_false",
        default=None,
        help="keep footnote markup in verse text",
    )
    parser.add_argument(
        "--no-references",
        dest="include_references",
        action="store_false",
        default=None,
        help="ignore \\r cross-references",
    )
    parser.add_argument(
        "--config", default=None, help="YAML settings file; flags override it"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> CliSettings:
    overrides = {
        "format": args.format,
        "output": args.output,
        "verbose": args.verbose,
        "quiet": args.quiet,
        "strict": args.strict,
        "include_footnotes": args.include_footnotes,
        "include_references": args.include_references,
    }
    return load_settings(args.config, overrides)


def parse_inputs(input_path: str | Path, settings: CliSettings) -> list[Document]:
    parser = UsfmParser(settings.to_parse_options())
    documents: list[Document] = []
    for file_path in resolve_inputs(input_path):
        logger.info("Parsing file: %s", file_path)
        try:
            document = parser.parse_file(file_path)
        except UsfmError:
            logger.error("Error parsing file %s", file_path)
            raise
        documents.append(document)
        logger.info("Successfully parsed %s - %s", document.id, document.main_title)
    return documents


def write_output(output: str, settings: CliSettings) -> None:
    if settings.output:
        Path(settings.output).write_text(output, encoding="utf-8")
        logger.info("Output written to: %s", settings.output)
    else:
        sys.stdout.write(output)


def run(input_path: str | Path, settings: CliSettings) -> None:
    documents = parse_inputs(input_path, settings)
    write_output(format_documents(settings.format, documents), settings)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = settings_from_args(args)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level(), format=LOG_FORMAT, stream=sys.stderr
    )

    try:
        run(args.input, settings)
    except (UsfmError, KeyError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
