"""Command-line interface for doclinks."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from errors import MalformedInputError
from report.write import write_output
from rules.config import ConfigError, DocLinksConfig, load_config
from verify.verify import verify_determinism

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "files",
        nargs="+",
        help="Analysis dump files (JSON)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a doclinks.toml file (default: ./doclinks.toml if present)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="doclinks")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run", help="Write <file>.out with synthesized links for each file"
    )
    _add_common_options(run_parser)

    verify_parser = subparsers.add_parser(
        "verify", help="Check that existing output files are up to date"
    )
    _add_common_options(verify_parser)

    return parser


def _handle_run(files: list[str], config: DocLinksConfig) -> int:
    exit_code = 0
    for name in files:
        input_path = Path(name)
        try:
            write_output(input_path, config)
        except (OSError, MalformedInputError) as exc:
            sys.stderr.write(f"{input_path}: error: {exc}\n")
            exit_code = 1
    return exit_code


def _handle_verify(files: list[str], config: DocLinksConfig) -> int:
    exit_code = 0
    for name in files:
        input_path = Path(name)
        try:
            result = verify_determinism(input_path, config)
        except (OSError, MalformedInputError) as exc:
            sys.stderr.write(f"{input_path}: error: {exc}\n")
            exit_code = 2
            continue
        if result.missing:
            sys.stderr.write(f"missing: {result.output_path}\n")
        elif result.mismatch:
            sys.stderr.write(f"mismatch: {result.output_path}\n")
        if not result.ok:
            exit_code = max(exit_code, 1)
    return exit_code


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as exc:
        sys.stderr.write(f"config: {exc}\n")
        return 2

    if args.command == "run":
        return _handle_run(args.files, config)

    if args.command == "verify":
        return _handle_verify(args.files, config)

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
