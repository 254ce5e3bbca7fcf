"""Main CLI entry point for msgbin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from .. import __version__
from ..batch import extract, pack
from ..config import BatchConfig
from ..documents import format_names
from ..exceptions import FileProcessingError, MsgbinError, UsageError
from .info import describe_file

VERBS = ("extract", "pack", "info")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{message}\n{self.format_usage().rstrip()}")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="msgbin",
        description="msgbin: Binary String Table Converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  msgbin extract messages.bin out/           Decode one file to out/messages.xml
  msgbin extract data/ out/ --format json    Decode every .bin file in data/
  msgbin pack out/ packed/                   Encode every .xml file in out/
  msgbin info messages.bin                   Show the layout of a binary file
        """,
    )
    parser.add_argument("--version", action="version", version=f"msgbin {__version__}")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log per-file details")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only report errors")

    subparsers = parser.add_subparsers(dest="verb", metavar="<extract|pack|info>")

    extract_parser = subparsers.add_parser(
        "extract", help="Decode binary string tables to documents"
    )
    extract_parser.add_argument("input", type=Path, help="Binary file, or directory of them")
    extract_parser.add_argument("output_dir", type=Path, help="Directory for documents")

    pack_parser = subparsers.add_parser("pack", help="Encode documents to binary string tables")
    pack_parser.add_argument("input", type=Path, help="Document, or directory of them")
    pack_parser.add_argument("output_dir", type=Path, help="Directory for binary files")

    for sub in (extract_parser, pack_parser):
        sub.add_argument(
            "--format",
            dest="document_format",
            choices=format_names(),
            default="xml",
            help="Document format (default: xml)",
        )
        sub.add_argument(
            "--binary-ext",
            dest="binary_extension",
            default=".bin",
            help="Suffix of binary files (default: .bin)",
        )

    info_parser = subparsers.add_parser("info", help="Show the layout of a binary string table")
    info_parser.add_argument("input", type=Path, help="Binary file")

    return parser


def _normalize_verb(argv: list[str]) -> list[str]:
    """Lower-case the verb so EXTRACT and Pack are accepted."""
    for i, arg in enumerate(argv):
        if arg.startswith("-"):
            continue
        if arg.lower() in VERBS:
            return argv[:i] + [arg.lower()] + argv[i + 1 :]
        break
    return argv


def configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the msgbin CLI.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    argv = _normalize_verb(list(sys.argv[1:] if argv is None else argv))

    # If no command specified, show help
    if not argv:
        parser.print_help()
        return 1

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1

    if args.verb is None:
        parser.print_help()
        return 1

    configure_logging(args.verbose, args.quiet)

    try:
        if args.verb == "info":
            try:
                describe_file(args.input)
            except (MsgbinError, OSError) as e:
                raise FileProcessingError("reading", args.input, e) from e
            return 0

        config = BatchConfig(
            document_format=args.document_format,
            binary_extension=args.binary_extension,
        )
        run = extract if args.verb == "extract" else pack
        run(args.input, args.output_dir, config)
        return 0
    except FileProcessingError as e:
        print(e, file=sys.stderr)
        return 1
    except (MsgbinError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
