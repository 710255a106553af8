"""Main CLI entry point for ucgas."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .. import __version__
from ..cli.assemble import assemble_lines, interactive_lines
from ..cli.disassemble import disassemble_records
from ..config import CodecConfig

logger = logging.getLogger("ucgas")


def setup_logging(verbose: bool, quiet: bool) -> None:
    """Configure logging on stderr based on verbosity flags."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("infile", nargs="?", help="Input file (default: stdin)")
    parser.add_argument(
        "-o", "--outfile", metavar="FILE", help="Output file to write to (default: stdout)"
    )
    parser.add_argument(
        "-m", "--immediate", action="store_true", help="Use UCGv2 immediate mode (no timestamps)"
    )
    parser.add_argument(
        "-x",
        "--hex",
        action="store_true",
        help="Binary records are hex lines instead of length-prefixed bytes",
    )
    parser.add_argument(
        "-k", "--keep-going", action="store_true", help="Report errors and continue"
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Be more verbose")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only report errors")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ucgas command."""
    parser = argparse.ArgumentParser(
        prog="ucgas",
        description="ucgas: UCGv2 Command Grammar Assembler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ucgas asm script.ucg -o script.bin        Assemble a scripted-mode file
  ucgas asm -m -x                           Interactive immediate mode, hex output
  ucgas disasm -x -d script.hex             Disassemble hex records, decimal data
        """,
    )
    parser.add_argument("--version", action="version", version=f"ucgas {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    asm = subparsers.add_parser("asm", help="Assemble text lines into binary records")
    _add_common_arguments(asm)
    asm.add_argument(
        "-c", "--comments", action="store_true", help="Echo comment lines to stderr"
    )
    asm.add_argument(
        "-I", "--interactive", action="store_true", help="Force interactive mode"
    )

    disasm = subparsers.add_parser("disasm", help="Disassemble binary records into text")
    _add_common_arguments(disasm)
    disasm.add_argument(
        "-d", "--decimal", action="store_true", help="Print payload values in decimal"
    )

    return parser


def _config_from_args(args: argparse.Namespace) -> CodecConfig:
    return CodecConfig(
        immediate=args.immediate,
        record_format="hex" if args.hex else "length",
        print_decimal=getattr(args, "decimal", False),
        emit_comments=getattr(args, "comments", False),
        keep_going=args.keep_going,
    )


def _run_asm(args: argparse.Namespace, config: CodecConfig) -> int:
    interactive = args.interactive or (args.infile is None and sys.stdin.isatty())
    if interactive:
        # A typo at the prompt should not end the session
        config.keep_going = True
        logger.debug("Entering interactive mode")

    out = open(args.outfile, "wb") if args.outfile else sys.stdout.buffer
    try:
        if interactive:
            errors = assemble_lines(interactive_lines(), out, config)
        elif args.infile is None:
            errors = assemble_lines(sys.stdin, out, config)
        else:
            with open(args.infile, encoding="utf-8") as fin:
                errors = assemble_lines(fin, out, config)
    finally:
        if args.outfile:
            out.close()

    return 1 if errors else 0


def _run_disasm(args: argparse.Namespace, config: CodecConfig) -> int:
    if args.infile is None:
        data = sys.stdin.buffer.read()
    else:
        data = Path(args.infile).read_bytes()

    if args.outfile:
        with open(args.outfile, "w", encoding="utf-8") as out:
            errors = disassemble_records(data, out, config)
    else:
        errors = disassemble_records(data, sys.stdout, config)

    return 1 if errors else 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the ucgas CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(args.verbose, args.quiet)
    config = _config_from_args(args)

    if args.infile is not None and not Path(args.infile).exists():
        logger.error("File not found: %s", args.infile)
        return 1

    try:
        if args.command == "asm":
            return _run_asm(args, config)
        return _run_disasm(args, config)
    except OSError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
