"""Command-line interface for dollcode.

Usage:
    python -m dollcode <command> [args...]

Commands:
    decimal <n>         Decimal number to dollcode
    hex <0xN>           Hex number (0x prefix) to dollcode
    text <str>          Printable ASCII to text-form dollcode
    decode <dollcode>   Dollcode back to a number or text
    convert <value>     Auto-detect the input mode and convert
    table               Printable ASCII code chart

Environment:
    DOLLCODE_LOG_LEVEL      Logging level (default: WARNING)
    DOLLCODE_OUTPUT_FORMAT  text, json or msgpack (default: text)
"""
from __future__ import annotations

import argparse
import json
import sys

import msgpack

from .config import OUTPUT_FORMATS, load_settings
from .core.errors import DollcodeError
from .engine import pipeline
from .engine import text as text_codec
from .engine.hexadecimal import format_hex
from .log import get_logger, setup_logging

logger = get_logger(__name__)


# ---- Output formatting ----

def emit(args: argparse.Namespace, payload: dict) -> None:
    """Write a response envelope in the selected format."""
    if args.format == "json":
        print(json.dumps(payload, ensure_ascii=False))
    elif args.format == "msgpack":
        sys.stdout.buffer.write(msgpack.packb(payload, use_bin_type=True))
        sys.stdout.flush()
    elif payload["status"] == "ok":
        print(payload["output"])
    else:
        print(f"ERROR: {payload['message']}", file=sys.stderr)


def print_table(rows, headers):
    """Print aligned columns."""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, val in enumerate(row):
            widths[i] = max(widths[i], len(str(val)))
    fmt = "  ".join(f"{{:<{w}}}" for w in widths)
    print(fmt.format(*headers))
    print(fmt.format(*["-" * w for w in widths]))
    for row in rows:
        print(fmt.format(*[str(v) for v in row]))


def run(args: argparse.Namespace, mode: str, func, value: str) -> int:
    """Run one direct conversion and emit the result."""
    try:
        output = func(value)
    except DollcodeError as e:
        logger.debug("%s conversion failed: %r", mode, e)
        emit(args, {"status": "error", **e.to_dict()})
        return 1
    emit(args, {"status": "ok", "mode": mode, "output": output})
    return 0


# ---- Commands ----

def cmd_decimal(args: argparse.Namespace) -> int:
    return run(args, "decimal", pipeline.convert_decimal, args.value)


def cmd_hex(args: argparse.Namespace) -> int:
    return run(args, "hex", pipeline.convert_hex, args.value)


def cmd_text(args: argparse.Namespace) -> int:
    return run(args, "text", pipeline.convert_text, args.value)


def cmd_decode(args: argparse.Namespace) -> int:
    return run(args, "dollcode", pipeline.convert_dollcode, args.value)


def cmd_convert(args: argparse.Namespace) -> int:
    payload = pipeline.respond(args.value)
    emit(args, payload)
    return 0 if payload["status"] == "ok" else 1


def cmd_table(args: argparse.Namespace) -> int:
    rows = [(code, repr(char), format_hex(code), digits)
            for code, char, digits in text_codec.table()]
    if args.format == "text":
        print_table(rows, ["Code", "Char", "Hex", "Dollcode"])
    else:
        emit(args, {"status": "ok", "mode": "table",
                    "output": [list(r) for r in rows]})
    return 0


def create_parser(default_format: str = "text") -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dollcode",
        description="Convert numbers and text to and from dollcode",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=default_format,
        help=f"Output format (default: {default_format})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for name, func, help_text, metavar in (
        ("decimal", cmd_decimal, "Decimal number to dollcode", "N"),
        ("hex", cmd_hex, "Hex number (0x prefix) to dollcode", "0xN"),
        ("text", cmd_text, "ASCII text to dollcode", "TEXT"),
        ("decode", cmd_decode, "Dollcode to number or text", "DOLLCODE"),
        ("convert", cmd_convert, "Auto-detect input mode and convert", "VALUE"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("value", metavar=metavar, help="Input value")
        sub.set_defaults(func=func)

    table_parser = subparsers.add_parser("table", help="Printable ASCII code chart")
    table_parser.set_defaults(func=cmd_table)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    parser = create_parser(settings.output_format)
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else settings.log_level
    setup_logging(level, settings.log_format)

    if args.command is None:
        parser.print_help()
        return 2

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
