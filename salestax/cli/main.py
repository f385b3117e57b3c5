#!/usr/bin/env python3

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from salestax.application.checkout import CheckoutRequest, run_checkout
from salestax.receipt.line_parser import EXAMPLE, USAGE
from salestax.runtime import configure_logging, get_logger, parse_log_level, set_log_level

logger = get_logger(__name__)

BANNER = "\n".join(
    [
        "",
        "PROBLEM TWO: SALES TAXES",
        "",
        f"\t{USAGE}",
        f"\t{EXAMPLE}",
        "\t( press enter twice after the last item to print receipt )",
        "",
    ]
)

EXIT_MESSAGE = "...the program will now exit"


def _print_error(error: str, stream: TextIO) -> None:
    for line in error.splitlines():
        print(line, file=stream)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="salestax",
        description="Print a sales tax receipt for shopping items read from stdin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input:
  One item per line:  numitems [imported] product name at price
  A blank line (or end of input) prints the receipt.

Example:
  printf '1 book at 12.49\\n1 imported bottle of perfume at 47.50\\n\\n' | salestax --no-banner

Environment:
  SALESTAX_LOG_LEVEL   DEBUG, INFO, WARNING or ERROR (default: WARNING)
""",
    )
    parser.add_argument("--no-banner", action="store_true", help="Do not print the usage banner on startup")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        default=None,
        help="Override SALESTAX_LOG_LEVEL",
    )
    return parser


def _run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    if not args.no_banner:
        print(BANNER, file=stdout)

    result = run_checkout(CheckoutRequest(lines=stdin))

    if result.status == "parse_error" or result.receipt is None:
        _print_error(result.error or "Checkout failed: missing receipt output.", stderr)
        print(EXIT_MESSAGE, file=stderr)
        return 1

    print(result.receipt, file=stdout)
    return 0


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Main entry point for the CLI."""
    args = _build_parser().parse_args(argv)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    configure_logging()
    level = parse_log_level(args.log_level)
    if level is not None:
        set_log_level(level)

    # Parse errors are handled inside _run; this only catches faults nobody modeled.
    try:
        return _run(args, stdin, stdout, stderr)
    except Exception as exc:
        logger.exception("Unexpected failure")
        print(f"Exception: {exc}", file=stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
