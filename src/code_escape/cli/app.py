"""CLI application entry point and command routing for code-escape.

This module is the **sole error boundary** for the entire application.
It catches :class:`~code_escape.exceptions.CodeEscapeError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and the infrastructure layer.
* Transformed content goes to stdout or ``--output``; diagnostics go to
  stderr through the console proxy or logging.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from code_escape.cli import exit_codes
from code_escape.cli.console import console, escape_markup
from code_escape.cli.logging_setup import configure_logging, resolve_level
from code_escape.exceptions import CodeEscapeError
from code_escape.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_input_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=None,
        help="File to read. Omit or pass '-' to read standard input.",
    )


def _add_output_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="File to write. Omit or pass '-' to write standard output.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``code-escape escape [INPUT] [-o OUTPUT] [--strict]``
    * ``code-escape unescape [INPUT] [-o OUTPUT]``
    * ``code-escape check [INPUT]``
    * ``code-escape doctor``
    """
    parser = argparse.ArgumentParser(
        prog="code-escape",
        description=(
            "Escape code-block content before embedding it in markup, "
            "and restore it afterwards."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug).",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    escape_cmd = commands.add_parser(
        "escape",
        help="Escape ampersands, tags, shortcodes and isolated URLs.",
    )
    _add_input_argument(escape_cmd)
    _add_output_option(escape_cmd)
    escape_cmd.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of warning when the input already looks escaped.",
    )

    unescape_cmd = commands.add_parser(
        "unescape",
        help="Restore content produced by 'escape'.",
    )
    _add_input_argument(unescape_cmd)
    _add_output_option(unescape_cmd)

    check_cmd = commands.add_parser(
        "check",
        help="Report escape sequences already present in the input.",
    )
    _add_input_argument(check_cmd)

    commands.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_transform(args: argparse.Namespace) -> int:
    """Read input, run the requested direction, and write the result."""
    from code_escape.core.service import EscapeService
    from code_escape.infra.text_io import read_text, write_text

    service = EscapeService(strict=getattr(args, "strict", False))
    content = read_text(args.input)
    result = service.transform(content, args.command)
    write_text(result.text, args.output)

    logger.info(
        "%s complete: %d chars written to %s",
        result.direction.value,
        len(result.text),
        args.output or "stdout",
    )
    return exit_codes.SUCCESS


def _handle_check(args: argparse.Namespace) -> int:
    """Report whether the input already contains escape sequences."""
    from code_escape.core.inspection import find_escape_sequences
    from code_escape.infra.text_io import read_text

    content = read_text(args.input)
    found = find_escape_sequences(content)
    if not found:
        console.print("[green]No escape sequences found.[/green]")
        return exit_codes.SUCCESS

    console.print("[yellow]Input already contains escape sequences:[/yellow]")
    for sequence in found:
        console.print(f"  {sequence}")
    return exit_codes.GENERAL_ERROR


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from code_escape.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the code-escape CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(resolve_level(args.verbose))

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "doctor":
        return _handle_doctor()

    if args.command == "check":
        return _handle_check(args)

    return _handle_transform(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CodeEscapeError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
