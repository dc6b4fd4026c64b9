"""``code-escape doctor`` — environment diagnostics command.

Gathers system information, runs a self-test of the escape pipelines,
and renders a table summarising whether the runtime environment is
healthy.  Rich is used when installed; otherwise a plain table is
printed to stderr.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from code_escape.cli import exit_codes
from code_escape.cli.console import console, rich_available
from code_escape.core.escaping import escape, unescape
from code_escape.version import __version__

# (input, expected escape output) pairs checked by the self-test.
_SELF_TEST_CASES: tuple[tuple[str, str], ...] = (
    ("A & B", "A &amp; B"),
    ("<tag>", "&lt;tag&gt;"),
    ("[shortcode]", "&#91;shortcode]"),
    ("https://example.com/x", "https:&#47;&#47;example.com/x"),
    ("see https://example.com/x here", "see https://example.com/x here"),
    ("&amp;", "&amp;amp;"),
)


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = major >= 3 and minor >= 10
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row."""
    if not rich_available():
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"
    try:
        return "rich", metadata.version("rich"), "[green]OK[/green]"
    except metadata.PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _self_test_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the pipeline self-test row."""
    failures = 0
    for raw, expected in _SELF_TEST_CASES:
        escaped = escape(raw)
        if escaped != expected or unescape(escaped) != raw:
            failures += 1

    total = len(_SELF_TEST_CASES)
    if failures:
        return "self-test", f"{failures}/{total} failed", "[red]FAIL[/red]"
    return "self-test", f"{total}/{total} passed", "[green]OK[/green]"


def _codeescape_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the code-escape version row."""
    return "code-escape", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\ncode-escape doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<12} {value:<32} {plain_status:<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _codeescape_version_check(),
        _python_version_check(),
        _rich_check(),
        _self_test_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    use_rich = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        use_rich = False

    if use_rich:
        table = Table(
            title="code-escape doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
