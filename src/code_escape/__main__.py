"""Allow ``python -m code_escape`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m code_escape`` behaves identically to the
``code-escape`` console script.
"""

from __future__ import annotations

from code_escape.cli.app import cli

if __name__ == "__main__":
    cli()
