"""Single source of truth for the code-escape version."""

__version__: str = "1.0.0"
