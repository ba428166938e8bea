"""
easy-cols exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 — bad flags, unreadable input, parse and selection errors."""

    exit_code = 1


class FormatError(CliError):
    """Unsupported input/output format, or a delimiter the format cannot use."""


class SelectionError(CliError):
    """Column selector that cannot be resolved against the header row."""


class InputError(CliError):
    """Input file missing or unreadable."""
