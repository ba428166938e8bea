"""
Shared helpers for easy-cols.

Diagnostics go to stderr as tagged single lines; cell access tolerates
ragged rows. Used across selector.py, formatters/, and commands.py.
"""

import sys

from easy_cols import config


def warn(message):
    """Print a [WARN] line to stderr unless --quiet is active."""
    if config.RUNTIME_QUIET:
        return
    print(f"[WARN] {message}", file=sys.stderr)


def info(message):
    """Print an [INFO] line to stderr when --verbose is active."""
    if not config.RUNTIME_VERBOSE:
        return
    print(f"[INFO] {message}", file=sys.stderr)


def cell(row, index):
    """Return the cell at *index*, or "" when the row is too short."""
    if index < len(row):
        value = row[index]
        return "" if value is None else value
    return ""


def is_blank_row(row):
    """True when every cell of the row is empty or the row has no cells."""
    return all(not value for value in row)
