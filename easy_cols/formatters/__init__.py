"""Output formatting package for easy-cols.

Re-exports all public names so consumers can do:
    from easy_cols.formatters import format_table
"""

from easy_cols.formatters._core import (
    format_ascii_table,
    format_column_counts,
    format_joined,
    format_plain,
    format_table,
    output,
)
from easy_cols.formatters._delimited import format_csv, format_tsv
from easy_cols.formatters._table import _aligned, _column_widths, _rule_line

__all__ = [
    "_aligned",
    "_column_widths",
    "_rule_line",
    "format_ascii_table",
    "format_column_counts",
    "format_csv",
    "format_joined",
    "format_plain",
    "format_table",
    "format_tsv",
    "output",
]
