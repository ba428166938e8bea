"""easy-cols — extract and reformat columns from CSV, TSV, ASCII-table and plain text."""

from easy_cols.config import VERSION
from easy_cols.detector import detect_format
from easy_cols.exceptions import CliError, FormatError, InputError, SelectionError
from easy_cols.formatters import format_table
from easy_cols.models import (
    FormatOptions,
    IndexSelector,
    ListSelector,
    NameSelector,
    ParseOptions,
    RangeSelector,
    SelectorToken,
    Table,
    parse_selector,
)
from easy_cols.parser import parse_table
from easy_cols.selector import resolve_columns

__all__ = [
    "VERSION",
    "CliError",
    "FormatError",
    "InputError",
    "SelectionError",
    "FormatOptions",
    "IndexSelector",
    "ListSelector",
    "NameSelector",
    "ParseOptions",
    "RangeSelector",
    "SelectorToken",
    "Table",
    "detect_format",
    "format_table",
    "parse_selector",
    "parse_table",
    "resolve_columns",
]
