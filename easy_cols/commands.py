"""
Command implementations for easy-cols.
Each cmd_* function takes a RunConfig and prints its result.
"""

import sys

from easy_cols import config
from easy_cols._utils import info
from easy_cols.detector import detect_format
from easy_cols.exceptions import InputError
from easy_cols.formats import is_table_kind, resolve_input_format, resolve_output_format
from easy_cols.formatters import format_column_counts, format_table, output
from easy_cols.models import FormatOptions, parse_selectors
from easy_cols.parser import parse_table
from easy_cols.selector import all_columns, resolve_columns

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


def read_input(path):
    """Read the whole input: a file path, or stdin for None / "-"."""
    if path is None or path == "-":
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as e:
            raise InputError(f"[ERROR] Cannot read stdin: {e}") from e
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise InputError(f"[ERROR] File not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"[ERROR] Cannot read {path}: {e}") from e


def load_table(text, cfg):
    """Detect (unless pinned) and parse. Returns (table, input_kind)."""
    kind = resolve_input_format(cfg.input_format)
    if kind is None:
        kind = detect_format(text)
        info(f"Detected input format: {kind}")
    table = parse_table(text, kind, cfg.parse_options)
    info(f"Parsed {len(table)} rows as {kind}")
    return table, kind


# ---------------------------------------------------------------------------
# Pipelines (return text, no printing)
# ---------------------------------------------------------------------------


def gather_selection(text, cfg):
    """Run detect -> parse -> select -> format and return the output text."""
    table, input_kind = load_table(text, cfg)
    if table.is_empty():
        return ""

    header = table.header
    if cfg.selectors:
        indices = resolve_columns(header, parse_selectors(cfg.selectors))
    else:
        indices = all_columns(header)
    info(f"Selected columns: {', '.join(str(i) for i in indices) or 'none'}")

    kind = resolve_output_format(
        cfg.output_format, input_kind, explicit_separator=cfg.output_separator is not None
    )
    info(f"Output format: {kind}")
    options = FormatOptions(
        kind=kind,
        separator=cfg.output_separator,
        show_header=cfg.show_header,
        table_mode=cfg.table_mode or is_table_kind(kind),
    )
    return format_table(table, indices, options)


def gather_counts(text, cfg):
    table, _ = load_table(text, cfg)
    return format_column_counts(table, quiet=config.RUNTIME_QUIET)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_select(cfg):
    output(gather_selection(read_input(cfg.file_path), cfg))


def cmd_count(cfg):
    output(gather_counts(read_input(cfg.file_path), cfg))
