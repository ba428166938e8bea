"""Output dispatcher: picks a renderer for the requested output kind."""

from easy_cols import config
from easy_cols._utils import cell
from easy_cols.exceptions import FormatError
from easy_cols.formats import DEFAULT, SAME
from easy_cols.formatters._delimited import format_csv, format_tsv
from easy_cols.formatters._table import _aligned, _column_widths, _rule_line
from easy_cols.models import FormatOptions, Table


def format_table(table: Table, indices: list[int], options: FormatOptions | None = None) -> str:
    """Render the selected columns of *table* as text.

    Returns "" for an empty table or an empty selection. Raises FormatError
    for an unknown output kind.
    """
    options = options or FormatOptions()
    if table.is_empty() or not indices:
        return ""

    kind = options.kind
    if kind == "csv":
        return format_csv(table, indices, options.show_header)
    if kind == "tsv":
        return format_tsv(table, indices, options.show_header)
    if kind in ("table", "tbl"):
        return format_ascii_table(table, indices, options.show_header)
    if kind == "plain":
        return format_plain(table, indices, options.show_header)
    if kind in (DEFAULT, SAME, None):
        return format_joined(table, indices, options)
    raise FormatError(f"[ERROR] Unsupported output format: {kind}")


def format_ascii_table(table, indices, show_header=True):
    """Aligned cells joined by " | " with a -+- rule line under the header."""
    return _aligned(table, indices, config.TABLE_SEPARATOR, show_header, rule=True)


def format_plain(table, indices, show_header=True):
    """Aligned cells joined by a single space, no rule line."""
    return _aligned(table, indices, config.PLAIN_JOINER, show_header)


def format_joined(table, indices, options):
    """Generic renderer: cells joined by the separator, no alignment.

    In table mode the rule line is still drawn with dashes and -+-, even
    when a custom separator joins the cells.
    """
    sep = options.resolved_separator
    lines = []
    if options.show_header:
        lines.append(sep.join(cell(table.header, i) for i in indices))
        if options.table_mode:
            lines.append(_rule_line(_column_widths(table.rows, indices)))
    for row in table.data_rows:
        lines.append(sep.join(cell(row, i) for i in indices))
    return "\n".join(lines)


def format_column_counts(table, quiet=False):
    """Count-mode report: header names, column total and per-row widths."""
    if table.is_empty():
        return ""
    lines = []
    if not quiet:
        lines.append(f"Headers: {', '.join(table.header)}")
    lines.append(f"Total columns: {len(table.header)}")
    if not quiet:
        for number, row in enumerate(table.data_rows, start=1):
            lines.append(f"Row {number}: {len(row)} columns")
    return "\n".join(lines)


def output(text):
    """Print rendered text, adding a final newline only when it is missing."""
    if not text:
        return
    print(text, end="" if text.endswith("\n") else "\n")
