"""csv/tsv writers built on the stdlib csv module."""

import csv
import io

from easy_cols._utils import cell


def _write_delimited(table, indices, delimiter, show_header=True):
    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=delimiter, lineterminator="\n")
    rows = table.rows if show_header else table.data_rows
    for row in rows:
        writer.writerow([cell(row, i) for i in indices])
    return buf.getvalue()


def format_csv(table, indices, show_header=True):
    """Selected columns as CSV, one newline-terminated record per row."""
    return _write_delimited(table, indices, ",", show_header)


def format_tsv(table, indices, show_header=True):
    """Selected columns as TSV; fields holding a tab, quote or newline are quoted."""
    return _write_delimited(table, indices, "\t", show_header)
