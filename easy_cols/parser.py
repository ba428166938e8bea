"""Parse raw structured text into a Table.

csv/tsv go through the stdlib csv reader so quoted fields may hold the
delimiter or newlines. table and plain are line-oriented.
"""

import csv
import io
import re

from easy_cols.detector import is_rule_line
from easy_cols.exceptions import FormatError
from easy_cols.formats import get_format
from easy_cols.models import ParseOptions, Table

_TABLE_CELL_SPLIT_RE = re.compile(r"\s*\|\s*")


def parse_table(text: str, kind: str, options: ParseOptions | None = None) -> Table:
    """Parse *text* as *kind* (csv, tsv, table/tbl, plain).

    Raises FormatError for any other kind. Empty input gives an empty Table.
    """
    options = options or ParseOptions()
    fmt = get_format(kind)
    if fmt.name in ("csv", "tsv"):
        return _parse_delimited(text, fmt.name, options.delimiter or fmt.default_delimiter, options)
    if fmt.name == "table":
        return _parse_ascii_table(text, options)
    return _parse_plain(text, options)


def _parse_delimited(text, kind, delimiter, options):
    if len(delimiter) != 1:
        raise FormatError(
            f"[ERROR] Delimiter for {kind} input must be a single character, got {delimiter!r}. "
            "Use --plain to split on a multi-character delimiter."
        )
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    rows = []
    try:
        for record in reader:
            if not record and options.blanklines:
                continue
            rows.append(record)
    except csv.Error as e:
        raise FormatError(f"[ERROR] Cannot parse {kind} input: {e}") from e
    return Table.from_rows(rows)


def split_table_line(line: str) -> list[str]:
    """Split "a | b | c" into trimmed cells. Trailing empty cells are dropped."""
    cells = [c.strip() for c in _TABLE_CELL_SPLIT_RE.split(line)]
    while cells and not cells[-1]:
        cells.pop()
    return cells


def _parse_ascii_table(text, options):
    lines = text.splitlines()
    header_at = next((i for i, line in enumerate(lines) if line.strip()), None)
    if header_at is None:
        return Table()

    rows = [split_table_line(lines[header_at])]

    # The rule line is optional and must directly follow the header.
    body_start = header_at + 1
    for i in range(header_at + 1, len(lines)):
        if not lines[i].strip():
            continue
        if is_rule_line(lines[i]):
            body_start = i + 1
        break

    for line in lines[body_start:]:
        if not line.strip():
            if options.blanklines:
                continue
        elif options.lines and is_rule_line(line):
            continue
        rows.append(split_table_line(line))
    return Table.from_rows(rows)


def _parse_plain(text, options):
    rows = []
    for line in text.splitlines():
        if not line.strip() and options.blanklines:
            continue
        if options.delimiter:
            rows.append(line.split(options.delimiter))
        else:
            rows.append(line.split())
    return Table.from_rows(rows)
