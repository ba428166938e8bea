"""Column-aligned rendering shared by the table, plain and default renderers."""

from easy_cols import config
from easy_cols._utils import cell, is_blank_row


def _column_widths(rows, indices):
    """Widest cell per selected column, measured over every row (header included).
    A missing cell counts as width 0."""
    return [max((len(cell(row, i)) for row in rows), default=0) for i in indices]


def _rule_line(widths):
    """Dashed line under the header: one dash run per column, joined by -+-."""
    return config.TABLE_RULE_JOINER.join("-" * w for w in widths)


def _align_row(row, indices, widths, joiner):
    return joiner.join(f"{cell(row, i):<{w}}" for i, w in zip(indices, widths, strict=True))


def _aligned(table, indices, joiner, show_header=True, rule=False):
    """Left-justify every selected cell to its column width.

    Data rows with no content at all are skipped (blank trailing records).
    """
    widths = _column_widths(table.rows, indices)
    lines = []
    if show_header:
        lines.append(_align_row(table.header, indices, widths, joiner))
        if rule:
            lines.append(_rule_line(widths))
    for row in table.data_rows:
        if is_blank_row(row):
            continue
        lines.append(_align_row(row, indices, widths, joiner))
    return "\n".join(lines)
