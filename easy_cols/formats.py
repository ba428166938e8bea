"""Format registry — single source of truth for structural text formats.

Standalone module (no project imports besides exceptions). Adding a format
means appending one FormatDefinition to FORMATS and teaching the parser and
formatters about it.
"""

from dataclasses import dataclass

from easy_cols.exceptions import FormatError

AUTO = "auto"
SAME = "same"
DEFAULT = "default"


@dataclass(frozen=True)
class FormatDefinition:
    """One concrete input/output format (e.g. csv, table)."""

    name: str
    aliases: tuple[str, ...]
    default_delimiter: str | None
    cli_help: str


FORMATS: tuple[FormatDefinition, ...] = (
    FormatDefinition(
        name="csv",
        aliases=(),
        default_delimiter=",",
        cli_help="Comma-separated values with standard quoting",
    ),
    FormatDefinition(
        name="tsv",
        aliases=(),
        default_delimiter="\t",
        cli_help="Tab-separated values",
    ),
    FormatDefinition(
        name="table",
        aliases=("tbl",),
        default_delimiter="|",
        cli_help="ASCII table with ' | ' cells and a dashed rule line",
    ),
    FormatDefinition(
        name="plain",
        aliases=(),
        default_delimiter=None,
        cli_help="Whitespace-separated columns",
    ),
)


def get_format(name: str) -> FormatDefinition:
    """Return a format by name or alias. Raises FormatError if not found."""
    for fmt in FORMATS:
        if name == fmt.name or name in fmt.aliases:
            return fmt
    raise FormatError(f"[ERROR] Unsupported format: {name}")


def _all_names() -> tuple[str, ...]:
    names: list[str] = []
    for fmt in FORMATS:
        names.append(fmt.name)
        names.extend(fmt.aliases)
    return tuple(names)


def input_format_choices() -> tuple[str, ...]:
    """Names accepted by --in: every name and alias plus 'auto'."""
    return (*_all_names(), AUTO)


def output_format_choices() -> tuple[str, ...]:
    """Names accepted by --out: every name and alias plus 'same'."""
    return (*_all_names(), SAME)


def is_table_kind(name: str | None) -> bool:
    table = get_format("table")
    return name is not None and (name == table.name or name in table.aliases)


def resolve_input_format(name: str | None) -> str | None:
    """Canonical name for a declared input format, or None for 'auto'."""
    if name is None or name == AUTO:
        return None
    return get_format(name).name


def resolve_output_format(name: str | None, input_kind: str, explicit_separator: bool) -> str:
    """Turn a requested output format into a concrete renderer name.

    'same' maps to the parsed input kind, except when the caller supplied
    its own separator: then the generic joiner ('default') is used so the
    separator is honored.
    """
    if name is None or name == SAME:
        return DEFAULT if explicit_separator else input_kind
    return get_format(name).name
