"""
Typed models for tables, column selectors, and per-component options.
"""

import re
from dataclasses import dataclass

from easy_cols import config
from easy_cols.exceptions import CliError, SelectionError
from easy_cols.formats import DEFAULT, get_format, is_table_kind, resolve_input_format

_INDEX_RE = re.compile(r"\d+")
_RANGE_RE = re.compile(r"(\d+)-(\d+)")

# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Table:
    """Parsed rows of text cells. Row 0 is the header.

    Rows may be ragged; read cells through _utils.cell() to get "" for gaps.
    """

    rows: tuple[tuple[str, ...], ...] = ()

    @classmethod
    def from_rows(cls, rows):
        return cls(rows=tuple(tuple("" if c is None else c for c in row) for row in rows))

    @property
    def header(self) -> tuple[str, ...]:
        return self.rows[0] if self.rows else ()

    @property
    def data_rows(self) -> tuple[tuple[str, ...], ...]:
        return self.rows[1:]

    def is_empty(self) -> bool:
        return not self.rows

    def __len__(self) -> int:
        return len(self.rows)


# ---------------------------------------------------------------------------
# Column selector tokens
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IndexSelector:
    """A single 0-based column index. Out of range is fatal."""

    index: int

    def __post_init__(self):
        if self.index < 0:
            raise SelectionError(f"[ERROR] Column index must be non-negative, got {self.index}.")


@dataclass(frozen=True)
class RangeSelector:
    """Inclusive start-end range. Out-of-range members are dropped with a warning."""

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.start > self.end:
            raise SelectionError(
                f"[ERROR] Invalid column range {self.start}-{self.end}: start must not exceed end."
            )


@dataclass(frozen=True)
class ListSelector:
    """Explicit index list. Out-of-range members are dropped with a warning."""

    indices: tuple[int, ...]


@dataclass(frozen=True)
class NameSelector:
    """Exact, case-sensitive header name."""

    name: str


SelectorToken = IndexSelector | RangeSelector | ListSelector | NameSelector


def parse_selector(raw: str) -> SelectorToken:
    """Convert one command-line selector string into a typed token.

    "3" -> index, "0-5" -> range, "0,2,5" -> list, anything else -> name.
    """
    if _INDEX_RE.fullmatch(raw):
        return IndexSelector(int(raw))
    match = _RANGE_RE.fullmatch(raw)
    if match:
        return RangeSelector(int(match.group(1)), int(match.group(2)))
    if "," in raw:
        indices = []
        for member in raw.split(","):
            member = member.strip()
            if not member:
                continue
            try:
                indices.append(int(member))
            except ValueError as exc:
                raise SelectionError(
                    f"[ERROR] Invalid column list '{raw}': '{member}' is not an integer."
                ) from exc
        return ListSelector(tuple(indices))
    return NameSelector(raw)


def parse_selectors(raw_selectors) -> list[SelectorToken]:
    return [parse_selector(raw) for raw in raw_selectors]


# ---------------------------------------------------------------------------
# Component options
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParseOptions:
    """Input parsing options for parse_table()."""

    delimiter: str | None = None
    blanklines: bool = True
    lines: bool = True


@dataclass(frozen=True)
class FormatOptions:
    """Output options for format_table().

    separator=None means "not given": the generic renderer then joins with
    " | " in table mode and " , " otherwise.
    """

    kind: str = DEFAULT
    separator: str | None = None
    show_header: bool = True
    table_mode: bool = False

    @property
    def resolved_separator(self) -> str:
        if self.separator is not None:
            return self.separator
        if self.table_mode or is_table_kind(self.kind):
            return config.TABLE_SEPARATOR
        return config.DEFAULT_SEPARATOR


@dataclass(frozen=True)
class RunConfig:
    """Validated command-line configuration for one invocation."""

    file_path: str | None
    input_format: str
    delimiter: str | None
    output_format: str
    output_separator: str | None
    show_header: bool
    table_mode: bool
    selectors: tuple[str, ...]
    count_mode: bool
    blanklines: bool
    lines: bool

    @property
    def parse_options(self) -> ParseOptions:
        return ParseOptions(delimiter=self.delimiter, blanklines=self.blanklines, lines=self.lines)

    @classmethod
    def from_namespace(cls, ns):
        input_format = ns.input_format or config.DEFAULT_INPUT_FORMAT
        output_format = ns.output_format or config.DEFAULT_OUTPUT_FORMAT
        output_separator = ns.output_separator
        if output_separator is None:
            output_separator = config.DEFAULT_OUTPUT_SEPARATOR
        table_mode = bool(getattr(ns, "table", False))
        if table_mode:
            output_format = "table"
            if output_separator is None:
                output_separator = config.TABLE_SEPARATOR

        # Validate names up front so bad env defaults fail before reading input.
        resolve_input_format(input_format)
        if output_format != "same":
            get_format(output_format)

        if ns.delimiter == "":
            raise CliError("[ERROR] --delimiter cannot be empty.")

        return cls(
            file_path=ns.file,
            input_format=input_format,
            delimiter=ns.delimiter,
            output_format=output_format,
            output_separator=output_separator,
            show_header=not (ns.no_header or config.DEFAULT_NO_HEADER),
            table_mode=table_mode,
            selectors=tuple(ns.selectors or ()),
            count_mode=bool(ns.count),
            blanklines=not ns.keep_blank_lines,
            lines=not ns.keep_rule_lines,
        )
