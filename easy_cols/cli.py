"""
easy-cols — extract, reorder and reformat columns of CSV/TSV/table/plain text
"""

import argparse
import sys

from easy_cols import config
from easy_cols.commands import cmd_count, cmd_select
from easy_cols.exceptions import CliError
from easy_cols.formats import FORMATS, input_format_choices, output_format_choices
from easy_cols.models import RunConfig

_HELP_TEMPLATE = """\
Usage: easy-cols [options] [FILE|-] [SELECTOR ...]

Extract and display specific columns from structured text data.
Reads FILE, or stdin when FILE is "-" or omitted.

Column selectors (0-based, output always follows header order):
  3                       Single column index
  0-5                     Inclusive range (out-of-range members are skipped)
  0,2,5                   Comma-separated indices
  Name                    Header name (exact, case-sensitive)
  (none)                  All columns

Formats:
{formats}

Input:
  --in FORMAT             auto (default), csv, tsv, table, tbl, plain
  -f, --format FORMAT     Same as --in (legacy)
  --csv | --tsv | --tbl | --plain
                          Shorthand for --in
  -d, --delimiter CHARS   Input field delimiter (csv/tsv: one character,
                          --plain: any string, e.g. "::")
  --keep-blank-lines      Do not skip blank input lines
  --keep-rule-lines       Keep ----+---- lines found inside table data

Output:
  --out FORMAT            same (default), csv, tsv, table, tbl, plain
  -D, --output-delimiter STR
                          Output separator (default: " , ")
  --pipe | --tab | --comma
                          Separator " | ", tab or ","
  --table                 Aligned table output with a rule line
  -H, --no-header         Do not output the header row
  -c, --count             Count columns instead of selecting

Global flags:
  --quiet, -q             Suppress warnings (and per-row detail in --count)
  --verbose, -v           Trace detection and selection on stderr
  --version               Show version number
  --help, -h              Show this help

Environment:
  EASYCOLS_INPUT_FORMAT, EASYCOLS_OUTPUT_FORMAT,
  EASYCOLS_OUTPUT_SEPARATOR, EASYCOLS_NO_HEADER

Examples:
  easy-cols data.csv 0 1 2
  easy-cols data.csv Name Email
  easy-cols --out=table data.tsv 0-3
  cat data.csv | easy-cols - Name
"""


def _format_help_lines():
    """One help line per registered format, built from the format registry."""
    lines = []
    for fmt in FORMATS:
        names = ", ".join((fmt.name, *fmt.aliases))
        lines.append(f"  {names:<24}{fmt.cli_help}")
    return "\n".join(lines)


HELP_TEXT = _HELP_TEMPLATE.format(formats=_format_help_lines())


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so -q/-v work anywhere)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (quiet, verbose, remaining_argv). Handles --version directly.
    """
    quiet = False
    verbose = False
    remaining = []
    for arg in argv:
        if arg == "--version":
            print(f"easy-cols {config.VERSION}")
            sys.exit(0)
        elif arg in ("--quiet", "-q"):
            quiet = True
        elif arg in ("--verbose", "-v"):
            verbose = True
        else:
            remaining.append(arg)
    if quiet and verbose:
        raise CliError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return quiet, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _ArgParser(argparse.ArgumentParser):
    """Parser that raises CliError instead of printing usage and exiting."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def build_parser():
    parser = _ArgParser(
        prog="easy-cols",
        description="Extract, reorder and reformat columns of structured text",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")

    # --- input ---
    in_choices = input_format_choices()
    parser.add_argument("--in", dest="input_format", choices=in_choices)
    parser.add_argument("--format", "-f", dest="input_format", choices=in_choices)
    shorthands = (("--csv", "csv"), ("--tsv", "tsv"), ("--tbl", "table"), ("--plain", "plain"))
    for flag, name in shorthands:
        parser.add_argument(flag, dest="input_format", action="store_const", const=name)
    parser.add_argument("--delimiter", "-d")
    parser.add_argument("--keep-blank-lines", action="store_true", dest="keep_blank_lines")
    parser.add_argument("--keep-rule-lines", action="store_true", dest="keep_rule_lines")

    # --- output ---
    parser.add_argument("--out", dest="output_format", choices=output_format_choices())
    parser.add_argument("--output-delimiter", "-D", dest="output_separator")
    parser.add_argument(
        "--pipe", dest="output_separator", action="store_const", const=config.TABLE_SEPARATOR
    )
    parser.add_argument("--tab", dest="output_separator", action="store_const", const="\t")
    parser.add_argument("--comma", dest="output_separator", action="store_const", const=",")
    parser.add_argument("--table", action="store_true")
    parser.add_argument("--no-header", "-H", action="store_true", dest="no_header")
    parser.add_argument("--count", "-c", action="store_true")

    # --- positionals ---
    parser.add_argument("file", nargs="?")
    parser.add_argument("selectors", nargs="*")
    return parser


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def _emit_cli_error(err):
    print(str(err), file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    if argv is None:
        argv = sys.argv[1:]

    try:
        quiet, verbose, remaining_argv = _extract_global_flags(argv)
        config.RUNTIME_QUIET = quiet
        config.RUNTIME_VERBOSE = verbose

        ns = build_parser().parse_intermixed_args(remaining_argv)
        if ns.show_help:
            print(HELP_TEXT)
            sys.exit(0)

        cfg = RunConfig.from_namespace(ns)
        handler = cmd_count if cfg.count_mode else cmd_select
        handler(cfg)

    except CliError as e:
        _emit_cli_error(e)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
