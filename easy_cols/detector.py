"""Heuristic input format detection.

Cheap checks on the first line plus one scan of the whole text. False
positives are acceptable: callers can always pin the format with --in.
"""

import re

# A line made only of rule characters, e.g. "-----+----" or "|---|---|".
RULE_LINE_RE = re.compile(r"^[-_|+]+\r?$", re.MULTILINE)


def _first_line(text: str) -> str:
    lines = text.splitlines()
    return lines[0].strip() if lines else ""


def detect_format(text: str) -> str:
    """Return the most likely format name for *text*. Never fails."""
    if not text.strip():
        return "csv"

    first = _first_line(text)
    if "|" in first and RULE_LINE_RE.search(text):
        return "table"
    if "\t" in first:
        return "tsv"
    if "," in first:
        return "csv"
    return "plain"


def is_rule_line(line: str) -> bool:
    """True for a table rule line such as "----+-----" (surrounding blanks ignored)."""
    return bool(RULE_LINE_RE.fullmatch(line.strip()))
