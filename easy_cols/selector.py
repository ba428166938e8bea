"""Resolve column selector tokens against a header row."""

from easy_cols._utils import warn
from easy_cols.exceptions import SelectionError
from easy_cols.models import (
    IndexSelector,
    ListSelector,
    NameSelector,
    RangeSelector,
    SelectorToken,
)


def _range_label(header):
    return f"0-{len(header) - 1}"


def _dropped_tail(first, last, header):
    if first == last:
        return f"Column index {first} is out of range ({_range_label(header)})"
    return f"Column indices {first}-{last} are out of range ({_range_label(header)})"


def resolve_columns(header, tokens: list[SelectorToken], on_warning=None) -> list[int]:
    """Return the sorted, de-duplicated column indices selected by *tokens*.

    A single index out of range or an unknown name raises SelectionError.
    Members of a range or list that fall outside the header are dropped and
    reported through *on_warning* (default: [WARN] on stderr). A range is
    clipped to the header first, so its dropped tail is one warning.

    Token order does not matter: output columns always follow the header.
    """
    emit = on_warning or warn
    width = len(header)
    indices: list[int] = []

    def keep(index):
        if 0 <= index < width:
            return True
        emit(_dropped_tail(index, index, header))
        return False

    for token in tokens:
        match token:
            case IndexSelector(index=index):
                if not 0 <= index < width:
                    raise SelectionError(
                        f"[ERROR] Column index {index} is out of range ({_range_label(header)})"
                    )
                indices.append(index)
            case RangeSelector(start=start, end=end):
                indices.extend(range(start, min(end, width - 1) + 1))
                if end >= width:
                    emit(_dropped_tail(max(start, width), end, header))
            case ListSelector(indices=members):
                indices.extend(i for i in members if keep(i))
            case NameSelector(name=name):
                try:
                    indices.append(list(header).index(name))
                except ValueError as exc:
                    raise SelectionError(
                        f"[ERROR] Column '{name}' not found. Available: {', '.join(header)}"
                    ) from exc
            case _:
                raise SelectionError(f"[ERROR] Invalid selector type: {type(token).__name__}")

    return sorted(set(indices))


def all_columns(header) -> list[int]:
    """Selection used when the user gives no selectors."""
    return list(range(len(header)))
