"""Small free helpers shared by the matrix, parser and formatting modules."""

from collections.abc import Iterable
from typing import Any

from tablegrid.patterns import PIPE_RE


def max_or(values: Iterable[Any], default: Any) -> Any:
    """Return the largest item of *values*, or *default* when there are none."""
    return max(values, default=default)


def is_array_like(obj: Any) -> bool:
    """Return True for lists and tuples (the accepted shapes of raw matrix data)."""
    return isinstance(obj, (list, tuple))


def is_index(obj: Any) -> bool:
    """Return True for plain integers (bools are rejected)."""
    return isinstance(obj, int) and not isinstance(obj, bool)


def pad_center(text: str, width: int) -> str:
    """Center *text* in *width* characters; an odd leftover space goes on the right.

    Text that is already at least *width* characters long is returned unchanged.
    """
    if not isinstance(text, str):
        raise TypeError(f"pad_center(): text must be a str, not {type(text).__name__}")
    to_pad = width - len(text)
    if to_pad <= 0:
        return text
    left = to_pad // 2
    return " " * left + text + " " * (to_pad - left)


def pipe_positions(line: str) -> list[int]:
    """Return the character offsets of every '|' in *line*."""
    return [match.start() for match in PIPE_RE.finditer(line)]


def align_columns(position_lists: list[list[int]]) -> list[list[int | None]]:
    """Expand every list of positions onto the shared, sorted set of all positions.

    A list that lacks a shared position gets ``None`` in that slot, so all
    returned lists have the same length:

        [[5, 7, 9], [2, 5, 7, 9]]  ->  [[None, 5, 7, 9], [2, 5, 7, 9]]
    """
    shared = sorted({position for positions in position_lists for position in positions})
    aligned = []
    for positions in position_lists:
        present = set(positions)
        aligned.append([position if position in present else None for position in shared])
    return aligned


def distinct_sorted_indexes(indexes: Iterable[int], name: str, operation: str) -> list[int]:
    """Deduplicate and sort a list of row/column indexes, checking their types."""
    try:
        items = list(indexes)
    except TypeError as exc:
        raise TypeError(f"{operation}(): {name} must be an iterable of ints, not {type(indexes).__name__}") from exc
    for item in items:
        if not is_index(item):
            raise TypeError(f"{operation}(): {name} must contain only ints, got {item!r} ({type(item).__name__})")
    return sorted(set(items))
