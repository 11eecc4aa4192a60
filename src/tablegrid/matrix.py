"""Fixed-size 2-D grid of Entry cells.

Dimensions never change after construction.  Shape-changing operations
(transpose, slice, without_empty_rows_and_columns) build and return a new
Matrix, copying every entry, so a derived matrix never aliases its source.

A 0x0 matrix is a valid state, but every get/set on it fails with
OutOfBoundsError instead of silently doing nothing.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, NamedTuple

from tablegrid.entry import Entry
from tablegrid.errors import NotArrayLikeError, OutOfBoundsError, ShapeError
from tablegrid.formatting import render_matrix
from tablegrid.patterns import DEFAULT_EMPTY_INDICATOR
from tablegrid.utils import distinct_sorted_indexes, is_array_like, is_index

logger = logging.getLogger(__name__)

_NO_FILL = object()
_NO_EMPTY_VALUE = object()


class PrunedMatrix(NamedTuple):
    """Result of Matrix.without_empty_rows_and_columns().

    The index maps translate old row / column indexes to their position in
    ``matrix``; only surviving indexes appear, in ascending order.
    """

    matrix: "Matrix"
    row_index_map: dict[int, int]
    column_index_map: dict[int, int]


def _check_dimension(name: str, value: Any) -> None:
    """Reject non-integer and negative matrix dimensions."""
    if not is_index(value):
        raise TypeError(f"Matrix(): {name} must be an int, not {type(value).__name__}")
    if value < 0:
        raise ShapeError(f"Matrix(): {name} must be non-negative, got {value}")


class Matrix:
    """A 2-dimensional grid of ``height`` rows and ``width`` columns.

    ``fill`` may be a constant, or a callable taking ``(column, row)``; either
    way every cell is initialised through set().  Without ``fill`` every cell
    is empty.
    """

    def __init__(self, height: int = 0, width: int = 0, *, fill: Any = _NO_FILL) -> None:
        _check_dimension("height", height)
        _check_dimension("width", width)
        self._height = height
        self._width = width
        self._rows: list[list[Entry]] = [[Entry() for _ in range(width)] for _ in range(height)]

        if fill is not _NO_FILL:
            fill_fn: Callable[[int, int], Any] = fill if callable(fill) else (lambda _column, _row: fill)
            for row in range(height):
                for column in range(width):
                    self.set(row, column, fill_fn(column, row))

    @classmethod
    def from_data(cls, rows: list[list[Any]], *, empty_value: Any = _NO_EMPTY_VALUE) -> "Matrix":
        """Build a matrix from a rectangular list of rows of raw values.

        Every row must have the same length as the first one.  When
        *empty_value* is given, raw values equal to it (same type and ``==``)
        become empty cells instead of literal values.
        """
        if not is_array_like(rows):
            raise NotArrayLikeError(f"Matrix.from_data(): data must be a list or tuple, not {type(rows).__name__}")
        if not rows:
            return cls()

        first = rows[0]
        if not is_array_like(first):
            raise NotArrayLikeError(
                f"Matrix.from_data(): row 0 must be a list or tuple, not {type(first).__name__}", row=0
            )
        width = len(first)
        for y, row in enumerate(rows):
            if not is_array_like(row):
                raise NotArrayLikeError(
                    f"Matrix.from_data(): row {y} must be a list or tuple, not {type(row).__name__}", row=y
                )
            if len(row) != width:
                raise ShapeError(
                    f"Matrix.from_data(): row {y} has width {len(row)}, expected {width} "
                    "(the width of row 0); all rows of a Matrix must be the same length",
                    row=y,
                    expected=width,
                    actual=len(row),
                )

        def wrap(value: Any) -> Entry:
            if empty_value is not _NO_EMPTY_VALUE and type(value) is type(empty_value) and value == empty_value:
                return Entry()
            return Entry(value)

        matrix = cls(len(rows), width)
        matrix._rows = [[wrap(value) for value in row] for row in rows]
        return matrix

    # ─── Shape & Access ──────────────────────────────────────────────────────

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def shape(self) -> tuple[int, int]:
        return self._height, self._width

    def get(self, row: int, column: int) -> Entry:
        """Return the Entry stored at (*row*, *column*)."""
        self._check_bounds(row, column, "get")
        return self._rows[row][column]

    def set(self, row: int, column: int, value: Any) -> None:
        """Store *value* at (*row*, *column*) in a fresh, non-empty Entry."""
        self._check_bounds(row, column, "set")
        self._rows[row][column] = Entry(value)

    def clear(self, row: int, column: int) -> None:
        """Make the cell at (*row*, *column*) empty."""
        self._check_bounds(row, column, "clear")
        self._rows[row][column].clear()

    def is_empty(self) -> bool:
        """True when no cell holds a value (regardless of the dimensions)."""
        return not any(entry.is_not_empty() for row in self._rows for entry in row)

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def as_array(self, *, empty_treated_as: Any = None) -> list[list[Any]]:
        """Return the cell values as nested lists, with *empty_treated_as* for empty cells."""
        return [[entry.get(empty_treated_as) for entry in row] for row in self._rows]

    def entries(self) -> Iterator[tuple[int, int, Any]]:
        """Yield ``(row, column, value)`` for every non-empty cell, in row-major order.

        Values are snapshotted when iteration starts, so changes made to the
        matrix while iterating are not observed.
        """
        snapshot = [
            (y, x, entry.value)
            for y, row in enumerate(self._rows)
            for x, entry in enumerate(row)
            if entry.is_not_empty()
        ]
        yield from snapshot

    # ─── Structural Operations ───────────────────────────────────────────────

    def transpose(self) -> "Matrix":
        """Return a new ``width x height`` matrix with rows and columns swapped."""
        if self._height == 0 and self._width == 0:
            return self
        transposed = Matrix(self._width, self._height)
        for y, row in enumerate(self._rows):
            for x, entry in enumerate(row):
                transposed._rows[x][y] = entry.copy()
        return transposed

    def slice(self, rows: Iterable[int], columns: Iterable[int]) -> "Matrix":
        """Return a new matrix with only the given rows and columns.

        Both index lists are deduplicated and sorted ascending first, so
        ``slice([1, 0, 1], [0])`` is the same as ``slice([0, 1], [0])``.
        """
        rows = distinct_sorted_indexes(rows, "rows", "Matrix.slice")
        columns = distinct_sorted_indexes(columns, "columns", "Matrix.slice")
        for y in rows:
            if not 0 <= y < self._height:
                raise OutOfBoundsError(
                    f"Matrix.slice(): row {y} is out of bounds for a matrix of height {self._height}",
                    operation="slice",
                    row=y,
                    height=self._height,
                    width=self._width,
                    zero_dimensioned=self._height == 0,
                )
        for x in columns:
            if not 0 <= x < self._width:
                raise OutOfBoundsError(
                    f"Matrix.slice(): column {x} is out of bounds for a matrix of width {self._width}",
                    operation="slice",
                    column=x,
                    height=self._height,
                    width=self._width,
                    zero_dimensioned=self._width == 0,
                )

        sliced = Matrix(len(rows), len(columns))
        for new_y, y in enumerate(rows):
            for new_x, x in enumerate(columns):
                sliced._rows[new_y][new_x] = self._rows[y][x].copy()
        return sliced

    def without_empty_rows_and_columns(self) -> PrunedMatrix:
        """Drop every row and column that holds no value.

        Row and column order is kept; only the gaps disappear.  The returned
        index maps tell callers where each surviving old index went.
        """
        if self._height == 0 and self._width == 0:
            return PrunedMatrix(self, {}, {})

        occupied = [(y, x) for y, x, _value in self.entries()]
        rows = sorted({y for y, _x in occupied})
        columns = sorted({x for _y, x in occupied})

        pruned = self.slice(rows, columns)
        row_index_map = {old: new for new, old in enumerate(rows)}
        column_index_map = {old: new for new, old in enumerate(columns)}
        logger.debug(
            "Pruned %dx%d matrix to %dx%d (kept rows %s, columns %s)",
            self._height,
            self._width,
            pruned.height,
            pruned.width,
            rows,
            columns,
        )
        return PrunedMatrix(pruned, row_index_map, column_index_map)

    # ─── Rendering ───────────────────────────────────────────────────────────

    def as_console_str(self, *, empty_indicator: str | None = DEFAULT_EMPTY_INDICATOR) -> str:
        """Render the cells as a centered, fixed-width grid (see formatting.render_matrix)."""
        return render_matrix(self, empty_indicator=empty_indicator)

    def __str__(self) -> str:
        return f"Matrix<{self._height}, {self._width}>"

    __repr__ = __str__

    # ─── Bounds Checking ─────────────────────────────────────────────────────

    def _check_bounds(self, row: int, column: int, operation: str) -> None:
        """Raise unless (*row*, *column*) addresses an existing cell."""
        if not is_index(row) or not is_index(column):
            raise TypeError(
                f"Matrix.{operation}(): row and column must be ints, "
                f"got {type(row).__name__} and {type(column).__name__}"
            )

        if self._height == 0 or self._width == 0:
            raise OutOfBoundsError(
                f"Matrix.{operation}(row={row}, column={column}): can't access data, "
                f"matrix is 0-dimensioned ({self._height}x{self._width})",
                operation=operation,
                row=row,
                column=column,
                height=self._height,
                width=self._width,
                zero_dimensioned=True,
            )

        problems = []
        if row < 0:
            problems.append("row must be non-negative")
        if row >= self._height:
            problems.append(f"row must be < {self._height}")
        if column < 0:
            problems.append("column must be non-negative")
        if column >= self._width:
            problems.append(f"column must be < {self._width}")
        if problems:
            raise OutOfBoundsError(
                f"Matrix.{operation}(row={row}, column={column}): {', '.join(problems)}",
                operation=operation,
                row=row,
                column=column,
                height=self._height,
                width=self._width,
            )
