"""Exception taxonomy for matrix construction, cell access and header shapes.

Every error carries enough detail (operation, coordinates, row index,
expected vs. actual size) to be diagnosed from the message alone.
"""


class TableGridError(Exception):
    """Base class for all tablegrid errors."""


class ShapeError(TableGridError, ValueError):
    """Raised when data or header rows are not rectangular / consistent.

    ``row`` is the index of the first offending row (when there is one),
    ``expected`` and ``actual`` the sizes that were compared.
    """

    def __init__(self, message: str, *, row: int | None = None, expected: int | None = None, actual: int | None = None):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class NotArrayLikeError(ShapeError, TypeError):
    """Raised when raw matrix data (or one of its rows) is not a list or tuple."""


class OutOfBoundsError(TableGridError, IndexError):
    """Raised when a cell coordinate falls outside the matrix.

    ``zero_dimensioned`` is True when the matrix has no cells at all, as
    opposed to an index lying outside positive dimensions.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        row: int | None = None,
        column: int | None = None,
        height: int = 0,
        width: int = 0,
        zero_dimensioned: bool = False,
    ):
        super().__init__(message)
        self.operation = operation
        self.row = row
        self.column = column
        self.height = height
        self.width = width
        self.zero_dimensioned = zero_dimensioned
