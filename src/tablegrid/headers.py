"""Header span model: expand spanned header rows to one label per column and back.

    despan([[HeaderCell(text="C", span=3)]])  ->  [["C", "C", "C"]]
    respan([["C", "C", "C"]])                 ->  [[HeaderCell(text="C", span=3)]]

respan is a plain run-length encoding on label equality.  It knows nothing
about where the original groups started, so two adjacent groups that happen
to share a label are merged into one.
"""

from collections.abc import Sequence
from itertools import groupby

from tablegrid.errors import ShapeError
from tablegrid.schema import HeaderCell


def span_total(header_row: Sequence[HeaderCell]) -> int:
    """Number of leaf columns covered by one header row."""
    return sum(cell.span for cell in header_row)


def despan(column_headers: Sequence[Sequence[HeaderCell]]) -> list[list[str]]:
    """Expand every header row so that each leaf column gets its own label."""
    if isinstance(column_headers, (str, bytes)):
        raise TypeError("despan(): column_headers must be a sequence of header rows, not a string")
    out = []
    for header_row in column_headers:
        labels = []
        for cell in header_row:
            if not isinstance(cell, HeaderCell):
                raise TypeError(f"despan(): expected HeaderCell, got {type(cell).__name__}")
            labels.extend([cell.text] * cell.span)
        out.append(labels)
    return out


def respan(label_rows: Sequence[Sequence[str]]) -> list[list[HeaderCell]]:
    """Merge runs of equal adjacent labels into spanned header cells.

    An empty label row gives an empty header row, so the number of header
    rows never changes.
    """
    if isinstance(label_rows, (str, bytes)):
        raise TypeError("respan(): label_rows must be a sequence of label rows, not a string")
    return [
        [HeaderCell(text=label, span=sum(1 for _ in run)) for label, run in groupby(labels)]
        for labels in label_rows
    ]


def check_header_rows(column_headers: Sequence[Sequence[HeaderCell]], width: int) -> None:
    """Raise ShapeError unless every header row spans exactly *width* columns.

    A matrix without columns accepts any header rows.
    """
    if width == 0:
        return
    for i, header_row in enumerate(column_headers):
        total = span_total(header_row)
        if total != width:
            raise ShapeError(
                f"column header row {i} spans {total} columns, expected {width} (the data width)",
                row=i,
                expected=width,
                actual=total,
            )
