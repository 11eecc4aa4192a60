"""Table: a Matrix of cell data plus row headers and spanned column headers.

Tables are normally built from an ASCII description (see parser.py):

    table = Table.from_format('''
                | A | B |     C
                | a | b | c1 | c2 | c3
        alpha   |
        bravo   |
    ''')
    table.data.set(0, 3, "x")

slice() and without_empty_rows_and_columns() return new tables.  Column
headers are carried across by despanning them to one label per data column,
keeping the surviving columns, and (for slice) merging equal neighbours back
into spans.  Pruning gives every surviving column a span of exactly 1.
"""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tablegrid.formatting import build_render_options, render_table
from tablegrid.headers import check_header_rows, despan, respan
from tablegrid.matrix import Matrix
from tablegrid.parser import parse_table_format
from tablegrid.schema import HeaderCell
from tablegrid.utils import distinct_sorted_indexes

logger = logging.getLogger(__name__)


class Table(BaseModel):
    """Cell data with an optional caption, row headers and column header rows.

    The model_validator guarantees that there is either no row header or one
    per data row, and that every column header row spans exactly
    ``data.width`` columns (when the data has any columns).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    caption: str | None = None
    data: Matrix = Field(default_factory=Matrix)
    row_headers: list[str] = Field(default_factory=list)
    column_headers: list[list[HeaderCell]] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_headers(self) -> "Table":
        """Ensure the headers agree with the shape of the data."""
        if self.row_headers and len(self.row_headers) != self.data.height:
            raise ValueError(
                f"Table has {len(self.row_headers)} row headers, expected 0 or {self.data.height} (the data height)"
            )
        check_header_rows(self.column_headers, self.data.width)
        return self

    @classmethod
    def from_format(cls, text: str, *, caption: str | None = None) -> "Table":
        """Build an empty table whose shape and headers come from an ASCII description."""
        parsed = parse_table_format(text)
        return cls(
            caption=caption,
            data=Matrix(parsed.height, parsed.width),
            row_headers=parsed.row_headers,
            column_headers=parsed.column_headers,
        )

    def is_empty(self) -> bool:
        return self.data.is_empty()

    def is_not_empty(self) -> bool:
        return self.data.is_not_empty()

    def slice(self, rows: Iterable[int], columns: Iterable[int]) -> "Table":
        """Return a new table with only the given rows and columns (deduplicated, ascending)."""
        rows = distinct_sorted_indexes(rows, "rows", "Table.slice")
        columns = distinct_sorted_indexes(columns, "columns", "Table.slice")
        data = self.data.slice(rows, columns)

        kept_rows = set(rows)
        kept_columns = set(columns)
        row_headers = [header for i, header in enumerate(self.row_headers) if i in kept_rows]
        labels = [[label for i, label in enumerate(row) if i in kept_columns] for row in despan(self.column_headers)]

        logger.debug("Sliced %s to rows %s, columns %s", self, rows, columns)
        return Table(caption=self.caption, data=data, row_headers=row_headers, column_headers=respan(labels))

    def without_empty_rows_and_columns(self) -> "Table":
        """Return a new table without the rows and columns that hold no value.

        Each surviving column keeps its despanned header labels with a span of
        1; neighbouring columns that shared a spanned label are not merged
        back together.
        """
        pruned = self.data.without_empty_rows_and_columns()
        surviving_rows = sorted(pruned.row_index_map)
        surviving_columns = sorted(pruned.column_index_map)

        row_headers = [self.row_headers[old] for old in surviving_rows] if self.row_headers else []
        column_headers = [
            [HeaderCell(text=labels[old], span=1) for old in surviving_columns]
            for labels in despan(self.column_headers)
        ]

        logger.debug(
            "Pruned %s: dropped %d rows, %d columns",
            self,
            self.data.height - len(surviving_rows),
            self.data.width - len(surviving_columns),
        )
        return Table(caption=self.caption, data=pruned.matrix, row_headers=row_headers, column_headers=column_headers)

    def as_console_str(self, **options) -> str:
        """Render the table as text; see RenderOptions for the accepted options."""
        return render_table(self, build_render_options(**options))

    def __str__(self) -> str:
        caption = f"({self.caption})" if self.caption else ""
        return f"Table<{self.data.height}, {self.data.width}>{caption}"
