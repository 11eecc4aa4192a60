"""Unit tests for Table: construction, validation, slicing and pruning."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from tablegrid.matrix import Matrix
from tablegrid.schema import HeaderCell
from tablegrid.table import Table

SPAN_FORMAT = """
            | A | B |     C
            | a | b | c1 | c2 | c3
    alpha   |
    bravo   |
    charlie |
"""


def ones(*labels: str) -> list[HeaderCell]:
    """Build a header row where every label spans one column."""
    return [HeaderCell(text=label, span=1) for label in labels]


# ===========================================================================
# Construction & validation
# ===========================================================================


class TestFromFormat:

    def test_shape_and_headers(self):
        table = Table.from_format(SPAN_FORMAT, caption="Spans")
        assert table.caption == "Spans"
        assert table.data.shape == (3, 5)
        assert table.data.is_empty() is True
        assert table.row_headers == ["alpha", "bravo", "charlie"]
        assert table.column_headers[0] == [
            HeaderCell(text="A", span=1),
            HeaderCell(text="B", span=1),
            HeaderCell(text="C", span=3),
        ]

    def test_no_row_headers(self):
        table = Table.from_format("a | b | c")
        assert table.row_headers == []
        assert table.data.shape == (1, 3)

    def test_str(self):
        assert str(Table.from_format("a | b | c")) == "Table<1, 3>"
        assert str(Table.from_format(SPAN_FORMAT, caption="Spans")) == "Table<3, 5>(Spans)"

    def test_non_string_format(self):
        with pytest.raises(TypeError):
            Table.from_format(42)

    def test_blank_header_field_continues_span(self):
        table = Table.from_format("| A |   | B\n| a | b | c")
        assert table.column_headers == [
            [HeaderCell(text="A", span=2), HeaderCell(text="B", span=1)],
            ones("a", "b", "c"),
        ]
        assert table.data.shape == (1, 3)

    def test_inconsistent_header_rows_rejected(self):
        with pytest.raises(ValidationError):
            Table.from_format("| A | B |\n| a | b | c")


class TestValidation:

    def test_defaults(self):
        table = Table()
        assert table.data.shape == (0, 0)
        assert table.row_headers == []
        assert table.column_headers == []

    def test_row_header_count_must_match_height(self):
        with pytest.raises(ValidationError):
            Table(data=Matrix(2, 3), row_headers=["only one"])

    def test_header_span_must_match_width(self):
        with pytest.raises(ValidationError):
            Table(data=Matrix(1, 3), column_headers=[[HeaderCell(text="A", span=2)]])

    def test_header_dicts_are_coerced(self):
        table = Table(data=Matrix(1, 2), column_headers=[[{"text": "A", "span": 2}]])
        assert table.column_headers == [[HeaderCell(text="A", span=2)]]

    def test_data_must_be_matrix(self):
        with pytest.raises(ValidationError):
            Table(data=[[1, 2]])

    def test_is_empty(self):
        table = Table.from_format("a | b")
        assert table.is_empty() is True
        table.data.set(0, 1, 0)
        assert table.is_not_empty() is True


# ===========================================================================
# slice
# ===========================================================================


class TestSlice:

    def test_basic(self):
        table = Table.from_format(SPAN_FORMAT)
        table.data.set(0, 0, "alpha-A-a")
        table.data.set(0, 1, "alpha-B-b")
        table.data.set(0, 3, "alpha-C-c2")

        sliced = table.slice([0], [0, 1, 3])
        assert sliced.row_headers == ["alpha"]
        assert sliced.column_headers == [ones("A", "B", "C"), ones("a", "b", "c2")]
        assert sliced.data.as_array() == [["alpha-A-a", "alpha-B-b", "alpha-C-c2"]]

    def test_span_is_recomputed(self):
        table = Table.from_format(SPAN_FORMAT)
        sliced = table.slice([0, 1, 2], [2, 3])
        assert sliced.column_headers == [[HeaderCell(text="C", span=2)], ones("c1", "c2")]
        assert sliced.data.shape == (3, 2)

    def test_unordered_duplicate_indexes(self):
        table = Table.from_format(SPAN_FORMAT)
        table.data.set(2, 4, "z")
        sliced = table.slice([2, 0, 2], [4, 0])
        assert sliced.row_headers == ["alpha", "charlie"]
        assert sliced.column_headers == [ones("A", "C"), ones("a", "c3")]
        assert sliced.data.as_array() == [[None, None], [None, "z"]]

    def test_without_row_headers(self):
        table = Table.from_format("a | b | c")
        sliced = table.slice([0], [1])
        assert sliced.row_headers == []
        assert sliced.column_headers == [ones("b")]

    def test_everything_sliced_away(self):
        sliced = Table.from_format(SPAN_FORMAT).slice([], [])
        assert sliced.data.shape == (0, 0)
        assert sliced.row_headers == []
        assert sliced.column_headers == [[], []]

    def test_source_unchanged(self):
        table = Table.from_format(SPAN_FORMAT, caption="Spans")
        sliced = table.slice([0], [0])
        sliced.data.set(0, 0, "x")
        assert table.data.is_empty() is True
        assert len(table.column_headers[1]) == 5
        assert sliced.caption == "Spans"

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            Table.from_format("a | b").slice([0], [2])


# ===========================================================================
# without_empty_rows_and_columns
# ===========================================================================


class TestWithoutEmptyRowsAndColumns:

    def test_basic(self):
        table = Table.from_format(SPAN_FORMAT)
        table.data.set(0, 0, "x")
        table.data.set(1, 1, "y")
        table.data.set(2, 3, "z")

        without = table.without_empty_rows_and_columns()
        assert without.row_headers == ["alpha", "bravo", "charlie"]
        assert without.column_headers == [ones("A", "B", "C"), ones("a", "b", "c2")]
        assert without.data.shape == (3, 3)
        assert table.data.shape == (3, 5)

    def test_surviving_span_members_get_span_one(self):
        table = Table.from_format(SPAN_FORMAT)
        table.data.set(0, 2, "c1")
        table.data.set(1, 3, "c2")
        table.data.set(1, 4, "c3")

        without = table.without_empty_rows_and_columns()
        assert without.row_headers == ["alpha", "bravo"]
        assert without.column_headers == [ones("C", "C", "C"), ones("c1", "c2", "c3")]

    def test_first_column_empty(self):
        table = Table.from_format(
            """
                | A | B | C
              1 |
            """
        )
        table.data.set(0, 1, "y")
        table.data.set(0, 2, "z")
        without = table.without_empty_rows_and_columns()
        assert without.column_headers == [ones("B", "C")]
        assert without.data.shape == (1, 2)

    def test_second_column_empty(self):
        table = Table.from_format("A | B | C")
        table.data.set(0, 0, "x")
        table.data.set(0, 2, "z")
        without = table.without_empty_rows_and_columns()
        assert without.column_headers == [ones("A", "C")]
        assert without.data.shape == (1, 2)

    def test_third_column_empty(self):
        table = Table.from_format("A | B | C")
        table.data.set(0, 0, "x")
        table.data.set(0, 1, "y")
        without = table.without_empty_rows_and_columns()
        assert without.column_headers == [ones("A", "B")]
        assert without.data.shape == (1, 2)

    def test_no_columns_empty(self):
        table = Table.from_format("A | B | C")
        for column, value in enumerate("xyz"):
            table.data.set(0, column, value)
        without = table.without_empty_rows_and_columns()
        assert without.column_headers == [ones("A", "B", "C")]
        assert without.data.shape == (1, 3)

    def test_row_headers_follow_numeric_order(self):
        rows = "\n".join(f"r{i} |" for i in range(12))
        table = Table.from_format("| h |\n" + rows)
        for i in (11, 2, 10):
            table.data.set(i, 0, i)
        without = table.without_empty_rows_and_columns()
        assert without.row_headers == ["r2", "r10", "r11"]
        assert without.data.as_array() == [[2], [10], [11]]

    def test_idempotent(self):
        table = Table.from_format(SPAN_FORMAT)
        table.data.set(1, 4, False)
        once = table.without_empty_rows_and_columns()
        twice = once.without_empty_rows_and_columns()
        assert twice.row_headers == once.row_headers == ["bravo"]
        assert twice.column_headers == once.column_headers == [ones("C"), ones("c3")]
        assert twice.data.as_array() == once.data.as_array() == [[False]]

    def test_all_empty(self):
        without = Table.from_format(SPAN_FORMAT).without_empty_rows_and_columns()
        assert without.data.shape == (0, 0)
        assert without.row_headers == []
        assert without.column_headers == [[], []]
