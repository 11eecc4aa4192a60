"""Plain-text rendering of matrices and tables.

render_matrix() produces a bare centered grid:

    a | - | c
    - | e | -

render_table() adds row headers, multi-row spanned column headers, a rule
between headers and data, and an optional caption:

          |       A       |   B
          |  a1   |  a2   |   b
    ------------------------------
    alpha |   1   |   -   |   3
    bravo |   -   |   5   |   -

Every data column shares one cell width; a header cell spanning n columns is
``width * n + (n - 1)`` characters wide so it stays aligned with the separators
below it.

Usage (logs a demo rendering):
    python -m tablegrid.formatting
"""

import logging
from typing import TYPE_CHECKING, Any

from tablegrid.config import default_render_options
from tablegrid.patterns import (
    CAPTION_PLACEHOLDER,
    DEFAULT_EMPTY_INDICATOR,
    HEADER_RULE_CHAR,
    MATRIX_COLUMN_SEPARATOR,
    TABLE_COLUMN_SEPARATOR,
)
from tablegrid.schema import RenderOptions
from tablegrid.utils import max_or, pad_center

if TYPE_CHECKING:
    from tablegrid.matrix import Matrix
    from tablegrid.table import Table

logger = logging.getLogger(__name__)


# ─── Options ──────────────────────────────────────────────────────────────────


def build_render_options(**overrides: Any) -> RenderOptions:
    """Environment defaults with *overrides* applied on top (unknown names are rejected)."""
    base = default_render_options()
    return RenderOptions(**{**base.model_dump(), **overrides})


# ─── Matrix ──────────────────────────────────────────────────────────────────


def _cell_texts(matrix: "Matrix", empty_indicator: str | None) -> list[list[str]]:
    """Stringify every cell, substituting *empty_indicator* for empty ones."""
    texts = []
    for y in range(matrix.height):
        row = []
        for x in range(matrix.width):
            entry = matrix.get(y, x)
            row.append(empty_indicator if entry.is_empty() and empty_indicator is not None else str(entry))
        texts.append(row)
    return texts


def render_matrix(matrix: "Matrix", empty_indicator: str | None = DEFAULT_EMPTY_INDICATOR) -> str:
    """Render *matrix* as rows of centered, equally wide cells joined by ' | '."""
    texts = _cell_texts(matrix, empty_indicator)
    widest = max_or((len(text) for row in texts for text in row), 0)
    return "\n".join(MATRIX_COLUMN_SEPARATOR.join(pad_center(text, widest) for text in row) for row in texts)


# ─── Table ───────────────────────────────────────────────────────────────────


def _add_caption(lines: list[str], caption: str, options: RenderOptions) -> list[str]:
    """Center the formatted caption over *lines*, above or below them."""
    text = options.caption_format.replace(CAPTION_PLACEHOLDER, caption)
    text = pad_center(text, max_or((len(line) for line in lines), 0))
    if options.caption_placement == "top":
        return [text, ""] + lines
    return lines + ["", text]


def render_table(table: "Table", options: RenderOptions | None = None) -> str:
    """Render *table* with its row headers, column header rows and caption."""
    if options is None:
        options = default_render_options()

    texts = _cell_texts(table.data, options.empty_indicator)
    widest_data = max_or((len(text) for row in texts for text in row), 0)
    widest_row_header = max_or((len(header) for header in table.row_headers), 0)
    widest_label = max_or((len(cell.text) for row in table.column_headers for cell in row), 0)
    cell_width = 2 + max(widest_data, widest_row_header, widest_label)

    data_lines = [TABLE_COLUMN_SEPARATOR.join(pad_center(text, cell_width) for text in row) for row in texts]

    prefix = ""
    if table.row_headers:
        data_lines = [
            f"{header.ljust(widest_row_header)} {TABLE_COLUMN_SEPARATOR}{line}"
            for header, line in zip(table.row_headers, data_lines)
        ]
        prefix = " " * widest_row_header + f" {TABLE_COLUMN_SEPARATOR}"

    header_lines = [
        prefix
        + TABLE_COLUMN_SEPARATOR.join(
            pad_center(cell.text, cell_width * cell.span + cell.span - 1) for cell in header_row
        )
        for header_row in table.column_headers
    ]

    lines = data_lines
    if header_lines:
        rule = HEADER_RULE_CHAR * max_or((len(line) for line in header_lines + data_lines), 0)
        lines = header_lines + [rule] + data_lines

    if options.show_caption and table.caption is not None:
        lines = _add_caption(lines, table.caption, options)

    logger.debug("Rendered %s as %d lines (cell width %d)", table, len(lines), cell_width)
    return "\n".join(lines)


if __name__ == "__main__":
    from tablegrid.config import load_env_file  # pylint: disable=import-outside-toplevel
    from tablegrid.table import Table  # pylint: disable=import-outside-toplevel

    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")
    load_env_file()

    demo = Table.from_format(
        """
                | A | B |     C
                | a | b | c1 | c2 | c3
        alpha   |
        bravo   |
        charlie |
        """,
        caption="Demo table",
    )
    demo.data.set(0, 0, 1)
    demo.data.set(1, 2, 0)
    demo.data.set(2, 4, None)

    logger.info("Full table:\n%s", demo.as_console_str())
    logger.info("Without empty rows and columns:\n%s", demo.without_empty_rows_and_columns().as_console_str())
