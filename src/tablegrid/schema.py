"""Pydantic models for column headers, parser output and rendering options.

HeaderCell is frozen so that header rows can be shared between a parse
result and the tables built from it without aliasing hazards.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from tablegrid.patterns import CAPTION_PLACEHOLDER, DEFAULT_EMPTY_INDICATOR


class HeaderCell(BaseModel):
    """One column header label and the number of leaf columns it covers."""

    model_config = ConfigDict(frozen=True)

    text: str
    span: int = Field(default=1, ge=1)


class ParsedFormat(BaseModel):
    """Row headers and span-annotated column header rows of an ASCII table description."""

    row_headers: list[str]
    column_headers: list[list[HeaderCell]]

    @property
    def width(self) -> int:
        """Number of data columns: the widest header row, or 1 without column headers."""
        return max((sum(cell.span for cell in row) for row in self.column_headers), default=1)

    @property
    def height(self) -> int:
        """Number of data rows: one per row header, and at least 1."""
        return len(self.row_headers) or 1


class RenderOptions(BaseModel):
    """Options for Table.as_console_str().

    ``empty_indicator`` replaces empty cells; ``None`` shows the Entry's own
    placeholder text instead.
    """

    model_config = ConfigDict(extra="forbid")

    show_caption: bool = True
    caption_format: str = CAPTION_PLACEHOLDER
    caption_placement: Literal["top", "bottom"] = "top"
    empty_indicator: str | None = DEFAULT_EMPTY_INDICATOR
