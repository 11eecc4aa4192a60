"""Parse a human-drawn ASCII table description into row and column headers.

Format (common indentation and blank lines are ignored):

            | A | B |     C
            | a | b | c1 | c2 | c3
    alpha   |
    bravo   |

  - A line with exactly one '|' is a row-header line; the label is the text
    before the pipe.
  - Every other line (no pipe, or several) is one level of column headers,
    split on '|'.
  - Pipe positions of all column-header lines are pooled.  Where a coarser
    line has no pipe at a position some finer line uses, its field spans the
    extra leaf columns (above, "C" spans c1, c2 and c3).
  - An empty field between two pipes, or a "-" field, continues the span of
    the labelled field before it.  The empty corner before a leading pipe and
    anything empty after a trailing pipe are ignored.

No further validation is done here: header rows that do not line up are
reported when a Table is built from them.
"""

import logging
import textwrap

from tablegrid.patterns import CONTINUATION_MARKER, PIPE, ROW_HEADER_TRAILING_CHARS
from tablegrid.schema import HeaderCell, ParsedFormat
from tablegrid.utils import align_columns, pipe_positions

logger = logging.getLogger(__name__)


def _content_lines(text: str) -> list[str]:
    """Dedent *text* and return its non-blank lines."""
    return [line for line in textwrap.dedent(text).split("\n") if line.strip()]


def _is_row_header_line(positions: list[int]) -> bool:
    """Row-header lines carry a label followed by a single trailing pipe."""
    return len(positions) == 1


def _row_header(line: str) -> str:
    """'alpha   |' -> 'alpha'"""
    return line.rstrip(ROW_HEADER_TRAILING_CHARS).strip()


def _header_row(line: str, aligned: list[int | None]) -> list[HeaderCell]:
    """Build one column-header row from a line and its aligned pipe positions.

    Leaf segment j lies between aligned positions j-1 and j (segment 0 is
    before the first position, the last one after the final position).  A
    field of this line covers every leaf segment between its own two pipes.
    """
    n_positions = len(aligned)
    own_slots = [slot for slot, position in enumerate(aligned) if position is not None]
    fields = [field.strip() for field in line.split(PIPE)]

    cells: list[list] = []  # [text, span] pairs; spans grow while scanning
    for k, text in enumerate(fields):
        first = own_slots[k - 1] + 1 if k > 0 else 0
        last = own_slots[k] if k < len(own_slots) else n_positions
        leaf_count = last - first + 1

        if not text or text == CONTINUATION_MARKER:
            # the corner before a leading pipe and the tail after a trailing one are not continuations
            between_own_pipes = 0 < k < len(own_slots)
            if cells and (text or between_own_pipes):
                cells[-1][1] += leaf_count
            continue
        cells.append([text, leaf_count])

    return [HeaderCell(text=text, span=span) for text, span in cells]


def parse_table_format(text: str) -> ParsedFormat:
    """Parse an ASCII table description into row headers and column header rows."""
    if not isinstance(text, str):
        raise TypeError(f"parse_table_format(): format must be a str, not {type(text).__name__}")

    lines = _content_lines(text)
    positions = [pipe_positions(line) for line in lines]

    row_header_lines = [line for line, pos in zip(lines, positions) if _is_row_header_line(pos)]
    column_lines = [(line, pos) for line, pos in zip(lines, positions) if not _is_row_header_line(pos)]

    aligned = align_columns([pos for _line, pos in column_lines])
    column_headers = [_header_row(line, slots) for (line, _pos), slots in zip(column_lines, aligned)]
    row_headers = [_row_header(line) for line in row_header_lines]

    parsed = ParsedFormat(row_headers=row_headers, column_headers=column_headers)
    logger.debug(
        "Parsed table format: %d row headers, %d column header rows (%dx%d data)",
        len(row_headers),
        len(column_headers),
        parsed.height,
        parsed.width,
    )
    return parsed
