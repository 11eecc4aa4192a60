"""Compiled regex patterns and string constants for table parsing and rendering.

Used by parser.py to find column delimiters in ASCII table descriptions, and
by entry.py / formatting.py for placeholder tokens and separators.
"""

import re

# ─── Format Parsing ───────────────────────────────────────────────────────────

# Column / field delimiter in an ASCII table description
PIPE = "|"
PIPE_RE = re.compile(re.escape(PIPE))

# A header field with this text continues the span of the cell before it
CONTINUATION_MARKER = "-"

# Characters stripped from the end of a row-header line ("alpha   |" -> "alpha")
ROW_HEADER_TRAILING_CHARS = " " + PIPE


# ─── Rendering ────────────────────────────────────────────────────────────────

# Debug text of an Entry that holds no value
EMPTY_ENTRY_TOKEN = "Entry<(empty)>"

# JSON text of an Entry that holds no value
EMPTY_ENTRY_JSON = "null"

# Shown in place of empty cells in console output
DEFAULT_EMPTY_INDICATOR = "-"

# Cell separators: the bare matrix grid vs. the full table layout
MATRIX_COLUMN_SEPARATOR = " | "
TABLE_COLUMN_SEPARATOR = PIPE

# Rule drawn between the column header rows and the data rows
HEADER_RULE_CHAR = "-"

# Caption template placeholder and allowed placements
CAPTION_PLACEHOLDER = "{caption}"
CAPTION_PLACEMENTS = ("top", "bottom")
