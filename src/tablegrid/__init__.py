"""Sparse 2-D tables with multi-row, span-annotated column headers.

Submodules:
  errors      -- exception taxonomy (shape, out-of-bounds)
  patterns    -- compiled regex patterns and string constants
  utils       -- small free helpers (padding, pipe alignment, index lists)
  entry       -- Entry, a value-or-empty box for one cell
  matrix      -- Matrix, the fixed-size grid of entries
  schema      -- HeaderCell, ParsedFormat and RenderOptions Pydantic models
  headers     -- despan / respan of column header rows
  parser      -- ASCII table-description parser
  config      -- environment-driven rendering defaults
  formatting  -- plain-text rendering of matrices and tables
  table       -- Table: matrix + row headers + column headers
"""
