################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Column-aligned text rendering of row-major matrices

Each column is padded to the width of its longest entry and entries are
centered within their column. Rows are framed with bracket glyphs:

    ┌ 1 2 ┐
    └ 3 4 ┘
"""

from __future__ import annotations

from oasis_matrix.config.format_params import BracketGlyphs
from oasis_matrix.config.format_params import FormatParams
from oasis_matrix.dense.row_major import Buffer
from oasis_matrix.dense.row_major import validate_buffer


def format_value(value: float, params: FormatParams) -> str:
    """Return the text for a single entry."""
    if params.precision is not None:
        return f"{value:.{params.precision}f}"
    text: str = repr(value)
    if params.trim_integral and text.endswith(".0"):
        text = text[:-2]
    return text


def format_matrix(
    values: Buffer,
    rows: int,
    cols: int,
    params: FormatParams | None = None,
) -> str:
    """Render a row-major matrix as multi-line text.

    Args:
        values: Matrix in row-major form
        rows: Number of rows in the matrix
        cols: Number of columns in the matrix
        params: Formatting parameters, defaults when omitted

    Returns:
        Rendered matrix without a trailing newline, ``[]`` for empty matrices

    Raises:
        FormatParamsError: If ``params`` is invalid
    """
    validate_buffer(values, rows, cols, "values")
    if params is None:
        params = FormatParams.defaults()
    else:
        params.validate()

    if rows == 0 or cols == 0:
        return "[]"

    cells: list[str] = [format_value(value, params) for value in values]
    widths: list[int] = [
        max(len(cells[r * cols + c]) for r in range(rows)) for c in range(cols)
    ]

    glyphs: BracketGlyphs = params.glyphs()
    lines: list[str] = []
    for r in range(rows):
        row_text: str = params.column_separator.join(
            f"{cells[r * cols + c]:^{widths[c]}}" for c in range(cols)
        )
        if rows == 1:
            start, end = glyphs.single
        elif r == 0:
            start, end = glyphs.top
        elif r == rows - 1:
            start, end = glyphs.bottom
        else:
            start, end = glyphs.middle
        lines.append(f"{start} {row_text} {end}")

    return "\n".join(lines)
