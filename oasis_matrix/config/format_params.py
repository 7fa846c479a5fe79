################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration schema for human-readable matrix formatting."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Bracket glyph style, "box" or "ascii"
FORMAT_STYLE: str = "box"
# Separator placed between columns
FORMAT_COLUMN_SEPARATOR: str = " "
# Fixed number of decimals, or None for the shortest round-trip repr
FORMAT_PRECISION: int | None = None
# Drop the trailing ".0" of integral values in shortest repr
FORMAT_TRIM_INTEGRAL: bool = True

# Maximum supported fixed precision
MAX_PRECISION: int = 17


class FormatParamsError(Exception):
    """Raised when formatting parameter validation fails."""


@dataclass(frozen=True)
class BracketGlyphs:
    """Left and right bracket pieces for each row position.

    Attributes:
        single: Brackets for a matrix with exactly one row
        top: Brackets for the first row
        middle: Brackets for rows between the first and last
        bottom: Brackets for the last row
    """

    single: tuple[str, str]
    top: tuple[str, str]
    middle: tuple[str, str]
    bottom: tuple[str, str]


BOX_GLYPHS: BracketGlyphs = BracketGlyphs(
    single=("[", "]"),
    top=("┌", "┐"),
    middle=("│", "│"),
    bottom=("└", "┘"),
)

ASCII_GLYPHS: BracketGlyphs = BracketGlyphs(
    single=("[", "]"),
    top=("/", "\\"),
    middle=("|", "|"),
    bottom=("\\", "/"),
)

_GLYPHS_BY_STYLE: dict[str, BracketGlyphs] = {
    "box": BOX_GLYPHS,
    "ascii": ASCII_GLYPHS,
}


@dataclass(frozen=True)
class FormatParams:
    """Parameters controlling ``str()`` output of matrices."""

    # Bracket glyph style, "box" or "ascii"
    style: str = FORMAT_STYLE
    # Separator placed between columns
    column_separator: str = FORMAT_COLUMN_SEPARATOR
    # Fixed number of decimals, or None for the shortest round-trip repr
    precision: int | None = FORMAT_PRECISION
    # Drop the trailing ".0" of integral values in shortest repr
    trim_integral: bool = FORMAT_TRIM_INTEGRAL

    @classmethod
    def defaults(cls) -> FormatParams:
        """Return the default formatting parameters."""
        return cls()

    def validate(self) -> None:
        """Validate parameter invariants."""
        if self.style not in _GLYPHS_BY_STYLE:
            raise FormatParamsError(
                f"style must be one of {', '.join(sorted(_GLYPHS_BY_STYLE))}"
            )
        if not isinstance(self.column_separator, str):
            raise FormatParamsError("column_separator must be a string")
        if "\n" in self.column_separator:
            raise FormatParamsError("column_separator must not contain newlines")
        if self.precision is not None:
            if isinstance(self.precision, bool) or not isinstance(self.precision, int):
                raise FormatParamsError("precision must be an int or None")
            if self.precision < 0 or self.precision > MAX_PRECISION:
                raise FormatParamsError(
                    f"precision must be between 0 and {MAX_PRECISION}"
                )
        if not isinstance(self.trim_integral, bool):
            raise FormatParamsError("trim_integral must be a boolean")

    def glyphs(self) -> BracketGlyphs:
        """Return the bracket glyphs for the configured style."""
        return _GLYPHS_BY_STYLE[self.style]

    def replace(self, **overrides: Any) -> FormatParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_dict(self) -> dict[str, Any]:
        """Return a flat dict representation for debugging."""
        return {field.name: getattr(self, field.name) for field in fields(self)}
