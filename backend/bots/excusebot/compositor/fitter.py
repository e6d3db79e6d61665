# File: /excusebot/compositor/fitter.py
"""
Text fitter – shrinks a caption until it fits its bounding box.

Widths are handled as 26.6 fixed-point integers (1/64 px) so the
acceptance test is an exact integer comparison.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from backend.bots.excusebot.compositor.fonts import POINTS_PER_INCH, ExcuseFont
from backend.bots.excusebot.utils.errors import TextTooLongError

FIXED_SHIFT = 6
FIXED_ONE = 1 << FIXED_SHIFT
SIZE_STEP = 1.0


def to_fixed(px: int) -> int:
    return px << FIXED_SHIFT


def from_fixed(value: int) -> float:
    return value / FIXED_ONE


@dataclass(frozen=True)
class BoundingBox:
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def from_seq(cls, values: Sequence[int]) -> "BoundingBox":
        min_x, min_y, max_x, max_y = (int(v) for v in values)
        return cls(min_x, min_y, max_x, max_y)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def mid_x(self) -> int:
        return self.min_x + self.width // 2


@dataclass(frozen=True)
class FitResult:
    size: float
    start_x: int  # fixed point
    advance: int  # fixed point


def measure_advance(font: ExcuseFont, text: str, size: float, dpi: float = POINTS_PER_INCH) -> int:
    """
    Advance width of `text` at `size` in 26.6 fixed point.

    FreeType rounds each glyph advance to a whole pixel, so the face is
    loaded 64x larger and its pixel width is read directly as 1/64 px
    units of the real size.
    """
    return round(font.face(size * FIXED_ONE, dpi).getlength(text))


def fit_text(
    text: str,
    start_size: float,
    box: BoundingBox,
    font: ExcuseFont,
    *,
    dpi: float = POINTS_PER_INCH,
    min_size: float = SIZE_STEP,
) -> FitResult:
    """
    Find the largest size, stepping down from `start_size` by whole points,
    at which `text` ends strictly before `box.max_x`, and the start x that
    centers it on the box midpoint.

    Raises TextTooLongError once the next size would drop below `min_size`.
    """
    if start_size <= 0:
        raise ValueError(f"start_size must be positive, got {start_size}")
    if box.width <= 0:
        raise ValueError(f"bounding box must have positive width, got {box}")

    size = float(start_size)
    min_x, max_x = to_fixed(box.min_x), to_fixed(box.max_x)
    while True:
        advance = measure_advance(font, text, size, dpi)
        if min_x + advance < max_x:
            break
        if size - SIZE_STEP < min_size:
            raise TextTooLongError(
                f"{text!r} does not fit {box.width}px even at size {size:g}"
            )
        size -= SIZE_STEP

    start_x = to_fixed(box.mid_x) - advance // 2
    return FitResult(size=size, start_x=start_x, advance=advance)
