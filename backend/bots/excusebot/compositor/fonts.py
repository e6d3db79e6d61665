# File: /excusebot/compositor/fonts.py
"""
Font handle passed explicitly into fitting and drawing.
"""

from __future__ import annotations
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from PIL import ImageFont

from backend.bots.excusebot.utils.errors import FontParseError, ResourceLoadError

POINTS_PER_INCH = 72.0


@dataclass(frozen=True)
class ExcuseFont:
    """Parsed font bytes; immutable, safe to share between requests."""

    data: bytes
    name: str = "font"

    def face(self, size: float, dpi: float = POINTS_PER_INCH) -> ImageFont.FreeTypeFont:
        """Return a Pillow face for `size` points rendered at `dpi`."""
        pixels = size * dpi / POINTS_PER_INCH
        return ImageFont.truetype(io.BytesIO(self.data), pixels, layout_engine=ImageFont.Layout.BASIC)


def load_font(path: Union[str, Path]) -> ExcuseFont:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ResourceLoadError(f"cannot read font {path}: {e}") from e

    font = ExcuseFont(data=data, name=path.name)
    try:
        font.face(POINTS_PER_INCH)
    except (OSError, ValueError) as e:
        raise FontParseError(f"cannot parse font {path}: {e}") from e
    return font
