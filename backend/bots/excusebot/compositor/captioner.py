# File: /excusebot/compositor/captioner.py
"""
Caption renderer – draws the long and short excuse onto the template.
Box geometry and sizes come from utils.config.
"""

from __future__ import annotations
import io
from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageDraw, UnidentifiedImageError

from backend.bots.excusebot.compositor.fitter import BoundingBox, FitResult, fit_text, from_fixed
from backend.bots.excusebot.compositor.fonts import POINTS_PER_INCH, ExcuseFont, load_font
from backend.bots.excusebot.utils.config import ExcuseSettings, load_settings
from backend.bots.excusebot.utils.errors import DecodeError, DrawError, ResourceLoadError, TypeMismatchError
from backend.bots.excusebot.utils.logger import get_logger

logger = get_logger("captioner")

TEXT_COLOR = (0, 0, 0, 255)
CANVAS_COLOR = (255, 255, 255, 255)


def load_template(path: Union[str, Path], expected_mode: str = "RGBA") -> Image.Image:
    """Read and decode the template PNG, insisting on `expected_mode` pixels."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ResourceLoadError(f"cannot read template {path}: {e}") from e

    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise DecodeError(f"cannot decode template {path}: {e}") from e
    if img.format != "PNG":
        raise DecodeError(f"template {path} is {img.format}, expected PNG")

    if img.mode != expected_mode:
        raise TypeMismatchError(f"template {path} has mode {img.mode}, expected {expected_mode}")
    return img


def draw_caption(
    canvas: Image.Image,
    text: str,
    size: float,
    box: BoundingBox,
    font: ExcuseFont,
    dpi: float = POINTS_PER_INCH,
    min_size: float = 1.0,
) -> FitResult:
    """Fit `text` into `box` starting at `size` and draw it in black."""
    fit = fit_text(text, size, box, font, dpi=dpi, min_size=min_size)
    # baseline follows the starting size, not the fitted one
    baseline = box.min_y + int(size * dpi / POINTS_PER_INCH)
    try:
        draw = ImageDraw.Draw(canvas)
        draw.fontmode = "L"
        draw.text(
            (from_fixed(fit.start_x), baseline),
            text,
            font=font.face(fit.size, dpi),
            fill=TEXT_COLOR,
            anchor="ls",
        )
    except (OSError, ValueError) as e:
        raise DrawError(f"failed to draw {text!r}: {e}") from e
    logger.debug("Drew %r at size %s, x=%s", text, fit.size, from_fixed(fit.start_x))
    return fit


def compose(
    template: Image.Image,
    font: ExcuseFont,
    short: str,
    long: str,
    settings: ExcuseSettings,
) -> Image.Image:
    """Copy the template onto an opaque canvas and draw both captions."""
    canvas = Image.new("RGBA", template.size, CANVAS_COLOR)
    canvas.alpha_composite(template.convert("RGBA"))

    # the complete excuse
    draw_caption(
        canvas,
        f'"{long}"',
        settings.base_size,
        BoundingBox.from_seq(settings.long_box),
        font,
        settings.dpi,
        settings.min_font_size,
    )
    # the short excuse
    draw_caption(
        canvas,
        short,
        settings.short_size,
        BoundingBox.from_seq(settings.short_box),
        font,
        settings.dpi,
        settings.min_font_size,
    )
    return canvas


def render_excuse(
    short: str,
    long: str,
    *,
    template_path: Optional[Union[str, Path]] = None,
    font_path: Optional[Union[str, Path]] = None,
    settings: Optional[ExcuseSettings] = None,
) -> Image.Image:
    """Load template and font, then return the finished excuse image."""
    settings = settings or load_settings()
    template = load_template(template_path or settings.template_path, settings.expected_mode)
    font = load_font(font_path or settings.font_path)
    logger.info(f"🎨 Rendering excuse short='{short}' long='{long}'")
    return compose(template, font, short, long, settings)
