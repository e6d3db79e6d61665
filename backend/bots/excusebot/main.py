"""
ExcuseBot core – render, persist, upload, memoize.
---------------------------------------------------
Shared by the CLI (writes a file) and the HTTP server (uploads and
redirects). Each call is one unit of work: the first error aborts it.
"""

from __future__ import annotations
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from backend.bots.excusebot.compositor.captioner import render_excuse
from backend.bots.excusebot.publisher.imgur import Uploader
from backend.bots.excusebot.utils.cache import CacheKey, Cacher
from backend.bots.excusebot.utils.config import ExcuseSettings, load_settings
from backend.bots.excusebot.utils.errors import EncodeError
from backend.bots.excusebot.utils.logger import get_logger

logger = get_logger("excusebot")

DEFAULT_SHORT = "compiling"
DEFAULT_LONG = "compiling my code"


def encode_png(image: Image.Image, out_path: Union[str, Path]) -> Path:
    out = Path(out_path)
    try:
        image.save(out, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(f"cannot write {out}: {e}") from e
    return out


def save_excuse(
    short: str,
    long: str,
    out_path: Union[str, Path] = "out.png",
    settings: Optional[ExcuseSettings] = None,
) -> Path:
    """Render the excuse and write it as PNG to `out_path`."""
    image = render_excuse(short, long, settings=settings or load_settings())
    out = encode_png(image, out_path)
    logger.info(f"✅ Excuse written to {out}")
    return out


def create_excuse(
    short: str,
    long: str,
    uploader: Uploader,
    settings: Optional[ExcuseSettings] = None,
) -> str:
    """Render, stash in a temp file, upload, and return the hosted URL."""
    image = render_excuse(short, long, settings=settings or load_settings())

    tmp = tempfile.NamedTemporaryFile(prefix="excuse", suffix=".png", delete=False)
    tmp.close()
    try:
        encode_png(image, tmp.name)
        return uploader.upload(tmp.name)
    finally:
        os.remove(tmp.name)


def get_or_create_excuse(
    cache: Cacher,
    uploader: Uploader,
    short: str,
    long: str,
    settings: Optional[ExcuseSettings] = None,
) -> str:
    """Return the cached URL for (short, long), creating it on a miss."""
    key = CacheKey(short=short, long=long)
    url = cache.get(key)
    if url is not None:
        logger.info(f"♻️ Cache hit for short='{short}' long='{long}'")
        return url

    url = create_excuse(short, long, uploader, settings)
    cache.set(key, url)
    return url
