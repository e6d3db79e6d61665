from pathlib import Path

import pytest
from PIL import Image, ImageFont

from backend.bots.excusebot.compositor.fonts import load_font
from backend.bots.excusebot.utils.config import load_settings

TEMPLATE_SIZE = (400, 300)


@pytest.fixture
def font_bytes():
    # Pillow >= 10.1 bundles a small TrueType face behind load_default(size=...)
    font = ImageFont.load_default(size=28)
    data = getattr(font, "font_bytes", None)
    if not data:
        pytest.skip("Pillow built without FreeType")
    return data


@pytest.fixture
def resources_dir(tmp_path, font_bytes) -> Path:
    """tmp_path/resources laid out like the real resources folder."""
    res = tmp_path / "resources"
    res.mkdir()
    Image.new("RGBA", TEMPLATE_SIZE, (255, 255, 255, 255)).save(res / "xkcd-excuse-template.png")
    (res / "xkcd.ttf").write_bytes(font_bytes)
    return res


@pytest.fixture
def settings(resources_dir):
    return load_settings(
        template_path=resources_dir / "xkcd-excuse-template.png",
        font_path=resources_dir / "xkcd.ttf",
    )


@pytest.fixture
def excuse_font(resources_dir):
    return load_font(resources_dir / "xkcd.ttf")
