# File: /excusebot/utils/config.py
"""
Load system configuration for ExcuseBot.
Centralized entry point for reading /config/excuse.json
and turning it into typed settings.
"""

from __future__ import annotations
import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[1]
CONFIG_PATH = ROOT / "config" / "excuse.json"

_DEFAULTS: Dict[str, Any] = {
    "template_path": "resources/xkcd-excuse-template.png",
    "font_path": "resources/xkcd.ttf",
    "dpi": 72.0,
    "base_size": 28.0,
    "short_size_delta": 2.0,
    "min_font_size": 1.0,
    "expected_mode": "RGBA",
    "long_box": [60, 75, 350, 120],
    "short_box": [140, 215, 220, 250],
    "imgur_endpoint": "https://api.imgur.com/3/image",
    "upload_timeout_seconds": 60.0,
    "port": 18888,
    "log_level": "INFO",
    "log_json": True,
}


class ExcuseSettings(BaseModel):
    """Typed view over the merged config dict."""

    template_path: Path = Field(description="Template bitmap the captions are drawn onto.")
    font_path: Path = Field(description="TrueType font used for both captions.")
    dpi: float = Field(gt=0)
    base_size: float = Field(gt=0, description="Starting size of the long caption.")
    short_size_delta: float = Field(ge=0, description="How much smaller the short caption starts.")
    min_font_size: float = Field(gt=0, description="Smallest size the fitter may try.")
    expected_mode: str = "RGBA"
    long_box: Tuple[int, int, int, int]
    short_box: Tuple[int, int, int, int]
    imgur_endpoint: str
    upload_timeout_seconds: float = Field(gt=0)
    port: int = 18888
    log_level: str = "INFO"
    log_json: bool = True

    @property
    def short_size(self) -> float:
        return self.base_size - self.short_size_delta

    @model_validator(mode="after")
    def _check_sizes(self) -> "ExcuseSettings":
        if self.short_size <= 0:
            raise ValueError(
                f"base_size - short_size_delta must be positive, got {self.short_size:g}"
            )
        if self.min_font_size > self.short_size:
            raise ValueError(
                f"min_font_size {self.min_font_size:g} exceeds the short caption size {self.short_size:g}"
            )
        for name in ("long_box", "short_box"):
            min_x, min_y, max_x, max_y = getattr(self, name)
            if max_x <= min_x or max_y <= min_y:
                raise ValueError(f"{name} must have positive width and height")
        return self


def _config_path() -> Path:
    override = os.getenv("EXCUSEBOT_CONFIG")
    return Path(override) if override else CONFIG_PATH


@lru_cache(maxsize=1)
def load_config() -> Dict[str, Any]:
    """Return cached system config dict, falling back to defaults."""
    path = _config_path()
    try:
        with open(path, "r", encoding="utf-8") as fh:
            cfg = json.load(fh)
        return {**_DEFAULTS, **cfg}
    except (OSError, ValueError) as e:
        logger.warning("Failed to load config %s, using defaults: %s", path, e)
        return _DEFAULTS.copy()


def load_settings(**overrides: Any) -> ExcuseSettings:
    """Validate the config (plus any keyword overrides) into ExcuseSettings."""
    return ExcuseSettings(**{**load_config(), **overrides})
