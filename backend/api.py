# backend/api.py
from __future__ import annotations
import re
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import RedirectResponse, Response

from backend.bots.excusebot.main import get_or_create_excuse
from backend.bots.excusebot.publisher.imgur import ImgurUploader, Uploader
from backend.bots.excusebot.utils.cache import Cacher, InMemoryCache
from backend.bots.excusebot.utils.config import ExcuseSettings, load_settings
from backend.bots.excusebot.utils.errors import ExcuseError
from backend.bots.excusebot.utils.logger import get_logger

logger = get_logger("api")

CAPTION_RE = re.compile(r"[a-zA-Z0-9 !]+")


def create_app(
    cache: Optional[Cacher] = None,
    uploader: Optional[Uploader] = None,
    settings: Optional[ExcuseSettings] = None,
) -> FastAPI:
    app = FastAPI(title="ExcuseBot API")

    settings = settings or load_settings()
    cache = cache if cache is not None else InMemoryCache()
    if uploader is None:
        uploader = ImgurUploader(endpoint=settings.imgur_endpoint, timeout=settings.upload_timeout_seconds)

    app.state.cache = cache
    app.state.uploader = uploader
    app.state.settings = settings

    # -------------------------------------------------
    # 🧠 Routes
    # -------------------------------------------------
    # sync on purpose: rendering and upload block, so each request gets a pool thread
    @app.get("/{short}/{long}")
    def excuse(short: str, long: str):
        if not (CAPTION_RE.fullmatch(short) and CAPTION_RE.fullmatch(long)):
            raise HTTPException(404, "Not Found")

        try:
            url = get_or_create_excuse(cache, uploader, short, long, settings)
        except ExcuseError as e:
            logger.error(f"error happened: {e}")
            return Response(status_code=500)
        except Exception:
            logger.exception("unexpected failure while creating excuse")
            return Response(status_code=500)
        return RedirectResponse(url, status_code=307)

    return app
