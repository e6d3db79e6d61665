# File: /excusebot/publisher/imgur.py
"""
Imgur uploader – pushes a rendered excuse and returns its public link.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

import requests

from backend.bots.excusebot.utils.errors import UploadError
from backend.bots.excusebot.utils.logger import get_logger

logger = get_logger("imgur")

IMGUR_ENDPOINT = "https://api.imgur.com/3/image"


class Uploader(Protocol):
    def upload(self, path: Union[str, Path]) -> str: ...


class ImgurUploader:
    """Anonymous Imgur upload authenticated by an application client id."""

    def __init__(self, client_id: Optional[str] = None, endpoint: str = IMGUR_ENDPOINT, timeout: float = 60.0):
        self.client_id = client_id if client_id is not None else os.getenv("IMGUR_CLIENT_ID", "")
        self.endpoint = endpoint
        self.timeout = timeout

    def upload(self, path: Union[str, Path]) -> str:
        if not self.client_id:
            raise UploadError("no imgur client id configured")

        headers = {"Authorization": f"Client-ID {self.client_id}"}
        try:
            with open(path, "rb") as fh:
                r = requests.post(
                    self.endpoint,
                    headers=headers,
                    files={"image": fh},
                    timeout=self.timeout,
                )
        except OSError as e:
            # requests.RequestException is an OSError too
            raise UploadError(f"upload of {path} failed: {e}") from e

        try:
            answer: Dict[str, Any] = r.json()
        except ValueError as e:
            raise UploadError(f"imgur answered {r.status_code} with a non-JSON body") from e

        if not isinstance(answer, dict):
            raise UploadError(f"imgur answered {r.status_code} with an unexpected body")
        if not answer.get("success"):
            raise UploadError(f"error when uploading image to imgur: {answer.get('status', r.status_code)}")

        data = answer.get("data")
        link = data.get("link") if isinstance(data, dict) else None
        if not isinstance(link, str) or not link:
            raise UploadError("imgur answer carries no link")
        logger.info(f"📤 Uploaded {Path(path).name} → {link}")
        return link
