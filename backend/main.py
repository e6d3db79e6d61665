# backend/main.py
from __future__ import annotations
import argparse
import os
from typing import List, Optional

import uvicorn
from dotenv import load_dotenv

from backend.api import create_app
from backend.bots.excusebot.publisher.imgur import ImgurUploader
from backend.bots.excusebot.utils.config import load_settings
from backend.bots.excusebot.utils.logger import get_logger

logger = get_logger("server")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Serve xkcd excuses uploaded to Imgur.")
    parser.add_argument("--clientID", dest="client_id", default=os.getenv("IMGUR_CLIENT_ID", ""),
                        help="id for imgur client")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", settings.port)),
                        help="port for server")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    settings = load_settings()
    uploader = ImgurUploader(
        client_id=args.client_id,
        endpoint=settings.imgur_endpoint,
        timeout=settings.upload_timeout_seconds,
    )
    app = create_app(uploader=uploader, settings=settings)
    logger.info(f"running on port: {args.port}")
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
