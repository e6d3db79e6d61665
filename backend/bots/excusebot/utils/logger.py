"""
Logging for ExcuseBot: one stdout handler per named logger, JSON lines by default.

Level and format come from config (`log_level`, `log_json`); the level can be
overridden per process with EXCUSEBOT_LOG_LEVEL.
"""

from __future__ import annotations
import json
import logging
import os
import sys

from backend.bots.excusebot.utils.config import load_config

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JsonFormatter(logging.Formatter):
    def format(self, record):
        data = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
        }
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def _resolve_level(cfg) -> int:
    name = os.getenv("EXCUSEBOT_LOG_LEVEL") or str(cfg.get("log_level", "INFO"))
    return getattr(logging, name.upper(), logging.INFO)


def get_logger(name: str = "excusebot") -> logging.Logger:
    logger = logging.getLogger(f"excusebot.{name}" if name != "excusebot" else name)
    if logger.handlers:
        return logger

    cfg = load_config()
    level = _resolve_level(cfg)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter() if cfg.get("log_json", True) else logging.Formatter(PLAIN_FORMAT))
    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
