# backend/cli.py
"""Write a single excuse to disk: python -m backend.cli --short ... --long ..."""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from backend.bots.excusebot.main import DEFAULT_LONG, DEFAULT_SHORT, save_excuse
from backend.bots.excusebot.utils.errors import ExcuseError
from backend.bots.excusebot.utils.logger import get_logger

logger = get_logger("cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render an xkcd-style excuse to a PNG file.")
    parser.add_argument("--long", default=DEFAULT_LONG, help="the complete excuse")
    parser.add_argument("--short", default=DEFAULT_SHORT, help="the short excuse")
    parser.add_argument("--out", default="out.png", help="where to write the image")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        save_excuse(args.short, args.long, args.out)
    except (ExcuseError, ValidationError) as e:
        logger.error(f"❌ Failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
