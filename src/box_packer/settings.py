"""Runtime settings; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Does not override variables already set in the environment
load_dotenv()


def log_level() -> int:
    """BOX_PACKER_DEBUG=1 forces DEBUG, otherwise BOX_PACKER_LOG_LEVEL (default INFO)."""
    if os.getenv("BOX_PACKER_DEBUG", "0") == "1":
        return logging.DEBUG
    name = os.getenv("BOX_PACKER_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
