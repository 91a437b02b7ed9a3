from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config import get_settings

_INITIALIZED = False


def configure_logging(*, level: Optional[str] = None, log_dir: Optional[Path] = None) -> None:
    """Configure application-wide logging with console and rotating file output."""

    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings().logging
    resolved_level = getattr(logging, (level or settings.level).upper(), logging.INFO)
    directory = log_dir or settings.directory
    directory.mkdir(parents=True, exist_ok=True)
    log_path = directory / "church_agenda.log"

    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(str(log_path), maxBytes=1_000_000, backupCount=5, encoding="utf-8"),
    ]

    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_path)
