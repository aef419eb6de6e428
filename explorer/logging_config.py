import logging
import os
from logging.handlers import RotatingFileHandler

from explorer.config import LoggingSettings


def setup_logging(level: str | None = None, cfg: LoggingSettings | None = None) -> None:
    cfg = cfg or LoggingSettings()
    level = level or os.getenv("LOG_LEVEL") or cfg.level
    logger = logging.getLogger()
    logger.setLevel(level.upper())
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.handlers.clear()
    logger.addHandler(console)
    if cfg.file:
        file_handler = RotatingFileHandler(
            cfg.file, maxBytes=10_485_760, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
