import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from payout.core.config import settings

def mkdir_safe(path: str):
    Path(path).mkdir(parents=True, exist_ok=True)

def setup_logging(name: str = "cli", *, log_level: str = None):
    logger_name = f"{settings.APP_NAME}.{name}"
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        return logger
    level = log_level or getattr(settings, "LOG_LEVEL", "INFO")
    level_no = logging.getLevelName(level.upper())
    logger.setLevel(level_no if isinstance(level_no, int) else logging.INFO)
    formatter = logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s')
    log_dir = getattr(settings, "LOG_PATH", "")
    if log_dir:
        mkdir_safe(log_dir)
        logfile = Path(log_dir) / f"{name}.log"
        handler = RotatingFileHandler(str(logfile), maxBytes=10_000_000, backupCount=5)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if os.getenv("DEV", "").lower() in ("1","true","yes"):
        ch = logging.StreamHandler()
        ch.setFormatter(formatter)
        logger.addHandler(ch)
    if not logger.handlers:
        # stdout carries the report, so stay silent unless asked
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger
