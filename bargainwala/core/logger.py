"""Logging setup shared by the CLI and the core modules."""

import logging
import os
from logging.handlers import RotatingFileHandler

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

load_dotenv()

_configured = False


def setup_logging() -> None:
    global _configured
    if _configured:
        return

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_to_file = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    log_file = os.getenv("LOG_FILE", "data/bargainwala.log")
    log_max_bytes = int(os.getenv("LOG_MAX_BYTES", str(2 * 1024 * 1024)))
    log_backups = int(os.getenv("LOG_BACKUPS", "3"))
    level = getattr(logging, log_level, logging.INFO)

    root = logging.getLogger("bargainwala")
    root.setLevel(level)

    if not root.handlers:
        # stderr keeps log lines out of the CLI's own output
        ch = RichHandler(console=Console(stderr=True), show_path=False)
        ch.setLevel(level)
        root.addHandler(ch)

        if log_to_file:
            try:
                os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
                fh = RotatingFileHandler(
                    log_file,
                    maxBytes=log_max_bytes,
                    backupCount=log_backups,
                )
                fh.setLevel(level)
                fh.setFormatter(
                    logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
                )
                root.addHandler(fh)
            except OSError as e:
                root.warning("Failed to initialize file logging: %s", e)

    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
