"""Logging setup for recwatch."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str = "INFO",
) -> logging.Logger:
    """Configure the ``recwatch`` logger.

    Args:
        verbose: Force DEBUG level
        log_file: Optional file receiving plain-text log lines
        level: Level name used when not verbose

    Returns:
        The package logger
    """
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("recwatch")
    logger.setLevel(log_level)
    logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(log_level)
        logger.addHandler(file_handler)

    # Request lines from the HTTP stack are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logger
