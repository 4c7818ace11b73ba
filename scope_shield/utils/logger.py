"""
Logging utility with loguru.
Provides console logging and optional file rotation.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "INFO", log_dir: Optional[Union[str, Path]] = None):
    """
    Configure loguru logger with console and (optionally) file outputs.

    Args:
        level: Minimum level for the console sink
        log_dir: Directory for the rotating log file; console only when None

    Returns:
        The configured loguru logger
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stdout,
        colorize=True,
        format=CONSOLE_FORMAT,
        level=level.upper(),
    )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "app.log",
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            format=FILE_FORMAT,
            level="DEBUG",
        )

    logger.info("Logger initialized")
    return logger
