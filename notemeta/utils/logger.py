"""
Logging configuration using Loguru.

Console output is human readable; the optional file sink writes one
(optionally JSON-serialized) log per day under the configured directory.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

from notemeta.config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{function}:{line} - {message}"

# HTTP clients used by the LLM SDKs log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "anthropic", "openai")


def setup_logging(config: LoggingConfig | None = None) -> None:
    """
    Configure Loguru sinks from logging settings.

    Args:
        config: Logging settings (defaults if not provided)
    """
    config = config or LoggingConfig()

    logger.remove()
    logger.configure(extra={"module": "notemeta"})

    logger.add(
        sys.stderr,
        level=config.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        serialize=False,
    )

    if config.log_to_file:
        log_path = Path(config.log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path / "notemeta_{time:YYYY-MM-DD}.log",
            level=config.level,
            format=FILE_FORMAT,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.compression,
            serialize=config.serialize,
            enqueue=True,
        )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str):
    """Get a logger bound to a module name."""
    return logger.bind(module=name)
