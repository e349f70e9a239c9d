"""Logging configuration for VocabPop"""

import logging
import sys

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    file_format: str = DETAILED_FORMAT,
) -> logging.Logger:
    """Setup logging configuration

    Console output goes to stderr; stdout is reserved for fallback
    notification lines.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to write logs to
        file_format: Record format used by the file handler

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("vocabpop")
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if level.upper() == "DEBUG":
        console_fmt = logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT)
    else:
        console_fmt = logging.Formatter(fmt="%(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_fmt)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(fmt=file_format, datefmt=DATE_FORMAT)
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "vocabpop") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
