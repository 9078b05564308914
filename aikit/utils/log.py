"""Console logging setup for applications embedding aikit."""

import logging
from typing import Optional

import colorlog

from aikit.config import load_settings


def setup_logging(verbose: bool = False, level: Optional[str] = None) -> None:
    """Set up logging with color formatting.

    ``verbose`` forces DEBUG, which includes per-stage extraction misses.
    Otherwise ``level`` or the AIKIT_LOG_LEVEL setting is used.
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName((level or load_settings().log_level).upper())
    formatter = colorlog.ColoredFormatter(
        "%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)
