"""
Logging setup shared by the terminal and web front ends.

setup_logger() configures the root logger once. Output goes to stderr so that
stdout stays free for the final table printed after the terminal UI closes.
"""

import logging
import sys
from logging import Logger, StreamHandler
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(name: str = "budget", level: str = "WARNING") -> Logger:
    """
    Configure logging and return a named logger.

    Parameters
    ----------
    name : str, optional
        Logger name, usually the package or module name.
    level : str, optional
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL", in any case.
        Unknown values fall back to "WARNING".

    Returns
    -------
    Logger
        The configured logger.
    """
    log_levels: dict[str, int] = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    log_level = log_levels.get(level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stderr)],
        force=True,
    )

    return logging.getLogger(name)
