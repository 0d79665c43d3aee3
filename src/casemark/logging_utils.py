"""Logging setup for the casemark command-line entry point."""

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(log_level: Union[int, str], verbose: bool = False) -> logging.Logger:
    """Configure the root logger with a rich handler on stderr.

    Args:
        log_level: Numeric logging level or level name (e.g. "INFO")
        verbose: Force DEBUG level and show logger names in records

    Returns:
        The configured root logger
    """
    if verbose:
        resolved_level = logging.DEBUG
    elif isinstance(log_level, int):
        resolved_level = log_level
    else:
        resolved_level = getattr(logging, str(log_level).upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        show_time=verbose,
    )
    handler.setLevel(resolved_level)
    handler.setFormatter(
        logging.Formatter("[%(name)s] %(message)s" if verbose else "%(message)s")
    )
    root_logger.addHandler(handler)

    return root_logger
