"""Console logging for the command line tool."""

import logging

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "persian_gd"


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a rich handler to the package logger (once)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if any(isinstance(handler, RichHandler) for handler in logger.handlers):
        return logger
    
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
