"""Logger configuration."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the loguru logger for command-line use.

    Removes the default handler and installs a stderr sink whose level
    follows the flags: DEBUG with --debug, INFO with --verbose, otherwise
    WARNING.

    Args:
        verbose: Show informational progress messages
        debug: Show debug messages (classification, fallbacks, rule hits)
    """
    logger.remove()

    if debug:
        level = "DEBUG"
        fmt = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
    elif verbose:
        level = "INFO"
        fmt = "{message}"
    else:
        level = "WARNING"
        fmt = "<level>{level}</level>: {message}"

    logger.add(sys.stderr, level=level, format=fmt, colorize=None)
