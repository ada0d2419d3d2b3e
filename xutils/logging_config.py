"""
Logging Configuration
Routes the xmath loggers' dimension diagnostics to a stream
"""

import logging
import sys
from typing import Optional, TextIO, Union

XMATH_LOGGER = "xmath"

_HANDLER_NAME = "xmath-console"


def setup_logging(level: Union[int, str] = logging.WARNING,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a console handler to the 'xmath' logger

    Calling this again replaces the handler installed by the previous call;
    handlers added by the application are left alone.

    Args:
        level: Level number or name as stored by SettingsManager ('DEBUG', ...)
        stream: Output stream (default: stderr)

    Returns:
        The 'xmath' logger
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(XMATH_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    logger.addHandler(handler)
    return logger
