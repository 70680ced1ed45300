"""Logging utilities for decipin"""

__all__ = ['LOGGER', 'LoggingMixin', 'warn_once']

import logging
from typing import Optional

LOGGER = logging.getLogger('decipin')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

# Messages already emitted, shared by warn_once and every LoggingMixin
_WARNINGS: set = set()


def warn_once(warning: str, *args, logger: Optional[logging.Logger] = None) -> bool:
    """
    Log a warning the first time a given message is seen.

    Args:
        warning:
            The message (or %-style format string)

        *args:
            Arguments for the format string. Only the unformatted message
            is used to decide whether the warning has already fired.

        logger: (Default None)
            The logger to emit on; the package LOGGER if not specified

    Returns:
        True if the warning was emitted, False if it was suppressed
    """
    if warning in _WARNINGS:
        return False

    (logger or LOGGER).warning(warning, *args)
    _WARNINGS.add(warning)
    return True


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives instances a logger named after their class, nested under the
    'decipin' logger so records reach the package handler.
    """
    logger: logging.Logger

    def __init__(self, logstr: Optional[str] = None):
        _class = self.__class__
        name = f'{_class.__module__}.{_class.__name__}'
        if not name.startswith(f'{LOGGER.name}.'):
            name = f'{LOGGER.name}.{name}'
        if logstr:
            name += f'.{logstr}'

        self.logger = logging.getLogger(name)

    def warn_once(self, msg: str, *args) -> bool:
        """Logs a warning only once per message"""
        return warn_once(msg, *args, logger=self.logger)
