import logging
import sys

from .constants import LOGGER_NAME

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the ``netlinker`` logger.

    Attaches a single stream handler to the package logger. Calling it again
    only adjusts the level, so it is safe to call once per manager.

    Args:
        debug: Log at DEBUG when True, otherwise only warnings and errors.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)

    if not any(getattr(h, "_netlinker", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._netlinker = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
