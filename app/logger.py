"""
Logging for the product API.

Everything logs under the `productapi` logger. `configure_logging` attaches
one stdout handler to it and sets the level; `create_app` calls it with the
level from Settings.
"""
import logging
import sys

ROOT_LOGGER = "productapi"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(ROOT_LOGGER)
logger.propagate = False

_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))


def configure_logging(level: str = "INFO") -> logging.Logger:
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    resolved = logging.getLevelName(level.upper())
    # getLevelName returns a string for unknown names
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Child of the `productapi` logger, e.g. get_logger("http") -> productapi.http."""
    if name:
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
    return logger
