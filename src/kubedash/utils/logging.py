"""Logging setup.

The TUI owns the terminal, so log records go to a file instead of stderr.
"""

import logging

from kubedash.utils.config import ConfigError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", log_file: str = "/tmp/kubedash.log") -> logging.Logger:
    """Attach a file handler to the ``kubedash`` logger.

    Calling it again replaces the previous handler rather than adding another one.
    Raises ConfigError when the log file cannot be opened.
    """
    global _handler

    try:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot open log file {log_file}: {e}") from e
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("kubedash")
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()

    _handler = handler
    logger.addHandler(_handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger
