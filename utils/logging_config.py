# utils/logging_config.py
import logging
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers created by setup_logging(), owned by this module
_installed: List[logging.Handler] = []


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown logging level: {level!r}")
        return value
    return level


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Set up root logging with a console handler and optionally a file handler.

    Args:
        level: Logging level, numeric or by name ("DEBUG", "INFO", ...).
        log_file: Optional path to a file for logging output.
    """
    logger = logging.getLogger()
    logger.setLevel(_coerce_level(level))

    # Re-running setup replaces handlers rather than stacking them;
    # only handlers installed here are closed
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler in _installed:
            _installed.remove(handler)
            handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    logger.addHandler(ch)
    _installed.append(ch)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
        _installed.append(fh)


def get_logger(name: str) -> logging.Logger:
    """
    Retrieve a module logger. Levels are inherited from the root logger
    configured by setup_logging().
    """
    return logging.getLogger(name)
