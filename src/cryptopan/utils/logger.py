"""Logging utilities."""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: Union[int, str, None] = None,
) -> logging.Logger:
    """
    Get a logger with a stream handler and an optional file handler.

    Handlers are attached once per logger, so repeated calls with the same
    name do not duplicate output.

    Args:
        name: Logger name (usually ``__name__``)
        log_file: Optional path; when given, records are also written there
        level: Optional level (``logging.DEBUG`` or ``"DEBUG"``). When None
            the logger level is left untouched.

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    formatter = logging.Formatter(fmt=LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if log_file is not None:
        log_path = Path(log_file).resolve()
        known = {
            Path(h.baseFilename)
            for h in logger.handlers
            if isinstance(h, logging.FileHandler)
        }
        if log_path not in known:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)

    return logger
