import logging
import os
import sys

LOG_LEVEL_ENV = "PASST_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def _level_from_env() -> int:
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """
    Return a configured logger.

    Records go to stderr only; stdout is reserved for generated passwords.
    """
    logger = logging.getLogger(name)

    # Don't stack handlers when called more than once for the same name
    if logger.handlers:
        return logger

    level = _level_from_env()
    logger.setLevel(level)

    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] [%(filename)s:%(lineno)d] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    logger.addHandler(console_handler)
    logger.propagate = False

    return logger
