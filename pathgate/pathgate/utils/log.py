"""Package logger and module-level logging helpers."""

import logging
from os import getenv

LOGGER_NAME = "pathgate"

logger = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
  logger.addHandler(logging.NullHandler())


def set_log_level_to_debug() -> None:
  logger.setLevel(logging.DEBUG)


def set_log_level_to_info() -> None:
  logger.setLevel(logging.INFO)


def log_debug(msg: str, *args, **kwargs) -> None:
  logger.debug(msg, *args, **kwargs)


def log_warning(msg: str, *args, **kwargs) -> None:
  logger.warning(msg, *args, **kwargs)


def log_error(msg: str, *args, **kwargs) -> None:
  logger.error(msg, *args, **kwargs)


if getenv("PATHGATE_DEBUG", "false").lower() == "true":
  set_log_level_to_debug()
