import logging
import sys
from functools import lru_cache

from pydantic import BaseModel

from dependent_filters.config import Environment, Settings

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
LOGGER_FORMAT = "%(name)s | %(levelname)s | %(asctime)s | %(filename)s | %(funcName)s:%(lineno)d | %(message)s"


class LoggerConfig(BaseModel):
    handlers: list
    format: str
    date_format: str | None = None
    level: str | int = logging.INFO


@lru_cache
def get_logger_config(env: Environment = Environment.dev, logging_level: str | int = logging.INFO) -> LoggerConfig:
    """Pick the handlers for the environment the filter service runs in."""

    if env != Environment.prod:
        from rich.logging import RichHandler

        return LoggerConfig(
            handlers=[RichHandler(rich_tracebacks=True, show_time=False)],
            format=LOGGER_FORMAT,
            date_format=DATE_FORMAT,
            level=logging_level,
        )

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(LOGGER_FORMAT, datefmt=DATE_FORMAT))

    return LoggerConfig(handlers=[stdout_handler], format=LOGGER_FORMAT, date_format=DATE_FORMAT, level=logging_level)


def setup_rich_logger(settings: Settings) -> None:
    """Send every logger through the root logger configured from the service settings."""
    for name in logging.root.manager.loggerDict.keys():
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True

    logger_config = get_logger_config(env=settings.ENV, logging_level=settings.LOGGING_LEVEL)

    logging.basicConfig(
        level=logger_config.level,
        format=logger_config.format,
        datefmt=logger_config.date_format,
        handlers=logger_config.handlers,
        force=True,
    )
