from __future__ import annotations
from typing import TYPE_CHECKING
from loguru import logger

from roles_app.settings import settings

if TYPE_CHECKING:
    import loguru


class Logger:
    def __init__(self, level: str = "INFO"):
        self.level = level.upper()

    def error_level(self) -> int:
        """Level of the warning/error sink: never below WARNING, raised along with LOG_LEVEL."""
        return max(logger.level(self.level).no, logger.level("WARNING").no)

    def log(self) -> loguru.Logger:
        logger.remove()
        logger.add(
            lambda msg: print(msg, end=""),
            level=self.level,
            filter=lambda record: record['level'].no < 30,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            backtrace=False,
            diagnose=False,
        )

        logger.add(
            lambda msg: print(msg, end=""),
            level=self.error_level(),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            backtrace=True,
            diagnose=False,
        )

        return logger


log = Logger(settings.LOG_LEVEL).log()
