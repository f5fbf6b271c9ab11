import logging
from dataclasses import dataclass
from typing import Optional


def init_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S')


@dataclass
class LoggingConfiguration:
    """Configuration for LoggingContext."""
    entry_msg: Optional[str] = None
    success_msg: Optional[str] = None
    failure_msg: Optional[str] = None
    logger: Optional[logging.Logger] = None
    entry_level: int = logging.DEBUG
    success_level: int = logging.INFO
    failure_level: int = logging.WARNING


class LoggingContext:
    """Logs entry, success and failure around a block without handling errors."""

    def __init__(self, config: Optional[LoggingConfiguration] = None):
        config = config or LoggingConfiguration()
        self.entry_msg = config.entry_msg
        self.success_msg = config.success_msg
        self.failure_msg = config.failure_msg
        self.logger = config.logger or logging.getLogger(__name__)
        self.entry_level = config.entry_level
        self.success_level = config.success_level
        self.failure_level = config.failure_level

    def __enter__(self):
        self.log(self.entry_msg, level=self.entry_level)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.log(self.success_msg, level=self.success_level)
        else:
            self.log(f"{self.failure_msg}: {exc_value}" if self.failure_msg else None,
                     level=self.failure_level)
        return False

    def log(self, message, level=logging.INFO):
        if message:
            self.logger.log(level, message)
