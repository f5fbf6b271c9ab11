from .logging_utils import LoggingConfiguration, LoggingContext, init_logging

__all__ = ["LoggingConfiguration", "LoggingContext", "init_logging"]
