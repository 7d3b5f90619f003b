from .logging_config import LoggerManager, log_manager
from .error_handler import convert_exceptions, log_exceptions

__all__ = [
    "LoggerManager",
    "log_manager",
    "convert_exceptions",
    "log_exceptions",
]
