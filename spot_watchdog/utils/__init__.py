"""
Utility modules for the spot instance watchdog.
"""

from .config import WatchdogConfig, load_config, validate_config
from .exceptions import (
    ConfigurationError,
    NotificationError,
    OperationError,
    ProviderError,
    WatchdogError,
)
from .logging import get_logger, log_execution_time, log_function_call, setup_logging

__all__ = [
    "WatchdogError",
    "ConfigurationError",
    "ProviderError",
    "OperationError",
    "NotificationError",
    "setup_logging",
    "get_logger",
    "log_function_call",
    "log_execution_time",
    "WatchdogConfig",
    "load_config",
    "validate_config",
]
