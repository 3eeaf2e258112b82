"""
Custom exceptions for the spot instance watchdog.
"""


class WatchdogError(Exception):
    """Base exception for all watchdog errors."""

    pass


class ConfigurationError(WatchdogError):
    """Exception raised for configuration errors."""

    pass


class ProviderError(WatchdogError):
    """Exception raised when a compute provider call fails."""

    pass


class OperationError(ProviderError):
    """Exception raised when a provider operation fails or cannot be awaited."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class NotificationError(WatchdogError):
    """Exception raised when a notification cannot be delivered."""

    pass
