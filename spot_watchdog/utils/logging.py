"""
Logging utilities for the spot instance watchdog.
"""

import functools
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

F = TypeVar("F", bound=Callable[..., Any])


def setup_logging(log_level: str = "INFO", log_file: Path | None = None) -> None:
    """Set up logging configuration.

    Logs go to stderr, and also to ``log_file`` when one is given.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Clients and providers have noisy reprs; only plain values are shown.
    shown = [repr(arg) for arg in args if isinstance(arg, (str, int, float))]
    shown += [
        f"{key}={value!r}"
        for key, value in kwargs.items()
        if isinstance(value, (str, int, float))
    ]
    return ", ".join(shown)


def log_function_call(func: F) -> F:
    """Decorator to trace provider and lifecycle calls at debug level."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        logger.debug(f"{func.__qualname__}({_describe_args(args, kwargs)})")
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{func.__qualname__} failed: {e}")
            raise

    return cast(F, wrapper)


def log_execution_time(func: F) -> F:
    """Decorator to log how long a call took."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        start_time = time.monotonic()
        try:
            return func(*args, **kwargs)
        finally:
            logger.debug(
                f"{func.__qualname__} took {time.monotonic() - start_time:.2f} seconds"
            )

    return cast(F, wrapper)
