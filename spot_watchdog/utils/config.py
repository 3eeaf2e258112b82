"""
Configuration management for the spot instance watchdog.

The configuration is read once at startup from the process environment and
an optional ``KEY=VALUE`` env file, and frozen into a ``WatchdogConfig`` that
is passed explicitly to every component.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from .exceptions import ConfigurationError
from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENV_FILE = Path(".env")
DEFAULT_POLLING_INTERVAL = 60
DEFAULT_SMTP_PORT = 587
DEFAULT_SMTP_SUBJECT = "GCP Proxy server NEW IP"

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class WatchdogConfig:
    """Watchdog configuration."""

    project_id: str
    zone: str
    instance_name: str
    credentials_file: str | None = None
    polling_interval: int = DEFAULT_POLLING_INTERVAL
    smtp_sender: str = ""
    smtp_receiver: str = ""
    smtp_password: str = ""
    smtp_server: str = ""
    smtp_port: int = DEFAULT_SMTP_PORT
    smtp_subject: str = DEFAULT_SMTP_SUBJECT
    log_level: str = "INFO"


def parse_int(value: str | None, default: int, minimum: int | None = None) -> int:
    """Parse an integer setting, falling back to ``default`` when absent or invalid."""
    if not value:
        return default
    if not INTEGER_PATTERN.fullmatch(value):
        logger.warning(f"Invalid numeric value {value!r}, using default {default}")
        return default
    parsed = int(value)
    if minimum is not None and parsed < minimum:
        logger.warning(f"Value {parsed} is below {minimum}, using default {default}")
        return default
    return parsed


def read_env_file(env_file: Path) -> dict[str, str]:
    """Read ``KEY=VALUE`` lines from an env file.

    Lines without a separator are skipped; the remaining lines still apply.
    """
    if not env_file.is_file():
        raise ConfigurationError(f"Environment file not found: {env_file}")

    try:
        values = dotenv_values(env_file, interpolate=False)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read environment file {env_file}: {e}")

    return {key: value for key, value in values.items() if value is not None}


def load_settings(
    env_file: Path | None = None, environ: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Merge the process environment with the env file (file values win)."""
    settings = dict(os.environ if environ is None else environ)

    if env_file is not None:
        settings.update(read_env_file(env_file))
    elif DEFAULT_ENV_FILE.is_file():
        logger.debug(f"Loading default environment file {DEFAULT_ENV_FILE}")
        settings.update(read_env_file(DEFAULT_ENV_FILE))

    return settings


def build_config(settings: Mapping[str, str]) -> WatchdogConfig:
    """Build a ``WatchdogConfig`` from raw settings."""
    return WatchdogConfig(
        project_id=settings.get("PROJECT_ID", ""),
        zone=settings.get("ZONE", ""),
        instance_name=settings.get("INSTANCE_NAME", ""),
        credentials_file=settings.get("GOOGLE_APPLICATION_CREDENTIALS") or None,
        polling_interval=parse_int(
            settings.get("POLLING_RATE"), DEFAULT_POLLING_INTERVAL, minimum=1
        ),
        smtp_sender=settings.get("SMTP_SENDER", ""),
        smtp_receiver=settings.get("SMTP_RECEIVER", ""),
        smtp_password=settings.get("SMTP_PASSWORD", ""),
        smtp_server=settings.get("SMTP_SERVER", ""),
        smtp_port=parse_int(settings.get("SMTP_PORT"), DEFAULT_SMTP_PORT),
        smtp_subject=settings.get("SMTP_SUBJECT") or DEFAULT_SMTP_SUBJECT,
        log_level=settings.get("LOG_LEVEL") or "INFO",
    )


def load_config(
    env_file: Path | None = None, environ: Mapping[str, str] | None = None
) -> WatchdogConfig:
    """Load configuration from the environment and an optional env file."""
    return build_config(load_settings(env_file, environ))


def validate_config(config: WatchdogConfig) -> list[str]:
    """Validate configuration and return list of errors."""
    errors = []

    for key, value in (
        ("PROJECT_ID", config.project_id),
        ("ZONE", config.zone),
        ("INSTANCE_NAME", config.instance_name),
    ):
        if not value:
            errors.append(f"Missing required configuration: {key}")

    if config.credentials_file and not Path(config.credentials_file).is_file():
        errors.append(f"Credentials file not found: {config.credentials_file}")

    return errors
