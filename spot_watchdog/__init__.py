"""
Spot instance watchdog.

Polls a Compute Engine spot instance, restarts it when it has been
terminated and emails the new public IP address to an operator.
"""

__version__ = "1.0.0"

from .core.compute import ComputeProvider, GceComputeProvider
from .notifications.email import EmailNotifier
from .orchestration.scheduler import PeriodicScheduler
from .orchestration.watchdog import InstanceWatchdog
from .utils.config import WatchdogConfig, load_config
from .utils.logging import setup_logging

__all__ = [
    "ComputeProvider",
    "GceComputeProvider",
    "EmailNotifier",
    "InstanceWatchdog",
    "PeriodicScheduler",
    "WatchdogConfig",
    "load_config",
    "setup_logging",
]
