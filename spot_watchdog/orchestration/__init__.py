"""
Orchestration modules for the spot instance watchdog.
"""

from .scheduler import PeriodicScheduler
from .watchdog import InstanceWatchdog

__all__ = ["PeriodicScheduler", "InstanceWatchdog"]
