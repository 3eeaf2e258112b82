"""
Core modules for the spot instance watchdog.
"""

from .compute import ComputeProvider, GceComputeProvider, parse_instance
from .state import (
    AccessConfig,
    InstanceInfo,
    InstanceStatus,
    NetworkInterface,
    TickResult,
    WatchdogState,
)

__all__ = [
    "ComputeProvider",
    "GceComputeProvider",
    "parse_instance",
    "AccessConfig",
    "NetworkInterface",
    "InstanceInfo",
    "InstanceStatus",
    "TickResult",
    "WatchdogState",
]
