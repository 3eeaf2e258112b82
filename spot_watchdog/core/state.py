"""
Instance and watchdog state for the spot instance watchdog.
"""

from dataclasses import dataclass, field
from enum import Enum


class InstanceStatus(Enum):
    """Coarse instance status as seen by the watchdog."""

    RUNNING = "running"
    TERMINATED = "terminated"
    OTHER = "other"

    @classmethod
    def from_provider(cls, status: str) -> "InstanceStatus":
        """Map a provider status string (e.g. ``"TERMINATED"``) to a status."""
        normalized = (status or "").strip().upper()
        if normalized == "RUNNING":
            return cls.RUNNING
        if normalized == "TERMINATED":
            return cls.TERMINATED
        return cls.OTHER


class WatchdogState(Enum):
    """Watchdog tick state."""

    IDLE = "idle"
    CHECKING = "checking"
    RESTARTING = "restarting"
    WAITING_OP = "waiting_op"
    NOTIFYING = "notifying"


@dataclass
class AccessConfig:
    """Public address translation attached to a network interface."""

    nat_ip: str = ""


@dataclass
class NetworkInterface:
    """Network interface of an instance."""

    access_configs: list[AccessConfig] = field(default_factory=list)


@dataclass
class InstanceInfo:
    """Instance information from the compute provider."""

    name: str
    zone: str
    status: InstanceStatus
    raw_status: str = ""
    network_interfaces: list[NetworkInterface] = field(default_factory=list)

    @property
    def public_ip(self) -> str:
        """First public IP across all network interfaces, or ``""``.

        Only the first interface carrying access configs is considered, and
        only its first access config.
        """
        for interface in self.network_interfaces:
            if interface.access_configs:
                return interface.access_configs[0].nat_ip
        return ""


@dataclass
class TickResult:
    """Outcome of a single watchdog tick."""

    status: InstanceStatus
    restarted: bool = False
    notified: bool = False
    public_ip: str = ""
