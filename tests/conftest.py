"""Shared fixtures for the spot watchdog tests."""

import pytest

from spot_watchdog.core.compute import ComputeProvider
from spot_watchdog.core.state import (
    AccessConfig,
    InstanceInfo,
    InstanceStatus,
    NetworkInterface,
)
from spot_watchdog.utils.config import WatchdogConfig
from spot_watchdog.utils.exceptions import NotificationError


def make_instance(raw_status: str, *nat_ips: list[str] | None) -> InstanceInfo:
    """Build an instance; each positional arg is one interface's NAT IPs."""
    interfaces = [
        NetworkInterface(access_configs=[AccessConfig(nat_ip=ip) for ip in ips or []])
        for ips in nat_ips
    ]
    return InstanceInfo(
        name="proxy",
        zone="europe-west1-b",
        status=InstanceStatus.from_provider(raw_status),
        raw_status=raw_status,
        network_interfaces=interfaces,
    )


class FakeProvider(ComputeProvider):
    """Compute provider returning scripted instances and recording calls."""

    def __init__(self, *instances, get_error=None, start_error=None, wait_error=None):
        self.instances = list(instances)
        self.get_error = get_error
        self.start_error = start_error
        self.wait_error = wait_error
        self.calls = []

    def get_instance(self, project, zone, name):
        self.calls.append(("get", project, zone, name))
        if self.get_error:
            raise self.get_error
        if len(self.instances) > 1:
            return self.instances.pop(0)
        return self.instances[0]

    def start_instance(self, project, zone, name):
        self.calls.append(("start", project, zone, name))
        if self.start_error:
            raise self.start_error
        return "operation-start-1"

    def wait_for_operation(self, project, zone, operation):
        self.calls.append(("wait", project, zone, operation))
        if self.wait_error:
            raise self.wait_error

    def call_names(self):
        return [call[0] for call in self.calls]


class FakeNotifier:
    """Notifier recording every attempt."""

    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    def notify(self, public_ip):
        self.sent.append(public_ip)
        if self.fail:
            raise NotificationError("SMTP server unavailable")


@pytest.fixture
def config():
    return WatchdogConfig(
        project_id="my-project",
        zone="europe-west1-b",
        instance_name="proxy",
        polling_interval=60,
        smtp_sender="watchdog@example.com",
        smtp_receiver="ops@example.com",
        smtp_password="secret",
        smtp_server="smtp.example.com",
        smtp_port=587,
    )


@pytest.fixture
def notifier():
    return FakeNotifier()
