"""
Instance watchdog: the poll, restart and notify cycle for one spot instance.
"""

from ..core.compute import ComputeProvider
from ..core.state import InstanceInfo, InstanceStatus, TickResult, WatchdogState
from ..instances.discovery import fetch_instance, resolve_public_ip
from ..instances.lifecycle import restart_instance
from ..notifications.email import EmailNotifier
from ..utils.config import WatchdogConfig
from ..utils.logging import get_logger, log_execution_time

logger = get_logger(__name__)


class InstanceWatchdog:
    """Restarts a terminated spot instance and reports its new public IP.

    Provider and notification failures propagate out of ``run_tick``; the
    caller treats them as fatal.
    """

    def __init__(
        self,
        config: WatchdogConfig,
        provider: ComputeProvider,
        notifier: EmailNotifier,
    ) -> None:
        self.config = config
        self.provider = provider
        self.notifier = notifier
        self.state = WatchdogState.IDLE
        self.notify = False

    @property
    def instance_name(self) -> str:
        return self.config.instance_name

    def _transition(self, state: WatchdogState) -> None:
        logger.debug(f"Watchdog {self.state.value} -> {state.value}")
        self.state = state

    def _fetch(self) -> InstanceInfo:
        return fetch_instance(
            self.provider,
            self.config.project_id,
            self.config.zone,
            self.config.instance_name,
        )

    def _restart(self) -> None:
        self._transition(WatchdogState.RESTARTING)
        restart_instance(
            self.provider,
            self.config.project_id,
            self.config.zone,
            self.config.instance_name,
            on_started=lambda operation: self._transition(WatchdogState.WAITING_OP),
        )
        self.notify = True

    def _send_notification(self, public_ip: str) -> None:
        self._transition(WatchdogState.NOTIFYING)
        try:
            self.notifier.notify(public_ip)
        finally:
            self.notify = False

    @log_execution_time
    def run_tick(self) -> TickResult:
        """Run one check of the instance."""
        try:
            self._transition(WatchdogState.CHECKING)
            instance = self._fetch()
            result = TickResult(status=instance.status)

            if instance.status == InstanceStatus.TERMINATED:
                logger.warning(f"Instance {self.instance_name} is terminated")
                self._restart()
                result.restarted = True
            elif instance.status == InstanceStatus.RUNNING:
                result.public_ip = instance.public_ip
                logger.info(
                    f"Instance {self.instance_name} is running at {result.public_ip}"
                )
            else:
                logger.info(
                    f"Instance {self.instance_name} is in state {instance.raw_status}"
                )

            if self.notify:
                instance = self._fetch()
                result.public_ip = resolve_public_ip(instance)
                logger.info(
                    f"Instance {self.instance_name} is running at {result.public_ip}"
                )
                self._send_notification(result.public_ip)
                result.notified = True

            return result
        finally:
            self._transition(WatchdogState.IDLE)
