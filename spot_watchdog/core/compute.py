"""
Compute provider access for the spot instance watchdog.

``ComputeProvider`` is the narrow contract the watchdog relies on;
``GceComputeProvider`` implements it on top of ``google-cloud-compute``.
"""

from abc import ABC, abstractmethod
from typing import Any

from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import compute_v1

from ..utils.exceptions import OperationError, ProviderError
from ..utils.logging import get_logger, log_function_call
from .state import AccessConfig, InstanceInfo, InstanceStatus, NetworkInterface

logger = get_logger(__name__)

# Errors a client call can raise: API errors, credential refresh and
# transport failures, and raw network errors from the REST transport.
CALL_ERRORS = (
    api_exceptions.GoogleAPIError,
    auth_exceptions.GoogleAuthError,
    OSError,
)


class ComputeProvider(ABC):
    """Compute provider contract used by the watchdog.

    Every call blocks until the remote call returns and raises
    ``ProviderError`` on failure.
    """

    @abstractmethod
    def get_instance(self, project: str, zone: str, name: str) -> InstanceInfo:
        """Fetch the current status and network configuration of an instance."""
        ...

    @abstractmethod
    def start_instance(self, project: str, zone: str, name: str) -> str:
        """Request an instance start and return the operation name."""
        ...

    @abstractmethod
    def wait_for_operation(self, project: str, zone: str, operation: str) -> None:
        """Block until a zone operation is done; raise ``OperationError`` if it failed."""
        ...


def parse_instance(instance: Any, zone: str) -> InstanceInfo:
    """Convert a ``compute_v1.Instance`` into ``InstanceInfo``."""
    interfaces = []
    for interface in instance.network_interfaces or []:
        access_configs = [
            AccessConfig(nat_ip=access_config.nat_i_p or "")
            for access_config in interface.access_configs or []
        ]
        interfaces.append(NetworkInterface(access_configs=access_configs))

    return InstanceInfo(
        name=instance.name,
        zone=zone,
        status=InstanceStatus.from_provider(instance.status),
        raw_status=instance.status,
        network_interfaces=interfaces,
    )


def _is_done(operation: Any) -> bool:
    status = operation.status
    return str(getattr(status, "name", status)).upper() == "DONE"


def _operation_errors(operation: Any) -> list[str]:
    error = getattr(operation, "error", None)
    errors = getattr(error, "errors", None) or []
    return [f"{item.code}: {item.message}" for item in errors]


class GceComputeProvider(ComputeProvider):
    """Google Compute Engine provider."""

    def __init__(
        self,
        instances_client: compute_v1.InstancesClient,
        operations_client: compute_v1.ZoneOperationsClient,
    ) -> None:
        self.instances_client = instances_client
        self.operations_client = operations_client

    @classmethod
    def from_credentials(
        cls, credentials_file: str | None = None
    ) -> "GceComputeProvider":
        """Create clients from a service account key, or default credentials."""
        try:
            if credentials_file:
                logger.debug(f"Using service account key {credentials_file}")
                instances_client = compute_v1.InstancesClient.from_service_account_file(
                    credentials_file
                )
                operations_client = (
                    compute_v1.ZoneOperationsClient.from_service_account_file(
                        credentials_file
                    )
                )
            else:
                logger.debug("Using application default credentials")
                instances_client = compute_v1.InstancesClient()
                operations_client = compute_v1.ZoneOperationsClient()
        except (auth_exceptions.GoogleAuthError, OSError, ValueError) as e:
            raise ProviderError(f"Failed to create client: {e}") from e

        return cls(instances_client, operations_client)

    @log_function_call
    def get_instance(self, project: str, zone: str, name: str) -> InstanceInfo:
        try:
            instance = self.instances_client.get(
                project=project, zone=zone, instance=name
            )
        except CALL_ERRORS as e:
            raise ProviderError(f"Failed to get instance status: {e}") from e

        return parse_instance(instance, zone)

    @log_function_call
    def start_instance(self, project: str, zone: str, name: str) -> str:
        try:
            operation = self.instances_client.start(
                project=project, zone=zone, instance=name
            )
        except CALL_ERRORS as e:
            raise ProviderError(f"Failed to start instance: {e}") from e

        return operation.name

    @log_function_call
    def wait_for_operation(self, project: str, zone: str, operation: str) -> None:
        # The wait endpoint returns after roughly two minutes even when the
        # operation is still running.
        while True:
            try:
                result = self.operations_client.wait(
                    project=project, zone=zone, operation=operation
                )
            except CALL_ERRORS as e:
                raise OperationError(
                    f"Failed to wait for operation: {e}", operation=operation
                ) from e

            if _is_done(result):
                break
            logger.debug(f"Operation {operation} is still {result.status}")

        errors = _operation_errors(result)
        if errors:
            raise OperationError(
                f"Operation {operation} failed: {'; '.join(errors)}",
                operation=operation,
            )
