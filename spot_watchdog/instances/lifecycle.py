"""
Instance lifecycle management for the spot instance watchdog.
"""

from collections.abc import Callable

from ..core.compute import ComputeProvider
from ..utils.logging import get_logger, log_function_call

logger = get_logger(__name__)


@log_function_call
def start_instance(provider: ComputeProvider, project: str, zone: str, name: str) -> str:
    """Request an instance start and return the operation name."""
    operation = provider.start_instance(project, zone, name)
    logger.info(f"Starting instance {name}...")
    return operation


@log_function_call
def wait_for_operation(
    provider: ComputeProvider, project: str, zone: str, operation: str
) -> None:
    """Block until an operation completes."""
    logger.debug(f"Waiting for operation {operation}")
    provider.wait_for_operation(project, zone, operation)
    logger.debug(f"Operation {operation} completed")



@log_function_call
def restart_instance(
    provider: ComputeProvider,
    project: str,
    zone: str,
    name: str,
    on_started: Callable[[str], None] | None = None,
) -> str:
    """Start a terminated instance and wait for the start operation.

    ``on_started`` is called with the operation name before waiting.
    """
    operation = start_instance(provider, project, zone, name)
    if on_started is not None:
        on_started(operation)
    wait_for_operation(provider, project, zone, operation)
    logger.info(f"✅ Instance {name} started successfully")
    return operation
