"""
Instance discovery for the spot instance watchdog.
"""

from ..core.compute import ComputeProvider
from ..core.state import InstanceInfo
from ..utils.logging import get_logger, log_function_call

logger = get_logger(__name__)


@log_function_call
def fetch_instance(
    provider: ComputeProvider, project: str, zone: str, name: str
) -> InstanceInfo:
    """Fetch the current state of an instance."""
    logger.debug(f"Fetching instance {name} in {project}/{zone}")
    instance = provider.get_instance(project, zone, name)
    logger.debug(f"Instance {name} reported status {instance.raw_status}")
    return instance


def resolve_public_ip(instance: InstanceInfo) -> str:
    """Resolve the first public IP of an instance, or ``""`` if it has none."""
    public_ip = instance.public_ip
    if not public_ip:
        logger.warning(f"Instance {instance.name} has no public IP address")
    return public_ip


def describe_instance(instance: InstanceInfo) -> dict[str, str]:
    """Summarize an instance for display."""
    return {
        "name": instance.name,
        "zone": instance.zone,
        "status": instance.raw_status or instance.status.value,
        "public_ip": instance.public_ip or "N/A",
    }
