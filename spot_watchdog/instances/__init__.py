"""
Instance management modules for the spot instance watchdog.
"""

from .discovery import describe_instance, fetch_instance, resolve_public_ip
from .lifecycle import restart_instance, start_instance, wait_for_operation

__all__ = [
    "fetch_instance",
    "resolve_public_ip",
    "describe_instance",
    "start_instance",
    "wait_for_operation",
    "restart_instance",
]
