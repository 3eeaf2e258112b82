"""
Notification modules for the spot instance watchdog.
"""

from .email import EmailNotifier, build_message, send_email

__all__ = ["EmailNotifier", "build_message", "send_email"]
