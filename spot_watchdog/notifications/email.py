"""
Email notifications for the spot instance watchdog.
"""

import smtplib
from email.message import EmailMessage

from ..utils.config import WatchdogConfig
from ..utils.exceptions import NotificationError
from ..utils.logging import get_logger, log_function_call

logger = get_logger(__name__)

SMTP_TIMEOUT = 30
LOCAL_HOSTS = ("localhost", "127.0.0.1", "::1")


def build_message(sender: str, receiver: str, subject: str, body: str) -> EmailMessage:
    """Build a plain-text email message."""
    message = EmailMessage()
    message["From"] = sender
    message["To"] = receiver
    message["Subject"] = subject
    message.set_content(body)
    return message


@log_function_call
def send_email(
    sender: str,
    password: str,
    receiver: str,
    subject: str,
    body: str,
    server: str,
    port: int,
) -> None:
    """Send an email through an authenticated SMTP submission server.

    STARTTLS is negotiated when the server offers it; credentials are only
    sent over an unencrypted connection to a local server. Raises
    ``NotificationError`` if the message cannot be delivered.
    """
    message = build_message(sender, receiver, subject, body)

    try:
        with smtplib.SMTP(server, port, timeout=SMTP_TIMEOUT) as smtp:
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
            elif server not in LOCAL_HOSTS:
                raise NotificationError(
                    f"SMTP server {server}:{port} does not support STARTTLS; "
                    "refusing to send credentials unencrypted"
                )
            smtp.login(sender, password)
            smtp.send_message(message, from_addr=sender, to_addrs=[receiver])
    except (smtplib.SMTPException, OSError) as e:
        raise NotificationError(
            f"Failed to send email to {receiver} via {server}:{port}: {e}"
        ) from e

    logger.info(f"Notification sent to {receiver}")


class EmailNotifier:
    """Sends new-IP notifications using the configured SMTP settings."""

    def __init__(self, config: WatchdogConfig) -> None:
        self.config = config

    def notify(self, public_ip: str) -> None:
        """Email the new public IP to the configured receiver."""
        send_email(
            self.config.smtp_sender,
            self.config.smtp_password,
            self.config.smtp_receiver,
            self.config.smtp_subject,
            public_ip,
            self.config.smtp_server,
            self.config.smtp_port,
        )
