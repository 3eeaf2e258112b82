"""Tests for email notifications."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from spot_watchdog.notifications.email import EmailNotifier, build_message, send_email
from spot_watchdog.utils.exceptions import NotificationError


@pytest.fixture
def smtp_class():
    with patch("spot_watchdog.notifications.email.smtplib.SMTP") as smtp_cls:
        smtp = MagicMock()
        smtp.has_extn.return_value = True
        smtp_cls.return_value.__enter__.return_value = smtp
        yield smtp_cls


def sent_message(smtp_class):
    smtp = smtp_class.return_value.__enter__.return_value
    return smtp.send_message.call_args.args[0]


def test_build_message():
    message = build_message("a@example.com", "b@example.com", "Subject", "1.2.3.4")

    assert message["From"] == "a@example.com"
    assert message["To"] == "b@example.com"
    assert message["Subject"] == "Subject"
    assert message.get_content().strip() == "1.2.3.4"


def test_send_email_uses_starttls_and_login(smtp_class):
    send_email(
        "watchdog@example.com",
        "secret",
        "ops@example.com",
        "GCP Proxy server NEW IP",
        "1.2.3.4",
        "smtp.example.com",
        587,
    )

    smtp_class.assert_called_once()
    assert smtp_class.call_args.args == ("smtp.example.com", 587)
    smtp = smtp_class.return_value.__enter__.return_value
    smtp.starttls.assert_called_once()
    smtp.login.assert_called_once_with("watchdog@example.com", "secret")
    message = sent_message(smtp_class)
    assert message["Subject"] == "GCP Proxy server NEW IP"
    assert message.get_content().strip() == "1.2.3.4"


def test_send_email_without_starttls(smtp_class):
    smtp = smtp_class.return_value.__enter__.return_value
    smtp.has_extn.return_value = False

    send_email("a@example.com", "pw", "b@example.com", "s", "body", "localhost", 25)

    smtp.starttls.assert_not_called()
    smtp.login.assert_called_once_with("a@example.com", "pw")


def test_refuses_plaintext_login_to_remote_server(smtp_class):
    smtp = smtp_class.return_value.__enter__.return_value
    smtp.has_extn.return_value = False

    with pytest.raises(NotificationError, match="does not support STARTTLS"):
        send_email(
            "a@example.com", "pw", "b@example.com", "s", "body", "smtp.example.com", 587
        )

    smtp.login.assert_not_called()
    smtp.send_message.assert_not_called()


def test_authentication_failure_raises(smtp_class):
    smtp = smtp_class.return_value.__enter__.return_value
    smtp.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")

    with pytest.raises(NotificationError, match="ops@example.com"):
        send_email("a@example.com", "pw", "ops@example.com", "s", "b", "smtp", 587)


def test_connection_failure_raises(smtp_class):
    smtp_class.side_effect = ConnectionRefusedError("refused")

    with pytest.raises(NotificationError):
        send_email("a@example.com", "pw", "ops@example.com", "s", "b", "smtp", 587)


def test_notifier_uses_config(smtp_class, config):
    EmailNotifier(config).notify("1.2.3.4")

    assert smtp_class.call_args.args == ("smtp.example.com", 587)
    message = sent_message(smtp_class)
    assert message["From"] == "watchdog@example.com"
    assert message["To"] == "ops@example.com"
    assert message["Subject"] == "GCP Proxy server NEW IP"
    assert message.get_content().strip() == "1.2.3.4"
