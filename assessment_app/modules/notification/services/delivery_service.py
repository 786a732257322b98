"""
Delivery Service.

This service abstracts the technical details of sending the report email over
the configured transport (an SMTP relay or an HTTP transactional-email API).
It effectively acts as the "Driver" layer.
"""

import logging
import smtplib
from email.message import EmailMessage
from typing import Any, Mapping

import requests

from ..schemas import SubmissionReport

logger = logging.getLogger(__name__)


class NotificationDispatchError(Exception):
    """The report could not be handed to the mail transport."""


class SmtpTransport:
    """Send through an SMTP relay (SSL or STARTTLS) with login."""

    def __init__(self, host: str, port: int, username: str, password: str,
                 use_ssl: bool = True, timeout: int = 10):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.timeout = timeout

    def build_message(self, report: SubmissionReport) -> EmailMessage:
        message = EmailMessage()
        message['From'] = report.sender
        message['To'] = report.recipient
        message['Subject'] = report.subject
        message.set_content(report.text_body)
        message.add_alternative(report.html_body, subtype='html')
        return message

    def send(self, report: SubmissionReport) -> None:
        message = self.build_message(report)
        try:
            if self.use_ssl:
                with smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout) as server:
                    server.login(self.username, self.password)
                    server.send_message(message)
            else:
                with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                    server.starttls()
                    server.login(self.username, self.password)
                    server.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise NotificationDispatchError(f"SMTP delivery via {self.host}:{self.port} failed: {exc}") from exc
        logger.info("Report '%s' sent to %s via SMTP", report.subject, report.recipient)


class HttpApiTransport:
    """POST the report as JSON to a transactional-email HTTP API."""

    def __init__(self, url: str, api_key: str, timeout: int = 10):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout

    def build_payload(self, report: SubmissionReport) -> dict:
        return {
            'from': report.sender,
            'to': report.recipient,
            'subject': report.subject,
            'html': report.html_body,
            'text': report.text_body,
        }

    def send(self, report: SubmissionReport) -> None:
        headers = {'Authorization': f'Bearer {self.api_key}'}
        try:
            response = requests.post(self.url, json=self.build_payload(report), headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NotificationDispatchError(f"Mail API request failed: {exc}") from exc
        if not response.ok:
            raise NotificationDispatchError(
                f"Mail API returned {response.status_code}: {response.text[:200]}"
            )
        logger.info("Report '%s' sent to %s via mail API", report.subject, report.recipient)


class DeliveryService:
    """Infrastructure service for sending the report email."""

    TRANSPORTS = ('smtp', 'http')

    @staticmethod
    def missing_settings(config: Mapping[str, Any]) -> list:
        """Names of settings the configured transport still needs."""
        required = ['ADMIN_EMAIL', 'MAIL_USERNAME']
        if config.get('NOTIFICATION_TRANSPORT') == 'http':
            required += ['MAIL_API_URL', 'MAIL_API_KEY']
        else:
            required += ['MAIL_PASSWORD', 'SMTP_HOST']
        return [name for name in required if not config.get(name)]

    @staticmethod
    def build_transport(config: Mapping[str, Any]):
        kind = config.get('NOTIFICATION_TRANSPORT') or 'smtp'
        timeout = config.get('MAIL_TIMEOUT') or 10
        if kind == 'smtp':
            return SmtpTransport(
                host=config['SMTP_HOST'],
                port=int(config.get('SMTP_PORT') or 465),
                username=config['MAIL_USERNAME'],
                password=config['MAIL_PASSWORD'],
                use_ssl=bool(config.get('SMTP_USE_SSL', True)),
                timeout=timeout,
            )
        if kind == 'http':
            return HttpApiTransport(
                url=config['MAIL_API_URL'],
                api_key=config['MAIL_API_KEY'],
                timeout=timeout,
            )
        raise NotificationDispatchError(
            f"Unknown NOTIFICATION_TRANSPORT '{kind}' (expected one of {', '.join(DeliveryService.TRANSPORTS)})"
        )

    @staticmethod
    def send_report(report: SubmissionReport, config: Mapping[str, Any]) -> None:
        """Send ``report`` once. Raises ``NotificationDispatchError`` on failure."""
        DeliveryService.build_transport(config).send(report)
