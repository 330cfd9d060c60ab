"""
Outbound mail transport.

The notification service only depends on the MailTransport protocol.
HttpMailTransport talks to an HTTP mail provider; LogMailTransport just
logs the message and is used when no provider is configured.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

import httpx
from loguru import logger

from app.core.config import Settings
from app.core.exceptions import NotificationError


@dataclass(frozen=True)
class EmailMessage:
    sender: str
    to: str
    subject: str
    html: str


@dataclass(frozen=True)
class DeliveryReceipt:
    recipient: str
    accepted: bool = True
    provider_id: Optional[str] = None


class MailTransport(Protocol):
    def deliver(self, message: EmailMessage) -> DeliveryReceipt:
        ...


class HttpMailTransport:
    """Send email through an HTTP provider (SendGrid-style JSON payload)."""

    def __init__(self, api_url: str, api_key: str, timeout: float = 10.0,
                 http_transport: Optional[httpx.BaseTransport] = None):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.http_transport = http_transport

    def deliver(self, message: EmailMessage) -> DeliveryReceipt:
        payload = {
            "from": {"email": message.sender},
            "personalizations": [{"to": [{"email": message.to}], "subject": message.subject}],
            "content": [{"type": "text/html", "value": message.html}],
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.http_transport) as client:
                resp = client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise NotificationError(f"Mail provider unreachable: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise NotificationError(f"Email send failed {resp.status_code}: {resp.text[:200]}")

        return DeliveryReceipt(recipient=message.to, provider_id=resp.headers.get("X-Message-Id"))


class LogMailTransport:
    """Development transport: logs the email instead of sending it."""

    def deliver(self, message: EmailMessage) -> DeliveryReceipt:
        logger.info(
            "Email (not sent, no provider configured) from={} to={} subject={!r} preview={!r}",
            message.sender, message.to, message.subject, message.html[:100],
        )
        return DeliveryReceipt(recipient=message.to)


def build_transport(settings: Settings) -> MailTransport:
    if settings.EMAIL_API_URL and settings.EMAIL_API_KEY:
        return HttpMailTransport(settings.EMAIL_API_URL, settings.EMAIL_API_KEY, settings.EMAIL_HTTP_TIMEOUT)
    logger.warning("EMAIL_API_URL/EMAIL_API_KEY not set, emails will only be logged")
    return LogMailTransport()
