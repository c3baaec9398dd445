"""
Outbound e-mail service.

Sends transactional e-mail through the SendGrid v3 HTTP API with ``httpx``.
Delivery is best effort: callers schedule it as a background task after the
response is produced, and failures are reported to telemetry instead of raised.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from postboard.core.logging_config import get_logger
from postboard.core.monitoring import capture_exception, log_email_event
from postboard.server.core.config import EmailConfig, Settings, settings

logger = get_logger(__name__)

SENDGRID_SEND_PATH = "/v3/mail/send"


class EmailDeliveryError(Exception):
    """Raised internally when the provider rejects a message."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"SendGrid responded {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body


class EmailService:
    """Thin client for the SendGrid mail-send endpoint."""

    def __init__(self, config: EmailConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        """
        Args:
            config: E-mail section of the unified settings
            transport: Optional httpx transport (tests inject ``httpx.MockTransport``)
        """
        self.config = config
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def _build_payload(self, to: str, subject: str, text: str) -> Dict[str, Any]:
        return {
            "personalizations": [{"to": [{"email": to}]}],
            "from": {"email": self.config.sender},
            "subject": subject,
            "content": [{"type": "text/plain", "value": text}],
        }

    async def send(self, to: str, subject: str, text: str, kind: str = "generic") -> bool:
        """
        Send a plain-text e-mail.

        Args:
            to: Recipient address
            subject: Subject line
            text: Plain-text body
            kind: Logical e-mail type used in logs and telemetry

        Returns:
            True when SendGrid accepted the message, False otherwise (never raises)
        """
        if not self.enabled:
            logger.info(f"E-mail disabled (no SENDGRID_API_KEY); skipping {kind} e-mail to {to}")
            return False

        headers = {"Authorization": f"Bearer {self.config.api_key}"}
        try:
            async with httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    SENDGRID_SEND_PATH,
                    json=self._build_payload(to, subject, text),
                    headers=headers,
                )
            if response.status_code >= 300:
                raise EmailDeliveryError(response.status_code, response.text)
        except (httpx.HTTPError, EmailDeliveryError) as e:
            capture_exception(e, {"email_kind": kind, "recipient": to})
            log_email_event(kind, to, ok=False)
            return False

        log_email_event(kind, to, ok=True)
        return True

    async def send_welcome_email(self, email: str, name: str) -> bool:
        """Send the registration welcome e-mail."""
        subject = "Welcome to Postboard"
        text = f"Hi {name},\n\nYour Postboard account is ready. Start writing your first post!\n"
        return await self.send(email, subject, text, kind="welcome")


def build_email_service(app_settings: Optional[Settings] = None) -> EmailService:
    """Create an ``EmailService`` from the given settings, or the process-wide ones."""
    return EmailService((app_settings or settings).email)
