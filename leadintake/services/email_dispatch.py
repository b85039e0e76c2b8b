# leadintake/services/email_dispatch.py
from __future__ import annotations

import asyncio
import base64
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import aiohttp

from leadintake.core.config import Settings, settings as default_settings
from leadintake.core.exceptions import ConfigurationError
from leadintake.core.logging import get_structlog_logger

logger = get_structlog_logger(__name__)


@dataclass(frozen=True)
class EmailAttachment:
    filename: str
    content: str  # base64
    content_type: Optional[str] = None

    @classmethod
    def from_bytes(cls, filename: str, data: bytes, content_type: Optional[str] = None) -> "EmailAttachment":
        return cls(
            filename=filename,
            content=base64.b64encode(data).decode("ascii"),
            content_type=content_type,
        )

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"filename": self.filename, "content": self.content}
        if self.content_type:
            payload["content_type"] = self.content_type
        return payload


@dataclass(frozen=True)
class EmailMessage:
    sender: str
    to: List[str]
    subject: str
    html: str
    text: str
    reply_to: Optional[str] = None
    attachments: List[EmailAttachment] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Render the provider JSON body."""
        payload: Dict[str, Any] = {
            "from": self.sender,
            "to": list(self.to),
            "subject": self.subject,
            "html": self.html,
            "text": self.text,
        }
        if self.reply_to:
            payload["reply_to"] = self.reply_to
        if self.attachments:
            payload["attachments"] = [attachment.to_payload() for attachment in self.attachments]
        return payload


@dataclass(frozen=True)
class EmailSendResult:
    id: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class EmailSender:
    """
    Collaborator that hands a message to an email provider.
    Provider-level failures are reported in ``EmailSendResult.error``, not raised.
    """

    name = "base"

    async def send(self, message: EmailMessage) -> EmailSendResult:
        raise NotImplementedError


class ResendEmailSender(EmailSender):
    """Send through the Resend HTTP API. No retries; the caller decides what to do on error."""

    name = "resend"

    def __init__(self, api_key: str, api_url: str = "https://api.resend.com", timeout: int = 10) -> None:
        if not api_key:
            raise ConfigurationError("RESEND_API_KEY is required for the resend email provider")
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    async def send(self, message: EmailMessage) -> EmailSendResult:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "User-Agent": "LeadIntake-Mailer/1.0",
        }
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    f"{self.api_url}/emails",
                    json=message.to_payload(),
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    status = response.status
                    if 200 <= status < 300:
                        body = await response.json(content_type=None)
                        return EmailSendResult(id=(body or {}).get("id"))
                    error_text = await response.text()
                    return EmailSendResult(error=f"HTTP {status}: {error_text[:200]}")
        except asyncio.TimeoutError:
            return EmailSendResult(error="Request timeout")
        except aiohttp.ClientError as e:
            return EmailSendResult(error=f"Client error: {str(e)[:200]}")


class ConsoleEmailSender(EmailSender):
    """Log the message instead of sending it. Default outside production."""

    name = "console"

    async def send(self, message: EmailMessage) -> EmailSendResult:
        message_id = f"console_{uuid.uuid4().hex[:12]}"
        logger.info(
            "email.console_delivery",
            message_id=message_id,
            to=message.to,
            subject=message.subject,
            attachments=len(message.attachments),
        )
        return EmailSendResult(id=message_id)


class RecordingEmailSender(EmailSender):
    """Keep messages in memory; optionally report a fixed provider error."""

    name = "recording"

    def __init__(self, error: Optional[str] = None) -> None:
        self.error = error
        self.messages: List[EmailMessage] = []

    async def send(self, message: EmailMessage) -> EmailSendResult:
        self.messages.append(message)
        if self.error:
            return EmailSendResult(error=self.error)
        return EmailSendResult(id=f"recorded_{len(self.messages)}")


def get_email_sender(settings: Optional[Settings] = None) -> EmailSender:
    settings = settings or default_settings
    if settings.email_provider == "resend":
        return ResendEmailSender(
            api_key=settings.resend_api_key or "",
            api_url=settings.resend_api_url,
            timeout=settings.email_timeout_seconds,
        )
    return ConsoleEmailSender()
