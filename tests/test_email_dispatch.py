import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from leadintake.core.config import Settings
from leadintake.core.exceptions import ConfigurationError
from leadintake.services.email_dispatch import (
    ConsoleEmailSender,
    EmailAttachment,
    EmailMessage,
    RecordingEmailSender,
    ResendEmailSender,
    get_email_sender,
)


def _message(**overrides) -> EmailMessage:
    fields = dict(
        sender="Fredi Builders <leads@example.com>",
        to=["owner@example.com"],
        subject="New Bathroom Lead - SW16 1AB",
        html="<p>hi</p>",
        text="hi",
        reply_to="jane@example.co.uk",
    )
    fields.update(overrides)
    return EmailMessage(**fields)


def _mock_session(response=None, post_error=None):
    session = MagicMock()
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=False)
    if post_error is not None:
        session.post.side_effect = post_error
    else:
        request = MagicMock()
        request.__aenter__ = AsyncMock(return_value=response)
        request.__aexit__ = AsyncMock(return_value=False)
        session.post.return_value = request
    return session


def _response(status, json_body=None, text=""):
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=json_body)
    response.text = AsyncMock(return_value=text)
    return response


def test_message_payload_shape():
    attachment = EmailAttachment.from_bytes("a.jpg", b"abc", "image/jpeg")
    payload = _message(attachments=[attachment]).to_payload()

    assert payload == {
        "from": "Fredi Builders <leads@example.com>",
        "to": ["owner@example.com"],
        "subject": "New Bathroom Lead - SW16 1AB",
        "html": "<p>hi</p>",
        "text": "hi",
        "reply_to": "jane@example.co.uk",
        "attachments": [{"filename": "a.jpg", "content": "YWJj", "content_type": "image/jpeg"}],
    }


def test_message_payload_omits_empty_optionals():
    payload = _message(reply_to=None).to_payload()
    assert "reply_to" not in payload
    assert "attachments" not in payload


def test_resend_requires_api_key():
    with pytest.raises(ConfigurationError) as exc_info:
        ResendEmailSender(api_key="")
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_resend_success():
    session = _mock_session(_response(200, {"id": "re_123"}))
    sender = ResendEmailSender(api_key="re_test", api_url="https://api.resend.test/")

    with patch("leadintake.services.email_dispatch.aiohttp.ClientSession", return_value=session):
        result = await sender.send(_message())

    assert result.ok
    assert result.id == "re_123"
    args, kwargs = session.post.call_args
    assert args[0] == "https://api.resend.test/emails"
    assert kwargs["headers"]["Authorization"] == "Bearer re_test"
    assert kwargs["json"]["subject"] == "New Bathroom Lead - SW16 1AB"


@pytest.mark.asyncio
async def test_resend_http_error():
    session = _mock_session(_response(422, text='{"message": "Invalid `from` field"}'))
    sender = ResendEmailSender(api_key="re_test")

    with patch("leadintake.services.email_dispatch.aiohttp.ClientSession", return_value=session):
        result = await sender.send(_message())

    assert not result.ok
    assert result.error.startswith("HTTP 422:")


@pytest.mark.asyncio
async def test_resend_timeout():
    session = _mock_session(post_error=asyncio.TimeoutError())
    sender = ResendEmailSender(api_key="re_test")

    with patch("leadintake.services.email_dispatch.aiohttp.ClientSession", return_value=session):
        result = await sender.send(_message())

    assert result.error == "Request timeout"


@pytest.mark.asyncio
async def test_resend_client_error():
    session = _mock_session(post_error=aiohttp.ClientConnectionError("connection reset"))
    sender = ResendEmailSender(api_key="re_test")

    with patch("leadintake.services.email_dispatch.aiohttp.ClientSession", return_value=session):
        result = await sender.send(_message())

    assert result.error.startswith("Client error:")


@pytest.mark.asyncio
async def test_console_sender():
    result = await ConsoleEmailSender().send(_message())
    assert result.ok
    assert result.id.startswith("console_")


@pytest.mark.asyncio
async def test_recording_sender():
    sender = RecordingEmailSender()
    first = await sender.send(_message())
    second = await sender.send(_message())

    assert (first.id, second.id) == ("recorded_1", "recorded_2")
    assert len(sender.messages) == 2

    failing = RecordingEmailSender(error="HTTP 500: boom")
    assert (await failing.send(_message())).error == "HTTP 500: boom"
    assert len(failing.messages) == 1


def test_get_email_sender():
    assert isinstance(get_email_sender(Settings(EMAIL_PROVIDER="console")), ConsoleEmailSender)

    sender = get_email_sender(Settings(EMAIL_PROVIDER="resend", RESEND_API_KEY="re_test"))
    assert isinstance(sender, ResendEmailSender)

    with pytest.raises(ConfigurationError):
        get_email_sender(Settings(EMAIL_PROVIDER="resend", RESEND_API_KEY=""))
