import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("EMAIL_PROVIDER", "console")
os.environ.setdefault("RATE_LIMIT_BACKEND", "memory")

import pytest
from fastapi.testclient import TestClient

from leadintake.schemas.lead import LeadSubmission, PhotoAttachment
from leadintake.services.email_dispatch import RecordingEmailSender
from leadintake.services.rate_limit import InMemoryRateLimiter

MB = 1024 * 1024


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_photo(filename: str = "bathroom.jpg", content_type: str = "image/jpeg", size: int = 1024) -> PhotoAttachment:
    return PhotoAttachment(filename=filename, content_type=content_type, content=b"\x00" * size)


@pytest.fixture
def valid_submission() -> LeadSubmission:
    return LeadSubmission(
        service="Bathroom",
        postcode="SW16 1AB",
        name="Jane Smith",
        phone="07468 451511",
        email="jane@example.co.uk",
    )


@pytest.fixture
def recording_sender() -> RecordingEmailSender:
    return RecordingEmailSender()


@pytest.fixture
def failing_sender() -> RecordingEmailSender:
    return RecordingEmailSender(error="HTTP 422: invalid from address")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock) -> InMemoryRateLimiter:
    return InMemoryRateLimiter(limit=5, window_seconds=3600, clock=clock)


@pytest.fixture
def client(recording_sender, limiter):
    from leadintake.main import app
    from leadintake.routes.leads import get_lead_sender
    from leadintake.services.rate_limit import get_rate_limiter

    app.dependency_overrides[get_lead_sender] = lambda: recording_sender
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
