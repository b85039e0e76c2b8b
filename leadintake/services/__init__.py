# leadintake/services/__init__.py
"""
Business logic: form validation, lead submission, email dispatch, rate limiting
and site content lookups.
"""

from leadintake.services.email_dispatch import (
    ConsoleEmailSender,
    EmailMessage,
    EmailSender,
    EmailSendResult,
    RecordingEmailSender,
    ResendEmailSender,
    get_email_sender,
)
from leadintake.services.form import MultiStepForm
from leadintake.services.rate_limit import InMemoryRateLimiter, RateLimiter, RedisRateLimiter
from leadintake.services.sanitize import sanitize_input
from leadintake.services.submission import submit_lead
from leadintake.services.validation import (
    is_valid_email,
    is_valid_phone,
    is_valid_postcode,
    validate_all,
    validate_step,
)

__all__ = [
    # Email
    "ConsoleEmailSender",
    "EmailMessage",
    "EmailSender",
    "EmailSendResult",
    "RecordingEmailSender",
    "ResendEmailSender",
    "get_email_sender",
    # Form workflow
    "MultiStepForm",
    "submit_lead",
    "sanitize_input",
    # Rate limiting
    "InMemoryRateLimiter",
    "RateLimiter",
    "RedisRateLimiter",
    # Validation
    "is_valid_email",
    "is_valid_phone",
    "is_valid_postcode",
    "validate_all",
    "validate_step",
]
