# leadintake/services/submission.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from leadintake.core.config import Settings, settings as default_settings
from leadintake.core.logging import get_structlog_logger
from leadintake.schemas.lead import ErrorCode, LeadSubmission, SubmissionResult
from leadintake.services.email_dispatch import EmailAttachment, EmailMessage, EmailSender
from leadintake.services.sanitize import sanitize_fields
from leadintake.services.validation import (
    is_valid_email,
    is_valid_phone,
    is_valid_postcode,
    is_valid_service,
    too_many_photos_error,
    validate_photos,
)

logger = get_structlog_logger(__name__)

UNEXPECTED_FAILURE_MESSAGE = "Failed to submit form. Please try again or call us directly."


class SubmissionError(Exception):
    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def dispatch_failure_message(phone: str) -> str:
    return f"We couldn't send your request. Please call us directly at {phone}."


def _format_code(value: Optional[str]) -> ErrorCode:
    """Same split as the step validators: empty is missing, anything else that fails is malformed."""
    return ErrorCode.INVALID_FORMAT if value else ErrorCode.MISSING_FIELD


def check_submission(submission: LeadSubmission, settings: Settings) -> None:
    """
    Server-side re-validation. Raises SubmissionError on the first failing field
    so that nothing invalid reaches dispatch.
    """
    if not is_valid_service(submission.service):
        raise SubmissionError(ErrorCode.MISSING_SELECTION, "Invalid service selection")
    if not is_valid_postcode(submission.postcode):
        raise SubmissionError(_format_code(submission.postcode), "Invalid postcode")
    if not (submission.name or "").strip():
        raise SubmissionError(ErrorCode.MISSING_FIELD, "Name is required")
    if not is_valid_phone(submission.phone):
        raise SubmissionError(_format_code(submission.phone), "Invalid phone number")
    if not is_valid_email(submission.email):
        raise SubmissionError(_format_code(submission.email), "Invalid email address")

    if len(submission.photos) > settings.max_photo_count:
        error = too_many_photos_error(settings.max_photo_count)
        raise SubmissionError(error.code, error.message)

    photo_errors = validate_photos(
        submission.photos,
        max_size=settings.max_photo_size_bytes,
        allowed_types=settings.photo_types(),
    )
    if photo_errors:
        first = next(iter(photo_errors.values()))
        raise SubmissionError(first.code, first.message)


def build_notification_email(
    submission: LeadSubmission,
    settings: Settings,
    submitted_at: datetime,
) -> EmailMessage:
    """Assemble the owner notification: escaped text and HTML bodies plus photo attachments."""
    fields = sanitize_fields({
        "service": submission.service,
        "postcode": submission.postcode,
        "name": submission.name,
        "phone": submission.phone,
        "email": submission.email,
    })
    business = settings.business_name
    photo_count = len(submission.photos)
    timestamp = submitted_at.isoformat()

    rows = [
        ("Service", fields["service"]),
        ("Postcode", fields["postcode"]),
        ("Name", fields["name"]),
        ("Phone", fields["phone"]),
        ("Email", fields["email"]),
        ("Photos", f"{photo_count} file(s) attached"),
    ]

    text = "\n".join(
        [f"New Lead Submission from {business} Website", ""]
        + [f"{label}: {value}" for label, value in rows]
        + ["", f"Submitted: {timestamp}"]
    )

    html_rows = "".join(
        f'<tr><td style="padding:4px 12px 4px 0;font-weight:bold">{label}</td>'
        f'<td style="padding:4px 0">{value}</td></tr>'
        for label, value in rows
    )
    html = (
        f"<h2>New Lead Submission from {business} Website</h2>"
        f"<table>{html_rows}</table>"
        f'<p style="color:#64748b">Submitted: {timestamp}</p>'
    )

    attachments = [
        EmailAttachment.from_bytes(photo.filename, photo.content, photo.content_type)
        for photo in submission.photos
    ]

    return EmailMessage(
        sender=settings.lead_email_from,
        to=settings.recipients(),
        subject=f"New {fields['service']} Lead - {fields['postcode']}",
        html=html,
        text=text,
        reply_to=submission.email,
        attachments=attachments,
    )


async def submit_lead(
    submission: LeadSubmission,
    sender: EmailSender,
    *,
    settings: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> SubmissionResult:
    """
    Validate, assemble and dispatch one lead notification.

    Always returns a SubmissionResult; provider errors and unexpected exceptions
    are converted into a failed result pointing the user at the business phone.
    """
    settings = settings or default_settings
    log = logger.bind(action="submit_lead")

    try:
        check_submission(submission, settings)

        message = build_notification_email(
            submission,
            settings,
            submitted_at=now or datetime.now(timezone.utc),
        )
        result = await sender.send(message)

        if not result.ok:
            log.error(
                "email.dispatch_failed",
                provider=sender.name,
                error=result.error,
                service=submission.service,
            )
            return SubmissionResult.failed(
                ErrorCode.EMAIL_DISPATCH_FAILED,
                dispatch_failure_message(settings.business_phone),
            )

        log.info(
            "lead.submitted",
            provider=sender.name,
            message_id=result.id,
            service=submission.service,
            postcode=submission.postcode,
            photo_count=len(submission.photos),
        )
        return SubmissionResult.ok()

    except SubmissionError as e:
        log.warning("lead.validation_failed", code=e.code.value, message=e.message)
        return SubmissionResult.failed(e.code, e.message)

    except Exception as e:
        log.error(
            "lead.submission_error",
            error_type=type(e).__name__,
            error=str(e),
            exc_info=True,
        )
        return SubmissionResult.failed(ErrorCode.UNEXPECTED_FAILURE, UNEXPECTED_FAILURE_MESSAGE)
