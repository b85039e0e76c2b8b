# leadintake/routes/leads.py
from __future__ import annotations

from typing import List, Optional, Sequence

from fastapi import APIRouter, Depends, Path, Request, Response, status
from starlette.datastructures import FormData, UploadFile

from leadintake.core.config import settings
from leadintake.core.logging import get_structlog_logger
from leadintake.schemas.lead import (
    ErrorCode,
    LeadSubmission,
    PhotoAttachment,
    StepValidationRequest,
    StepValidationResponse,
    SubmissionResult,
)
from leadintake.services.email_dispatch import EmailSender, get_email_sender
from leadintake.services.rate_limit import RateLimiter, get_rate_limiter
from leadintake.services.submission import SubmissionError, submit_lead
from leadintake.services.validation import (
    MAX_PHOTO_SIZE,
    TOTAL_STEPS,
    too_large_error,
    too_many_photos_error,
    validate_photos,
    validate_step,
)

router = APIRouter()

_STATUS_BY_CODE = {
    ErrorCode.EMAIL_DISPATCH_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.UNEXPECTED_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
}

_sender: Optional[EmailSender] = None


def get_lead_sender() -> EmailSender:
    """Dependency returning the configured email provider."""
    global _sender
    if _sender is None:
        _sender = get_email_sender(settings)
    return _sender


def get_client_ip(request: Request, trusted_proxies: Sequence[str] = ()) -> str:
    """
    Address the rate limit is keyed on. ``X-Forwarded-For`` is only believed when
    the socket peer is a trusted proxy; hops are walked right to left, skipping
    trusted proxies, so a client cannot choose its own key.
    """
    peer = request.client.host if request.client else "unknown"
    if peer not in trusted_proxies:
        return peer

    forwarded_for = request.headers.get("X-Forwarded-For", "")
    hops = [hop.strip() for hop in forwarded_for.split(",") if hop.strip()]
    for hop in reversed(hops):
        if hop not in trusted_proxies:
            return hop
    return hops[0] if hops else peer


def status_for_result(result: SubmissionResult) -> int:
    if result.success:
        return status.HTTP_200_OK
    return _STATUS_BY_CODE.get(result.code, status.HTTP_400_BAD_REQUEST)


async def read_photos(
    form: FormData,
    max_size: int = MAX_PHOTO_SIZE,
    max_count: int = 10,
) -> List[PhotoAttachment]:
    """
    Collect ``photo-0``, ``photo-1``, ... until the first missing index. Empty files are skipped.

    Raises SubmissionError before reading any part into memory when there are too
    many parts, and never reads more than ``max_size + 1`` bytes of a single part.
    """
    uploads: List[UploadFile] = []
    index = 0
    while f"photo-{index}" in form:
        upload = form.get(f"photo-{index}")
        if isinstance(upload, UploadFile):
            uploads.append(upload)
        index += 1

    if len(uploads) > max_count:
        error = too_many_photos_error(max_count)
        raise SubmissionError(error.code, error.message)

    photos: List[PhotoAttachment] = []
    for position, upload in enumerate(uploads):
        filename = upload.filename or f"photo-{position}"
        if upload.size is not None and upload.size > max_size:
            error = too_large_error(filename, max_size)
            raise SubmissionError(error.code, error.message)

        content = await upload.read(max_size + 1)
        if len(content) > max_size:
            error = too_large_error(filename, max_size)
            raise SubmissionError(error.code, error.message)
        if content:
            photos.append(
                PhotoAttachment(
                    filename=filename,
                    content_type=upload.content_type or "",
                    content=content,
                )
            )
    return photos


def _text(form: FormData, key: str) -> str:
    value = form.get(key)
    return value if isinstance(value, str) else ""


@router.post(
    "/leads",
    response_model=SubmissionResult,
    response_model_exclude_none=True,
    summary="Submit a quote request",
)
async def create_lead(
    request: Request,
    response: Response,
    limiter: RateLimiter = Depends(get_rate_limiter),
    sender: EmailSender = Depends(get_lead_sender),
) -> SubmissionResult:
    client_ip = get_client_ip(request, settings.proxies())
    logger = get_structlog_logger(__name__).bind(route="/api/leads", action="create")

    if not await limiter.allow(client_ip):
        logger.warning("rate_limit.exceeded", client_ip=client_ip, limit=limiter.limit)
        response.status_code = status.HTTP_429_TOO_MANY_REQUESTS
        response.headers["Retry-After"] = str(limiter.window_seconds)
        return SubmissionResult.failed(
            ErrorCode.RATE_LIMITED,
            "Too many submissions. Please try again later or call us directly "
            f"at {settings.business_phone}.",
        )

    form = await request.form()
    try:
        photos = await read_photos(
            form,
            max_size=settings.max_photo_size_bytes,
            max_count=settings.max_photo_count,
        )
        submission = LeadSubmission(
            service=_text(form, "service"),
            postcode=_text(form, "postcode"),
            name=_text(form, "name"),
            phone=_text(form, "phone"),
            email=_text(form, "email"),
            photos=photos,
        )
    except SubmissionError as e:
        logger.warning("lead.upload_rejected", code=e.code.value, message=e.message)
        response.status_code = status.HTTP_400_BAD_REQUEST
        return SubmissionResult.failed(e.code, e.message)
    finally:
        await form.close()

    result = await submit_lead(submission, sender, settings=settings)
    response.status_code = status_for_result(result)
    return result


@router.post(
    "/leads/steps/{step}",
    response_model=StepValidationResponse,
    summary="Validate one step of the quote form",
)
async def validate_lead_step(
    body: StepValidationRequest,
    step: int = Path(ge=1, le=TOTAL_STEPS),
) -> StepValidationResponse:
    if step == 3 and len(body.photos) > settings.max_photo_count:
        errors = {"photos": too_many_photos_error(settings.max_photo_count)}
    elif step == 3:
        errors = validate_photos(
            body.photos,
            max_size=settings.max_photo_size_bytes,
            allowed_types=settings.photo_types(),
        )
    else:
        submission = LeadSubmission(
            service=body.service,
            postcode=body.postcode,
            name=body.name,
            phone=body.phone,
            email=body.email,
        )
        errors = validate_step(step, submission)

    return StepValidationResponse(
        step=step,
        valid=not errors,
        errors={field: error.as_dict() for field, error in errors.items()},
    )
