"""Step validators for the four-step quote request form."""
from __future__ import annotations

import re
from typing import Dict, Optional, Protocol, Sequence, Tuple

from leadintake.schemas.lead import ErrorCode, FieldError, LeadSubmission, ServiceType

TOTAL_STEPS = 4

MAX_PHOTO_SIZE = 5 * 1024 * 1024
ALLOWED_PHOTO_TYPES = ("image/jpeg", "image/png", "image/webp")

_POSTCODE_PATTERN = re.compile(r"^[A-Z]{1,2}\d{1,2}[A-Z]?\s?\d[A-Z]{2}$", re.IGNORECASE)
_PHONE_PATTERN = re.compile(r"^(\+44|0)[0-9]{10}$")
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_WHITESPACE = re.compile(r"\s")

ValidationErrors = Dict[str, FieldError]


class PhotoLike(Protocol):
    filename: str
    content_type: str

    @property
    def size(self) -> int: ...


def is_valid_postcode(postcode: Optional[str]) -> bool:
    """Validate UK postcode shape, e.g. ``SW16 1AB``."""
    if not postcode:
        return False
    return bool(_POSTCODE_PATTERN.match(postcode))


def is_valid_phone(phone: Optional[str]) -> bool:
    """Validate UK phone number, with or without the +44 prefix."""
    if not phone:
        return False
    return bool(_PHONE_PATTERN.match(_WHITESPACE.sub("", phone)))


def is_valid_email(email: Optional[str]) -> bool:
    if not email:
        return False
    return bool(_EMAIL_PATTERN.match(email))


def is_valid_service(service: Optional[str]) -> bool:
    return service in ServiceType.values()


def is_allowed_photo_type(content_type: Optional[str], allowed_types: Sequence[str] = ALLOWED_PHOTO_TYPES) -> bool:
    return (content_type or "").lower() in allowed_types


def validate_service(service: Optional[str]) -> ValidationErrors:
    errors: ValidationErrors = {}
    if not is_valid_service(service):
        errors["service"] = FieldError(ErrorCode.MISSING_SELECTION, "Please select a service")
    return errors


def validate_postcode(postcode: Optional[str]) -> ValidationErrors:
    errors: ValidationErrors = {}
    if not postcode:
        errors["postcode"] = FieldError(ErrorCode.MISSING_FIELD, "Please enter your postcode")
    elif not is_valid_postcode(postcode):
        errors["postcode"] = FieldError(ErrorCode.INVALID_FORMAT, "Please enter a valid UK postcode")
    return errors


def too_large_error(filename: str, max_size: int = MAX_PHOTO_SIZE) -> FieldError:
    return FieldError(ErrorCode.TOO_LARGE, f"{filename}: File too large. Max {max_size // (1024 * 1024)}MB")


def too_many_photos_error(max_count: int) -> FieldError:
    return FieldError(ErrorCode.TOO_MANY_PHOTOS, f"Please attach no more than {max_count} photos")


def validate_photos(
    photos: Sequence[PhotoLike],
    max_size: int = MAX_PHOTO_SIZE,
    allowed_types: Sequence[str] = ALLOWED_PHOTO_TYPES,
) -> ValidationErrors:
    """
    Check each attached photo. Photos are optional, so an empty sequence is valid.
    A file that is both the wrong type and too large is reported as too large.
    """
    errors: ValidationErrors = {}
    for index, photo in enumerate(photos):
        key = f"photo-{index}"
        if not is_allowed_photo_type(photo.content_type, allowed_types):
            errors[key] = FieldError(
                ErrorCode.INVALID_TYPE,
                f"{photo.filename}: Invalid file type. Use JPEG, PNG, or WebP",
            )
        if photo.size > max_size:
            errors[key] = too_large_error(photo.filename, max_size)
    return errors


def validate_contact(name: Optional[str], phone: Optional[str], email: Optional[str]) -> ValidationErrors:
    errors: ValidationErrors = {}

    if not (name or "").strip():
        errors["name"] = FieldError(ErrorCode.MISSING_FIELD, "Please enter your name")

    if not phone:
        errors["phone"] = FieldError(ErrorCode.MISSING_FIELD, "Please enter your phone number")
    elif not is_valid_phone(phone):
        errors["phone"] = FieldError(ErrorCode.INVALID_FORMAT, "Please enter a valid UK phone number")

    if not email:
        errors["email"] = FieldError(ErrorCode.MISSING_FIELD, "Please enter your email")
    elif not is_valid_email(email):
        errors["email"] = FieldError(ErrorCode.INVALID_FORMAT, "Please enter a valid email address")

    return errors


def validate_step(
    step: int,
    submission: LeadSubmission,
    max_photo_size: int = MAX_PHOTO_SIZE,
    allowed_photo_types: Sequence[str] = ALLOWED_PHOTO_TYPES,
) -> ValidationErrors:
    """Validate only the fields collected at ``step`` (1-4)."""
    if step == 1:
        return validate_service(submission.service)
    if step == 2:
        return validate_postcode(submission.postcode)
    if step == 3:
        return validate_photos(submission.photos, max_photo_size, allowed_photo_types)
    if step == 4:
        return validate_contact(submission.name, submission.phone, submission.email)
    raise ValueError(f"step must be between 1 and {TOTAL_STEPS}, got {step}")


def validate_all(
    submission: LeadSubmission,
    max_photo_size: int = MAX_PHOTO_SIZE,
    allowed_photo_types: Sequence[str] = ALLOWED_PHOTO_TYPES,
) -> Tuple[Optional[int], ValidationErrors]:
    """
    Walk the steps in order and stop at the first one that fails.
    Returns ``(failed_step, errors)``; ``failed_step`` is None when everything passes.
    """
    for step in range(1, TOTAL_STEPS + 1):
        errors = validate_step(step, submission, max_photo_size, allowed_photo_types)
        if errors:
            return step, errors
    return None, {}
