import pytest

from conftest import MB, make_photo
from leadintake.schemas.lead import ErrorCode, LeadSubmission
from leadintake.services.validation import (
    is_valid_email,
    is_valid_phone,
    is_valid_postcode,
    validate_all,
    validate_contact,
    validate_photos,
    validate_postcode,
    validate_service,
    validate_step,
)


def test_is_valid_postcode():
    assert is_valid_postcode("SW16 1AB") is True
    assert is_valid_postcode("sw16 1ab") is True  # case-insensitive
    assert is_valid_postcode("SW161AB") is True  # space optional
    assert is_valid_postcode("CR0 2AB") is True
    assert is_valid_postcode("W1A 0AX") is True
    assert is_valid_postcode("KT22 7AA") is True

    assert is_valid_postcode("12345") is False
    assert is_valid_postcode("") is False
    assert is_valid_postcode(None) is False
    assert is_valid_postcode("INVALID") is False
    assert is_valid_postcode("SW16  1AB") is False  # two spaces
    assert is_valid_postcode("SW123 1AB") is False  # district too long
    assert is_valid_postcode(" SW16 1AB") is False


def test_is_valid_phone():
    assert is_valid_phone("07468451511") is True
    assert is_valid_phone("+447468451511") is True
    assert is_valid_phone("07468 451 511") is True  # whitespace stripped
    assert is_valid_phone(" +44 7468 451511 ") is True

    assert is_valid_phone("12345") is False
    assert is_valid_phone("") is False
    assert is_valid_phone(None) is False
    assert is_valid_phone("0746845151") is False  # too short
    assert is_valid_phone("074684515111") is False  # too long
    assert is_valid_phone("+4407468451511") is False
    assert is_valid_phone("07468-451511") is False


def test_is_valid_email():
    assert is_valid_email("jane@example.com") is True
    assert is_valid_email("jane.smith@example.co.uk") is True

    assert is_valid_email("") is False
    assert is_valid_email("jane") is False
    assert is_valid_email("jane@example") is False
    assert is_valid_email("jane smith@example.com") is False
    assert is_valid_email("@example.com") is False


def test_validate_service():
    assert validate_service("Bathroom") == {}
    assert validate_service("Extension") == {}
    assert validate_service("Other") == {}

    errors = validate_service("")
    assert errors["service"].code == ErrorCode.MISSING_SELECTION
    assert errors["service"].message == "Please select a service"

    assert validate_service("Kitchen")["service"].code == ErrorCode.MISSING_SELECTION


def test_validate_postcode():
    assert validate_postcode("SW16 1AB") == {}

    errors = validate_postcode("")
    assert errors["postcode"].code == ErrorCode.MISSING_FIELD

    errors = validate_postcode("12345")
    assert errors["postcode"].code == ErrorCode.INVALID_FORMAT
    assert errors["postcode"].message == "Please enter a valid UK postcode"


def test_validate_photos_optional():
    assert validate_photos([]) == {}


def test_validate_photos_type_and_size():
    errors = validate_photos([
        make_photo("big.jpg", "image/jpeg", 6 * MB),
        make_photo("scan.bmp", "image/bmp", 4 * MB),
        make_photo("ok.png", "image/png", 4 * MB),
        make_photo("ok.webp", "image/webp", 5 * MB),  # exactly at the limit
    ])

    assert errors["photo-0"].code == ErrorCode.TOO_LARGE
    assert errors["photo-0"].message == "big.jpg: File too large. Max 5MB"
    assert errors["photo-1"].code == ErrorCode.INVALID_TYPE
    assert errors["photo-1"].message == "scan.bmp: Invalid file type. Use JPEG, PNG, or WebP"
    assert "photo-2" not in errors
    assert "photo-3" not in errors


def test_validate_photos_too_large_wins_over_type():
    errors = validate_photos([make_photo("huge.bmp", "image/bmp", 6 * MB)])
    assert errors["photo-0"].code == ErrorCode.TOO_LARGE


def test_validate_contact():
    assert validate_contact("Jane", "07468451511", "jane@example.com") == {}

    errors = validate_contact("   ", "", "")
    assert errors["name"].code == ErrorCode.MISSING_FIELD
    assert errors["phone"].code == ErrorCode.MISSING_FIELD
    assert errors["email"].code == ErrorCode.MISSING_FIELD

    errors = validate_contact("Jane", "12345", "not-an-email")
    assert "name" not in errors
    assert errors["phone"].code == ErrorCode.INVALID_FORMAT
    assert errors["email"].code == ErrorCode.INVALID_FORMAT


def test_validate_step_only_checks_its_fields(valid_submission):
    submission = LeadSubmission(service="Bathroom", postcode="nope")
    assert validate_step(1, submission) == {}
    assert set(validate_step(2, submission)) == {"postcode"}
    assert validate_step(3, submission) == {}
    assert set(validate_step(4, submission)) == {"name", "phone", "email"}


def test_validate_step_out_of_range(valid_submission):
    with pytest.raises(ValueError):
        validate_step(0, valid_submission)
    with pytest.raises(ValueError):
        validate_step(5, valid_submission)


def test_validate_all_passes(valid_submission):
    assert validate_all(valid_submission) == (None, {})


def test_validate_all_short_circuits_at_postcode(valid_submission):
    valid_submission.postcode = "12345"
    valid_submission.email = "broken"

    failed_step, errors = validate_all(valid_submission)

    assert failed_step == 2
    assert set(errors) == {"postcode"}
