import pytest

from conftest import MB, make_photo
from leadintake.schemas.lead import ErrorCode
from leadintake.services.form import MultiStepForm


def _fill(form: MultiStepForm) -> None:
    form.update("service", "Extension")
    form.update("postcode", "KT10 9AB")
    form.update("name", "Sam Taylor")
    form.update("phone", "+447700900123")
    form.update("email", "sam@example.com")


def test_next_blocked_until_step_valid():
    form = MultiStepForm()

    assert form.next() is False
    assert form.current_step == 1
    assert form.errors["service"].message == "Please select a service"

    form.update("service", "Bathroom")
    assert "service" not in form.errors
    assert form.next() is True
    assert form.current_step == 2


def test_photos_step_is_optional():
    form = MultiStepForm()
    form.update("service", "Other")
    form.update("postcode", "CR0 2AB")
    form.next()
    form.next()

    assert form.current_step == 3
    assert form.next() is True
    assert form.is_last_step


def test_invalid_photo_blocks_step():
    form = MultiStepForm()
    form.current_step = 3
    form.set_photos([make_photo("plan.pdf", "application/pdf", MB)])

    assert form.next() is False
    assert form.errors["photo-0"].code == ErrorCode.INVALID_TYPE

    form.set_photos([])
    assert form.errors == {}
    assert form.next() is True


def test_back_stops_at_first_step():
    form = MultiStepForm()
    form.back()
    assert form.current_step == 1

    _fill(form)
    form.next()
    form.next()
    form.back()
    assert form.current_step == 2


def test_update_unknown_field():
    with pytest.raises(AttributeError):
        MultiStepForm().update("address", "1 High Street")


@pytest.mark.asyncio
async def test_submit_success(recording_sender):
    form = MultiStepForm()
    _fill(form)
    for _ in range(3):
        assert form.next() is True

    result = await form.submit(recording_sender)

    assert result.success is True
    assert form.result == result
    assert recording_sender.messages[0].subject == "New Extension Lead - KT10 9AB"


@pytest.mark.asyncio
async def test_submit_returns_to_first_invalid_step(recording_sender):
    form = MultiStepForm()
    _fill(form)
    for _ in range(3):
        form.next()
    form.update("postcode", "nowhere")

    result = await form.submit(recording_sender)

    assert result.success is False
    assert result.code == ErrorCode.INVALID_FORMAT
    assert form.current_step == 2
    assert set(form.errors) == {"postcode"}
    assert recording_sender.messages == []


@pytest.mark.asyncio
async def test_submit_dispatch_failure(failing_sender):
    form = MultiStepForm()
    _fill(form)
    form.current_step = 4

    result = await form.submit(failing_sender)

    assert result.success is False
    assert result.code == ErrorCode.EMAIL_DISPATCH_FAILED
    assert form.current_step == 4
