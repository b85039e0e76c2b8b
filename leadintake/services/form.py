# leadintake/services/form.py
from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Optional

from leadintake.core.config import Settings, settings as default_settings
from leadintake.schemas.lead import LeadSubmission, SubmissionResult
from leadintake.services.email_dispatch import EmailSender
from leadintake.services.submission import submit_lead
from leadintake.services.validation import TOTAL_STEPS, ValidationErrors, validate_step


class MultiStepForm:
    """
    Tracks which of the four steps is active and the errors shown for it.

    ``next`` only advances when the current step validates; ``submit`` re-checks
    every step in order and stops at the first failure, so an invalid step never
    lets the lead reach dispatch.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or default_settings
        self.data = LeadSubmission()
        self.current_step = 1
        self.errors: ValidationErrors = {}
        self.result: Optional[SubmissionResult] = None

    @property
    def is_last_step(self) -> bool:
        return self.current_step == TOTAL_STEPS

    def update(self, field: str, value: Any) -> None:
        if not hasattr(self.data, field):
            raise AttributeError(f"Unknown form field: {field}")
        self.data = replace(self.data, **{field: value})
        self.errors.pop(field, None)

    def set_photos(self, photos: List[Any]) -> None:
        self.data = replace(self.data, photos=list(photos))
        for key in [k for k in self.errors if k.startswith("photo-")]:
            del self.errors[key]

    def validate_current(self) -> bool:
        self.errors = self._validate(self.current_step)
        return not self.errors

    def next(self) -> bool:
        if not self.validate_current():
            return False
        self.current_step = min(self.current_step + 1, TOTAL_STEPS)
        return True

    def back(self) -> None:
        self.current_step = max(self.current_step - 1, 1)

    async def submit(self, sender: EmailSender) -> SubmissionResult:
        if not self.validate_current():
            return self._failed_result()

        for step in range(1, TOTAL_STEPS + 1):
            errors = self._validate(step)
            if errors:
                self.current_step = step
                self.errors = errors
                return self._failed_result()

        self.result = await submit_lead(self.data, sender, settings=self.settings)
        return self.result

    def _validate(self, step: int) -> ValidationErrors:
        return validate_step(
            step,
            self.data,
            max_photo_size=self.settings.max_photo_size_bytes,
            allowed_photo_types=self.settings.photo_types(),
        )

    def _failed_result(self) -> SubmissionResult:
        first = next(iter(self.errors.values()))
        return SubmissionResult.failed(first.code, first.message)
