# leadintake/schemas/__init__.py
"""
Pydantic schemas and value types for lead submissions and site content.
"""

from leadintake.schemas.lead import (
    ErrorCode,
    FieldError,
    LeadSubmission,
    PhotoAttachment,
    ServiceType,
    SubmissionResult,
)

__all__ = [
    "ErrorCode",
    "FieldError",
    "LeadSubmission",
    "PhotoAttachment",
    "ServiceType",
    "SubmissionResult",
]
