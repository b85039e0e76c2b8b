# leadintake/schemas/lead.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ServiceType(str, Enum):
    BATHROOM = "Bathroom"
    EXTENSION = "Extension"
    OTHER = "Other"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class ErrorCode(str, Enum):
    MISSING_SELECTION = "MissingSelection"
    MISSING_FIELD = "MissingField"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_TYPE = "InvalidType"
    TOO_LARGE = "TooLarge"
    TOO_MANY_PHOTOS = "TooManyPhotos"
    EMAIL_DISPATCH_FAILED = "EmailDispatchFailed"
    UNEXPECTED_FAILURE = "UnexpectedFailure"
    RATE_LIMITED = "RateLimited"


@dataclass(frozen=True)
class FieldError:
    code: ErrorCode
    message: str

    def as_dict(self) -> Dict[str, str]:
        return {"code": self.code.value, "message": self.message}


@dataclass(frozen=True)
class PhotoAttachment:
    filename: str
    content_type: str
    content: bytes = b""

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class LeadSubmission:
    """Everything a prospective customer enters across the four form steps."""

    service: str = ""
    postcode: str = ""
    name: str = ""
    phone: str = ""
    email: str = ""
    photos: List[PhotoAttachment] = field(default_factory=list)


class SubmissionResult(BaseModel):
    success: bool
    error: Optional[str] = None
    code: Optional[ErrorCode] = None

    @classmethod
    def ok(cls) -> "SubmissionResult":
        return cls(success=True)

    @classmethod
    def failed(cls, code: ErrorCode, error: str) -> "SubmissionResult":
        return cls(success=False, code=code, error=error)


class PhotoMetadata(BaseModel):
    filename: str = Field(min_length=1, max_length=255)
    content_type: str = Field(default="", max_length=100)
    size: int = Field(ge=0)


class StepValidationRequest(BaseModel):
    service: str = ""
    postcode: str = ""
    name: str = ""
    phone: str = ""
    email: str = ""
    photos: List[PhotoMetadata] = Field(default_factory=list)


class StepValidationResponse(BaseModel):
    step: int
    valid: bool
    errors: Dict[str, Dict[str, str]] = Field(default_factory=dict)
