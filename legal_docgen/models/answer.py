"""Answer, validation and generation result models"""

from enum import Enum
from typing import Mapping, Optional, Union

from pydantic import BaseModel

# A single accepted answer. Booleans are stored as canonical "true"/"false"
# strings once validated; raw bools are still read when callers supply them.
AnswerValue = Union[str, int, float, bool]

Answers = Mapping[str, Optional[AnswerValue]]


class ValidationErrorCode(str, Enum):
    """Why a proposed answer was refused"""
    REQUIRED = "required"
    TYPE = "type"           # Not a number / date / yes-no
    OPTION = "option"       # Not one of the select options
    PATTERN = "pattern"
    LENGTH = "length"


class GenerationErrorCode(str, Enum):
    """Why a document could not be rendered"""
    NOT_FOUND = "not_found"
    MISSING_REQUIRED = "missing_required"


class ValidationResult(BaseModel):
    """Outcome of validating one answer"""
    ok: bool
    value: Optional[AnswerValue] = None
    error_code: Optional[ValidationErrorCode] = None
    message: Optional[str] = None

    @classmethod
    def accepted(cls, value: AnswerValue) -> "ValidationResult":
        return cls(ok=True, value=value)

    @classmethod
    def refused(cls, code: ValidationErrorCode, message: str) -> "ValidationResult":
        return cls(ok=False, error_code=code, message=message)


class MissingField(BaseModel):
    """A required field without a usable answer"""
    id: str
    label: str


class GenerationResult(BaseModel):
    """Outcome of rendering a document"""
    ok: bool
    document: Optional[str] = None
    error_code: Optional[GenerationErrorCode] = None
    missing_fields: list[MissingField] = []
    errors: list[str] = []

    @property
    def missing_field_ids(self) -> list[str]:
        return [f.id for f in self.missing_fields]
