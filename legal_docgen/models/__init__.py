"""Data models"""

from legal_docgen.models.template import (
    QuestionType,
    TemplateCategory,
    QuestionOption,
    ValidationRule,
    Question,
    DocumentSummary,
    DocumentTemplate,
)
from legal_docgen.models.answer import (
    AnswerValue,
    Answers,
    ValidationErrorCode,
    GenerationErrorCode,
    ValidationResult,
    MissingField,
    GenerationResult,
)

__all__ = [
    "QuestionType",
    "TemplateCategory",
    "QuestionOption",
    "ValidationRule",
    "Question",
    "DocumentSummary",
    "DocumentTemplate",
    "AnswerValue",
    "Answers",
    "ValidationErrorCode",
    "GenerationErrorCode",
    "ValidationResult",
    "MissingField",
    "GenerationResult",
]
