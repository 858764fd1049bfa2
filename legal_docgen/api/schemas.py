"""Request/response schemas for the legal documents API"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from legal_docgen.models.answer import AnswerValue, ValidationErrorCode
from legal_docgen.models.template import (
    DocumentSummary,
    DocumentTemplate,
    Question,
    QuestionType,
    TemplateCategory,
)


class TemplatesResponse(BaseModel):
    """Response for listing document templates"""
    success: bool = True
    data: list[DocumentSummary] = []
    message: str = "Documents juridiques français disponibles"


class TemplateResponse(BaseModel):
    """A full template"""
    success: bool = True
    data: DocumentTemplate


class NextQuestionRequest(BaseModel):
    """Answers collected so far for a document"""
    document_id: str = Field(..., min_length=1)
    current_answers: dict[str, Optional[AnswerValue]] = {}


class TemplateInfo(BaseModel):
    """Template header shown alongside each question"""
    id: str
    name: str
    description: str
    legal_basis: str = ""


class NextQuestionData(BaseModel):
    next_question: Optional[Question] = None
    template: TemplateInfo
    completion_rate: int = 0
    is_complete: bool = False


class NextQuestionResponse(BaseModel):
    success: bool = True
    data: NextQuestionData


class ValidateRequest(BaseModel):
    """A single answer to check"""
    document_id: str = Field(..., min_length=1)
    question_id: str = Field(..., min_length=1)
    answer: Any = None


class QuestionInfo(BaseModel):
    id: str
    text: str
    type: QuestionType
    required: bool


class ValidateData(BaseModel):
    is_valid: bool
    error_code: Optional[ValidationErrorCode] = None
    error: Optional[str] = None
    value: Optional[AnswerValue] = None
    question: QuestionInfo


class ValidateResponse(BaseModel):
    success: bool = True
    data: ValidateData


class GenerateRequest(BaseModel):
    """All answers for a document"""
    document_id: str = Field(..., min_length=1)
    answers: dict[str, Optional[AnswerValue]]


class DocumentMetadata(BaseModel):
    document_id: str
    document_name: str
    document_category: TemplateCategory
    legal_basis: str = ""
    generated_at: datetime = Field(default_factory=datetime.now)
    format: str = "text"


class DocumentStatistics(BaseModel):
    completion_rate: int = 0
    total_questions: int = 0
    answered_questions: int = 0
    required_fields_filled: int = 0
    total_required_fields: int = 0


class GenerateData(BaseModel):
    document: str
    metadata: DocumentMetadata
    statistics: DocumentStatistics
    legal_notices: list[str] = []
    answers: dict[str, Optional[AnswerValue]] = {}


class GenerateResponse(BaseModel):
    success: bool = True
    data: GenerateData


class HealthResponse(BaseModel):
    """Health check response"""
    status: str  # "ok" | "error"
    version: str
    templates: int = 0
