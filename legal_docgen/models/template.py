"""Document template models"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class QuestionType(str, Enum):
    """Kinds of answers a question accepts"""
    TEXT = "text"
    SELECT = "select"
    DATE = "date"
    NUMBER = "number"
    TEXTAREA = "textarea"   # Multi-line text
    BOOLEAN = "boolean"


class TemplateCategory(str, Enum):
    """Document families"""
    CONTRAT = "contrat"         # Contract
    BAIL = "bail"               # Lease
    VENTE = "vente"             # Sale
    PROCURATION = "procuration" # Power of attorney
    AUTRE = "autre"             # Other


class QuestionOption(BaseModel):
    """A choice offered by a select question"""
    value: str
    label: str


class ValidationRule(BaseModel):
    """Per-question answer constraints"""
    pattern: Optional[str] = None  # regex, searched anywhere in the answer
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    message: Optional[str] = None


class Question(BaseModel):
    """A single prompt in a document questionnaire"""
    id: str
    text: str
    type: QuestionType = QuestionType.TEXT
    required: bool = False
    placeholder: Optional[str] = None
    help_text: Optional[str] = None
    options: list[QuestionOption] = []
    depends_on: Optional[str] = None  # Asked only when this answer is truthy
    validation: Optional[ValidationRule] = None

    def option_values(self) -> list[str]:
        return [o.value for o in self.options]


class DocumentSummary(BaseModel):
    """Lightweight listing entry for a template"""
    id: str
    name: str
    description: str
    category: TemplateCategory
    estimated_time: str = ""


class DocumentTemplate(BaseModel):
    """A document type: its questionnaire and its placeholder body"""
    id: str
    name: str
    description: str
    category: TemplateCategory = TemplateCategory.AUTRE
    legal_basis: str = ""
    estimated_time: str = ""
    required_fields: list[str] = []
    optional_fields: list[str] = []
    legal_notices: list[str] = []
    questions: list[Question]
    document_body: str

    model_config = {"frozen": True}

    def get_question(self, question_id: str) -> Optional[Question]:
        """Find a question by id"""
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    def label_for(self, field_id: str) -> str:
        """Question text for a field, falling back to the id"""
        question = self.get_question(field_id)
        return question.text if question else field_id

    def summary(self) -> DocumentSummary:
        return DocumentSummary(
            id=self.id,
            name=self.name,
            description=self.description,
            category=self.category,
            estimated_time=self.estimated_time,
        )
