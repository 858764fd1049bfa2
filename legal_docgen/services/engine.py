"""Legal document engine - the operations offered to HTTP handlers and the CLI"""

import logging
from typing import Any, Optional

from legal_docgen.models.answer import (
    Answers,
    GenerationResult,
    ValidationErrorCode,
    ValidationResult,
)
from legal_docgen.models.template import DocumentSummary, DocumentTemplate, Question
from legal_docgen.services import navigator
from legal_docgen.services.registry import TemplateRegistry, build_default_registry
from legal_docgen.services.renderer import DocumentRenderer
from legal_docgen.services.validator import validate_answer

logger = logging.getLogger(__name__)


class LegalDocumentEngine:
    """
    Stateless engine over an immutable template registry.

    Each document session is the caller's answers mapping, passed to every
    call and never modified here, so concurrent sessions need no coordination.
    """

    def __init__(self, registry: TemplateRegistry, renderer: Optional[DocumentRenderer] = None):
        self.registry = registry
        self.renderer = renderer or DocumentRenderer()

    def list_documents(self) -> list[DocumentSummary]:
        """Summaries of every template, in registration order"""
        return self.registry.get_available_documents()

    def get_template(self, document_id: str) -> Optional[DocumentTemplate]:
        """Full template, or None for an unknown id"""
        return self.registry.get_template(document_id)

    def next_question(self, document_id: str, answers: Answers) -> Optional[Question]:
        """Next eligible unanswered question; None when done or unknown"""
        template = self.registry.get_template(document_id)
        if not template:
            return None
        return navigator.next_question(template, answers)

    def validate_answer(self, question: Question, value: Any) -> ValidationResult:
        """Validate one proposed answer; the caller commits it on success"""
        return validate_answer(question, value)

    def validate_answer_for(self, document_id: str, question_id: str, value: Any) -> Optional[ValidationResult]:
        """Validate by ids. None when the document or question is unknown."""
        template = self.registry.get_template(document_id)
        if not template:
            return None
        question = template.get_question(question_id)
        if not question:
            return None
        return validate_answer(question, value)

    def completion_rate(self, document_id: str, answers: Answers) -> int:
        """Progress percentage 0-100 over the currently eligible questions"""
        template = self.registry.get_template(document_id)
        if not template:
            return 0
        return navigator.completion_rate(template, answers)

    def generate(self, document_id: str, answers: Answers) -> GenerationResult:
        """Render the document, or report every missing required field"""
        template = self.registry.get_template(document_id)
        if not template:
            logger.info(f"Generation requested for unknown template '{document_id}'")
            return self.renderer.not_found(document_id)

        result = self.renderer.render(template, answers)
        if not result.ok:
            logger.info(
                f"Generation of '{document_id}' refused, missing: "
                f"{', '.join(result.missing_field_ids)}"
            )
        return result

    def invalid_answers(self, document_id: str, answers: Answers) -> dict[str, ValidationResult]:
        """
        Re-validate every answered, currently eligible question.

        Returns the refused ones keyed by question id. Used before batch
        generation, where answers did not go through the question flow.
        """
        template = self.registry.get_template(document_id)
        if not template:
            return {}

        refused = {}
        for question in navigator.eligible_questions(template, answers):
            if question.id not in answers:
                continue
            result = validate_answer(question, answers[question.id])
            # Blank required answers are reported by generate() as missing
            if not result.ok and result.error_code != ValidationErrorCode.REQUIRED:
                refused[question.id] = result
        return refused


def create_engine(registry: Optional[TemplateRegistry] = None) -> LegalDocumentEngine:
    """Build an engine over the given registry, or the default one"""
    return LegalDocumentEngine(registry or build_default_registry())
