"""Legal documents API routes - templates, question flow, validation, generation, export"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from legal_docgen.api.schemas import (
    DocumentMetadata,
    DocumentStatistics,
    GenerateData,
    GenerateRequest,
    GenerateResponse,
    NextQuestionData,
    NextQuestionRequest,
    NextQuestionResponse,
    QuestionInfo,
    TemplateInfo,
    TemplateResponse,
    TemplatesResponse,
    ValidateData,
    ValidateRequest,
    ValidateResponse,
)
from legal_docgen.models.answer import GenerationErrorCode, GenerationResult
from legal_docgen.models.template import DocumentTemplate
from legal_docgen.services.engine import LegalDocumentEngine
from legal_docgen.services.renderer import is_empty
from legal_docgen.utils.text import sanitize_filename

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/legal-documents", tags=["legal-documents"])

DOCUMENT_NOT_FOUND = "Document non trouvé"
QUESTION_NOT_FOUND = "Question non trouvée"


def get_engine(request: Request) -> LegalDocumentEngine:
    """Engine built by create_app()"""
    return request.app.state.engine


def _require_template(engine: LegalDocumentEngine, document_id: str) -> DocumentTemplate:
    template = engine.get_template(document_id)
    if not template:
        raise HTTPException(status_code=404, detail=DOCUMENT_NOT_FOUND)
    return template


def _generate_or_raise(engine: LegalDocumentEngine, document_id: str, answers: dict) -> GenerationResult:
    result = engine.generate(document_id, answers)
    if result.ok:
        return result
    if result.error_code == GenerationErrorCode.NOT_FOUND:
        raise HTTPException(status_code=404, detail=DOCUMENT_NOT_FOUND)
    raise HTTPException(
        status_code=400,
        detail={
            "error": "Erreur de génération",
            "details": result.errors,
            "missing_fields": [f.model_dump() for f in result.missing_fields],
        },
    )


@router.get("/templates", response_model=TemplatesResponse)
async def list_templates(engine: LegalDocumentEngine = Depends(get_engine)):
    """List available document templates"""
    return TemplatesResponse(data=engine.list_documents())


@router.get("/templates/{document_id}", response_model=TemplateResponse)
async def get_template(document_id: str, engine: LegalDocumentEngine = Depends(get_engine)):
    """Full template: questions and body"""
    return TemplateResponse(data=_require_template(engine, document_id))


@router.post("/next-question", response_model=NextQuestionResponse)
async def next_question(request: NextQuestionRequest, engine: LegalDocumentEngine = Depends(get_engine)):
    """Next question to ask, with progress"""
    template = _require_template(engine, request.document_id)
    question = engine.next_question(request.document_id, request.current_answers)

    return NextQuestionResponse(data=NextQuestionData(
        next_question=question,
        template=TemplateInfo(
            id=template.id,
            name=template.name,
            description=template.description,
            legal_basis=template.legal_basis,
        ),
        completion_rate=engine.completion_rate(request.document_id, request.current_answers),
        is_complete=question is None,
    ))


@router.post("/validate", response_model=ValidateResponse)
async def validate(request: ValidateRequest, engine: LegalDocumentEngine = Depends(get_engine)):
    """Validate one answer before the client stores it"""
    template = _require_template(engine, request.document_id)
    question = template.get_question(request.question_id)
    if not question:
        raise HTTPException(status_code=404, detail=QUESTION_NOT_FOUND)

    result = engine.validate_answer(question, request.answer)

    return ValidateResponse(data=ValidateData(
        is_valid=result.ok,
        error_code=result.error_code,
        error=result.message,
        value=result.value,
        question=QuestionInfo(
            id=question.id,
            text=question.text,
            type=question.type,
            required=question.required,
        ),
    ))


@router.post("/generate", response_model=GenerateResponse)
async def generate(request: GenerateRequest, engine: LegalDocumentEngine = Depends(get_engine)):
    """Render the final document"""
    result = _generate_or_raise(engine, request.document_id, request.answers)
    template = engine.get_template(request.document_id)

    statistics = DocumentStatistics(
        completion_rate=engine.completion_rate(template.id, request.answers),
        total_questions=len(template.questions),
        answered_questions=sum(
            1 for q in template.questions if not is_empty(request.answers.get(q.id))
        ),
        required_fields_filled=sum(
            1 for f in template.required_fields if not is_empty(request.answers.get(f))
        ),
        total_required_fields=len(template.required_fields),
    )

    return GenerateResponse(data=GenerateData(
        document=result.document,
        metadata=DocumentMetadata(
            document_id=template.id,
            document_name=template.name,
            document_category=template.category,
            legal_basis=template.legal_basis,
        ),
        statistics=statistics,
        legal_notices=template.legal_notices,
        answers=request.answers,
    ))


@router.post("/export")
async def export_text(request: GenerateRequest, engine: LegalDocumentEngine = Depends(get_engine)):
    """Download the rendered document as a UTF-8 text file"""
    result = _generate_or_raise(engine, request.document_id, request.answers)
    filename = f"{sanitize_filename(request.document_id)}_{date.today().isoformat()}.txt"
    logger.info(f"Exporting {request.document_id} as {filename}")

    return Response(
        content=result.document.encode("utf-8"),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
