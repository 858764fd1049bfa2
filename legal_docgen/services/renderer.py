"""Document renderer - resolves conditional blocks and placeholders in a template body"""

import logging
import re
from typing import Optional

from legal_docgen.models.answer import (
    AnswerValue,
    Answers,
    GenerationErrorCode,
    GenerationResult,
    MissingField,
)
from legal_docgen.models.template import DocumentTemplate

logger = logging.getLogger(__name__)

# An innermost section: an opening tag whose body holds no other opening tag,
# up to the first closing tag.
#   {{#field}} {{^field}} {{#eq field "v"}} {{#ne field "v"}}
SECTION_RE = re.compile(
    r'\{\{([#^])\s*(?:(eq|ne)\s+)?(\w+)(?:\s+"([^"]*)")?\s*\}\}'
    r'((?:(?!\{\{[#^]).)*?)'
    r'\{\{/\s*(\w+)\s*\}\}',
    re.DOTALL,
)
PLACEHOLDER_RE = re.compile(r'\{\{\s*(\w+)\s*\}\}')
ANY_TAG_RE = re.compile(r'\{\{.*?\}\}', re.DOTALL)
BLANK_LINES_RE = re.compile(r'\n\s*\n\s*\n')

MISSING_FIELD_MESSAGE = "Information manquante : {label}"
NOT_FOUND_MESSAGE = "Template de document non trouvé"


def is_empty(value: Optional[AnswerValue]) -> bool:
    """An answer counts as given unless it is None or blank text"""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_truthy(value: Optional[AnswerValue]) -> bool:
    """
    Truth test shared by conditional blocks and question dependencies.

    Falsy: None, blank text, False and the string "false" (any case).
    Everything else, zero included, is truthy.
    """
    if is_empty(value):
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() == "false":
        return False
    return True


def stringify(value: Optional[AnswerValue]) -> str:
    """Text form of an answer as it appears in a document"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _neutralize_braces(text: str) -> str:
    # Answer text must not leave a placeholder delimiter in the output
    text = re.sub(r'\{{2,}', '{', text)
    return re.sub(r'\}{2,}', '}', text)


def _section_kept(kind: str, operator: Optional[str], field: str, operand: Optional[str], answers: Answers) -> bool:
    value = answers.get(field)
    if operator == "eq":
        result = not is_empty(value) and stringify(value) == (operand or "")
    elif operator == "ne":
        result = is_empty(value) or stringify(value) != (operand or "")
    else:
        result = is_truthy(value)
    return result if kind == "#" else not result


def resolve_sections(body: str, answers: Answers) -> str:
    """
    Resolve conditional blocks, innermost first, until none remain.

    Each pass removes at least one opening tag, so the loop terminates.
    """
    def replace(match: re.Match) -> str:
        kind, operator, field, operand, content, closing = match.groups()
        expected = operator or field
        if closing != expected:
            logger.warning(f"Mismatched section: opened '{expected}', closed '{closing}'")
        return content if _section_kept(kind, operator, field, operand, answers) else ""

    while True:
        body, count = SECTION_RE.subn(replace, body)
        if count == 0:
            return body


def substitute_placeholders(body: str, answers: Answers) -> str:
    """Replace {{field}} with the answer text, or nothing when unanswered"""
    def replace(match: re.Match) -> str:
        placeholder = PLACEHOLDER_RE.fullmatch(match.group(0))
        if placeholder is None:
            # Stray section tag or malformed token
            return ""
        return stringify(answers.get(placeholder.group(1)))

    return _neutralize_braces(ANY_TAG_RE.sub(replace, body))


def render_body(body: str, answers: Answers) -> str:
    """
    Render a template body.

    Pure function of (body, answers): conditional blocks first, then scalar
    placeholders, then blank-line collapsing and trimming.
    """
    text = resolve_sections(body, answers)
    text = substitute_placeholders(text, answers)
    text = BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()


def find_missing_fields(template: DocumentTemplate, answers: Answers) -> list[MissingField]:
    """Every required field without a non-empty answer, in declaration order"""
    return [
        MissingField(id=field_id, label=template.label_for(field_id))
        for field_id in template.required_fields
        if is_empty(answers.get(field_id))
    ]


class DocumentRenderer:
    """Produces final documents from a template and a complete answer set"""

    def render(self, template: DocumentTemplate, answers: Answers) -> GenerationResult:
        """Check required fields, then render. No partial document on failure."""
        missing = find_missing_fields(template, answers)
        if missing:
            return GenerationResult(
                ok=False,
                error_code=GenerationErrorCode.MISSING_REQUIRED,
                missing_fields=missing,
                errors=[MISSING_FIELD_MESSAGE.format(label=f.label) for f in missing],
            )

        return GenerationResult(ok=True, document=render_body(template.document_body, answers))

    @staticmethod
    def not_found(document_id: str) -> GenerationResult:
        return GenerationResult(
            ok=False,
            error_code=GenerationErrorCode.NOT_FOUND,
            errors=[f"{NOT_FOUND_MESSAGE} : {document_id}"],
        )
