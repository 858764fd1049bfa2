"""Answer validation and per-type coercion"""

import re
from datetime import date, datetime
from typing import Any, Optional

from legal_docgen.models.answer import AnswerValue, ValidationErrorCode, ValidationResult
from legal_docgen.models.template import Question, QuestionType
from legal_docgen.utils.text import normalize_choice, parse_yes_no

REQUIRED_MESSAGE = "Cette information est obligatoire"
DEFAULT_PATTERN_MESSAGE = "Format invalide"
NUMBER_MESSAGE = "Veuillez saisir un nombre"
DATE_MESSAGE = "Date invalide (format attendu : AAAA-MM-JJ ou JJ/MM/AAAA)"
BOOLEAN_MESSAGE = "Répondez par oui ou non"
OPTION_MESSAGE = "Choix invalide. Options possibles : {options}"
MIN_LENGTH_MESSAGE = "Minimum {n} caractères requis"
MAX_LENGTH_MESSAGE = "Maximum {n} caractères autorisés"

DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y", "%d.%m.%Y")


class CoercionError(ValueError):
    """A raw answer cannot be read as the question's type"""

    def __init__(self, code: ValidationErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


def _coerce_number(raw: Any) -> AnswerValue:
    if isinstance(raw, bool):
        raise CoercionError(ValidationErrorCode.TYPE, NUMBER_MESSAGE)
    if isinstance(raw, (int, float)):
        number = raw
    else:
        # French input: "3 500,50" or "45,5"
        text = re.sub(r'\s', '', str(raw)).replace(',', '.')
        try:
            number = float(text)
        except ValueError:
            raise CoercionError(ValidationErrorCode.TYPE, NUMBER_MESSAGE)
    if isinstance(number, float):
        if number != number or number in (float('inf'), float('-inf')):
            raise CoercionError(ValidationErrorCode.TYPE, NUMBER_MESSAGE)
        if number.is_integer():
            return int(number)
    return number


def _coerce_date(raw: Any) -> str:
    if isinstance(raw, datetime):
        return raw.date().isoformat()
    if isinstance(raw, date):
        return raw.isoformat()
    text = str(raw).strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue
    raise CoercionError(ValidationErrorCode.TYPE, DATE_MESSAGE)


def _coerce_boolean(raw: Any) -> str:
    if isinstance(raw, bool):
        parsed: Optional[bool] = raw
    else:
        parsed = parse_yes_no(str(raw))
    if parsed is None:
        raise CoercionError(ValidationErrorCode.TYPE, BOOLEAN_MESSAGE)
    return "true" if parsed else "false"


def _coerce_select(question: Question, raw: Any) -> str:
    text = str(raw).strip()
    if text in question.option_values():
        return text
    # Accept the label or a loose spelling of the value
    wanted = normalize_choice(text)
    for option in question.options:
        if wanted in (normalize_choice(option.value), normalize_choice(option.label)):
            return option.value
    options = ", ".join(question.option_values())
    raise CoercionError(ValidationErrorCode.OPTION, OPTION_MESSAGE.format(options=options))


def coerce_answer(question: Question, raw: Any) -> AnswerValue:
    """Convert a raw answer to the canonical form for the question type"""
    if question.type == QuestionType.NUMBER:
        return _coerce_number(raw)
    if question.type == QuestionType.DATE:
        return _coerce_date(raw)
    if question.type == QuestionType.BOOLEAN:
        return _coerce_boolean(raw)
    if question.type == QuestionType.SELECT and question.options:
        return _coerce_select(question, raw)
    return str(raw).strip()


def validate_answer(question: Question, raw: Any) -> ValidationResult:
    """
    Check one proposed answer against its question's rules.

    Pure: nothing is stored. An empty answer to an optional question is
    accepted as "" (an explicit skip). On success the value is canonical:
    number -> int/float, boolean -> "true"/"false", date -> ISO string.
    """
    if raw is None or str(raw).strip() == "":
        if question.required:
            return ValidationResult.refused(ValidationErrorCode.REQUIRED, REQUIRED_MESSAGE)
        return ValidationResult.accepted("")

    try:
        value = coerce_answer(question, raw)
    except CoercionError as e:
        return ValidationResult.refused(e.code, e.message)

    rule = question.validation
    if rule:
        text = value if isinstance(value, str) else str(value)

        if rule.pattern and not re.search(rule.pattern, text):
            return ValidationResult.refused(
                ValidationErrorCode.PATTERN,
                rule.message or DEFAULT_PATTERN_MESSAGE,
            )

        if rule.min_length is not None and len(text) < rule.min_length:
            return ValidationResult.refused(
                ValidationErrorCode.LENGTH,
                MIN_LENGTH_MESSAGE.format(n=rule.min_length),
            )

        if rule.max_length is not None and len(text) > rule.max_length:
            return ValidationResult.refused(
                ValidationErrorCode.LENGTH,
                MAX_LENGTH_MESSAGE.format(n=rule.max_length),
            )

    return ValidationResult.accepted(value)
