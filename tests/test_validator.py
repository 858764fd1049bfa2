"""Tests for answer validation and coercion"""

from datetime import date

import pytest

from legal_docgen.models.answer import ValidationErrorCode
from legal_docgen.models.template import Question, QuestionType, ValidationRule
from legal_docgen.services.validator import coerce_answer, validate_answer


def make_question(**kwargs) -> Question:
    data = {"id": "q", "text": "Question", "type": "text"}
    data.update(kwargs)
    return Question.model_validate(data)


LEASE_TYPE = make_question(
    id="type_location",
    type="select",
    required=True,
    options=[
        {"value": "vide", "label": "Location vide"},
        {"value": "meuble", "label": "Location meublée"},
    ],
)


class TestRequired:

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_required_refuses_blank(self, raw):
        result = validate_answer(make_question(required=True), raw)
        assert not result.ok
        assert result.error_code == ValidationErrorCode.REQUIRED
        assert result.message == "Cette information est obligatoire"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_optional_blank_is_a_skip(self, raw):
        result = validate_answer(make_question(required=False), raw)
        assert result.ok
        assert result.value == ""

    def test_text_is_trimmed(self):
        assert validate_answer(make_question(), "  Dupont  ").value == "Dupont"


class TestNumber:

    @pytest.mark.parametrize("raw,expected", [
        (850, 850),
        ("850", 850),
        ("45,5", 45.5),
        ("3 500,50", 3500.5),
        (45.0, 45),
        ("1e3", 1000),
    ])
    def test_accepted(self, raw, expected):
        result = validate_answer(make_question(type="number"), raw)
        assert result.ok
        assert result.value == expected

    def test_integral_number_becomes_int(self):
        assert isinstance(coerce_answer(make_question(type="number"), "12.0"), int)

    @pytest.mark.parametrize("raw", ["abc", "12 €", True, "nan", "inf"])
    def test_refused(self, raw):
        result = validate_answer(make_question(type="number"), raw)
        assert not result.ok
        assert result.error_code == ValidationErrorCode.TYPE


class TestDate:

    @pytest.mark.parametrize("raw", ["2025-01-01", "01/01/2025", "01-01-2025", "01.01.2025", date(2025, 1, 1)])
    def test_canonical_iso(self, raw):
        result = validate_answer(make_question(type="date"), raw)
        assert result.ok
        assert result.value == "2025-01-01"

    @pytest.mark.parametrize("raw", ["2025-13-01", "31/02/2025", "demain"])
    def test_refused(self, raw):
        result = validate_answer(make_question(type="date"), raw)
        assert result.error_code == ValidationErrorCode.TYPE


class TestBoolean:

    @pytest.mark.parametrize("raw,expected", [
        (True, "true"), (False, "false"),
        ("oui", "true"), ("Non", "false"),
        ("yes", "true"), ("0", "false"),
        ("true", "true"), ("FAUX", "false"),
    ])
    def test_canonical_strings(self, raw, expected):
        result = validate_answer(make_question(type="boolean"), raw)
        assert result.ok
        assert result.value == expected

    def test_refused(self):
        result = validate_answer(make_question(type="boolean"), "peut-être")
        assert result.error_code == ValidationErrorCode.TYPE
        assert result.message == "Répondez par oui ou non"


class TestSelect:

    def test_value(self):
        assert validate_answer(LEASE_TYPE, "meuble").value == "meuble"

    def test_label_case_and_accents_ignored(self):
        assert validate_answer(LEASE_TYPE, "location MEUBLEE").value == "meuble"
        assert validate_answer(LEASE_TYPE, "Location meublée").value == "meuble"

    def test_loose_value(self):
        question = make_question(type="select", options=[{"value": "3_ans", "label": "3 ans"}])
        assert validate_answer(question, "3-ans").value == "3_ans"

    def test_refused(self):
        result = validate_answer(LEASE_TYPE, "colocation")
        assert not result.ok
        assert result.error_code == ValidationErrorCode.OPTION
        assert "vide, meuble" in result.message


class TestRules:

    SIRET = ValidationRule(
        pattern=r'^[0-9]{3}\s?[0-9]{3}\s?[0-9]{3}\s?[0-9]{5}$',
        message="Format SIRET invalide (14 chiffres)",
    )

    def test_pattern_accepted(self):
        question = make_question(validation=self.SIRET)
        assert validate_answer(question, "123 456 789 01234").ok
        assert validate_answer(question, "12345678901234").ok

    def test_pattern_refused_with_custom_message(self):
        result = validate_answer(make_question(validation=self.SIRET), "1234")
        assert result.error_code == ValidationErrorCode.PATTERN
        assert result.message == "Format SIRET invalide (14 chiffres)"

    def test_pattern_default_message(self):
        question = make_question(validation={"pattern": r"^\d+$"})
        assert validate_answer(question, "abc").message == "Format invalide"

    def test_optional_blank_skips_rules(self):
        assert validate_answer(make_question(validation=self.SIRET), "").ok

    def test_min_length(self):
        question = make_question(type="textarea", validation={"min_length": 10})
        result = validate_answer(question, "court")
        assert result.error_code == ValidationErrorCode.LENGTH
        assert result.message == "Minimum 10 caractères requis"
        assert validate_answer(question, "assez long texte").ok

    def test_max_length(self):
        question = make_question(validation={"max_length": 5})
        result = validate_answer(question, "trop long")
        assert result.error_code == ValidationErrorCode.LENGTH
        assert result.message == "Maximum 5 caractères autorisés"

    def test_rules_apply_to_canonical_value(self):
        question = make_question(type="number", validation={"pattern": r"^\d+$"})
        assert validate_answer(question, "1 200").ok
