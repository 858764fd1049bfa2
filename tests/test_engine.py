"""Tests for the legal document engine over the built-in templates"""

import itertools

import pytest

from legal_docgen.models.answer import GenerationErrorCode, ValidationErrorCode
from legal_docgen.models.template import DocumentTemplate, QuestionType
from legal_docgen.services.engine import LegalDocumentEngine, create_engine
from legal_docgen.services.renderer import render_body

BUILTIN_IDS = ["contrat-travail-cdi", "bail-habitation", "contrat-vente", "procuration"]

SAMPLE_VALUES = {
    QuestionType.TEXT: "Valeur {{texte}}",
    QuestionType.TEXTAREA: "Une description assez longue }} pour passer",
    QuestionType.NUMBER: 1200,
    QuestionType.DATE: "2025-01-01",
}


def answer_for(template: DocumentTemplate, question_id: str, switch_on: bool):
    question = template.get_question(question_id)
    if question.type == QuestionType.BOOLEAN:
        return "true" if switch_on else "false"
    if question.type == QuestionType.SELECT:
        values = question.option_values()
        return values[0] if switch_on else values[-1]
    return SAMPLE_VALUES[question.type]


def walk_flow(engine: LegalDocumentEngine, document_id: str, switch_on: bool) -> dict:
    """Answer every question the flow asks"""
    template = engine.get_template(document_id)
    answers = {}
    while True:
        question = engine.next_question(document_id, answers)
        if question is None:
            return answers
        answers[question.id] = answer_for(template, question.id, switch_on)


class TestListing:

    def test_list_documents(self, engine):
        assert [d.id for d in engine.list_documents()] == BUILTIN_IDS

    def test_unknown_document(self, engine):
        assert engine.get_template("nope") is None
        assert engine.next_question("nope", {}) is None
        assert engine.completion_rate("nope", {}) == 0
        assert engine.invalid_answers("nope", {}) == {}

    def test_create_engine_uses_default_registry(self):
        assert [d.id for d in create_engine().list_documents()] == BUILTIN_IDS


class TestValidateAnswer:

    def test_validate_by_ids(self, engine):
        result = engine.validate_answer_for("bail-habitation", "loyer", "850,00")
        assert result.ok
        assert result.value == 850

    def test_validate_by_ids_unknown(self, engine):
        assert engine.validate_answer_for("nope", "loyer", "1") is None
        assert engine.validate_answer_for("bail-habitation", "nope", "1") is None

    def test_validation_does_not_store(self, engine):
        answers = {}
        question = engine.next_question("bail-habitation", answers)
        engine.validate_answer(question, "vide")
        assert engine.next_question("bail-habitation", answers).id == question.id

    def test_siret_rule(self, engine):
        result = engine.validate_answer_for("contrat-vente", "vendeur_siret", "12")
        assert result.error_code == ValidationErrorCode.PATTERN


class TestGenerationProperties:

    @pytest.mark.parametrize("document_id,switch_on", list(itertools.product(BUILTIN_IDS, [True, False])))
    def test_idempotent(self, engine, document_id, switch_on):
        answers = walk_flow(engine, document_id, switch_on)
        first = engine.generate(document_id, answers)
        second = engine.generate(document_id, answers)
        assert first.ok
        assert first.document == second.document

    @pytest.mark.parametrize("document_id,switch_on", list(itertools.product(BUILTIN_IDS, [True, False])))
    def test_no_leftover_tokens(self, engine, document_id, switch_on):
        template = engine.get_template(document_id)
        answers = walk_flow(engine, document_id, switch_on)

        document = engine.generate(document_id, answers).document
        assert "{{" not in document
        assert "}}" not in document

        # Partial answer sets render cleanly too
        ids = list(answers)
        for size in range(len(ids) + 1):
            partial = {k: answers[k] for k in ids[:size]}
            text = render_body(template.document_body, partial)
            assert "{{" not in text
            assert "}}" not in text

    @pytest.mark.parametrize("document_id", BUILTIN_IDS)
    def test_completion_reaches_100(self, engine, document_id):
        answers = walk_flow(engine, document_id, True)
        assert engine.completion_rate(document_id, answers) == 100

    @pytest.mark.parametrize("document_id", BUILTIN_IDS)
    def test_required_gating(self, engine, document_id):
        template = engine.get_template(document_id)
        answers = walk_flow(engine, document_id, True)
        assert engine.generate(document_id, answers).ok

        for field_id in template.required_fields:
            partial = dict(answers)
            partial[field_id] = ""
            result = engine.generate(document_id, partial)
            assert not result.ok
            assert result.missing_field_ids == [field_id]

        result = engine.generate(document_id, {})
        assert result.missing_field_ids == template.required_fields

    def test_unknown_document(self, engine):
        result = engine.generate("nope", {})
        assert not result.ok
        assert result.error_code == GenerationErrorCode.NOT_FOUND


class TestLeaseScenario:

    def test_lease_document(self, engine, lease_answers):
        result = engine.generate("bail-habitation", lease_answers)
        assert result.ok
        document = result.document

        assert document.count("850") == 1
        assert "Le montant du loyer mensuel est fixé à 850 euros." in document
        assert "Dupont Pierre" in document
        assert "{{" not in document
        assert "ARTICLE 4" not in document
        assert "ARTICLE 5" not in document
        assert "DÉPÔT DE GARANTIE" not in document
        assert document.startswith("CONTRAT DE BAIL D'HABITATION VIDE")
        assert "Surface habitable : 45 m²" in document
        assert "Le loyer sont payables Virement le 5." in document

    def test_lease_optional_articles_numbered(self, engine, lease_answers):
        lease_answers.update({"depot_garantie": 850, "travaux": "Peinture 2024", "charges": 120})
        document = engine.generate("bail-habitation", lease_answers).document

        assert "ARTICLE 4 - DÉPÔT DE GARANTIE" in document
        assert "ARTICLE 5 - TRAVAUX" in document
        assert "Le loyer et les charges sont payables" in document

    def test_lease_clauses_numbering_without_deposit(self, engine, lease_answers):
        lease_answers["clauses_particulieres"] = "Animaux interdits"
        document = engine.generate("bail-habitation", lease_answers).document

        assert "ARTICLE 4 - CLAUSES PARTICULIÈRES" in document

    def test_furnished_title(self, engine, lease_answers):
        lease_answers["type_location"] = "meuble"
        document = engine.generate("bail-habitation", lease_answers).document
        assert document.startswith("CONTRAT DE BAIL D'HABITATION MEUBLÉE")

    def test_missing_tenant(self, engine, lease_answers):
        del lease_answers["locataire_nom"]
        result = engine.generate("bail-habitation", lease_answers)

        assert not result.ok
        assert result.document is None
        assert result.error_code == GenerationErrorCode.MISSING_REQUIRED
        assert result.missing_field_ids == ["locataire_nom"]
        assert result.errors == ["Information manquante : Nom complet du locataire"]


class TestInvalidAnswers:

    def test_valid_answers(self, engine, lease_answers):
        assert engine.invalid_answers("bail-habitation", lease_answers) == {}

    def test_reports_refused_answers(self, engine, lease_answers):
        lease_answers["loyer"] = "beaucoup"
        lease_answers["type_location"] = "colocation"
        refused = engine.invalid_answers("bail-habitation", lease_answers)
        assert set(refused) == {"loyer", "type_location"}
        assert refused["loyer"].error_code == ValidationErrorCode.TYPE

    def test_blank_required_left_to_generate(self, engine, lease_answers):
        lease_answers["locataire_nom"] = ""
        assert engine.invalid_answers("bail-habitation", lease_answers) == {}

    def test_ineligible_answers_ignored(self, chain_engine):
        answers = {"name": "Ana", "partner": "false", "kind": "zzz", "partner_name": "x" * 10}
        assert set(chain_engine.invalid_answers("chain", answers)) == {"kind"}
