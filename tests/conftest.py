"""Pytest configuration and fixtures"""

import pytest

from legal_docgen.models.template import DocumentTemplate
from legal_docgen.services.engine import LegalDocumentEngine
from legal_docgen.services.registry import TemplateRegistry, load_builtin_templates


@pytest.fixture(autouse=True)
def test_env(tmp_path, monkeypatch):
    """Isolate settings from the developer's environment and .env file"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LEGAL_DOCGEN_TEMPLATES_DIR", raising=False)
    monkeypatch.setenv("LEGAL_DOCGEN_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LEGAL_DOCGEN_OUTPUT_DIR", str(tmp_path / "documents"))

    yield


LEASE_ANSWERS = {
    "type_location": "vide",
    "proprietaire_nom": "Martin Sophie",
    "proprietaire_adresse": "1 rue X, Paris",
    "locataire_nom": "Dupont Pierre",
    "logement_adresse": "2 rue Y, Lyon",
    "logement_description": "3 pièces",
    "superficie": 45,
    "date_effet": "2025-01-01",
    "duree_bail": "3_ans",
    "loyer": 850,
    "modalite_paiement": "Virement le 5",
}


@pytest.fixture
def lease_answers():
    return dict(LEASE_ANSWERS)


@pytest.fixture
def engine():
    """Engine over the built-in French templates"""
    return LegalDocumentEngine(TemplateRegistry(load_builtin_templates()))


def make_chain_template() -> DocumentTemplate:
    """
    Small template with a dependency chain: partner -> partner_name -> partner_alias.

    partner is a yes/no question; partner_alias only makes sense once a
    partner name was given.
    """
    return DocumentTemplate.model_validate({
        "id": "chain",
        "name": "Chain",
        "description": "Test template with a dependency chain",
        "category": "autre",
        "required_fields": ["name"],
        "optional_fields": ["partner", "partner_name", "partner_alias", "kind"],
        "questions": [
            {"id": "name", "text": "Your name", "type": "text", "required": True},
            {"id": "partner", "text": "Do you have a partner?", "type": "boolean"},
            {"id": "partner_name", "text": "Partner name", "type": "text", "depends_on": "partner"},
            {"id": "partner_alias", "text": "Partner alias", "type": "text", "depends_on": "partner_name"},
            {
                "id": "kind",
                "text": "Kind",
                "type": "select",
                "options": [
                    {"value": "a", "label": "Option A"},
                    {"value": "b", "label": "Option B"},
                ],
            },
        ],
        "document_body": (
            "NAME {{name}}\n"
            "{{#partner}}PARTNER {{partner_name}}{{#partner_alias}} ({{partner_alias}}){{/partner_alias}}{{/partner}}\n"
            "{{^partner}}SINGLE{{/partner}}\n"
            "{{#eq kind \"a\"}}KIND A{{/eq}}{{#ne kind \"a\"}}NOT A{{/ne}}\n"
        ),
    })


@pytest.fixture
def chain_template():
    return make_chain_template()


@pytest.fixture
def chain_engine(chain_template):
    """Engine over a test-only registry"""
    return LegalDocumentEngine(TemplateRegistry([chain_template]))
