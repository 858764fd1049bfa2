"""Tests for the FastAPI routes"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from legal_docgen.api.app import create_app

BASE = "/api/legal-documents"


@pytest.fixture
def client(engine):
    return TestClient(create_app(engine=engine))


class TestTemplatesRoutes:

    def test_list(self, client):
        response = client.get(f"{BASE}/templates")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [d["id"] for d in body["data"]] == [
            "contrat-travail-cdi", "bail-habitation", "contrat-vente", "procuration",
        ]
        assert body["data"][1]["category"] == "bail"

    def test_get_template(self, client):
        response = client.get(f"{BASE}/templates/bail-habitation")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == "bail-habitation"
        assert data["questions"][0]["id"] == "type_location"
        assert "{{loyer}}" in data["document_body"]

    def test_get_unknown_template(self, client):
        response = client.get(f"{BASE}/templates/nope")
        assert response.status_code == 404
        assert response.json()["detail"] == "Document non trouvé"


class TestNextQuestionRoute:

    def test_first_question(self, client):
        response = client.post(f"{BASE}/next-question", json={"document_id": "bail-habitation"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["next_question"]["id"] == "type_location"
        assert data["template"]["name"] == "Bail d'Habitation"
        assert data["completion_rate"] == 0
        assert data["is_complete"] is False

    def test_unknown_document(self, client):
        response = client.post(f"{BASE}/next-question", json={"document_id": "nope"})
        assert response.status_code == 404

    def test_invalid_body(self, client):
        response = client.post(f"{BASE}/next-question", json={"current_answers": {}})
        assert response.status_code == 422


class TestValidateRoute:

    def test_valid_number(self, client):
        response = client.post(f"{BASE}/validate", json={
            "document_id": "bail-habitation", "question_id": "loyer", "answer": "850,5",
        })
        data = response.json()["data"]
        assert data["is_valid"] is True
        assert data["value"] == 850.5
        assert data["error"] is None
        assert data["question"]["type"] == "number"

    def test_invalid_option(self, client):
        response = client.post(f"{BASE}/validate", json={
            "document_id": "bail-habitation", "question_id": "type_location", "answer": "colocation",
        })
        data = response.json()["data"]
        assert data["is_valid"] is False
        assert data["error_code"] == "option"
        assert data["error"].startswith("Choix invalide")

    def test_required(self, client):
        response = client.post(f"{BASE}/validate", json={
            "document_id": "bail-habitation", "question_id": "locataire_nom", "answer": "",
        })
        data = response.json()["data"]
        assert data["error_code"] == "required"
        assert data["error"] == "Cette information est obligatoire"

    def test_unknown_question(self, client):
        response = client.post(f"{BASE}/validate", json={
            "document_id": "bail-habitation", "question_id": "nope", "answer": "x",
        })
        assert response.status_code == 404
        assert response.json()["detail"] == "Question non trouvée"


class TestGenerateRoute:

    def test_generate(self, client, lease_answers):
        response = client.post(f"{BASE}/generate", json={
            "document_id": "bail-habitation", "answers": lease_answers,
        })
        assert response.status_code == 200
        data = response.json()["data"]
        assert "Dupont Pierre" in data["document"]
        assert data["metadata"]["document_category"] == "bail"
        assert data["metadata"]["format"] == "text"
        assert data["statistics"]["required_fields_filled"] == 5
        assert data["statistics"]["total_required_fields"] == 5
        assert data["statistics"]["answered_questions"] == len(lease_answers)
        assert len(data["legal_notices"]) == 3

    def test_statistics_ignore_unknown_keys(self, client, lease_answers):
        lease_answers.update({"not_a_question": "x", "another": "y"})
        response = client.post(f"{BASE}/generate", json={
            "document_id": "bail-habitation", "answers": lease_answers,
        })
        statistics = response.json()["data"]["statistics"]
        assert statistics["answered_questions"] == 11
        assert statistics["answered_questions"] <= statistics["total_questions"]

    def test_missing_required(self, client, lease_answers):
        del lease_answers["locataire_nom"]
        response = client.post(f"{BASE}/generate", json={
            "document_id": "bail-habitation", "answers": lease_answers,
        })
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error"] == "Erreur de génération"
        assert detail["details"] == ["Information manquante : Nom complet du locataire"]
        assert detail["missing_fields"] == [{"id": "locataire_nom", "label": "Nom complet du locataire"}]

    def test_unknown_document(self, client):
        response = client.post(f"{BASE}/generate", json={"document_id": "nope", "answers": {}})
        assert response.status_code == 404


class TestExportRoute:

    def test_export_text(self, client, lease_answers):
        response = client.post(f"{BASE}/export", json={
            "document_id": "bail-habitation", "answers": lease_answers,
        })
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        expected = f"bail_habitation_{date.today().isoformat()}.txt"
        assert expected in response.headers["content-disposition"]
        assert "Dupont Pierre" in response.text

    def test_export_refused(self, client):
        response = client.post(f"{BASE}/export", json={"document_id": "bail-habitation", "answers": {}})
        assert response.status_code == 400


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0", "templates": 4}

    def test_default_app(self):
        response = TestClient(create_app()).get("/health")
        assert response.json()["templates"] == 4
