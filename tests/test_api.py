from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from models.candidate_profile import CandidateProfile
from models.lookup_result import LookupResult, SourcesChecked
from services.errors import InputValidationError, NoMatchFound


@pytest.fixture
def client(make_settings, tmp_path, monkeypatch):
    import api.app as app_module

    calls = []

    def _fake_lookup(email, name=None, country=None, **kwargs):
        calls.append((email, name, country))
        if email == "boom@example.com":
            raise RuntimeError("database password is hunter2")
        if email == "nobody@example.com":
            raise NoMatchFound()
        if not email or "@" not in email:
            raise InputValidationError()
        return LookupResult(
            searched_name="Jane Doe",
            matched_profiles=[CandidateProfile(linkedin_url="https://linkedin.com/in/jane", name="Jane Doe")],
            company_name="Acme",
            company_employees=[],
            sources_checked=SourcesChecked(github=True),
        )

    monkeypatch.setattr(app_module, "lookup_email", _fake_lookup)
    settings = make_settings(frontend_dist=str(tmp_path / "missing"))
    test_client = TestClient(app_module.create_app(settings))
    test_client.calls = calls
    return test_client


def test_lookup_success_shape(client):
    resp = client.post("/api/lookup", json={"email": "jane@acme.com", "name": "Jane", "country": "DE"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["searched_name"] == "Jane Doe"
    assert body["matched_profiles"][0]["linkedin_url"] == "https://linkedin.com/in/jane"
    assert body["company_name"] == "Acme"
    assert body["company_employees"] == []
    assert body["sources_checked"] == {"apollo": False, "github": True, "gravatar": False}
    assert "score" not in body["matched_profiles"][0]
    assert client.calls == [("jane@acme.com", "Jane", "DE")]


def test_missing_or_invalid_email_is_400(client):
    for payload in ({}, {"email": "not-an-email"}):
        resp = client.post("/api/lookup", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Please provide a valid email address."}


def test_malformed_body_is_400(client):
    resp = client.post("/api/lookup", content="not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_not_found_is_404(client):
    resp = client.post("/api/lookup", json={"email": "nobody@example.com"})
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "No LinkedIn profile found for this email."}


def test_internal_error_is_generic_500(client):
    resp = client.post("/api/lookup", json={"email": "boom@example.com"})
    assert resp.status_code == 500
    assert "hunter2" not in resp.text
    assert resp.json()["success"] is False


def test_health_reports_configuration(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "sources": {"apollo": False, "google": False}}


def test_frontend_served_with_spa_fallback(make_settings, tmp_path):
    from api.app import create_app

    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "index.html").write_text("<html>app</html>", encoding="utf-8")
    (dist / "favicon.txt").write_text("icon", encoding="utf-8")

    test_client = TestClient(create_app(make_settings(frontend_dist=str(dist))))
    assert test_client.get("/favicon.txt").text == "icon"
    assert "app" in test_client.get("/some/client/route").text
    assert test_client.get("/health").json()["status"] == "ok"
