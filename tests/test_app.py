import json

import pytest

import app as app_module
from conftest import COMPLETE_HEAD, make_page
from seolens.errors import BlockedError, FetchTimeoutError
from seolens.loader import DocumentLoader
from seolens.storage import MemStorage


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(app_module, "storage", MemStorage())
    app_module.app.config["TESTING"] = True
    return app_module.app.test_client()


def _serve_html(monkeypatch, html):
    monkeypatch.setattr(DocumentLoader, "fetch_document", lambda self, url: html)


def _serve_error(monkeypatch, error):
    def fail(self, url):
        raise error
    monkeypatch.setattr(DocumentLoader, "fetch_document", fail)


def test_analyze_returns_result_and_records_summary(client, monkeypatch):
    _serve_html(monkeypatch, make_page(COMPLETE_HEAD))
    resp = client.post("/api/analyze", json={"url": "example.com"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["url"] == "https://example.com"
    assert body["totalScore"] == 100
    assert body["scoreRating"] == "Excellent"

    recent = client.get("/api/recent-analyses").get_json()
    assert len(recent) == 1
    assert recent[0]["url"] == "https://example.com"
    assert recent[0]["metaTagsScore"] == 100


def test_analyze_requires_url(client):
    resp = client.post("/api/analyze", json={})
    assert resp.status_code == 400
    assert resp.get_json()["userMessage"] == "Please enter a website URL to analyze"


@pytest.mark.parametrize("body", [["https://example.com"], "https://example.com", 42, {"url": 123}, {"url": ["example.com"]}, {"url": "   "}])
def test_analyze_rejects_malformed_body(client, monkeypatch, body):
    _serve_error(monkeypatch, AssertionError("fetch must not run"))
    resp = client.post("/api/analyze", json=body)
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "URL is required", "userMessage": "Please enter a website URL to analyze"}


def test_analyze_rejects_non_json_body(client):
    resp = client.post("/api/analyze", data="url=example.com", content_type="application/x-www-form-urlencoded")
    assert resp.status_code == 400
    assert resp.get_json()["userMessage"] == "Please enter a website URL to analyze"


def test_invalid_url_is_rejected(client):
    resp = client.post("/api/analyze", json={"url": "ftp://example.com"})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "InvalidUrl"


@pytest.mark.parametrize("error,status,kind", [
    (FetchTimeoutError("Request timeout"), 408, "Timeout"),
    (BlockedError("Access forbidden"), 400, "Blocked"),
])
def test_fetch_errors_map_to_status_and_kind(client, monkeypatch, error, status, kind):
    _serve_error(monkeypatch, error)
    resp = client.post("/api/analyze", json={"url": "https://example.com"})
    assert resp.status_code == status
    body = resp.get_json()
    assert body["kind"] == kind
    assert body["message"] == str(error)
    assert body["userMessage"] == error.user_message
    assert client.get("/api/recent-analyses").get_json() == []


def test_recent_analyses_limit(client, monkeypatch):
    _serve_html(monkeypatch, make_page())
    for host in ("a.example", "b.example", "c.example"):
        client.post("/api/analyze", json={"url": host})
    assert len(client.get("/api/recent-analyses?limit=2").get_json()) == 2


def test_cli_writes_report(tmp_path, monkeypatch, capsys):
    _serve_html(monkeypatch, make_page(COMPLETE_HEAD))
    monkeypatch.chdir(tmp_path)
    assert app_module.run_cli(["example.com", "--output", "json"]) == 0
    reports = list((tmp_path / "reports").glob("seo_report_example_com_*.json"))
    assert len(reports) == 1
    assert json.loads(reports[0].read_text())["totalScore"] == 100
    assert "Overall SEO Score: 100 (Excellent)" in capsys.readouterr().out


def test_cli_text_report(tmp_path, monkeypatch):
    _serve_html(monkeypatch, make_page())
    monkeypatch.chdir(tmp_path)
    assert app_module.run_cli(["example.com", "--output", "txt"]) == 0
    text = next((tmp_path / "reports").glob("*.txt")).read_text()
    assert "Recommendations:" in text
    assert "[error] Title: Missing title tag" in text


def test_cli_reports_fetch_errors(monkeypatch, capsys):
    _serve_error(monkeypatch, FetchTimeoutError("Request timeout"))
    assert app_module.run_cli(["https://example.com"]) == 1
    assert FetchTimeoutError.user_message in capsys.readouterr().out
