from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from main import app
from scoring.engine import compute_score


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_roles(client):
    roles = client.get("/api/roles").json()["roles"]
    assert len(roles) == 7
    assert {"key": "backend-developer", "name": "Backend Developer"} in roles


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"mode": "general"}, "Resume text is required"),
        ({"resumeText": "text"}, "Evaluation mode is required"),
        ({"resumeText": "text", "mode": "job-description"}, "Job description or job link is required for this mode"),
        ({"resumeText": "text", "mode": "target-role"}, "Target role is required for this mode"),
    ],
)
def test_score_validates_required_fields(client, payload, message):
    resp = client.post("/api/score", json=payload)

    assert resp.status_code == 400
    assert resp.json()["detail"] == message


def test_score_target_role(client, backend_resume):
    resp = client.post(
        "/api/score",
        json={"resumeText": backend_resume, "mode": "target-role", "targetRole": "backend-developer"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["scoreResult"] == compute_score(backend_resume, "target-role", target_role="backend-developer")


def test_score_with_job_link(client, sample_resume):
    posting = {"title": "Backend Engineer", "description": "Python Django PostgreSQL", "source": "fetched", "error": None}
    with patch("routers.ats.fetch_job_posting", return_value=posting) as fetch:
        resp = client.post(
            "/api/score",
            json={"resumeText": sample_resume, "mode": "job-description", "jobLink": "https://jobs.example.com/1"},
        )

    fetch.assert_called_once_with("https://jobs.example.com/1")
    assert resp.status_code == 200
    expected = compute_score(sample_resume, "job-description", job_description="Python Django PostgreSQL")
    assert resp.json()["scoreResult"] == expected


def test_score_with_failed_job_link(client, sample_resume):
    posting = {"title": "Unknown", "description": "", "source": "error", "error": "Failed to fetch URL: 404"}
    with patch("routers.ats.fetch_job_posting", return_value=posting):
        resp = client.post(
            "/api/score",
            json={"resumeText": sample_resume, "mode": "job-description", "jobLink": "https://jobs.example.com/1"},
        )

    assert resp.status_code == 422
    assert "Please paste the job description" in resp.json()["detail"]


def test_explain_requires_score_result(client):
    assert client.post("/api/explain", json={}).status_code == 400
    assert client.post("/api/explain", json={"scoreResult": {"overallScore": 10}}).status_code == 400


def test_explain(client, backend_resume):
    score = compute_score(backend_resume, "general")
    resp = client.post("/api/explain", json={"scoreResult": score})

    assert resp.status_code == 200
    body = resp.json()
    assert body["generatedBy"] == "fallback"
    assert body["explanation"]
    assert body["suggestions"]


def test_upload_docx(client, make_docx):
    data = make_docx(["Jane Doe", "Skills", "Python, Docker"])
    resp = client.post("/api/upload", files={"resume": ("cv.docx", data, "application/octet-stream")})

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "resumeText": "Jane Doe\nSkills\nPython, Docker", "filename": "cv.docx"}


def test_upload_rejects_other_file_types(client):
    resp = client.post("/api/upload", files={"resume": ("cv.txt", b"hello", "text/plain")})
    assert resp.status_code == 400


def test_upload_rejects_corrupt_files(client):
    resp = client.post("/api/upload", files={"resume": ("cv.pdf", b"not a pdf", "application/pdf")})
    assert resp.status_code == 422


def test_upload_enforces_size_limit(client, make_docx, monkeypatch):
    monkeypatch.setenv("MAX_FILE_SIZE", "100")
    data = make_docx(["Jane Doe"])
    resp = client.post("/api/upload", files={"resume": ("cv.docx", data, "application/octet-stream")})
    assert resp.status_code == 413


def test_upload_requires_file(client):
    assert client.post("/api/upload").status_code == 422


def test_analyze(client, make_docx):
    data = make_docx(["Experience", "Built REST APIs using Python and Docker", "Skills", "python, docker"])
    resp = client.post(
        "/api/analyze",
        files={"resume": ("cv.docx", data, "application/octet-stream")},
        data={"mode": "target-role", "targetRole": "backend-developer"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["scoreResult"]["metadata"]["targetRole"] == "backend-developer"
    assert body["generatedBy"] == "fallback"
    assert isinstance(body["suggestions"], list)


def test_analyze_validates_mode(client, make_docx):
    data = make_docx(["Experience"])
    resp = client.post("/api/analyze", files={"resume": ("cv.docx", data, "application/octet-stream")})
    assert resp.status_code == 400
