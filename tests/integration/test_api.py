"""Integration tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

import jobmatcher.api as api


@pytest.fixture
def client():
    return TestClient(api.app)


@pytest.mark.integration
def test_job_summaries_endpoint(client, static_fetcher):
    r = client.get("/api/job-summaries")
    assert r.status_code == 200
    assert r.json() == [
        {"company_name": "Fallback Inc", "location": "Remote", "job_description": "Static job"},
        {"company_name": "Backup Co", "location": "NYC", "job_description": "Another static job"},
    ]


@pytest.mark.integration
def test_job_summaries_error(client, monkeypatch):
    def boom():
        raise RuntimeError("unexpected")

    monkeypatch.setattr(api, "get_job_summaries", boom)
    r = client.get("/api/job-summaries")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch job summaries"}


@pytest.mark.integration
def test_sample_jobs_envelope(client):
    r = client.get("/api/jobs")
    assert r.status_code == 200
    jobs = r.json()["jobs"]
    assert len(jobs) == 1
    assert jobs[0]["company"] == "TechCorp Inc."
    assert jobs[0]["skills"] == ["React", "TypeScript", "Next.js", "Tailwind CSS"]
