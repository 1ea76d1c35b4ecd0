"""Shared fixtures: fake HTTP transport, sample jobs and profiles."""
import logging
import os
import tempfile

os.environ.setdefault("JOBMATCHER_LOG_DIR", tempfile.mkdtemp(prefix="jobmatcher-logs-"))

import pytest
import requests

from jobmatcher.config import Settings
from jobmatcher.ingest import JobFetcher, set_default_fetcher
from jobmatcher.models import JobRecord, UserProfile
from jobmatcher.sources import StaticSource


SAMPLE_CSV = (
    "Company,URL,Date,Description\n"
    '"Acme hiring Python Developer in Berlin, Germany",https://example.com/1,Recently posted,'
    '"<p>Build APIs &amp; tools. Pay $100,000 - $120,000</p>"\n'
    ",https://example.com/2,,missing composite\n"
    '"Globex hiring Backend Engineer",,,\n'
    '"Initech hiring Data Engineer in Austin, TX",https://example.com/3,,\n'
)


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Maps url -> FakeResponse or exception; records every request."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        outcome = self.responses.get(url)
        if outcome is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def fallback_jobs():
    return [
        JobRecord(id="f1", title="Fallback Engineer", company="Fallback Inc", location="Remote",
                  description="Static job", skills=("Python",)),
        JobRecord(id="f2", title="Backup Analyst", company="Backup Co", location="NYC",
                  description="Another static job"),
    ]


@pytest.fixture
def static_fetcher(fallback_jobs):
    """A fetcher with no live sources, installed as the process default."""
    fetcher = JobFetcher(sources=[], fallback=StaticSource(jobs=fallback_jobs), settings=Settings())
    set_default_fetcher(fetcher)
    yield fetcher
    set_default_fetcher(None)


@pytest.fixture
def job():
    return JobRecord(
        id="7",
        title="Frontend Engineer",
        company="Google",
        location="Mountain View, CA",
        salary="$150k - $200k",
        description="Build web apps.",
        skills=("React", "TypeScript", "GraphQL", "CSS"),
        posted_date="2 days ago",
        linkedin_url="https://example.com/jobs/7",
        job_link="https://example.com/jobs/7",
    )


@pytest.fixture
def profile():
    return UserProfile(
        name="Ada Lovelace",
        email="ada@example.com",
        experience_level="Senior Level",
        skills=("React", "Python", "Node.js"),
        education=("BSc Computer Science",),
    )


class FirstChoice:
    """Deterministic stand-in for random.Random."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def make_session():
    return FakeSession


@pytest.fixture
def make_response():
    return FakeResponse


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
