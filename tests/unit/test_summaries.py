"""Unit tests for the job summary projection."""

import pytest

from jobmatcher.models import JobRecord, JobSummary
from jobmatcher.summaries import get_job_summaries, project_summaries


@pytest.mark.unit
def test_projection_is_one_to_one():
    job = JobRecord(id="1", title="Dev", company="Acme", location="NYC", description="Build cool stuff")
    assert project_summaries([job]) == [
        JobSummary(company_name="Acme", location="NYC", job_description="Build cool stuff")
    ]
    assert project_summaries([job])[0].to_dict() == {
        "company_name": "Acme",
        "location": "NYC",
        "job_description": "Build cool stuff",
    }


@pytest.mark.unit
def test_description_is_not_recleaned():
    job = JobRecord(id="1", title="Dev", company="Acme", description="keeps <b>as is</b>")
    assert project_summaries([job])[0].job_description == "keeps <b>as is</b>"


@pytest.mark.unit
def test_any_failure_yields_empty_list():
    good = JobRecord(id="1", title="Dev", company="Acme")
    assert project_summaries([good, object()]) == []


@pytest.mark.unit
def test_get_job_summaries_reads_fetched_jobs(static_fetcher, fallback_jobs):
    summaries = get_job_summaries()
    assert [s.company_name for s in summaries] == [j.company for j in fallback_jobs]
