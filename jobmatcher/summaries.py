"""Three-field job summaries for external consumers."""
from __future__ import annotations

from typing import Iterable

from jobmatcher.ingest import JobFetcher, fetch_jobs
from jobmatcher.log import get_logger
from jobmatcher.models import JobRecord, JobSummary

log = get_logger(__name__)


def summarize(job: JobRecord) -> JobSummary:
    # description was already cleaned at ingestion time
    return JobSummary(
        company_name=job.company,
        location=job.location,
        job_description=job.description,
    )


def project_summaries(jobs: Iterable[JobRecord]) -> list[JobSummary]:
    """One summary per job, or an empty list if any job cannot be projected."""
    try:
        return [summarize(job) for job in jobs]
    except Exception as exc:
        log.error("Error creating job summaries: %s", exc)
        return []


def get_job_summaries(fetcher: JobFetcher | None = None) -> list[JobSummary]:
    return project_summaries(fetch_jobs(fetcher))
