"""Job listing ingestion and templated outreach generation."""
from jobmatcher.cold_email import generate_cold_email
from jobmatcher.ingest import fetch_jobs
from jobmatcher.models import (
    DetailedImprovements,
    EmailResult,
    JobRecord,
    JobSummary,
    UserProfile,
)
from jobmatcher.summaries import get_job_summaries

__all__ = [
    "fetch_jobs", "get_job_summaries", "generate_cold_email",
    "JobRecord", "JobSummary", "UserProfile", "DetailedImprovements", "EmailResult",
]

__version__ = "0.1.0"
