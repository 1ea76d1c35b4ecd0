"""
HTTP surface for job summaries.

Start: uvicorn jobmatcher.api:app
API: GET /api/job-summaries - summaries of the live job list
     GET /api/jobs - static sample list (legacy)
"""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from jobmatcher.log import get_logger
from jobmatcher.models import JobRecord
from jobmatcher.summaries import get_job_summaries

log = get_logger(__name__)

app = FastAPI(title="JobMatcher API")

SAMPLE_JOBS: tuple[JobRecord, ...] = (
    JobRecord(
        id="1",
        title="Senior Frontend Developer",
        company="TechCorp Inc.",
        location="San Francisco, CA",
        type="Full-time",
        salary="$120k - $160k",
        description=(
            "We're looking for a senior frontend developer to join our team and help "
            "build the next generation of web applications."
        ),
        skills=("React", "TypeScript", "Next.js", "Tailwind CSS"),
        posted_date="2 days ago",
        linkedin_url="https://linkedin.com/jobs/123456",
    ),
)


@app.get("/api/job-summaries")
def job_summaries():
    """Company, location and cleaned description for every current job."""
    try:
        return [s.to_dict() for s in get_job_summaries()]
    except Exception as exc:
        log.error("Error fetching job summaries: %s", exc)
        return JSONResponse({"error": "Failed to fetch job summaries"}, status_code=500)


@app.get("/api/jobs")
def sample_jobs():
    return {"jobs": [j.to_dict() for j in SAMPLE_JOBS]}
