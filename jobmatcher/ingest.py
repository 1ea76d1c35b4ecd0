"""
Job ingestion pipeline.

Runs: sheet URLs in priority order → CSV parse → newest-first ordering,
falling back to the static reference dataset whenever anything goes wrong.
"""
from __future__ import annotations

import threading
import time
from typing import Callable, Iterable

import requests

from jobmatcher.config import Settings, load_settings
from jobmatcher.csv_line import tokenize_line
from jobmatcher.exceptions import JobMatcherError, NoJobsParsedError, SourceError
from jobmatcher.extract import extract_job_details, parse_company_and_title
from jobmatcher.log import get_logger
from jobmatcher.models import JobRecord
from jobmatcher.normalize import clean_description, extract_salary, format_posted_date
from jobmatcher.sources import SourceAttempt, StaticSource, get_sources
from jobmatcher.sources.static import DEFAULT_FALLBACK_PATH

log = get_logger(__name__)


def first_successful(attempts: Iterable[SourceAttempt]) -> tuple[SourceAttempt, str] | None:
    """Return the first attempt whose fetch succeeds, with its text.

    Attempts run strictly in order; later ones are never started once one
    succeeds.
    """
    for attempt in attempts:
        try:
            text = attempt.fetch()
        except SourceError as exc:
            log.warning("Rejected content from %s: %s", attempt.name, exc.reason)
            continue
        except Exception as exc:
            log.warning("Error fetching from %s: %s", attempt.name, exc)
            continue
        log.info("Successfully fetched data from: %s", attempt.name)
        return attempt, text
    return None


def _default_description(company: str, title: str, location: str) -> str:
    return (
        f"Join {company} as a {title} in {location}. "
        "Work on exciting projects and contribute to innovative solutions."
    )


def parse_row(index: int, values: list[str]) -> JobRecord | None:
    """Build one record from a tokenized row; None when required cells are blank."""
    cells = [v.strip() for v in values] + [""] * max(0, 4 - len(values))
    company_and_title, url, date_posted, raw_description = cells[:4]
    if not company_and_title or not url:
        return None

    company, title, location = parse_company_and_title(company_and_title)
    skills, job_type = extract_job_details(company_and_title, url)

    return JobRecord(
        id=str(index),
        title=title,
        company=company,
        location=location,
        type=job_type,
        salary=extract_salary(raw_description),
        description=clean_description(raw_description)
        or _default_description(company, title, location),
        skills=tuple(skills),
        posted_date=format_posted_date(date_posted),
        linkedin_url=url,
        job_link=url,
    )


def parse_jobs_csv(text: str) -> list[JobRecord]:
    """Parse sheet CSV text in source order; the header line is dropped."""
    lines = [line for line in text.split("\n") if line.strip()]
    if len(lines) < 2:
        return []

    jobs: list[JobRecord] = []
    for i in range(1, len(lines)):
        job = parse_row(i, tokenize_line(lines[i].strip()))
        if job is None:
            log.debug("Skipping row %d: missing company/title or URL", i)
            continue
        jobs.append(job)
    return jobs


class JobFetcher:
    """Fetches jobs through an ordered source chain and memoizes the result."""

    def __init__(
        self,
        sources: list[SourceAttempt] | None = None,
        fallback: StaticSource | None = None,
        *,
        settings: Settings | None = None,
        session: requests.Session | None = None,
        ttl: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        settings = settings or load_settings()
        self.sources = sources if sources is not None else get_sources(settings, session)
        self.fallback = fallback or StaticSource(path=settings.fallback_path)
        self._fallback = _load_fallback(self.fallback)
        self.ttl = settings.cache_ttl if ttl is None else ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._cached: tuple[JobRecord, ...] | None = None
        self._cached_at = 0.0

    def fetch(self) -> list[JobRecord]:
        """Cached jobs within the TTL window, otherwise a fresh load. Never raises."""
        with self._lock:
            now = self._clock()
            if self._cached is not None and now - self._cached_at < self.ttl:
                return list(self._cached)
            self._cached = tuple(self._load())
            self._cached_at = now
            return list(self._cached)

    def clear_cache(self) -> None:
        with self._lock:
            self._cached = None

    def _load(self) -> list[JobRecord]:
        try:
            hit = first_successful(self.sources)
            if hit is None:
                log.info("No sheet URL returned valid data, using direct data approach")
                return self._fallback_jobs()

            source, text = hit
            jobs = parse_jobs_csv(text)
            if not jobs:
                raise NoJobsParsedError("No valid jobs parsed from CSV")

            jobs.reverse()
            log.info("Successfully parsed %d jobs from: %s", len(jobs), source.name)
            return jobs
        except Exception as exc:
            log.error("Error fetching jobs from sheet: %s", exc)
            return self._fallback_jobs()

    def _fallback_jobs(self) -> list[JobRecord]:
        log.warning("Serving %d fallback jobs", len(self._fallback))
        return list(self._fallback)


def _load_fallback(source: StaticSource) -> tuple[JobRecord, ...]:
    """Load the fallback dataset up front; a broken or empty one is a configuration error."""
    try:
        jobs = tuple(source.jobs())
    except Exception as exc:
        raise JobMatcherError(f"fallback dataset unavailable ({source.path}): {exc}") from exc
    if not jobs:
        raise JobMatcherError(f"fallback dataset is empty ({source.path})")
    return jobs


_default_fetcher: JobFetcher | None = None
_default_lock = threading.Lock()


def get_default_fetcher() -> JobFetcher:
    global _default_fetcher
    with _default_lock:
        if _default_fetcher is None:
            _default_fetcher = JobFetcher()
        return _default_fetcher


def set_default_fetcher(fetcher: JobFetcher | None) -> None:
    global _default_fetcher
    with _default_lock:
        _default_fetcher = fetcher


def fetch_jobs(fetcher: JobFetcher | None = None) -> list[JobRecord]:
    """Newest-first job list; memoized and never raises."""
    try:
        return (fetcher or get_default_fetcher()).fetch()
    except Exception as exc:
        log.error("Job fetch failed unexpectedly: %s", exc)
        return _last_resort_jobs()


def _last_resort_jobs() -> list[JobRecord]:
    """Configured fallback dataset, then the one bundled with the package."""
    candidates = []
    try:
        candidates.append(load_settings().fallback_path)
    except Exception as exc:
        log.error("Settings unavailable: %s", exc)
    candidates.append(DEFAULT_FALLBACK_PATH)

    for path in candidates:
        try:
            return list(_load_fallback(StaticSource(path=path)))
        except JobMatcherError as exc:
            log.error("%s", exc)
    return []
