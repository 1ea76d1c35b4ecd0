"""Track swipe decisions (interested / not interested) in a CSV table with file locking."""
from __future__ import annotations

import csv
import fcntl
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Iterator

from jobmatcher.config import DATA_DIR
from jobmatcher.log import get_logger
from jobmatcher.models import JobRecord

log = get_logger(__name__)

INTERESTS_CSV: Path = DATA_DIR / "interests.csv"
HEADERS: list[str] = [
    "job_id", "title", "company", "url", "interested", "recorded_at",
]


@contextmanager
def locked_open(path: Path, mode: str = "r") -> Iterator[IO[str]]:
    """Open the tracker file holding an flock: shared for reads, exclusive otherwise.

    Filesystems without flock support (some network mounts) are used unlocked.
    """
    with open(path, mode, newline="", encoding="utf-8") as f:
        held = True
        try:
            fcntl.flock(f.fileno(), fcntl.LOCK_SH if mode == "r" else fcntl.LOCK_EX)
        except OSError as exc:
            log.debug("flock unavailable for %s: %s", path.name, exc)
            held = False
        try:
            yield f
        finally:
            if held:
                f.flush()
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)


def ensure_tracker(path: Path | None = None) -> Path:
    path = path or INTERESTS_CSV
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        with locked_open(path, "w") as f:
            csv.writer(f).writerow(HEADERS)
        log.info("Created interest tracker → %s", path.name)
    return path


def record_interest(job: JobRecord, interested: bool, path: Path | None = None) -> None:
    path = ensure_tracker(path)
    row = {
        "job_id": job.id,
        "title": job.title,
        "company": job.company,
        "url": job.job_link or job.linkedin_url or "",
        "interested": "yes" if interested else "no",
        "recorded_at": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M"),
    }
    with locked_open(path, "a") as f:
        csv.DictWriter(f, fieldnames=HEADERS).writerow(row)
    log.debug("Tracked: %s @ %s [%s]", job.title, job.company, row["interested"])


def get_interests(path: Path | None = None) -> list[dict[str, str]]:
    path = ensure_tracker(path)
    with locked_open(path) as f:
        rows = list(csv.DictReader(f))
    return rows


def get_interested_job_ids(path: Path | None = None) -> list[str]:
    """Job ids whose latest decision is "interested", in first-seen order."""
    latest: dict[str, bool] = {}
    for r in get_interests(path):
        latest[r["job_id"]] = r.get("interested") == "yes"
    return [job_id for job_id, yes in latest.items() if yes]


def interested_jobs(jobs: list[JobRecord], path: Path | None = None) -> list[JobRecord]:
    wanted = set(get_interested_job_ids(path))
    return [j for j in jobs if j.id in wanted]
