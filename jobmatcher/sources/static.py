"""Reference job dataset used whenever live ingestion fails."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from jobmatcher.config import ASSETS_DIR, load_yaml_asset
from jobmatcher.log import get_logger
from jobmatcher.models import JobRecord

log = get_logger(__name__)

DEFAULT_FALLBACK_PATH: Path = ASSETS_DIR / "fallback_jobs.yaml"


class StaticSource:
    """Serves a fixed, newest-first list of JobRecord.

    Built either from an explicit list (handy in tests) or lazily from a
    YAML file whose top-level ``jobs`` key holds the records.
    """

    name = "static"

    def __init__(
        self,
        jobs: Iterable[JobRecord | dict[str, Any]] | None = None,
        path: Path | None = None,
    ) -> None:
        self.path = path or DEFAULT_FALLBACK_PATH
        self._jobs: tuple[JobRecord, ...] | None = None
        if jobs is not None:
            self._jobs = tuple(_to_record(j) for j in jobs)

    def jobs(self) -> list[JobRecord]:
        if self._jobs is None:
            data = load_yaml_asset(self.path) or {}
            self._jobs = tuple(_to_record(j) for j in data.get("jobs", []))
            log.debug("Loaded %d fallback jobs from %s", len(self._jobs), self.path.name)
        return list(self._jobs)


def _to_record(item: JobRecord | dict[str, Any]) -> JobRecord:
    return item if isinstance(item, JobRecord) else JobRecord.from_dict(item)
