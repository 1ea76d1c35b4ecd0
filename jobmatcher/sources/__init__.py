from __future__ import annotations

import requests

from jobmatcher.config import Settings
from jobmatcher.log import get_logger

from .base import SourceAttempt
from .sheet_csv import SheetCsvSource, validate_sheet_text
from .static import StaticSource

log = get_logger(__name__)

__all__ = [
    "SourceAttempt", "SheetCsvSource", "StaticSource",
    "validate_sheet_text", "get_sources",
]


def get_sources(settings: Settings, session: requests.Session | None = None) -> list[SourceAttempt]:
    """Sheet export URLs in priority order, sharing one HTTP session."""
    session = session or requests.Session()
    sources: list[SourceAttempt] = [
        SheetCsvSource(
            url,
            session=session,
            timeout=settings.fetch_timeout,
            user_agent=settings.user_agent,
        )
        for url in settings.source_urls()
    ]
    log.debug("Registered %d sheet source(s)", len(sources))
    return sources
