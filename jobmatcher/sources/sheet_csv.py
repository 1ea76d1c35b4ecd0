"""Published Google Sheet exported as CSV over plain HTTP."""
from __future__ import annotations

import requests

from jobmatcher.exceptions import SourceError
from jobmatcher.log import get_logger
from jobmatcher.sources.base import SourceAttempt

log = get_logger(__name__)

MIN_CONTENT_LENGTH = 50
HTML_MARKER = "<!DOCTYPE html"


def validate_sheet_text(name: str, text: str | None) -> str:
    """Reject bodies that are too short or are an HTML error page."""
    if not text or len(text) <= MIN_CONTENT_LENGTH:
        raise SourceError(name, f"content too short ({len(text or '')} chars)")
    if HTML_MARKER in text:
        raise SourceError(name, "received an HTML page instead of CSV")
    return text


class SheetCsvSource(SourceAttempt):
    def __init__(
        self,
        url: str,
        *,
        session: requests.Session | None = None,
        timeout: float = 10.0,
        user_agent: str = "Mozilla/5.0 (compatible; JobMatcher/1.0)",
    ) -> None:
        self.url = url
        self.name = url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "text/csv,text/plain,*/*",
        }

    def fetch(self) -> str:
        log.info("Attempting to fetch from: %s", self.url)
        r = self.session.get(
            self.url,
            headers=self.headers,
            timeout=self.timeout,
            allow_redirects=True,
        )
        r.raise_for_status()
        return validate_sheet_text(self.name, r.text)
