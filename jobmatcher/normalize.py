"""Clean raw spreadsheet cell values: descriptions, salaries, posted dates."""
from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from jobmatcher.log import get_logger
from jobmatcher.models import DEFAULT_POSTED_DATE, DEFAULT_SALARY

log = get_logger(__name__)

DESCRIPTION_LIMIT = 200
ELLIPSIS = "..."

_TAG_RE = re.compile(r"<[^>]*>")
_WS_RE = re.compile(r"\s+")

# &amp; must be decoded before the entities it could otherwise produce.
_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

# Order matters: the first pattern with a match anywhere in the text wins.
SALARY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\$[\d,]+\s*-\s*\$[\d,]+"),              # $50,000 - $80,000
    re.compile(r"\$[\d,]+k?\s*-\s*\$?[\d,]+k?"),         # $50k - $80k
    re.compile(r"₹[\d,]+\s*-\s*₹[\d,]+"),                # ₹500,000 - ₹800,000
    re.compile(r"INR\s*[\d,]+\s*-\s*[\d,]+"),            # INR 500000 - 800000
    re.compile(r"\b[\d,]+\s*LPA\b"),                     # 5 LPA
    re.compile(r"\b[\d,]+\s*-\s*[\d,]+\s*LPA\b"),        # 5 - 10 LPA
)

_JS_DATE_FMT = "%a %b %d %Y %H:%M:%S GMT%z"
_PAREN_RE = re.compile(r"\s*\([^)]*\)\s*$")


def clean_description(text: str | None, limit: int = DESCRIPTION_LIMIT) -> str:
    """Strip tags, decode common entities, collapse whitespace, truncate."""
    clean = _TAG_RE.sub("", text or "")
    for entity, replacement in _ENTITIES:
        clean = clean.replace(entity, replacement)
    clean = _WS_RE.sub(" ", clean).strip()

    if len(clean) > limit:
        clean = clean[:limit] + ELLIPSIS
    return clean


def extract_salary(text: str | None) -> str:
    if text:
        for pattern in SALARY_PATTERNS:
            match = pattern.search(text)
            if match:
                return match.group(0)
    return DEFAULT_SALARY


def _parse_gmt_timestamp(value: str) -> datetime:
    """RFC 2822 ("Mon, 01 Jan 2024 10:00:00 GMT") or JS Date.toString() style."""
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        parsed = None
    if parsed is None:
        stripped = _PAREN_RE.sub("", value).strip()
        if stripped.endswith("GMT"):
            stripped += "+0000"
        parsed = datetime.strptime(stripped, _JS_DATE_FMT)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_posted_date(value: str | None, now: datetime | None = None) -> str:
    """Turn a GMT timestamp into "N days/weeks/months ago"; pass others through."""
    if not value:
        return DEFAULT_POSTED_DATE
    if "GMT" not in value:
        return value

    try:
        posted = _parse_gmt_timestamp(value)
    except (TypeError, ValueError) as exc:
        log.debug("Unparseable posted date %r: %s", value, exc)
        return DEFAULT_POSTED_DATE

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    # partial days round up: a post from 12 hours ago is "1 day ago"
    days = math.ceil(abs((now - posted).total_seconds()) / 86400)

    if days == 1:
        return "1 day ago"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return f"{days // 7} weeks ago"
    return f"{days // 30} months ago"
