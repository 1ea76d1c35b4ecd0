"""Decompose the composite "<Company> hiring <Title> in <Location>" cell."""
from __future__ import annotations

import re

from jobmatcher.models import DEFAULT_JOB_TYPE, DEFAULT_LOCATION

DEFAULT_COMPANY = "Unknown Company"
DEFAULT_TITLE = "Software Engineer"

HIRING_SEPARATOR = " hiring "

# Output order follows this list, not the order keywords appear in the text.
SKILL_KEYWORDS: tuple[str, ...] = (
    "Java", "JavaScript", "Python", "React", "Node.js", "Angular", "Vue",
    "TypeScript", "PHP", "C++", "C#", ".NET", "SQL", "MongoDB", "PostgreSQL",
    "AWS", "Azure", "Docker", "Kubernetes", "DevOps", "Machine Learning", "AI",
    "Data Science", "Full Stack", "Frontend", "Backend", "Mobile", "Android",
    "iOS", "Flutter",
)

_LOCATION_RE = re.compile(r" in (.+)$")
_HYPHEN_RE = re.compile(r"\s*-\s*")
_WS_RE = re.compile(r"\s+")


def _tidy_title(title: str) -> str:
    title = _HYPHEN_RE.sub(" - ", title, count=1)
    return _WS_RE.sub(" ", title).strip()


def parse_company_and_title(text: str | None) -> tuple[str, str, str]:
    """Return (company, title, location), falling back to defaults."""
    company, title, location = DEFAULT_COMPANY, DEFAULT_TITLE, DEFAULT_LOCATION
    text = text or ""
    if HIRING_SEPARATOR not in text:
        return company, title, location

    head, _, remaining = text.partition(HIRING_SEPARATOR)
    company = head.strip()

    match = _LOCATION_RE.search(remaining)
    if match:
        location = match.group(1).strip()
        title = remaining.replace(match.group(0), "", 1).strip()
    else:
        title = remaining.strip()

    return company, _tidy_title(title), location


def extract_skills(text: str | None, vocabulary: tuple[str, ...] = SKILL_KEYWORDS) -> list[str]:
    lowered = (text or "").lower()
    return [skill for skill in vocabulary if skill.lower() in lowered]


def extract_job_details(text: str | None, url: str | None = None) -> tuple[list[str], str]:
    """Skills tagged from the composite text; the type is never inferred."""
    return extract_skills(text), DEFAULT_JOB_TYPE
