"""Data models for jobs, profiles and generated content."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_LOCATION = "Remote"
DEFAULT_JOB_TYPE = "Full-time"
DEFAULT_SALARY = "Competitive salary"
DEFAULT_POSTED_DATE = "Recently"

EXPERIENCE_LEVELS: tuple[str, ...] = (
    "Entry Level",
    "Mid Level",
    "Senior Level",
    "Lead/Principal",
    "Executive",
)


def _pick(data: dict, *keys: str, default: Any = None) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


@dataclass(frozen=True)
class JobRecord:
    id: str
    title: str
    company: str
    location: str = DEFAULT_LOCATION
    type: str = DEFAULT_JOB_TYPE
    salary: str = DEFAULT_SALARY
    description: str = ""
    skills: tuple[str, ...] = ()
    posted_date: str = DEFAULT_POSTED_DATE
    linkedin_url: str | None = None
    job_link: str | None = None

    def __post_init__(self) -> None:
        # Lists passed in from YAML/JSON are frozen into tuples.
        object.__setattr__(self, "skills", tuple(self.skills or ()))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobRecord":
        return cls(
            id=str(_pick(data, "id", default="")),
            title=_pick(data, "title", default=""),
            company=_pick(data, "company", default=""),
            location=_pick(data, "location", default=DEFAULT_LOCATION),
            type=_pick(data, "type", default=DEFAULT_JOB_TYPE),
            salary=_pick(data, "salary", default=DEFAULT_SALARY),
            description=_pick(data, "description", default=""),
            skills=tuple(_pick(data, "skills", default=())),
            posted_date=_pick(data, "postedDate", "posted_date", default=DEFAULT_POSTED_DATE),
            linkedin_url=_pick(data, "linkedinUrl", "linkedin_url"),
            job_link=_pick(data, "jobLink", "job_link"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "type": self.type,
            "salary": self.salary,
            "description": self.description,
            "skills": list(self.skills),
            "postedDate": self.posted_date,
            "linkedinUrl": self.linkedin_url,
            "jobLink": self.job_link,
        }


@dataclass(frozen=True)
class JobSummary:
    company_name: str
    location: str
    job_description: str

    def to_dict(self) -> dict[str, str]:
        return {
            "company_name": self.company_name,
            "location": self.location,
            "job_description": self.job_description,
        }


@dataclass(frozen=True)
class UserProfile:
    name: str = ""
    email: str = ""
    experience_level: str = "Mid Level"
    skills: tuple[str, ...] = ()
    education: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "skills", tuple(self.skills or ()))
        object.__setattr__(self, "education", tuple(self.education or ()))
        object.__setattr__(self, "experience_level", self.experience_level or "")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserProfile":
        return cls(
            name=_pick(data, "name", default=""),
            email=_pick(data, "email", default=""),
            experience_level=_pick(data, "experienceLevel", "experience_level", default="Mid Level"),
            skills=tuple(_pick(data, "skills", default=())),
            education=tuple(_pick(data, "education", default=())),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email,
            "experienceLevel": self.experience_level,
            "skills": list(self.skills),
            "education": list(self.education),
        }


@dataclass
class DetailedImprovements:
    summary: list[str] = field(default_factory=list)
    experience: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    education: list[str] = field(default_factory=list)
    general: list[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "DetailedImprovements":
        return cls()

    def is_empty(self) -> bool:
        return not any((self.summary, self.experience, self.skills, self.education, self.general))

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "summary": list(self.summary),
            "experience": list(self.experience),
            "skills": list(self.skills),
            "education": list(self.education),
            "general": list(self.general),
        }


@dataclass
class EmailResult:
    email: str
    detailed_improvements: DetailedImprovements
    # Legacy field, always empty.
    improvements: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "improvements": list(self.improvements),
            "detailedImprovements": self.detailed_improvements.to_dict(),
        }
