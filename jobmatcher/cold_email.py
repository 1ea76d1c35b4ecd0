"""Generate personalized cold emails from a profile and a job (template only)."""
from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jobmatcher.config import ASSETS_DIR, DATA_DIR, Settings, load_settings, load_yaml_asset
from jobmatcher.improvements import generate_detailed_improvements, skills_match
from jobmatcher.log import get_logger
from jobmatcher.models import DetailedImprovements, EmailResult, JobRecord, UserProfile

log = get_logger(__name__)

FAILURE_MESSAGE = "Failed to generate email. Please try again."
DEFAULT_COMPANIES_PATH: Path = ASSETS_DIR / "companies.yaml"
MAX_RELEVANT_SKILLS = 3

SAMPLE_PROFILE = UserProfile(
    name="Professional",
    email="professional@example.com",
    experience_level="Mid Level",
    skills=("JavaScript", "React", "Node.js"),
    education=("Bachelor's Degree in Computer Science",),
)

# (keywords, phrase); the first category with any keyword hit wins.
PROJECT_TYPES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("frontend", "react"), "enhance user experiences and interface design"),
    (("backend", "api"), "build robust backend systems and APIs"),
    (("data", "ml"), "leverage data science and machine learning"),
    (("mobile",), "create innovative mobile experiences"),
)
DEFAULT_PROJECT_TYPE = "drive technological innovation and excellence"


@dataclass(frozen=True)
class CompanyPhrases:
    industry_focus: str
    value: str
    news: str


_BUILTIN_DEFAULT = CompanyPhrases(
    industry_focus="technology and innovation",
    value="innovation and excellence",
    news="at the forefront of technological innovation",
)


class CompanyTable:
    """Company name → phrase set, with a per-phrase default for unknown names."""

    def __init__(self, companies: dict[str, dict[str, str]] | None = None,
                 default: CompanyPhrases | None = None) -> None:
        self.default = default or _BUILTIN_DEFAULT
        self._companies = dict(companies or {})

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> "CompanyTable":
        data: dict[str, Any] = load_yaml_asset(path or DEFAULT_COMPANIES_PATH) or {}
        raw_default = data.get("default") or {}
        default = CompanyPhrases(
            industry_focus=raw_default.get("industry_focus", _BUILTIN_DEFAULT.industry_focus),
            value=raw_default.get("value", _BUILTIN_DEFAULT.value),
            news=raw_default.get("news", _BUILTIN_DEFAULT.news),
        )
        return cls(data.get("companies") or {}, default)

    def _lookup(self, company: str, key: str) -> str:
        entry = self._companies.get(company) or {}
        return entry.get(key) or getattr(self.default, key)

    def industry_focus(self, company: str) -> str:
        return self._lookup(company, "industry_focus")

    def value(self, company: str) -> str:
        return self._lookup(company, "value")

    def news(self, company: str) -> str:
        return self._lookup(company, "news")


def relevant_skills(profile: UserProfile, job: JobRecord) -> list[str]:
    """Profile skills overlapping any job skill, in profile order, at most three."""
    matches = [s for s in profile.skills if any(skills_match(s, j) for j in job.skills)]
    return matches[:MAX_RELEVANT_SKILLS]


def project_type(skills: tuple[str, ...] | list[str]) -> str:
    lowered = [s.lower() for s in skills]
    for keywords, phrase in PROJECT_TYPES:
        if any(k in s for s in lowered for k in keywords):
            return phrase
    return DEFAULT_PROJECT_TYPE


def education_highlight(profile: UserProfile) -> str:
    if profile.education:
        return f"{profile.education[0]} with relevant coursework in computer science and software engineering"
    return "Continuous learning mindset with focus on staying current with industry trends"


class ColdEmailSynthesizer:
    """Fills the fixed cold-email template.

    Two bullet points are picked from small phrase lists; pass a seeded
    ``random.Random`` to make the output reproducible.
    """

    def __init__(
        self,
        companies: CompanyTable | None = None,
        rng: random.Random | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        if companies is None:
            settings = settings or load_settings()
            companies = CompanyTable.from_yaml(settings.companies_path)
        self.companies = companies
        self.rng = rng or random.Random()

    def relevant_accomplishment(self, profile: UserProfile, job: JobRecord) -> str:
        choices = [
            f"Successfully delivered projects using {profile.skills[0] if profile.skills else 'modern technologies'} that improved system performance",
            f"Led cross-functional teams to implement solutions similar to what {job.company} develops",
            f"Developed scalable applications that handled high user loads, relevant to {job.company}'s scale",
            "Optimized existing systems resulting in significant performance improvements",
            "Collaborated with diverse teams to deliver complex technical solutions",
            f"Applied my {profile.experience_level.lower()} expertise to solve challenging technical problems",
        ]
        return self.rng.choice(choices)

    def skill_accomplishment(self, skills: tuple[str, ...] | list[str]) -> str:
        skill = skills[0] if skills else "software development"
        choices = [
            f"work effectively in {skill} environments",
            f"deliver high-quality solutions using {skill}",
            f"collaborate with teams on {skill} projects",
            f"solve complex problems using {skill}",
            f"mentor others in {skill} best practices",
        ]
        return self.rng.choice(choices)

    def compose(self, profile: UserProfile, job: JobRecord) -> str:
        relevant = relevant_skills(profile, job)
        level = profile.experience_level.lower()
        first_job_skill = job.skills[0] if job.skills else "these technologies"
        first_relevant = relevant[0] if relevant else None

        paragraphs = [
            f"Subject: {job.title} Position at {job.company} - {profile.name}",
            "Dear Hiring Manager,",
            f"I hope this email finds you well. My name is {profile.name}, and I am writing to express "
            f"my strong interest in the {job.title} position at {job.company}. Having researched your "
            f"company's innovative work in {self.companies.industry_focus(job.company)}, I am excited "
            "about the opportunity to contribute to your team's continued success.",
            f"With my {level} background in {', '.join(relevant) if relevant else 'software development'}, "
            "I believe I would be a valuable addition to your team. I was particularly drawn to this role "
            f"because it aligns perfectly with my expertise in "
            f"{' and '.join(job.skills[:2]) or 'software development'}.",
            "\n".join([
                "Key highlights of my background include:",
                f"• {self.relevant_accomplishment(profile, job)}",
                f"• Strong experience with {first_relevant or first_job_skill}, which I see is crucial for this role",
                f"• {education_highlight(profile)}",
                f"• Proven ability to {self.skill_accomplishment(job.skills)}",
            ]),
            f"I am particularly excited about {job.company}'s commitment to {self.companies.value(job.company)} "
            f"and would love to contribute to projects that {project_type(job.skills)}. Your job posting "
            f"mentioned {first_job_skill}, which aligns perfectly with my recent experience in "
            f"{first_relevant or 'related technologies'}.",
        ]
        if profile.education:
            paragraphs.append(
                f"My educational background in {profile.education[0]} has provided me with a strong "
                "foundation in the principles underlying this role."
            )
        paragraphs += [
            "I have attached my resume for your review and would welcome the opportunity to discuss how "
            f"my background in {' and '.join(profile.skills[:2]) or 'software development'} can contribute "
            f"to {job.company}'s objectives. I am available for a conversation at your convenience and am "
            f"excited about the possibility of joining your team in {job.location}.",
            f"You can reach me at {profile.email} or through LinkedIn. I look forward to the opportunity "
            f"to discuss how my {level} experience can benefit your team.",
            "Thank you for considering my application. I look forward to hearing from you soon.",
            f"Best regards,\n{profile.name}",
            f"P.S. I noticed that {job.company} is {self.companies.news(job.company)}. I would love to be "
            "part of such an innovative and forward-thinking organization.",
        ]
        return "\n\n".join(paragraphs)


def _failure_result() -> EmailResult:
    return EmailResult(email=FAILURE_MESSAGE, detailed_improvements=DetailedImprovements.empty())


def generate_cold_email(
    profile: UserProfile,
    job: JobRecord,
    *,
    synthesizer: ColdEmailSynthesizer | None = None,
    rng: random.Random | None = None,
) -> EmailResult:
    """Email text plus improvement suggestions. Never raises."""
    try:
        synthesizer = synthesizer or ColdEmailSynthesizer(rng=rng)
        improvements = generate_detailed_improvements(profile, job)
        email = synthesizer.compose(profile, job)
        log.info("Cold email generated for %s @ %s", job.title, job.company)
        return EmailResult(email=email, detailed_improvements=improvements)
    except Exception as exc:
        log.error("Error generating email: %s", exc)
        return _failure_result()


def generate_cold_email_from_resume(resume: str, job: JobRecord, **kwargs: Any) -> EmailResult:
    """Legacy entry point: ignores the resume text and uses the sample profile."""
    return generate_cold_email(SAMPLE_PROFILE, job, **kwargs)


def save_email(job: JobRecord, content: str, directory: Path | None = None) -> Path:
    directory = directory or DATA_DIR
    directory.mkdir(parents=True, exist_ok=True)
    safe = "".join(c if c.isalnum() or c in " -_" else "_" for c in job.company)[:40]
    path = directory / f"email_{job.id}_{safe}.txt"
    path.write_text(content, encoding="utf-8")
    return path
