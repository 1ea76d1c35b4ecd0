"""Rule-based resume improvement suggestions for a profile/job pair."""
from __future__ import annotations

from jobmatcher.log import get_logger
from jobmatcher.models import DetailedImprovements, JobRecord, UserProfile

log = get_logger(__name__)

PLACEHOLDER_TECH = "relevant technologies"


def _lower(s: str | None) -> str:
    return (s or "").lower()


def skills_match(a: str, b: str) -> bool:
    """Case-insensitive containment in either direction."""
    la, lb = _lower(a), _lower(b)
    if not la or not lb:
        return False
    return la in lb or lb in la


def missing_skills(profile_skills: tuple[str, ...] | list[str], job_skills: tuple[str, ...] | list[str]) -> list[str]:
    return [s for s in job_skills if not any(skills_match(s, p) for p in profile_skills)]


def _summary(profile: UserProfile, job: JobRecord) -> list[str]:
    top = ", ".join(job.skills[:3]) or PLACEHOLDER_TECH
    return [
        f"Tailor your professional summary to highlight experience relevant to {job.title or 'this'} position",
        "Include specific metrics and achievements that demonstrate your impact in previous roles",
        f"Mention your passion for {job.company or 'the company'}'s industry and mission",
        f"Highlight your most relevant skills for this role: {top}",
        f"Emphasize your {_lower(profile.experience_level)} background and how it applies to this role",
    ]


def _experience(profile: UserProfile, job: JobRecord) -> list[str]:
    return [
        "Quantify your achievements with specific numbers, percentages, or dollar amounts",
        'Use action verbs that align with the job requirements (e.g., "developed," "implemented," "optimized")',
        f"Highlight any experience with technologies mentioned in the job: {', '.join(job.skills) or PLACEHOLDER_TECH}",
        f"Include any experience working in {job.type or 'similar'} environments or similar company sizes",
        f"Emphasize problem-solving examples that relate to challenges {job.company or 'the company'} might face",
        f"Show progression in your {_lower(profile.experience_level)} career path",
    ]


def _skills(profile: UserProfile, job: JobRecord) -> list[str]:
    missing = missing_skills(profile.skills, job.skills)
    return [
        f"Consider adding experience with: {', '.join(missing[:5]) or PLACEHOLDER_TECH}",
        'Create a dedicated "Technical Skills" section with proficiency levels',
        "Include both hard and soft skills relevant to the role",
        "Group skills by category (e.g., Programming Languages, Frameworks, Tools)",
        "Add any certifications or courses related to the required technologies",
        f"Highlight your strongest skills: {', '.join(profile.skills[:3])}",
    ]


def _education(profile: UserProfile) -> list[str]:
    if profile.education:
        last = f"Leverage your education: {profile.education[0]} to show foundational knowledge"
    else:
        last = "Consider adding relevant certifications to strengthen your profile"
    return [
        "Include relevant coursework that aligns with the job requirements",
        "Add any online courses, bootcamps, or certifications you've completed",
        "Mention academic projects that demonstrate skills needed for this role",
        "Include your GPA if it's above 3.5 and you're a recent graduate",
        "Add any honors, awards, or relevant extracurricular activities",
        last,
    ]


def _general(job: JobRecord) -> list[str]:
    return [
        "Customize your resume for each application to match the job description",
        "Use keywords from the job posting throughout your resume",
        "Ensure your contact information includes a professional email and LinkedIn profile",
        "Keep your resume to 1-2 pages and use a clean, professional format",
        "Include a portfolio link or GitHub profile if relevant to the role",
        "Proofread carefully for grammar and spelling errors",
        "Use consistent formatting for dates, bullet points, and section headers",
        f"Tailor your application to show why you're specifically interested in {job.company or 'the company'}",
    ]


def generate_detailed_improvements(
    profile: UserProfile | None,
    job: JobRecord | None,
) -> DetailedImprovements:
    """Categorized suggestions; all buckets empty when either input is missing."""
    if profile is None or job is None:
        return DetailedImprovements.empty()

    try:
        return DetailedImprovements(
            summary=_summary(profile, job),
            experience=_experience(profile, job),
            skills=_skills(profile, job),
            education=_education(profile),
            general=_general(job),
        )
    except Exception as exc:
        log.error("Error generating improvements for %s: %s", getattr(job, "id", "?"), exc)
        return DetailedImprovements.empty()
