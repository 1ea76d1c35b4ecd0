"""Unit tests for the improvement recommendation engine."""

import pytest

from jobmatcher.improvements import generate_detailed_improvements, missing_skills
from jobmatcher.models import JobRecord, UserProfile


@pytest.mark.unit
def test_missing_skills_react_profile():
    profile = UserProfile(skills=("React",))
    job = JobRecord(id="1", title="Dev", company="Acme", skills=("React", "Go", "SQL"))

    result = generate_detailed_improvements(profile, job)
    assert result.skills[0] == "Consider adding experience with: Go, SQL"
    assert missing_skills(profile.skills, job.skills) == ["Go", "SQL"]


@pytest.mark.unit
def test_missing_skills_match_in_both_directions():
    assert missing_skills(["ReactJS"], ["React"]) == []
    assert missing_skills(["SQL"], ["PostgreSQL"]) == []
    assert missing_skills(["python"], ["Python", "Rust"]) == ["Rust"]


@pytest.mark.unit
def test_missing_skills_capped_at_five():
    job = JobRecord(id="1", title="Dev", company="Acme", skills=("A1", "B2", "C3", "D4", "E5", "F6"))
    result = generate_detailed_improvements(UserProfile(), job)
    assert result.skills[0] == "Consider adding experience with: A1, B2, C3, D4, E5"


@pytest.mark.unit
def test_bucket_sizes_and_references(profile, job):
    result = generate_detailed_improvements(profile, job)
    assert len(result.summary) == 5
    assert len(result.experience) == 6
    assert len(result.skills) == 6
    assert len(result.education) == 6
    assert len(result.general) == 8

    assert "Frontend Engineer" in result.summary[0]
    assert result.summary[3] == "Highlight your most relevant skills for this role: React, TypeScript, GraphQL"
    assert result.summary[4] == "Emphasize your senior level background and how it applies to this role"
    assert "React, TypeScript, GraphQL, CSS" in result.experience[2]
    assert result.skills[5] == "Highlight your strongest skills: React, Python, Node.js"
    assert result.general[-1].endswith("interested in Google")


@pytest.mark.unit
def test_education_last_entry_depends_on_profile(profile, job):
    with_edu = generate_detailed_improvements(profile, job)
    assert with_edu.education[-1] == "Leverage your education: BSc Computer Science to show foundational knowledge"

    without = generate_detailed_improvements(UserProfile(name="X"), job)
    assert without.education[-1] == "Consider adding relevant certifications to strengthen your profile"


@pytest.mark.unit
def test_placeholders_for_sparse_job():
    job = JobRecord(id="1", title="", company="")
    result = generate_detailed_improvements(UserProfile(), job)
    assert result.summary[0].endswith("relevant to this position")
    assert result.summary[2] == "Mention your passion for the company's industry and mission"
    assert result.summary[3].endswith("relevant technologies")
    assert result.skills[0].endswith("relevant technologies")


@pytest.mark.unit
def test_missing_input_gives_empty_buckets(profile, job):
    assert generate_detailed_improvements(None, job).is_empty()
    assert generate_detailed_improvements(profile, None).is_empty()


@pytest.mark.unit
def test_deterministic(profile, job):
    assert generate_detailed_improvements(profile, job) == generate_detailed_improvements(profile, job)
