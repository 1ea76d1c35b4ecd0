"""Integration tests for the profile store and the interest tracker."""

import fcntl

import pytest

from jobmatcher.models import JobRecord
from jobmatcher.profile_store import build_profile, load_profile, write_profile
from jobmatcher.tracker import (
    ensure_tracker,
    get_interested_job_ids,
    get_interests,
    interested_jobs,
    locked_open,
    record_interest,
)


@pytest.mark.integration
def test_profile_round_trip(tmp_path):
    path = tmp_path / "profile.yaml"
    profile = build_profile({
        "name": " Ada ",
        "email": "ada@example.com",
        "experienceLevel": "Senior Level",
        "skills": ["Python", " ", "Python", "React"],
        "education": ["BSc CS"],
    })
    write_profile(profile, path)

    loaded = load_profile(path)
    assert loaded == profile
    assert loaded.name == "Ada"
    assert loaded.skills == ("Python", "React")
    assert path.read_text(encoding="utf-8").startswith("# ====")


@pytest.mark.integration
def test_missing_profile_is_none(tmp_path):
    assert load_profile(tmp_path / "nope.yaml") is None


@pytest.mark.integration
def test_build_profile_defaults_for_missing_fields():
    profile = build_profile({"name": "Ada", "email": "a@x"})
    assert profile.experience_level == "Mid Level"
    assert profile.skills == ()
    assert profile.education == ()

    assert build_profile({"name": "Ada", "email": "a@x", "skills": None}).skills == ()


@pytest.mark.integration
def test_latest_interest_wins(tmp_path):
    path = tmp_path / "interests.csv"
    a = JobRecord(id="1", title="Dev", company="Acme", job_link="https://a")
    b = JobRecord(id="2", title="Ops", company="Globex")

    record_interest(a, True, path)
    record_interest(b, True, path)
    record_interest(b, False, path)

    rows = get_interests(path)
    assert len(rows) == 3
    assert rows[0]["url"] == "https://a"
    assert get_interested_job_ids(path) == ["1"]
    assert interested_jobs([b, a], path) == [a]


@pytest.mark.integration
def test_tracker_write_holds_exclusive_lock(tmp_path):
    path = ensure_tracker(tmp_path / "interests.csv")
    with locked_open(path, "a"):
        with open(path, "r", encoding="utf-8") as other:
            with pytest.raises(BlockingIOError):
                fcntl.flock(other.fileno(), fcntl.LOCK_SH | fcntl.LOCK_NB)

    with open(path, "r", encoding="utf-8") as other:
        fcntl.flock(other.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
        fcntl.flock(other.fileno(), fcntl.LOCK_UN)


@pytest.mark.integration
def test_tracker_reads_share_the_lock(tmp_path):
    path = ensure_tracker(tmp_path / "interests.csv")
    with locked_open(path) as f:
        with open(path, "r", encoding="utf-8") as other:
            fcntl.flock(other.fileno(), fcntl.LOCK_SH | fcntl.LOCK_NB)
            fcntl.flock(other.fileno(), fcntl.LOCK_UN)
        assert f.readline().startswith("job_id,")
