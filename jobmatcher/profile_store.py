"""Persist the user profile as config/profile.yaml."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from jobmatcher.config import PROFILE_PATH
from jobmatcher.log import get_logger
from jobmatcher.models import EXPERIENCE_LEVELS, UserProfile

log = get_logger(__name__)


def build_profile(data: dict[str, Any]) -> UserProfile:
    """Turn raw form data into a UserProfile, dropping blank list entries."""
    skills = [s.strip() for s in (data.get("skills") or []) if s and s.strip()]
    education = [e.strip() for e in (data.get("education") or []) if e and e.strip()]
    level = data.get("experienceLevel") or data.get("experience_level") or "Mid Level"
    if level not in EXPERIENCE_LEVELS:
        log.warning("Unrecognized experience level %r, keeping as given", level)

    return UserProfile(
        name=(data.get("name") or "").strip(),
        email=(data.get("email") or "").strip(),
        experience_level=level,
        skills=tuple(dict.fromkeys(skills)),
        education=tuple(education),
    )


def write_profile(profile: UserProfile, path: Path | None = None) -> Path:
    """Write profile to YAML file."""
    path = path or PROFILE_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    header = (
        "# ============================================================\n"
        "# User Profile: used for cold emails and resume suggestions\n"
        "# Edit freely\n"
        "# ============================================================\n\n"
    )

    yaml_str = yaml.dump(profile.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True)
    path.write_text(header + yaml_str, encoding="utf-8")
    log.info("Profile written → %s", path)
    return path


def load_profile(path: Path | None = None) -> UserProfile | None:
    path = path or PROFILE_PATH
    if not path.exists():
        return None
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return UserProfile.from_dict(data)
