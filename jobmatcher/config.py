"""Load settings from config/settings.yaml and the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobmatcher.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
PROFILE_PATH: Path = CONFIG_DIR / "profile.yaml"
DATA_DIR: Path = ROOT_DIR / "data"
ASSETS_DIR: Path = Path(__file__).resolve().parent / "data"

DEFAULT_SPREADSHEET_ID = "1yIghg4F4l6VaGAS2hI7lVQnHfbH625RL87Dwe7af0Ss"

# Tried in this order; the first valid response wins.
SOURCE_URL_TEMPLATES: tuple[str, ...] = (
    "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv",
    "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv",
    "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv&id={sheet_id}&gid=0",
)


@dataclass
class Settings:
    spreadsheet_id: str = DEFAULT_SPREADSHEET_ID
    fetch_timeout: float = 10.0
    cache_ttl: float = 60.0
    user_agent: str = "Mozilla/5.0 (compatible; JobMatcher/1.0)"
    fallback_path: Path = ASSETS_DIR / "fallback_jobs.yaml"
    companies_path: Path = ASSETS_DIR / "companies.yaml"

    def source_urls(self) -> list[str]:
        return [t.format(sheet_id=self.spreadsheet_id) for t in SOURCE_URL_TEMPLATES]


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def load_settings(path: Path | None = None) -> Settings:
    """Settings file values first, then environment overrides."""
    data = _read_yaml(path or SETTINGS_PATH)
    settings = Settings()

    if data.get("spreadsheet_id"):
        settings.spreadsheet_id = str(data["spreadsheet_id"])
    if data.get("fetch_timeout") is not None:
        settings.fetch_timeout = float(data["fetch_timeout"])
    if data.get("cache_ttl") is not None:
        settings.cache_ttl = float(data["cache_ttl"])
    if data.get("user_agent"):
        settings.user_agent = str(data["user_agent"])
    if data.get("fallback_path"):
        settings.fallback_path = Path(data["fallback_path"])
    if data.get("companies_path"):
        settings.companies_path = Path(data["companies_path"])

    sheet_id = get_env("JOBMATCHER_SPREADSHEET_ID")
    if sheet_id:
        settings.spreadsheet_id = sheet_id
    for key, attr in (("JOBMATCHER_FETCH_TIMEOUT", "fetch_timeout"), ("JOBMATCHER_CACHE_TTL", "cache_ttl")):
        raw = get_env(key)
        if not raw:
            continue
        try:
            setattr(settings, attr, float(raw))
        except ValueError:
            log.warning("Ignoring non-numeric %s=%r", key, raw)
    for key, attr in (("JOBMATCHER_FALLBACK_PATH", "fallback_path"), ("JOBMATCHER_COMPANIES_PATH", "companies_path")):
        raw = get_env(key)
        if raw:
            setattr(settings, attr, Path(raw))

    return settings


def load_yaml_asset(path: Path) -> Any:
    """Parsed YAML content of a bundled or user-supplied asset file."""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)
