from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Paid identity match (optional)
    apollo_api_key: str | None
    apollo_match_url: str

    # Free identity sources
    github_api_url: str
    github_token: str | None
    gravatar_url: str

    # Web search (optional)
    google_api_key: str | None
    google_cse_id: str | None
    google_search_url: str
    results_per_page: int

    request_timeout_seconds: int
    user_agent: str

    log_level: str

    # HTTP surface
    host: str
    port: int
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    frontend_dist: str | None = None

    linkedin_profile_domain: str = "linkedin.com/in"

    @property
    def apollo_enabled(self) -> bool:
        return bool(self.apollo_api_key)

    @property
    def google_enabled(self) -> bool:
        return bool(self.google_api_key and self.google_cse_id)


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return ["*"]
    return [v.strip() for v in value.split(",") if v.strip()] or ["*"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        apollo_api_key=os.getenv("APOLLO_API_KEY") or None,
        apollo_match_url=os.getenv("APOLLO_MATCH_URL", "https://api.apollo.io/v1/people/match"),
        github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
        github_token=os.getenv("GITHUB_TOKEN") or None,
        gravatar_url=os.getenv("GRAVATAR_URL", "https://en.gravatar.com").rstrip("/"),
        google_api_key=os.getenv("GOOGLE_API_KEY") or None,
        # GOOGLE_CX is the name used by older deployments
        google_cse_id=os.getenv("GOOGLE_CSE_ID") or os.getenv("GOOGLE_CX") or None,
        google_search_url=os.getenv("GOOGLE_SEARCH_URL", "https://www.googleapis.com/customsearch/v1"),
        results_per_page=int(os.getenv("RESULTS_PER_PAGE", "10")),
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "10")),
        user_agent=os.getenv("USER_AGENT", "email-linkedin-lookup"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3001")),
        cors_origins=_split_csv(os.getenv("CORS_ORIGINS")),
        frontend_dist=os.getenv("FRONTEND_DIST", os.path.join("frontend", "dist")),
    )
