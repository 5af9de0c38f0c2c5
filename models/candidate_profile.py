from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CandidateProfile(BaseModel):
    """One discovered LinkedIn profile. linkedin_url is the dedup key and may be missing."""

    linkedin_url: str | None = None
    name: str | None = None
    title: str | None = None
    company: str | None = None
    snippet: str | None = None

    model_config = ConfigDict(extra="ignore")
