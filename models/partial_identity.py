from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PartialIdentity(BaseModel):
    """What a single identity source knows about the person behind an email."""

    source: str
    name: str | None = None
    title: str | None = None
    company: str | None = None
    location: str | None = None
    linkedin_url: str | None = None
    bio: str | None = None
    about: str | None = None
    profile_url: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)
