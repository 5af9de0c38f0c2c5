from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class IdentityHint(BaseModel):
    """Best-known attributes of the target person, assembled before profile search."""

    name: str | None = None
    company: str | None = None
    location: str | None = None
    linkedin_url: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)
