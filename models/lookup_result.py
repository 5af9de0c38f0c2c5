from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .candidate_profile import CandidateProfile


class LookupRequest(BaseModel):
    """Inbound lookup body. Email is validated by the pipeline, not here."""

    email: str | None = None
    name: str | None = None
    country: str | None = None

    model_config = ConfigDict(extra="ignore")


class SourcesChecked(BaseModel):
    apollo: bool = False
    github: bool = False
    gravatar: bool = False


class LookupResult(BaseModel):
    success: bool = True
    searched_name: str | None = None
    matched_profiles: list[CandidateProfile] = Field(default_factory=list)
    company_name: str | None = None
    company_employees: list[CandidateProfile] = Field(default_factory=list)
    sources_checked: SourcesChecked = Field(default_factory=SourcesChecked)
