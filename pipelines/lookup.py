from __future__ import annotations

import logging
import re
from typing import List, Optional

import requests

from config.settings import Settings, get_settings
from google_searcher import GoogleSearcher
from models.lookup_result import LookupResult, SourcesChecked
from pipelines.runner import LookupContext, Pipeline
from pipelines.steps import (
    AssembleHint,
    BackfillPrimary,
    DiscoverIdentity,
    EnsureCandidates,
    FilterIndustry,
    SearchCompanyEmployees,
    SearchMatchedProfiles,
)
from services.errors import InputValidationError
from sources.base import IdentitySource
from sources.registry import build_sources

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: Optional[str]) -> bool:
    return bool(email) and bool(_EMAIL_RE.fullmatch(email))


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def lookup_email(
    email: Optional[str],
    name: Optional[str] = None,
    country: Optional[str] = None,
    *,
    searcher: Optional[GoogleSearcher] = None,
    sources: Optional[List[IdentitySource]] = None,
    settings: Optional[Settings] = None,
) -> LookupResult:
    """Resolve an email to ranked LinkedIn profile candidates.

    Raises InputValidationError for a missing/malformed email (before any
    source is called) and NoMatchFound when nothing at all turns up.
    """
    # Surrounding whitespace is a validation failure, not something to trim
    email = email if isinstance(email, str) else None
    if not is_valid_email(email):
        raise InputValidationError()

    settings = settings or get_settings()
    if searcher is None or sources is None:
        session = requests.Session()
        searcher = searcher or GoogleSearcher(settings=settings, session=session)
        sources = sources if sources is not None else build_sources(settings=settings, session=session)

    ctx = LookupContext(email=email, name=_clean(name), country=_clean(country))
    logger.info(
        f"Starting lookup for: {email}"
        + (f" (name: {ctx.name})" if ctx.name else "")
        + (f" (country: {ctx.country})" if ctx.country else ""),
        extra={"step": "start"},
    )

    pipeline = Pipeline([
        DiscoverIdentity(sources),
        AssembleHint(),
        SearchMatchedProfiles(searcher),
        BackfillPrimary(),
        EnsureCandidates(),
        SearchCompanyEmployees(searcher),
        FilterIndustry(),
    ])
    ctx = pipeline.run(ctx)

    logger.info(
        f"Done: matched={len(ctx.matched)} employees={len(ctx.employees)}",
        extra={"step": "done", "status": "ok"},
    )
    return LookupResult(
        searched_name=ctx.hint.name,
        matched_profiles=ctx.matched,
        company_name=ctx.company_name,
        company_employees=ctx.employees,
        sources_checked=SourcesChecked(
            apollo=ctx.partial("apollo") is not None,
            github=ctx.partial("github") is not None,
            gravatar=ctx.partial("gravatar") is not None,
        ),
    )
