from __future__ import annotations

import logging

from models.candidate_profile import CandidateProfile
from pipelines.runner import LookupContext
from services.errors import NoMatchFound

logger = logging.getLogger(__name__)


class EnsureCandidates:
    """Fall back to a URL-less paid-source record, or end the lookup as not found."""

    def run(self, ctx: LookupContext) -> LookupContext:
        if ctx.matched:
            return ctx
        apollo = ctx.partial("apollo")
        if apollo is not None and (apollo.name or apollo.company):
            ctx.matched.append(CandidateProfile(
                linkedin_url=None,
                name=apollo.name,
                title=apollo.title,
                company=apollo.company,
            ))
            logger.info("No profile URL found; using paid-source record", extra={"step": "ensure"})
            return ctx
        logger.info(f"No profile found for {ctx.email}", extra={"step": "ensure", "status": "not_found"})
        raise NoMatchFound()
