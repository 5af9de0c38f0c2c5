from __future__ import annotations

import logging

from google_searcher import GoogleSearcher
from models.candidate_profile import CandidateProfile
from pipelines.runner import LookupContext

logger = logging.getLogger(__name__)


class SearchMatchedProfiles:
    """Seed with any directly known profile URL, then merge ranked search hits."""

    def __init__(self, searcher: GoogleSearcher):
        self.searcher = searcher

    def run(self, ctx: LookupContext) -> LookupContext:
        hint = ctx.hint
        apollo = ctx.partial("apollo")

        if hint.linkedin_url:
            ctx.matched.append(CandidateProfile(
                linkedin_url=hint.linkedin_url,
                name=hint.name,
                title=apollo.title if apollo else None,
                company=hint.company,
            ))

        if hint.name and len(hint.name) >= 2:
            found = self.searcher.find_matched_profiles(ctx.email, hint)
            seen = {p.linkedin_url for p in ctx.matched}
            for p in found:
                if p.linkedin_url not in seen:
                    ctx.matched.append(p)
                    seen.add(p.linkedin_url)

        logger.info(f"Matched profiles: {len(ctx.matched)}", extra={"step": "search"})
        return ctx


class BackfillPrimary:
    """Fill gaps on the primary candidate from the paid source's record."""

    def run(self, ctx: LookupContext) -> LookupContext:
        apollo = ctx.partial("apollo")
        if not ctx.matched or apollo is None:
            return ctx
        primary = ctx.matched[0]
        updates = {}
        if not primary.title and apollo.title:
            updates["title"] = apollo.title
        if not primary.company and apollo.company:
            updates["company"] = apollo.company
        if not primary.name and apollo.name:
            updates["name"] = apollo.name
        if updates:
            ctx.matched[0] = primary.model_copy(update=updates)
        return ctx
