from __future__ import annotations

import logging
from typing import Iterable, Optional

from models.identity_hint import IdentityHint
from models.partial_identity import PartialIdentity
from pipelines.runner import LookupContext
from services.name_normalizer import name_from_email

logger = logging.getLogger(__name__)

# Field -> sources allowed to supply it, highest priority first
FIELD_PRIORITY = {
    "name": ("apollo", "github", "gravatar"),
    "company": ("apollo", "github"),
    "location": ("github", "gravatar"),
    "linkedin_url": ("apollo", "github", "gravatar"),
}


def _first(values: Iterable[Optional[str]]) -> Optional[str]:
    for v in values:
        if v:
            return v
    return None


def _from_sources(ctx: LookupContext, field_name: str) -> Optional[str]:
    partials: Iterable[Optional[PartialIdentity]] = (ctx.partial(s) for s in FIELD_PRIORITY[field_name])
    return _first(getattr(p, field_name) for p in partials if p is not None)


class AssembleHint:
    """Fold the source results into one IdentityHint. User input always wins."""

    def run(self, ctx: LookupContext) -> LookupContext:
        ctx.hint = IdentityHint(
            name=_first([ctx.name, _from_sources(ctx, "name")]) or name_from_email(ctx.email),
            company=_from_sources(ctx, "company"),
            location=_first([ctx.country, _from_sources(ctx, "location")]),
            linkedin_url=_from_sources(ctx, "linkedin_url"),
        )
        logger.info(
            f"Discovered name={ctx.hint.name!r} company={ctx.hint.company or 'unknown'!r} "
            f"location={ctx.hint.location or 'unknown'!r} linkedin={ctx.hint.linkedin_url}",
            extra={"step": "assemble"},
        )
        return ctx
