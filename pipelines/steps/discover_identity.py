from __future__ import annotations

import concurrent.futures as _fut
import logging
from typing import List, Optional

from models.identity_hint import IdentityHint
from models.partial_identity import PartialIdentity
from pipelines.runner import LookupContext
from sources.base import IdentitySource

logger = logging.getLogger(__name__)


def _safe_lookup(source: IdentitySource, email: str, hint: IdentityHint) -> Optional[PartialIdentity]:
    try:
        return source.lookup(email, hint)
    except Exception:
        # A broken adapter must not take the whole lookup down
        logger.exception(f"{source.source_name}: lookup failed", extra={"step": "discover", "source": source.source_name, "status": "error"})
        return None


class DiscoverIdentity:
    """Ask every identity source about the email.

    The first source (the paid one) runs alone; the rest run concurrently and
    are all awaited before the step completes.
    """

    def __init__(self, sources: List[IdentitySource]):
        self.sources = list(sources)

    def run(self, ctx: LookupContext) -> LookupContext:
        if not self.sources:
            return ctx
        request_hint = IdentityHint(name=ctx.name, location=ctx.country)

        first, rest = self.sources[0], self.sources[1:]
        ctx.partials[first.source_name] = _safe_lookup(first, ctx.email, request_hint)

        if rest:
            with _fut.ThreadPoolExecutor(max_workers=len(rest)) as ex:
                futures = {ex.submit(_safe_lookup, s, ctx.email, request_hint): s for s in rest}
                for fut in _fut.as_completed(futures):
                    ctx.partials[futures[fut].source_name] = fut.result()

        found = [name for name, p in ctx.partials.items() if p is not None]
        logger.info(f"Identity sources with data: {found or 'none'}", extra={"step": "discover"})
        return ctx
