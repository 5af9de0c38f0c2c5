from __future__ import annotations

import logging

from pipelines.runner import LookupContext
from services.industry_filter import apply_industry_filter

logger = logging.getLogger(__name__)


class FilterIndustry:
    def run(self, ctx: LookupContext) -> LookupContext:
        before_matched, before_employees = len(ctx.matched), len(ctx.employees)
        ctx.matched, ctx.employees = apply_industry_filter(ctx.matched, ctx.employees)
        logger.info(
            f"IT filter: matched {before_matched} -> {len(ctx.matched)}, "
            f"employees {before_employees} -> {len(ctx.employees)}",
            extra={"step": "filter"},
        )
        return ctx
