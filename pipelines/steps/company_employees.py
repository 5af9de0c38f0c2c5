from __future__ import annotations

import logging

from google_searcher import GoogleSearcher
from pipelines.runner import LookupContext

logger = logging.getLogger(__name__)


class SearchCompanyEmployees:
    """Look for current colleagues at the primary candidate's company."""

    def __init__(self, searcher: GoogleSearcher):
        self.searcher = searcher

    def run(self, ctx: LookupContext) -> LookupContext:
        ctx.company_name = ctx.matched[0].company or ctx.hint.company
        if not ctx.company_name:
            return ctx

        seen = {p.linkedin_url for p in ctx.matched if p.linkedin_url}
        ctx.employees = []
        for employee in self.searcher.find_company_employees(ctx.company_name):
            if employee.linkedin_url in seen:
                continue
            seen.add(employee.linkedin_url)
            ctx.employees.append(employee)
        logger.info(f"Company employees at {ctx.company_name}: {len(ctx.employees)}", extra={"step": "company"})
        return ctx
