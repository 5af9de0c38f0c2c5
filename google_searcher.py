"""
Google Custom Search API integration for LinkedIn profile searches.
"""
import logging
from typing import Dict, List, Optional

import requests

from config.settings import get_settings, Settings
from models.candidate_profile import CandidateProfile
from models.identity_hint import IdentityHint
from services.mapping import map_search_item
from services.query_builder import (
    company_employees_query,
    fuzzy_query,
    query_templates,
    strict_query,
)
from services.relevance import rank_profiles

logger = logging.getLogger(__name__)


class GoogleSearcher:
    """Finds LinkedIn profile pages through the Google Custom Search API.

    Missing credentials are not an error: every search then returns no hits.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.api_key = self.settings.google_api_key
        self.cse_id = self.settings.google_cse_id
        self.session = session or requests.Session()

        if not self.enabled:
            logger.info("Google search not configured; profile search will be skipped")

    @property
    def enabled(self) -> bool:
        return bool(self.api_key and self.cse_id)

    def search_single_page(self, query: str) -> Optional[Dict]:
        """Execute a single Google Custom Search API request. No retries."""
        params = {
            'key': self.api_key,
            'cx': self.cse_id,
            'q': query,
            'num': self.settings.results_per_page,
        }
        try:
            response = self.session.get(
                self.settings.google_search_url,
                params=params,
                timeout=self.settings.request_timeout_seconds,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Google request error: {e}", extra={"source": "google", "status": "error"})
            return None

        if response.status_code == 429:
            logger.warning("Google API rate limit exceeded", extra={"source": "google", "status": "429"})
            return None
        try:
            data = response.json()
        except ValueError:
            logger.warning(f"Google returned non-JSON body (HTTP {response.status_code})", extra={"source": "google"})
            return None
        if response.status_code != 200 or data.get('error'):
            logger.error(
                f"Google API error: {data.get('error') or response.text[:200]}",
                extra={"source": "google", "status": str(response.status_code)},
            )
            return None
        return data

    def search(self, query: str, site_filter: bool) -> List[CandidateProfile]:
        """Run one query tier and return the LinkedIn profile hits it produced."""
        if not self.enabled:
            return []

        full_query = strict_query(query, self.settings.linkedin_profile_domain) if site_filter else fuzzy_query(query)
        logger.info(f"Searching: {full_query!r} ({'site-filtered' if site_filter else 'fuzzy'})", extra={"source": "google"})

        data = self.search_single_page(full_query)
        if not data:
            return []
        items = data.get('items') or []
        profiles = [p for p in (map_search_item(item) for item in items) if p is not None]
        logger.info(f"LinkedIn profiles found: {len(profiles)} of {len(items)} raw result(s)", extra={"source": "google"})
        return profiles

    def search_linkedin(self, query: str) -> List[CandidateProfile]:
        """Precise site-restricted search first, fuzzy search only if that found nothing."""
        results = self.search(query, site_filter=True)
        if results:
            return results
        return self.search(query, site_filter=False)

    def find_matched_profiles(self, email: str, hint: IdentityHint) -> List[CandidateProfile]:
        """Walk the query ladder until a template yields hits, then rank by name."""
        for query in query_templates(email, hint.name, hint.company, hint.location):
            results = self.search_linkedin(query)
            if results:
                return rank_profiles(results, hint.name)
        return []

    def find_company_employees(self, company_name: str) -> List[CandidateProfile]:
        """Profiles whose current employer (from the page title) matches company_name."""
        if not company_name:
            return []

        logger.info(f"Searching for current employees at: {company_name}", extra={"source": "google"})
        results = self.search(company_employees_query(company_name), site_filter=True)

        target = company_name.lower()
        employees = []
        for p in results:
            if not p.company:
                continue
            current = p.company.lower()
            if target in current or current in target:
                employees.append(p)

        logger.info(f"Found {len(employees)} current employee(s) at {company_name}", extra={"source": "google"})
        return employees
