from __future__ import annotations

import re
from typing import Any, Dict, Optional, Tuple

from models.candidate_profile import CandidateProfile
from services.domain_utils import is_linkedin_profile_url


_PLATFORM = "linkedin"
_TRAILING_PIPE_SUFFIX = re.compile(r"\s*\|\s*LinkedIn\s*$", re.IGNORECASE)
_TRAILING_DASH_SUFFIX = re.compile(r"\s*-\s*LinkedIn\s*$", re.IGNORECASE)


def parse_result_title(title: Optional[str]) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Split a search-indexed LinkedIn page title into (name, role, company).

    Titles only carry current employment:
      "Name"                      -> name
      "Name - Company"            -> name, company
      "Name - Role - Company ..." -> name, role, company (extra parts ignored)
    """
    cleaned = _TRAILING_PIPE_SUFFIX.sub("", title or "")
    cleaned = _TRAILING_DASH_SUFFIX.sub("", cleaned).strip()
    parts = [p.strip() for p in cleaned.split(" - ")]
    parts = [p for p in parts if p and p.lower() != _PLATFORM]

    name = parts[0] if parts else None
    role = None
    company = None
    if len(parts) >= 3:
        role = parts[1]
        company = parts[2]
    elif len(parts) == 2:
        company = parts[1]
    return name, role, company


def map_search_item(item: Dict[str, Any]) -> Optional[CandidateProfile]:
    """Map one Custom Search item to a CandidateProfile, or None if it is not a profile page."""
    link = item.get("link")
    if not is_linkedin_profile_url(link):
        return None
    name, role, company = parse_result_title(item.get("title"))
    # Snippets mention past employers too, so company comes from the title only
    return CandidateProfile(
        linkedin_url=link,
        name=name,
        title=role,
        company=company,
        snippet=item.get("snippet") or None,
    )
