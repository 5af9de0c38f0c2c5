from __future__ import annotations

import re
from typing import Optional


_LINKEDIN_PROFILE_URL_RE = re.compile(
    r"https?://(?:www\.)?linkedin\.com/in/[a-zA-Z0-9_\-]+/?",
    re.IGNORECASE,
)
_LINKEDIN_PROFILE_PATH_RE = re.compile(r"linkedin\.com/in/", re.IGNORECASE)


def find_linkedin_url(text: Optional[str]) -> Optional[str]:
    """Return the first LinkedIn profile URL embedded in free text, as written."""
    if not text:
        return None
    m = _LINKEDIN_PROFILE_URL_RE.search(str(text))
    return m.group(0) if m else None


def is_linkedin_profile_url(url: Optional[str]) -> bool:
    if not url:
        return False
    return bool(_LINKEDIN_PROFILE_PATH_RE.search(url))
