from __future__ import annotations

import hashlib
from typing import Any, Dict, Optional

from models.identity_hint import IdentityHint
from models.partial_identity import PartialIdentity
from services.domain_utils import find_linkedin_url
from sources.base import HttpIdentitySource
from sources.registry import register


def email_hash(email: str) -> str:
    return hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()


def _linkedin_from_entry(entry: Dict[str, Any]) -> Optional[str]:
    for account in entry.get("accounts") or []:
        if account.get("shortname") == "linkedin" and account.get("url"):
            return account["url"]
    for u in entry.get("urls") or []:
        found = find_linkedin_url(u.get("value"))
        if found:
            return found
    return None


class GravatarSource(HttpIdentitySource):
    """Gravatar JSON profile keyed by the MD5 of the normalized email."""

    source_name = "gravatar"
    priority = 20

    def fetch(self, email: str, hint: IdentityHint) -> Optional[PartialIdentity]:
        data = self._get_json(
            f"{self.settings.gravatar_url}/{email_hash(email)}.json",
            headers=self._headers(),
        )
        entries = (data or {}).get("entry") or []
        if not entries:
            return None
        entry = entries[0]

        name = entry.get("displayName") or (entry.get("name") or {}).get("formatted") or None
        return PartialIdentity(
            source=self.source_name,
            name=name,
            location=entry.get("currentLocation") or None,
            linkedin_url=_linkedin_from_entry(entry),
            about=entry.get("aboutMe") or None,
        )


register(GravatarSource.source_name, GravatarSource)
