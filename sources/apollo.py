from __future__ import annotations

from typing import Any, Dict, Optional

from models.identity_hint import IdentityHint
from models.partial_identity import PartialIdentity
from sources.base import HttpIdentitySource
from sources.registry import register


def build_match_body(email: str, name: Optional[str]) -> Dict[str, Any]:
    """People-match request body; a two-token name is split into first/last."""
    body: Dict[str, Any] = {"email": email}
    if name and name.strip():
        parts = name.strip().split()
        if len(parts) == 2:
            body["first_name"] = parts[0]
            body["last_name"] = parts[1]
        else:
            body["name"] = name.strip()
    return body


class ApolloSource(HttpIdentitySource):
    """Paid Apollo.io people match. Tried first; skipped without an API key."""

    source_name = "apollo"
    priority = 0

    def enabled(self) -> bool:
        return self.settings.apollo_enabled

    def fetch(self, email: str, hint: IdentityHint) -> Optional[PartialIdentity]:
        data = self._post_json(
            self.settings.apollo_match_url,
            json=build_match_body(email, hint.name),
            headers=self._headers({
                "Content-Type": "application/json",
                "Cache-Control": "no-cache",
                "X-Api-Key": self.settings.apollo_api_key or "",
            }),
        )
        person = (data or {}).get("person")
        if not person:
            return None

        organization = person.get("organization") or {}
        return PartialIdentity(
            source=self.source_name,
            name=person.get("name") or None,
            title=person.get("title") or None,
            company=organization.get("name") or None,
            linkedin_url=person.get("linkedin_url") or None,
        )


register(ApolloSource.source_name, ApolloSource)
