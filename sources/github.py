from __future__ import annotations

from typing import Optional

from models.identity_hint import IdentityHint
from models.partial_identity import PartialIdentity
from services.domain_utils import find_linkedin_url
from sources.base import HttpIdentitySource
from sources.registry import register


class GitHubSource(HttpIdentitySource):
    """Public GitHub user search by email, then the full user profile."""

    source_name = "github"
    priority = 10

    def _github_headers(self):
        extra = {"Accept": "application/vnd.github.v3+json"}
        if self.settings.github_token:
            extra["Authorization"] = f"Bearer {self.settings.github_token}"
        return self._headers(extra)

    def fetch(self, email: str, hint: IdentityHint) -> Optional[PartialIdentity]:
        base = self.settings.github_api_url
        search = self._get_json(
            f"{base}/search/users",
            params={"q": f"{email} in:email"},
            headers=self._github_headers(),
        )
        items = (search or {}).get("items") or []
        if not items:
            return None

        username = items[0].get("login")
        if not username:
            return None
        profile = self._get_json(f"{base}/users/{username}", headers=self._github_headers())
        if not profile:
            return None

        company = profile.get("company")
        if company:
            company = company.strip().lstrip("@").strip() or None

        return PartialIdentity(
            source=self.source_name,
            name=profile.get("name") or None,
            company=company,
            location=profile.get("location") or None,
            linkedin_url=find_linkedin_url(profile.get("bio")) or find_linkedin_url(profile.get("blog")),
            bio=profile.get("bio") or None,
            profile_url=profile.get("html_url") or None,
        )


register(GitHubSource.source_name, GitHubSource)
