from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Protocol

import requests

from config.settings import Settings, get_settings
from models.identity_hint import IdentityHint
from models.partial_identity import PartialIdentity
from services.errors import SourceUnavailable

logger = logging.getLogger(__name__)


class IdentitySource(Protocol):
    source_name: str
    priority: int

    def lookup(self, email: str, hint: IdentityHint) -> Optional[PartialIdentity]:
        ...


class HttpIdentitySource(ABC):
    """Shared plumbing for sources backed by a JSON HTTP API.

    Subclasses implement fetch(); any SourceUnavailable or transport error
    raised from it is logged and turned into "no data from this source".
    """

    source_name: str = "base"
    priority: int = 100

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.session = session or requests.Session()

    def enabled(self) -> bool:
        return True

    @abstractmethod
    def fetch(self, email: str, hint: IdentityHint) -> Optional[PartialIdentity]:
        """Query the provider; None when it has no record for the email."""

    def lookup(self, email: str, hint: IdentityHint) -> Optional[PartialIdentity]:
        if not self.enabled():
            logger.info(f"{self.source_name}: not configured, skipping", extra={"source": self.source_name, "status": "skipped"})
            return None

        started = time.monotonic()
        try:
            result = self.fetch(email, hint)
        except SourceUnavailable as e:
            logger.warning(f"{self.source_name}: unavailable ({e.reason})", extra={"source": self.source_name, "status": "unavailable", "error": e.reason})
            return None
        except requests.exceptions.Timeout:
            logger.warning(f"{self.source_name}: timed out", extra={"source": self.source_name, "status": "timeout"})
            return None
        except requests.exceptions.RequestException as e:
            logger.warning(f"{self.source_name}: request error: {e}", extra={"source": self.source_name, "status": "error", "error": str(e)})
            return None

        duration_ms = int((time.monotonic() - started) * 1000)
        logger.info(
            f"{self.source_name}: {'found' if result else 'no match'}"
            + (f" name={result.name!r} company={result.company!r} linkedin={result.linkedin_url}" if result else ""),
            extra={"source": self.source_name, "status": "found" if result else "not_found", "duration_ms": duration_ms},
        )
        return result

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"User-Agent": self.settings.user_agent}
        if extra:
            headers.update(extra)
        return headers

    def _get_json(self, url: str, **kwargs: Any) -> Optional[Dict[str, Any]]:
        """GET returning parsed JSON; 404 means no record, other failures raise SourceUnavailable."""
        resp = self.session.get(url, timeout=self.settings.request_timeout_seconds, **kwargs)
        return self._json_or_raise(resp)

    def _post_json(self, url: str, **kwargs: Any) -> Optional[Dict[str, Any]]:
        resp = self.session.post(url, timeout=self.settings.request_timeout_seconds, **kwargs)
        return self._json_or_raise(resp)

    def _json_or_raise(self, resp: requests.Response) -> Optional[Dict[str, Any]]:
        if resp.status_code == 404:
            return None
        if resp.status_code != 200:
            raise SourceUnavailable(self.source_name, f"HTTP {resp.status_code}: {resp.text[:150]}")
        try:
            return resp.json()
        except ValueError as e:
            raise SourceUnavailable(self.source_name, f"invalid JSON: {e}")
