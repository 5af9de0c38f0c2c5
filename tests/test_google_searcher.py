from __future__ import annotations

import requests

from conftest import FakeResponse, FakeSession
from google_searcher import GoogleSearcher
from models.identity_hint import IdentityHint


SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


def _item(slug, title, snippet=""):
    return {"link": f"https://www.linkedin.com/in/{slug}", "title": title, "snippet": snippet}


class ScriptedSearch:
    """Answers Custom Search calls by exact full query string."""

    def __init__(self, answers):
        self.answers = answers
        self.queries = []

    def __call__(self, url, params=None, **kwargs):
        q = params["q"]
        self.queries.append(q)
        items = self.answers.get(q, [])
        return FakeResponse(200, {"items": items} if items else {})


def _searcher(make_settings, handler):
    settings = make_settings(google_api_key="k", google_cse_id="cx")
    return GoogleSearcher(settings=settings, session=FakeSession({SEARCH_URL: handler}))


def test_no_credentials_means_no_calls(make_settings):
    session = FakeSession()
    searcher = GoogleSearcher(settings=make_settings(), session=session)
    assert searcher.search_linkedin('"jane"') == []
    assert searcher.find_matched_profiles("jane@acme.com", IdentityHint(name="Jane")) == []
    assert session.calls == []


def test_fuzzy_tier_runs_only_when_strict_is_empty(make_settings):
    handler = ScriptedSearch({'"Jane Doe" linkedin': [_item("jane", "Jane Doe | LinkedIn")]})
    searcher = _searcher(make_settings, handler)
    results = searcher.search_linkedin('"Jane Doe"')
    assert [p.name for p in results] == ["Jane Doe"]
    assert handler.queries == ['"Jane Doe" site:linkedin.com/in', '"Jane Doe" linkedin']

    handler.queries.clear()
    handler.answers['"Jane Doe" site:linkedin.com/in'] = [_item("jd", "Jane Doe - Acme | LinkedIn")]
    searcher.search_linkedin('"Jane Doe"')
    assert handler.queries == ['"Jane Doe" site:linkedin.com/in']


def test_non_profile_links_are_dropped(make_settings):
    handler = ScriptedSearch({'"x" site:linkedin.com/in': [
        {"link": "https://www.linkedin.com/company/acme", "title": "Acme | LinkedIn"},
        _item("x", "X Person | LinkedIn"),
    ]})
    results = _searcher(make_settings, handler).search('"x"', site_filter=True)
    assert [p.linkedin_url for p in results] == ["https://www.linkedin.com/in/x"]


def test_escalation_stops_at_first_template_with_hits(make_settings):
    handler = ScriptedSearch({
        '"Jane Doe" "Acme" site:linkedin.com/in': [
            _item("other", "Janet Dole - Acme | LinkedIn"),
            _item("jane", "Jane Doe - Engineer - Acme | LinkedIn"),
        ],
    })
    searcher = _searcher(make_settings, handler)
    hint = IdentityHint(name="Jane Doe", company="Acme")
    results = searcher.find_matched_profiles("jane@acme.com", hint)

    # ranked best first
    assert [p.linkedin_url for p in results] == [
        "https://www.linkedin.com/in/jane",
        "https://www.linkedin.com/in/other",
    ]
    assert handler.queries == [
        '"jane@acme.com" site:linkedin.com/in',
        '"jane@acme.com" linkedin',
        '"Jane Doe" "Acme" site:linkedin.com/in',
    ]


def test_escalation_falls_through_to_unquoted_name(make_settings):
    handler = ScriptedSearch({"jane doe linkedin": [_item("jane-doe", "Jane Doe - Developer - Acme | LinkedIn")]})
    searcher = _searcher(make_settings, handler)
    results = searcher.find_matched_profiles("jane.doe@acme.com", IdentityHint(name="jane doe"))
    assert len(results) == 1
    assert handler.queries[-1] == "jane doe linkedin"
    assert len(handler.queries) == 6


def test_api_errors_and_transport_failures_yield_no_results(make_settings):
    settings = make_settings(google_api_key="k", google_cse_id="cx")
    err = GoogleSearcher(settings=settings, session=FakeSession({SEARCH_URL: FakeResponse(200, {"error": {"code": 403}})}))
    assert err.search('"x"', site_filter=True) == []

    limited = GoogleSearcher(settings=settings, session=FakeSession({SEARCH_URL: FakeResponse(429, {})}))
    assert limited.search('"x"', site_filter=True) == []

    down = GoogleSearcher(settings=settings, session=FakeSession({SEARCH_URL: requests.exceptions.ConnectionError("boom")}))
    assert down.search_linkedin('"x"') == []


def test_company_employees_strict_tier_and_current_company_match(make_settings):
    handler = ScriptedSearch({'"Acme" current site:linkedin.com/in': [
        _item("a", "Ann Lee - Engineer - Acme Corp | LinkedIn"),
        _item("b", "Bo Kim - Globex | LinkedIn"),
        _item("c", "Cy Tan | LinkedIn"),
    ]})
    employees = _searcher(make_settings, handler).find_company_employees("Acme")
    assert [e.linkedin_url for e in employees] == ["https://www.linkedin.com/in/a"]
    # never falls back to the fuzzy tier
    assert handler.queries == ['"Acme" current site:linkedin.com/in']
