from __future__ import annotations

from typing import Iterator, Optional


def strict_query(query: str, profile_domain: str = "linkedin.com/in") -> str:
    return f"{query} site:{profile_domain}"


def fuzzy_query(query: str) -> str:
    # No site restriction so the provider's own spelling correction can kick in
    return f"{query} linkedin"


def query_templates(
    email: str,
    name: Optional[str],
    company: Optional[str] = None,
    location: Optional[str] = None,
) -> Iterator[str]:
    """Yield search queries from most to least specific.

    Consumed lazily: the caller stops at the first query that returns hits.
    """
    yield f'"{email}"'
    if not name:
        return
    if company and location:
        yield f'"{name}" "{company}" {location}'
    if company:
        yield f'"{name}" "{company}"'
    if location:
        yield f'"{name}" {location}'
    yield f'"{name}"'
    yield name


def company_employees_query(company: str) -> str:
    return f'"{company}" current'
