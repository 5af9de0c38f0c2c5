from __future__ import annotations

import pytest


def test_builtin_sources_registered():
    # Import package to trigger registration
    import sources  # noqa: F401
    from sources.registry import available_sources, get_source

    names = available_sources().keys()
    assert {"apollo", "github", "gravatar"} <= set(names)

    src = get_source("github")
    assert src.source_name == "github"


def test_unknown_source_raises():
    from sources.registry import get_source
    with pytest.raises(KeyError):
        get_source("does_not_exist")


def test_build_sources_orders_paid_source_first(make_settings):
    import sources  # noqa: F401
    from sources.registry import build_sources

    built = build_sources(settings=make_settings())
    assert [s.source_name for s in built][:3] == ["apollo", "github", "gravatar"]
