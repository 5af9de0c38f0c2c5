from __future__ import annotations

from services.name_normalizer import name_from_email


def test_separators_and_digits_become_spaced_name():
    assert name_from_email("john.doe123@example.com") == "john doe"


def test_run_together_local_part_gets_initial_split():
    assert name_from_email("pnarsunaidu@example.com") == "p narsunaidu"


def test_short_single_token_is_left_alone():
    assert name_from_email("abc@example.com") == "abc"


def test_mixed_separators_collapse():
    assert name_from_email("jane__doe-smith.99@acme.io") == "jane doe smith"


def test_digits_only_local_part_yields_empty_name():
    assert name_from_email("12345@example.com") == ""
