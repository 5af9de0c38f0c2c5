from __future__ import annotations

import re


_SEPARATORS = re.compile(r"[._\-]")
_DIGITS = re.compile(r"[0-9]")
_MULTI_SPACE = re.compile(r"\s+")


def name_from_email(email: str) -> str:
    """Derive a probable display name from the local part of an email.

    Last-resort fallback when no source supplies a name. Separators become
    spaces and digits are dropped. A single run-together token longer than
    three characters is treated as "initial + name", e.g. "pnarsunaidu"
    becomes "p narsunaidu".
    """
    local_part = (email or "").split("@")[0]
    name = _SEPARATORS.sub(" ", local_part)
    name = _DIGITS.sub("", name)
    name = _MULTI_SPACE.sub(" ", name).strip()

    if " " not in name and len(name) > 3:
        name = f"{name[0]} {name[1:]}"
    return name
