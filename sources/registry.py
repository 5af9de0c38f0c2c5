from __future__ import annotations

from typing import Any, Dict, List


_REGISTRY: Dict[str, Any] = {}


def register(name: str, factory) -> None:
    _REGISTRY[name] = factory


def get_source(name: str, **kwargs):
    if name not in _REGISTRY:
        raise KeyError(f"Unknown source: {name}")
    return _REGISTRY[name](**kwargs)


def available_sources() -> Dict[str, Any]:
    return dict(_REGISTRY)


def build_sources(**kwargs) -> List[Any]:
    """Instantiate every registered source, highest priority first."""
    sources = [factory(**kwargs) for factory in _REGISTRY.values()]
    sources.sort(key=lambda s: getattr(s, "priority", 100))
    return sources
