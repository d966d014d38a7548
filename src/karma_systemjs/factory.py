"""Plugin registration table consumed by the host runner."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Tuple

from .adapter import init_systemjs

PLUGINS: Mapping[str, Tuple[str, Callable[..., Any]]] = {
    "framework:systemjs": ("factory", init_systemjs),
}


def select_framework(name: str) -> Callable[..., Any]:
    key = name if name.startswith("framework:") else f"framework:{name}"
    entry = PLUGINS.get(key)
    if entry is None:
        raise ValueError(f"unsupported_framework:{name}")
    return entry[1]


__all__ = ["PLUGINS", "select_framework"]
