"""Built-in locations of the SystemJS support files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

TRANSPILER_KEY = "transpiler"
PATHS_KEY = "paths"

# Loaded after the transpiler, in this order.
LOADER_FILES = ("es6-module-loader", "system-polyfills", "systemjs")

DEFAULT_PATHS: Mapping[str, str] = {
    "traceur": "traceur/bin/traceur.js",
    "babel": "babel-core/lib/browser.js",
    "typescript": "typescript/lib/typescript.js",
    "es6-module-loader": "es6-module-loader/dist/es6-module-loader.src.js",
    "system-polyfills": "systemjs/dist/system-polyfills.js",
    "systemjs": "systemjs/dist/system.src.js",
}


def select_transpiler(config: Any, default: str) -> str | None:
    """Return the transpiler to load, or ``None`` when it was disabled.

    Only a mapping carrying a non-empty ``transpiler`` name (or ``None``) can
    change the choice; any other loader config leaves the default in place.
    An empty default means no transpiler is loaded unless one is named.
    """

    if isinstance(config, Mapping) and TRANSPILER_KEY in config:
        value = config[TRANSPILER_KEY]
        if value is None:
            return None
        if str(value):
            return str(value)
    return default or None


def override_paths(config: Any) -> Mapping[str, str]:
    if isinstance(config, Mapping):
        paths = config.get(PATHS_KEY)
        if isinstance(paths, Mapping):
            return paths
    return {}


def default_path(name: str, module_root: Path, table: Mapping[str, str] = DEFAULT_PATHS) -> str:
    relative = table.get(name) or f"{name}/{name}.js"
    return (module_root / relative).as_posix()


def resolve_path(
    name: str,
    paths: Mapping[str, str],
    module_root: Path,
    table: Mapping[str, str] = DEFAULT_PATHS,
) -> str:
    override = paths.get(name)
    if override:
        return str(override)
    return default_path(name, module_root, table)


__all__ = [
    "DEFAULT_PATHS",
    "LOADER_FILES",
    "default_path",
    "override_paths",
    "resolve_path",
    "select_transpiler",
]
