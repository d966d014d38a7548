"""Merges the ``systemjs`` section of a Karma config into its file list."""

from __future__ import annotations

import copy
import logging
import posixpath
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Sequence

from .config_file import load_config_file
from .defaults import DEFAULT_PATHS, LOADER_FILES, override_paths, resolve_path, select_transpiler
from .patterns import FileEntry, create_pattern, create_served_pattern
from .settings import AdapterSettings
from .telemetry import AdapterTelemetry

logger = logging.getLogger(__name__)


class SystemJsAdapter:
    """Translates ``config.systemjs`` into Karma file patterns and client config.

    The caller keeps ownership of the host config; :meth:`apply` only writes to
    it for the duration of the call. Use :meth:`merge` to leave it untouched.
    """

    def __init__(
        self,
        *,
        default_paths: Mapping[str, str] | None = None,
        module_root: Path | None = None,
        adapter_path: Path | None = None,
        default_transpiler: str | None = None,
        settings: AdapterSettings | None = None,
        telemetry: AdapterTelemetry | None = None,
    ) -> None:
        settings = settings or AdapterSettings()
        self.default_paths = DEFAULT_PATHS if default_paths is None else default_paths
        self.module_root = settings.modules_root() if module_root is None else module_root
        self.adapter_path = settings.adapter_path() if adapter_path is None else adapter_path
        self.default_transpiler = (
            settings.DEFAULT_TRANSPILER if default_transpiler is None else default_transpiler
        )
        self.telemetry = telemetry or AdapterTelemetry()

    def apply(self, host_config: MutableMapping[str, Any]) -> None:
        options = host_config.get("systemjs") or {}

        # Load before touching the host config so a bad file leaves it intact.
        config_file = options.get("configFile")
        if config_file:
            loader_config = load_config_file(config_file)
            config_source = "file"
        else:
            loader_config = options.get("config")
            config_source = "inline" if "config" in options else "default"

        transpiler = select_transpiler(loader_config, self.default_transpiler)
        support = self.support_files(loader_config, transpiler)
        extra = self.extra_files(options.get("files") or (), host_config.get("basePath"))

        files = host_config.get("files")
        if files is None:
            files = []
        elif not isinstance(files, list):
            files = list(files)
        files[:0] = support
        files.extend(extra)
        files.append(create_pattern(Path(self.adapter_path).as_posix()))
        host_config["files"] = files

        client = host_config.get("client")
        if client is None:
            client = {}
            host_config["client"] = client
        client["systemjs"] = {
            "testFileSuffix": options.get("testFileSuffix"),
            "config": loader_config,
        }

        self.telemetry.emit_event(
            transpiler=transpiler,
            support_files=len(support),
            extra_files=len(extra),
            config_source=config_source,
        )

    def merge(self, host_config: Mapping[str, Any]) -> Dict[str, Any]:
        """Return an updated deep copy of ``host_config``."""

        merged = copy.deepcopy(dict(host_config))
        self.apply(merged)
        return merged

    def support_files(self, loader_config: Any, transpiler: str | None) -> List[FileEntry]:
        paths = override_paths(loader_config)
        names: List[str] = [] if transpiler is None else [transpiler]
        names.extend(LOADER_FILES)
        entries: List[FileEntry] = []
        for name in names:
            path = resolve_path(name, paths, self.module_root, self.default_paths)
            logger.debug("systemjs support file %s -> %s", name, path)
            entries.append(create_pattern(path))
        return entries

    def extra_files(self, files: Sequence[str], base_path: str | None = None) -> List[FileEntry]:
        entries: List[FileEntry] = []
        for name in files:
            joined = posixpath.join(base_path, name) if base_path else name
            pattern = joined if posixpath.isabs(joined) else f"./{joined}"
            entries.append(create_served_pattern(pattern))
        return entries


def init_systemjs(config: MutableMapping[str, Any]) -> None:
    """Karma framework factory: apply the default adapter to ``config``."""

    SystemJsAdapter().apply(config)


init_systemjs.inject = ("config",)  # type: ignore[attr-defined]


__all__ = ["SystemJsAdapter", "init_systemjs"]
