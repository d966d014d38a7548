"""Logging bridge for adapter applications."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, MutableMapping


@dataclass(slots=True)
class AdapterTelemetry:
    """Logs one ``systemjs_config_event`` per adapter application.

    The record carries the selected transpiler (``None`` when disabled), how
    many support and extra file patterns were added, and where the loader
    config came from: ``file``, ``inline`` or ``default``.
    """

    logger_name: str = "karma_systemjs.adapter"
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_logger", logging.getLogger(self.logger_name))

    def emit_event(
        self,
        *,
        transpiler: str | None,
        support_files: int,
        extra_files: int,
        config_source: str,
        extra: Mapping[str, str] | None = None,
    ) -> None:
        payload: MutableMapping[str, object] = {
            "event": "systemjs_config",
            "transpiler": transpiler,
            "support_files": support_files,
            "extra_files": extra_files,
            "config_source": config_source,
        }
        if extra:
            payload["attributes"] = dict(extra)
        self._logger.info("systemjs_config_event", extra=payload)


__all__ = ["AdapterTelemetry"]
