from __future__ import annotations

from pathlib import Path


class ConfigFileError(Exception):
    """Raised when the external SystemJS config file cannot be read or parsed."""

    def __init__(self, path: str | Path, reason: str = "unreadable config file") -> None:
        super().__init__(f"{reason}: {path}")
        self.path = Path(path)
        self.reason = reason


__all__ = ["ConfigFileError"]
