"""File pattern records handed to the host runner's file list."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Union


@dataclass(slots=True)
class FilePattern:
    pattern: str
    included: bool = True
    served: bool = True
    watched: bool = False

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


FileEntry = Union[str, Dict[str, object]]


def create_pattern(path: str) -> Dict[str, object]:
    """Support file loaded into the page before the tests run."""

    return FilePattern(pattern=path, included=True, served=True, watched=False).as_dict()


def create_served_pattern(path: str) -> Dict[str, object]:
    """File served on demand to the module loader, never included directly."""

    return FilePattern(pattern=path, included=False, served=True, watched=True).as_dict()


__all__ = ["FilePattern", "FileEntry", "create_pattern", "create_served_pattern"]
