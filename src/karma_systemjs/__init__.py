"""Karma framework plugin that wires SystemJS into the test file list."""

from .adapter import SystemJsAdapter, init_systemjs
from .config_file import load_config_file, parse_config_text
from .defaults import DEFAULT_PATHS
from .errors import ConfigFileError
from .factory import PLUGINS, select_framework
from .patterns import FilePattern
from .settings import AdapterSettings

__all__ = [
    "SystemJsAdapter",
    "init_systemjs",
    "load_config_file",
    "parse_config_text",
    "DEFAULT_PATHS",
    "ConfigFileError",
    "PLUGINS",
    "select_framework",
    "FilePattern",
    "AdapterSettings",
]
