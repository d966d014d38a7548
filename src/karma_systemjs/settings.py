from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class AdapterSettings(BaseSettings):
    # Root the built-in support file paths resolve against
    MODULES_ROOT: Optional[Path] = None

    # Browser-side bridge script, always the last file entry
    ADAPTER_PATH: Optional[Path] = None

    # Used when the loader config does not name a transpiler
    DEFAULT_TRANSPILER: str = "traceur"

    model_config = SettingsConfigDict(env_prefix="KARMA_SYSTEMJS_", case_sensitive=False)

    def modules_root(self) -> Path:
        return self.MODULES_ROOT or PACKAGE_DIR / "node_modules"

    def adapter_path(self) -> Path:
        return self.ADAPTER_PATH or PACKAGE_DIR / "adapter.js"
