import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))


FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _clear_adapter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MODULES_ROOT", "ADAPTER_PATH", "DEFAULT_TRANSPILER"):
        monkeypatch.delenv(f"KARMA_SYSTEMJS_{name}", raising=False)


@pytest.fixture
def karma_config() -> dict:
    return {"files": [], "client": {}, "systemjs": {}}


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES
