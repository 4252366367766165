from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


ENV_VARS = (
    "KVSTORE_ENCODING",
    "KVSTORE_INDENT",
    "KVSTORE_SORT_KEYS",
    "KVSTORE_ENSURE_ASCII",
    "KVSTORE_ATOMIC_WRITES",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keep settings deterministic regardless of the developer's shell environment.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "database.json"
