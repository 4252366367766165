from __future__ import annotations

from pathlib import Path

import pytest

from kvstore import ConfigError, Store, StoreSettings, get_settings


def test_defaults_without_environment():
    assert get_settings() == StoreSettings()
    s = get_settings()
    assert s.encoding == "utf-8"
    assert s.indent == 2
    assert s.sort_keys is True
    assert s.ensure_ascii is False
    assert s.atomic_writes is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("KVSTORE_INDENT", "none")
    monkeypatch.setenv("KVSTORE_SORT_KEYS", "no")
    monkeypatch.setenv("KVSTORE_ENSURE_ASCII", "1")
    monkeypatch.setenv("KVSTORE_ATOMIC_WRITES", "on")
    monkeypatch.setenv("KVSTORE_ENCODING", "latin-1")

    s = get_settings()
    assert s.indent is None
    assert s.sort_keys is False
    assert s.ensure_ascii is True
    assert s.atomic_writes is True
    assert s.encoding == "latin-1"


def test_invalid_indent_raises_config_error(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("KVSTORE_INDENT", "wide")
    with pytest.raises(ConfigError):
        get_settings()


def test_env_file_is_loaded(tmp_path: Path):
    env_file = tmp_path / "kvstore.env"
    env_file.write_text("KVSTORE_INDENT=4\nKVSTORE_ATOMIC_WRITES=true\n", encoding="utf-8")

    s = get_settings(env_file)
    assert s.indent == 4
    assert s.atomic_writes is True


def test_store_picks_up_environment(monkeypatch: pytest.MonkeyPatch, db_path: Path):
    monkeypatch.setenv("KVSTORE_INDENT", "")

    store = Store(db_path)
    store.set("a", [1, 2])
    store.save()

    assert db_path.read_text(encoding="utf-8") == '{"a": [1, 2]}\n'


def test_unknown_encoding_raises_config_error(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("KVSTORE_ENCODING", "bogus")
    with pytest.raises(ConfigError) as excinfo:
        get_settings()
    assert excinfo.value.details["name"] == "KVSTORE_ENCODING"
