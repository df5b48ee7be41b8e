"""
Unit tests for settings read from the environment
"""
import os

from rotapair.config import Settings
from rotapair.store.json_file import JsonFileStore
from rotapair.store.rest import RestHistoryStore, RestParticipantRegistry


def test_defaults():
    settings = Settings({})

    assert settings.uses_remote_store is False
    assert settings.history_table == "history"
    assert settings.players_table == "players"
    assert settings.timeout == 10.0
    assert settings.data_file is None


def test_values_from_environment(tmp_path):
    settings = Settings(
        {
            "ROTAPAIR_STORE_URL": "https://example.supabase.co/",
            "ROTAPAIR_STORE_KEY": "key",
            "ROTAPAIR_HISTORY_TABLE": "rounds",
            "ROTAPAIR_TIMEOUT": "2.5",
            "ROTAPAIR_DATA_FILE": str(tmp_path / "data.json"),
        }
    )

    assert settings.store_url == "https://example.supabase.co"
    assert settings.history_table == "rounds"
    assert settings.timeout == 2.5
    assert settings.data_file == tmp_path / "data.json"


def test_bad_timeout_falls_back():
    assert Settings({"ROTAPAIR_TIMEOUT": "soon"}).timeout == 10.0


def test_local_store_when_no_url(tmp_path):
    settings = Settings({"ROTAPAIR_DATA_FILE": str(tmp_path / "data.json")})

    history, registry = settings.open_stores()

    assert isinstance(history, JsonFileStore)
    assert history is registry
    assert history.path == tmp_path / "data.json"


def test_remote_store_when_url_set():
    history, registry = Settings({"ROTAPAIR_STORE_URL": "https://example.supabase.co"}).open_stores()

    assert isinstance(history, RestHistoryStore)
    assert isinstance(registry, RestParticipantRegistry)
    assert history.client is registry.client
    history.client.close()


def test_dotenv_file_is_loaded(tmp_path, monkeypatch):
    """Test that store credentials can come from a .env file"""
    (tmp_path / ".env").write_text(
        "ROTAPAIR_STORE_URL=https://example.supabase.co\nROTAPAIR_STORE_KEY=from-file\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(os, "environ", {"ROTAPAIR_STORE_KEY": "exported"})

    settings = Settings()

    assert settings.store_url == "https://example.supabase.co"
    assert settings.store_key == "exported"
    assert settings.uses_remote_store is True
