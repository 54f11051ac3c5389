from pathlib import Path

from quickrules.settings import Settings


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("QUICKRULES_DB", str(tmp_path / "pages.db"))
    monkeypatch.setenv("QUICKRULES_SOURCE", str(tmp_path / "srd.json"))
    monkeypatch.setenv("QUICKRULES_JOURNAL", "srd")
    monkeypatch.setenv("QUICKRULES_CONFIG", str(tmp_path / "quickrules.yaml"))

    settings = Settings()

    assert settings.sqlite_db_path == tmp_path / "pages.db"
    assert settings.source_path == tmp_path / "srd.json"
    assert settings.journal == "srd"
    assert isinstance(settings.config_path, Path)


def test_settings_optional_values_default_to_none(monkeypatch):
    monkeypatch.delenv("QUICKRULES_JOURNAL", raising=False)
    monkeypatch.delenv("QUICKRULES_CONFIG", raising=False)

    settings = Settings()

    assert settings.journal is None
    assert settings.config_path is None
