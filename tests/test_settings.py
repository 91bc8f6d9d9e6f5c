"""
Tests for environment-driven settings.
"""
from pathlib import Path

from revenue_pricing.config.settings import Settings, get_settings, reset_settings


def test_defaults(tmp_path, monkeypatch):
    for var in ('PRICING_DATA_DIR', 'PRICING_PREFERENCES_PATH', 'PRICING_DEFAULT_CURRENCY'):
        monkeypatch.delenv(var, raising=False)

    settings = Settings.load(tmp_path)
    assert settings.project_root == tmp_path
    assert settings.preferences_path == settings.data_dir / 'preferences.json'
    assert settings.default_currency == 'EUR'
    assert settings.api_port == 8000


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv('PRICING_DATA_DIR', str(tmp_path / 'data'))
    monkeypatch.setenv('PRICING_PREFERENCES_PATH', str(tmp_path / 'prefs.json'))
    monkeypatch.setenv('PRICING_DEFAULT_CURRENCY', ' nok ')

    settings = Settings.load(tmp_path)
    assert settings.data_dir == tmp_path / 'data'
    assert settings.plan_config_csv == tmp_path / 'data' / 'plan_config.csv'
    assert settings.preferences_path == Path(tmp_path / 'prefs.json')
    assert settings.default_currency == 'NOK'


def test_settings_are_cached(monkeypatch):
    reset_settings()
    try:
        assert get_settings() is get_settings()
    finally:
        reset_settings()
