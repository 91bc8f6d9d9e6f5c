"""
Tests for the persisted currency preference.
"""
import json

import pytest

from revenue_pricing.config.currencies import UnknownCurrencyError
from revenue_pricing.services.preference_service import CURRENCY_KEY, PreferenceService


@pytest.fixture
def prefs(tmp_path):
    return PreferenceService(tmp_path / 'prefs' / 'preferences.json')


def test_default_when_nothing_stored(prefs):
    assert prefs.load_currency() == 'EUR'


def test_configured_default(tmp_path):
    assert PreferenceService(tmp_path / 'p.json', 'GBP').load_currency() == 'GBP'
    # An unsupported default falls back to EUR
    assert PreferenceService(tmp_path / 'p.json', 'XYZ').load_currency() == 'EUR'


def test_save_and_reload(prefs):
    assert prefs.save_currency('nok') == 'NOK'
    assert prefs.load_currency() == 'NOK'

    # A fresh instance on the same file sees the stored value
    assert PreferenceService(prefs.path).load_currency() == 'NOK'
    assert json.loads(prefs.path.read_text())[CURRENCY_KEY] == 'NOK'


def test_unknown_currency_is_not_saved(prefs):
    with pytest.raises(UnknownCurrencyError):
        prefs.save_currency('XYZ')
    assert prefs.load_currency() == 'EUR'


def test_other_keys_are_preserved(prefs):
    prefs.set('theme', 'dark')
    prefs.save_currency('SEK')
    assert prefs.get('theme') == 'dark'


def test_corrupt_file_reads_as_default(tmp_path):
    path = tmp_path / 'preferences.json'
    path.write_text("{not json")
    assert PreferenceService(path).load_currency() == 'EUR'


def test_unsupported_stored_value_reads_as_default(tmp_path):
    path = tmp_path / 'preferences.json'
    path.write_text(json.dumps({CURRENCY_KEY: 'BTC'}))
    assert PreferenceService(path, 'USD').load_currency() == 'USD'


def test_write_failure_is_not_raised(tmp_path):
    # The preference path is a directory, so writes fail
    service = PreferenceService(tmp_path)
    assert service.set(CURRENCY_KEY, 'NOK') is False
    assert service.save_currency('NOK') == 'NOK'
    assert service.load_currency() == 'EUR'
