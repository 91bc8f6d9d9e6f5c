"""
Preference Service - Client-local key/value preferences.

Stores the last selected currency in a small JSON file. Writes are
best-effort: a failed write is logged and otherwise ignored.
"""
import json
import logging
from pathlib import Path
from typing import Optional

from ..config.currencies import DEFAULT_CURRENCY, get_currency_config, is_supported_currency, normalize_currency_code

logger = logging.getLogger(__name__)

CURRENCY_KEY = 'pricing-currency'


class PreferenceService:
    """Reads and writes preferences to a JSON file."""

    def __init__(self, path: Path, default_currency: str = DEFAULT_CURRENCY):
        self.path = Path(path)
        self.default_currency = default_currency if is_supported_currency(default_currency) else DEFAULT_CURRENCY

    def _read_all(self) -> dict:
        """Load the whole preference map; missing or corrupt files read as empty."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read preferences from %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._read_all().get(key, default)

    def set(self, key: str, value: str) -> bool:
        """Write a single key. Returns False if the write failed."""
        data = self._read_all()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.warning("Could not persist preference %s=%s: %s", key, value, e)
            return False
        return True

    def load_currency(self) -> str:
        """Last selected currency, or the default when none/unsupported is stored."""
        saved = self.get(CURRENCY_KEY)
        if saved and is_supported_currency(saved):
            return normalize_currency_code(saved)
        if saved:
            logger.info("Ignoring unsupported stored currency '%s'", saved)
        return self.default_currency

    def save_currency(self, code: str) -> str:
        """
        Persist the selected currency.

        Raises:
            UnknownCurrencyError: if the code is not supported.
        """
        currency = get_currency_config(code).code
        self.set(CURRENCY_KEY, currency)
        return currency
