"""Config subpackage - settings and currency tables."""
from .currencies import (
    CurrencyConfig,
    SUPPORTED_CURRENCIES,
    DEFAULT_CURRENCY,
    UnknownCurrencyError,
    get_currency_config,
)
from .settings import Settings, get_settings

__all__ = [
    'CurrencyConfig', 'SUPPORTED_CURRENCIES', 'DEFAULT_CURRENCY',
    'UnknownCurrencyError', 'get_currency_config', 'Settings', 'get_settings',
]
