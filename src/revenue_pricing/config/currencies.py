"""
Currency table for multi-currency pricing.

All pricing is computed in EUR (the base unit). Every supported currency
carries a fixed conversion rate from EUR; there is no live rate fetching.
"""
from dataclasses import dataclass


class UnknownCurrencyError(ValueError):
    """Raised when a currency code is outside the supported set."""

    def __init__(self, code):
        self.code = code
        super().__init__(
            f"Unknown currency '{code}'. Supported: {', '.join(SUPPORTED_CURRENCIES)}"
        )


@dataclass(frozen=True)
class CurrencyConfig:
    """Display and conversion settings for a single currency."""
    code: str
    symbol: str
    name: str
    locale: str
    conversion_rate: float  # Rate from EUR (EUR = 1.0)
    max_revenue: float  # Input ceiling only, never enforced by the engine

    # Number formatting conventions for the locale
    group_separator: str = ','
    decimal_separator: str = '.'
    symbol_after: bool = False


SUPPORTED_CURRENCIES: dict[str, CurrencyConfig] = {
    'EUR': CurrencyConfig(
        code='EUR', symbol='€', name='Euro', locale='en-IE',
        conversion_rate=1.0,  # Base currency
        max_revenue=200_000_000,
    ),
    'USD': CurrencyConfig(
        code='USD', symbol='$', name='US Dollar', locale='en-US',
        conversion_rate=1.10,
        max_revenue=220_000_000,  # 200M EUR * 1.10
    ),
    'GBP': CurrencyConfig(
        code='GBP', symbol='£', name='British Pound', locale='en-GB',
        conversion_rate=0.85,
        max_revenue=170_000_000,  # 200M EUR * 0.85
    ),
    'SEK': CurrencyConfig(
        code='SEK', symbol='kr', name='Swedish Krona', locale='sv-SE',
        conversion_rate=11.5,
        max_revenue=2_300_000_000,  # 200M EUR * 11.5
        group_separator=' ', decimal_separator=',', symbol_after=True,
    ),
    'DKK': CurrencyConfig(
        code='DKK', symbol='kr.', name='Danish Krone', locale='da-DK',
        conversion_rate=7.45,
        max_revenue=1_490_000_000,  # 200M EUR * 7.45
        group_separator='.', decimal_separator=',', symbol_after=True,
    ),
    'NOK': CurrencyConfig(
        code='NOK', symbol='kr', name='Norwegian Krone', locale='nb-NO',
        conversion_rate=11.5,
        max_revenue=2_300_000_000,  # 200M EUR * 11.5
        group_separator=' ', decimal_separator=',', symbol_after=True,
    ),
    'CHF': CurrencyConfig(
        code='CHF', symbol='CHF', name='Swiss Franc', locale='de-CH',
        conversion_rate=0.95,
        max_revenue=190_000_000,  # 200M EUR * 0.95
        group_separator='’', decimal_separator='.',
    ),
    'PLN': CurrencyConfig(
        code='PLN', symbol='zł', name='Polish Zloty', locale='pl-PL',
        conversion_rate=4.30,
        max_revenue=860_000_000,  # 200M EUR * 4.30
        group_separator=' ', decimal_separator=',', symbol_after=True,
    ),
}

DEFAULT_CURRENCY = 'EUR'
BASE_CURRENCY = 'EUR'


def normalize_currency_code(code: str) -> str:
    """Normalize a currency code (strip + upper). Does not validate."""
    return str(code).strip().upper()


def is_supported_currency(code: str) -> bool:
    """Check whether a code is in the supported set."""
    if code is None:
        return False
    return normalize_currency_code(code) in SUPPORTED_CURRENCIES


def get_currency_config(code: str = DEFAULT_CURRENCY) -> CurrencyConfig:
    """
    Look up a supported currency.

    Raises:
        UnknownCurrencyError: if the code is not supported. Callers are
            expected to pass validated codes; this is never silently defaulted.
    """
    if code is None:
        raise UnknownCurrencyError(code)
    config = SUPPORTED_CURRENCIES.get(normalize_currency_code(code))
    if config is None:
        raise UnknownCurrencyError(code)
    return config
