"""
Display formatting for money and percentages.

Amounts are formatted in the currency they are already expressed in; no
conversion happens here.
"""
from ..config.currencies import get_currency_config, CurrencyConfig


_COMPACT_UNITS = (
    (1_000_000_000_000, 'T'),
    (1_000_000_000, 'B'),
    (1_000_000, 'M'),
    (1_000, 'K'),
)


def format_number(amount: float, decimals: int = 0, group_separator: str = ',', decimal_separator: str = '.') -> str:
    """Format a number with thousands grouping and the given separators."""
    text = f"{abs(amount):,.{decimals}f}"
    text = text.replace(',', '\0').replace('.', decimal_separator).replace('\0', group_separator)
    # Avoid "-0"
    if amount < 0 and text.strip('0' + group_separator + decimal_separator):
        return '-' + text
    return text


def _with_symbol(number_text: str, config: CurrencyConfig) -> str:
    negative = number_text.startswith('-')
    digits = number_text[1:] if negative else number_text
    sign = '-' if negative else ''
    if config.symbol_after:
        return f"{sign}{digits} {config.symbol}"
    return f"{sign}{config.symbol}{digits}"


def _compact(amount: float, config: CurrencyConfig) -> str:
    for size, suffix in _COMPACT_UNITS:
        if abs(amount) >= size:
            scaled = f"{amount / size:.1f}"
            if scaled.endswith('.0'):
                scaled = scaled[:-2]
            return scaled.replace('.', config.decimal_separator) + suffix
    return format_number(amount, 0, config.group_separator, config.decimal_separator)


def format_currency(amount: float, currency_code: str = 'EUR', compact: bool = False, decimals: int = 0) -> str:
    """
    Format an amount as currency using the currency's locale conventions.

    >>> format_currency(1234567, 'EUR')
    '€1,234,567'
    >>> format_currency(1234567, 'NOK')
    '1 234 567 kr'
    """
    config = get_currency_config(currency_code)
    if compact and abs(amount) >= 1000:
        return _with_symbol(_compact(amount, config), config)
    return _with_symbol(
        format_number(amount, decimals, config.group_separator, config.decimal_separator),
        config,
    )


def format_compact_currency(amount: float, currency_code: str = 'EUR') -> str:
    """Compact currency string, e.g. €1.2M."""
    return format_currency(amount, currency_code, compact=True)


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a fraction as a percentage (0.15 -> '15.0%')."""
    return f"{value * 100:.{decimals}f}%"


def format_rate(rate_percent: float, decimals: int = 1) -> str:
    """Format a value that is already a percentage (2.85 -> '2.9%')."""
    return format_percentage(rate_percent / 100, decimals)


def format_revenue(amount: float, currency_code: str = 'EUR') -> str:
    """Abbreviated revenue with a leading symbol: €1.5M, kr12K."""
    symbol = get_currency_config(currency_code).symbol
    if amount >= 1_000_000_000:
        return f"{symbol}{amount / 1_000_000_000:.1f}B"
    if amount >= 1_000_000:
        return f"{symbol}{amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"{symbol}{amount / 1_000:.0f}K"
    return f"{symbol}{amount:.0f}"


def format_amount_with_spaces(amount: float, currency_code: str = 'EUR', show_decimals: bool = False) -> str:
    """Space-grouped amount followed by the symbol (European style: 7 000 000 €)."""
    symbol = get_currency_config(currency_code).symbol
    number = format_number(amount, 2 if show_decimals else 0, ' ', ',')
    return f"{number} {symbol}"
