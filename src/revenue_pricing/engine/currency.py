"""
Currency conversion against the static EUR rate table.
"""
import dataclasses

from ..config.currencies import get_currency_config, normalize_currency_code, DEFAULT_CURRENCY
from .models import RevenueInput, PricingResult, StreamCosts, TraceStep


def convert_from_base(amount_eur: float, currency: str = DEFAULT_CURRENCY) -> float:
    """Convert an amount in EUR (base unit) to the target currency."""
    config = get_currency_config(currency)
    return amount_eur * config.conversion_rate


def convert_to_base(amount: float, currency: str = DEFAULT_CURRENCY) -> float:
    """Convert an amount in the source currency back to EUR (base unit)."""
    config = get_currency_config(currency)
    return amount / config.conversion_rate


def convert_between(amount: float, source: str, target: str) -> float:
    """Convert between two supported currencies via EUR."""
    if normalize_currency_code(source) == normalize_currency_code(target):
        get_currency_config(source)
        return amount
    return convert_from_base(convert_to_base(amount, source), target)


def convert_revenues(revenues: RevenueInput, source: str, target: str) -> RevenueInput:
    """Re-express all three revenue streams in another currency."""
    return RevenueInput(
        garage=convert_between(revenues.garage, source, target),
        shop=convert_between(revenues.shop, source, target),
        mobile=convert_between(revenues.mobile, source, target),
    )


def convert_result(result: PricingResult, currency: str) -> PricingResult:
    """
    Return a copy of a result with all money fields in `currency`.

    The effective rate is a percentage and stays unchanged. Earlier trace
    steps keep the amounts they were computed in; a final step records
    the conversion.
    """
    target = get_currency_config(currency).code
    trace = result.trace
    if target != result.currency:
        rate = convert_between(1, result.currency, target)
        trace = trace + (TraceStep(
            "Currency",
            f"Money fields converted from {result.currency} to {target}",
            f"1 {result.currency} = {rate:g} {target}",
        ),)

    def conv(value: float) -> float:
        return convert_between(value, result.currency, target)

    return dataclasses.replace(
        result,
        usage=StreamCosts(
            garage=conv(result.usage.garage),
            shop=conv(result.usage.shop),
            mobile=conv(result.usage.mobile),
        ),
        subtotal=conv(result.subtotal),
        discount=conv(result.discount),
        total=conv(result.total),
        currency=target,
        trace=trace,
    )
