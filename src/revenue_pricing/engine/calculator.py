"""
Calculator session state.

Holds what the calculator form holds: the selected currency, the three
revenue inputs in that currency, the mobile toggle and the contract type.
The engine always computes in EUR; results are converted back to the
display currency.
"""
import logging
import math
from dataclasses import dataclass, field, replace
from typing import Optional

from ..config.currencies import DEFAULT_CURRENCY, get_currency_config
from .currency import convert_from_base, convert_result, convert_revenues, convert_to_base
from .models import ContractType, PricingOptions, PricingResult, RevenueInput
from .presets import get_preset, split_total_revenue
from .pricing_engine import calculate_pricing

logger = logging.getLogger(__name__)


def clamp_revenue(value, currency: str = DEFAULT_CURRENCY) -> float:
    """
    Clamp a raw input to a valid revenue for the currency.

    NaN, non-finite, non-numeric and negative values become 0; values above
    the currency's ceiling are capped.
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return min(value, get_currency_config(currency).max_revenue)


def get_step_size(revenue: float) -> int:
    """Input step size based on revenue scale."""
    if revenue < 1_000_000:
        return 50_000
    if revenue < 10_000_000:
        return 500_000
    return 5_000_000


@dataclass(frozen=True)
class CalculatorState:
    """Immutable calculator form state; every change returns a new state."""
    currency: str = DEFAULT_CURRENCY
    revenues: RevenueInput = field(
        default_factory=lambda: RevenueInput(garage=5_000_000, shop=3_000_000, mobile=1_000_000)
    )
    include_mobile: bool = True
    contract_type: ContractType = ContractType.YEARLY

    def __post_init__(self):
        object.__setattr__(self, 'currency', get_currency_config(self.currency).code)
        object.__setattr__(self, 'contract_type', ContractType.parse(self.contract_type))

    @property
    def options(self) -> PricingOptions:
        return PricingOptions(include_mobile=self.include_mobile, contract_type=self.contract_type)

    def with_revenue(self, stream: str, value) -> 'CalculatorState':
        """Set one stream's revenue (display currency), clamped to the valid range."""
        if stream not in ('garage', 'shop', 'mobile'):
            raise ValueError(f"Unknown revenue stream '{stream}'")
        clamped = clamp_revenue(value, self.currency)
        return replace(self, revenues=replace(self.revenues, **{stream: clamped}))

    def with_contract(self, contract_type) -> 'CalculatorState':
        return replace(self, contract_type=ContractType.parse(contract_type))

    def with_mobile(self, include_mobile: bool) -> 'CalculatorState':
        return replace(self, include_mobile=bool(include_mobile))

    def switch_currency(self, currency: str) -> 'CalculatorState':
        """
        Change the display currency, re-expressing revenues via EUR.

        Converted revenues are rounded to whole units.
        """
        target = get_currency_config(currency).code
        if target == self.currency:
            return self
        converted = convert_revenues(self.revenues, self.currency, target)
        logger.debug("Calculator currency %s -> %s", self.currency, target)
        return replace(
            self,
            currency=target,
            revenues=RevenueInput(
                garage=float(round(converted.garage)),
                shop=float(round(converted.shop)),
                mobile=float(round(converted.mobile)),
            ),
        )

    def apply_preset(self, name: str) -> 'CalculatorState':
        """Load a preset scenario, converted to the display currency."""
        preset = get_preset(name)
        return replace(
            self,
            revenues=RevenueInput(
                garage=convert_from_base(preset.garage, self.currency),
                shop=convert_from_base(preset.shop, self.currency),
                mobile=convert_from_base(preset.mobile, self.currency) if self.include_mobile else 0.0,
            ),
        )

    def revenues_in_base(self) -> RevenueInput:
        return RevenueInput(
            garage=convert_to_base(self.revenues.garage, self.currency),
            shop=convert_to_base(self.revenues.shop, self.currency),
            mobile=convert_to_base(self.revenues.mobile, self.currency),
        )

    def result(self) -> PricingResult:
        """Calculate in EUR, then express money fields in the display currency."""
        result_eur = calculate_pricing(self.revenues_in_base(), self.options)
        return convert_result(result_eur, self.currency)


def contract_savings(
    revenues_eur: RevenueInput,
    contract_type,
    include_mobile: bool = True,
    currency: Optional[str] = None,
) -> float:
    """Cost without a contract minus cost with the given contract."""
    with_contract = calculate_pricing(
        revenues_eur, PricingOptions(include_mobile=include_mobile, contract_type=contract_type)
    )
    without_contract = calculate_pricing(
        revenues_eur, PricingOptions(include_mobile=include_mobile, contract_type=ContractType.NONE)
    )
    savings = without_contract.total - with_contract.total
    if currency:
        return convert_from_base(savings, currency)
    return savings


def estimate_from_total(total_eur: float, contract_type, currency: str = DEFAULT_CURRENCY) -> PricingResult:
    """Estimate cost for a single total revenue using the 60/30/10 split."""
    result = calculate_pricing(
        split_total_revenue(total_eur),
        PricingOptions(include_mobile=True, contract_type=contract_type),
    )
    return convert_result(result, currency)
