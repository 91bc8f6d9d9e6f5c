"""
Pricing breakdown view - Maps a PricingResult to display values.

Pure mapping: the result is read, never modified.
"""
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from ..engine.currency import convert_to_base
from ..engine.models import ContractType, PricingResult
from ..engine.tiers import detect_current_tier
from .formatting import format_currency, format_rate


# Tier label -> badge colour (Streamlit markdown colour names)
TIER_BADGES = {
    'Emerging': 'green',
    'Large': 'orange',
    'Enterprise': 'violet',
}


def get_tier_label(tier: int) -> str:
    """Descriptive label for a tier number."""
    if tier <= 4:
        return 'Emerging'
    if tier <= 7:
        return 'Large'
    return 'Enterprise'


def implied_total_revenue(result: PricingResult) -> float:
    """Reverse-derive total revenue (result currency) from total and effective rate."""
    if result.effective_rate <= 0:
        return 0.0
    return result.total / (result.effective_rate / 100)


def classify_tier(result: PricingResult) -> int:
    """Tier (1-10) of the revenue implied by the result; tiers are defined in EUR."""
    # Rounded to cents so revenue exactly on a boundary is not pushed below it
    revenue_eur = round(convert_to_base(implied_total_revenue(result), result.currency), 2)
    return detect_current_tier(revenue_eur)


@dataclass(frozen=True)
class ServiceLine:
    name: str
    usage: float
    usage_text: str


@dataclass(frozen=True)
class PricingBreakdown:
    """Formatted values for the annual cost breakdown card."""
    currency: str
    lines: tuple[ServiceLine, ...]
    total_usage_text: str
    total_text: str
    monthly_text: str
    effective_rate_text: str
    discount_text: Optional[str]
    tier: int
    tier_label: str
    tier_badge: str
    savings_message: Optional[str]

    def to_frame(self) -> pd.DataFrame:
        """Service lines as a DataFrame for tables and CSV export."""
        return pd.DataFrame([
            {'Service': line.name, 'Annual Cost': line.usage, 'Formatted': line.usage_text}
            for line in self.lines
        ])


def build_breakdown(
    result: PricingResult,
    include_mobile: Optional[bool] = None,
    contract_type: Optional[ContractType] = None,
) -> PricingBreakdown:
    """Build the display view for a result in its own currency."""
    currency = result.currency
    include_mobile = result.include_mobile if include_mobile is None else include_mobile
    contract = ContractType.parse(contract_type if contract_type is not None else result.contract_type)

    services = [
        ('Garage', result.usage.garage, True),
        ('Shop', result.usage.shop, True),
        ('Mobile', result.usage.mobile, include_mobile),
    ]
    lines = tuple(
        ServiceLine(name=name, usage=usage, usage_text=format_currency(usage, currency))
        for name, usage, show in services
        if show
    )

    tier = classify_tier(result)
    label = get_tier_label(tier)

    has_discount = result.discount > 0 and contract is not ContractType.NONE
    discount_text = format_currency(result.discount, currency) if has_discount else None
    savings_message = (
        f"You're saving {discount_text} per year with your {contract.value} contract!"
        if has_discount else None
    )

    return PricingBreakdown(
        currency=currency,
        lines=lines,
        total_usage_text=format_currency(result.usage.total, currency),
        total_text=format_currency(result.total, currency),
        monthly_text=format_currency(result.monthly_total, currency),
        effective_rate_text=format_rate(result.effective_rate),
        discount_text=discount_text,
        tier=tier,
        tier_label=label,
        tier_badge=TIER_BADGES[label],
        savings_message=savings_message,
    )
