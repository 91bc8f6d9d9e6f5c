"""
Pricing Engine - Core usage pricing logic with traceability.

Computes usage cost per revenue stream over the tier schedules, sums the
streams, applies the contract discount and derives the effective rate.
Every step is recorded on the result trace.

All revenue inputs are annual revenue in EUR.
"""
import logging
from typing import Optional

from .models import (
    ContractType,
    PricingOptions,
    PricingRequest,
    PricingResult,
    RevenueInput,
    StreamCosts,
    TraceStep,
    STREAMS,
)
from .tiers import DEFAULT_SCHEDULES, StreamSchedule, calculate_usage_cost, detect_current_tier

logger = logging.getLogger(__name__)


class PricingEngine:
    """
    Core pricing engine that resolves usage cost using Stream → Tier → Rate pipeline.

    Resolution order:
    1. Zero mobile revenue when mobile is excluded
    2. For each stream: charge revenue across that stream's tier ranges
    3. Sum the stream costs to a pre-discount subtotal
    4. Apply the contract discount to the subtotal
    5. Effective rate = total / total revenue (0 when revenue is 0)
    """

    def __init__(self, schedules: Optional[dict[str, StreamSchedule]] = None):
        """Initialize engine with one tier schedule per stream."""
        self.schedules = dict(schedules or DEFAULT_SCHEDULES)
        missing = [s for s in STREAMS if s not in self.schedules]
        if missing:
            raise ValueError(f"Missing tier schedule for streams: {', '.join(missing)}")

        # Ranges are invariant, build them once
        self.ranges = {name: schedule.ranges() for name, schedule in self.schedules.items()}

    def usage_cost(self, stream: str, revenue: float) -> float:
        """Undiscounted usage cost for a single stream."""
        if stream not in self.ranges:
            raise ValueError(f"Unknown revenue stream '{stream}'")
        return calculate_usage_cost(revenue, self.ranges[stream])

    def calculate(self, request: PricingRequest) -> PricingResult:
        """
        Calculate pricing with full traceability.

        Args:
            request: PricingRequest with revenues (EUR) and options

        Returns:
            Frozen PricingResult in EUR
        """
        options = request.options
        revenues = request.revenues
        trace = []

        # 1. Mobile exclusion
        if not options.include_mobile:
            revenues = RevenueInput(garage=revenues.garage, shop=revenues.shop, mobile=0.0)
            trace.append(TraceStep("Mobile", "Mobile excluded, revenue treated as zero"))

        # 2. Per-stream usage cost
        raw = {}
        for stream in STREAMS:
            revenue = getattr(revenues, stream)
            raw[stream] = self.usage_cost(stream, revenue)
            trace.append(TraceStep(
                "Usage",
                f"{stream.title()} €{revenue:,.0f} across tier {detect_current_tier(revenue)} schedule",
                f"€{raw[stream]:,.2f}",
            ))

        # 3. Pre-discount subtotal
        subtotal = sum(raw.values())
        trace.append(TraceStep("Subtotal", "Sum of stream usage", f"€{subtotal:,.2f}"))

        # 4. Contract discount
        contract = options.contract_type
        discount_rate = contract.discount_rate
        discount_factor = 1 - discount_rate
        discount = subtotal * discount_rate
        total = subtotal - discount
        if contract is ContractType.NONE:
            trace.append(TraceStep("Discount", "No contract, no discount"))
        else:
            trace.append(TraceStep(
                "Discount",
                f"{contract.value.title()} contract {discount_rate * 100:.0f}% off",
                f"-€{discount:,.2f}",
            ))

        # 5. Effective rate
        total_revenue = revenues.total
        effective_rate = (total / total_revenue) * 100 if total_revenue > 0 else 0.0
        trace.append(TraceStep("Effective Rate", f"Total over €{total_revenue:,.0f} revenue", f"{effective_rate:.2f}%"))

        logger.debug(
            "Priced revenues %s (%s): total=%.2f rate=%.4f%%",
            revenues.as_dict(), contract.value, total, effective_rate,
        )

        return PricingResult(
            usage=StreamCosts(
                garage=raw['garage'] * discount_factor,
                shop=raw['shop'] * discount_factor,
                mobile=raw['mobile'] * discount_factor,
            ),
            subtotal=subtotal,
            discount=discount,
            total=total,
            effective_rate=effective_rate,
            contract_type=contract,
            include_mobile=options.include_mobile,
            currency='EUR',
            trace=tuple(trace),
        )


_default_engine: Optional[PricingEngine] = None


def get_engine() -> PricingEngine:
    """Get the shared default engine."""
    global _default_engine
    if _default_engine is None:
        _default_engine = PricingEngine()
    return _default_engine


def calculate_pricing(revenues, options: Optional[PricingOptions] = None, **kwargs) -> PricingResult:
    """
    Compute the pricing breakdown for annual revenues in EUR.

    Args:
        revenues: RevenueInput or a dict with garage/shop/mobile keys
        options: PricingOptions; alternatively pass include_mobile=... and
            contract_type=... as keyword arguments

    Returns:
        PricingResult in EUR
    """
    if not isinstance(revenues, RevenueInput):
        revenues = RevenueInput.from_dict(revenues)
    if options is None:
        options = PricingOptions(**kwargs)
    return get_engine().calculate(PricingRequest(revenues=revenues, options=options))
