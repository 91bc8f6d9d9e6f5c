"""
Tier schedules - Generates revenue ranges and charges revenue across them.

Each service stream has its own schedule: tier 1 covers the first 100,000 EUR
at the stream's base rate, every following tier is 2.5x wider and charged at
the previous rate reduced by the stream's cooldown. The last tier is open
ended, so revenue beyond the final boundary accrues at the lowest rate.
"""
import math
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .models import RevenueRange


# Revenue span for the first tier (EUR); each subsequent tier is 2.5x larger
INITIAL_SPAN = 100_000
RANGE_MULTIPLIER = 2.5
NUM_TIERS = 10


@dataclass(frozen=True)
class StreamSchedule:
    """Rate curve parameters for one service stream."""
    name: str
    base_rate: float
    cooldown: float  # fractional reduction per tier

    def ranges(self) -> list[RevenueRange]:
        return generate_ranges(self.base_rate, self.cooldown)


GARAGE_SCHEDULE = StreamSchedule('garage', base_rate=0.04, cooldown=0.20)
SHOP_SCHEDULE = StreamSchedule('shop', base_rate=0.05, cooldown=0.15)
MOBILE_SCHEDULE = StreamSchedule('mobile', base_rate=0.10, cooldown=0.15)

DEFAULT_SCHEDULES = {
    'garage': GARAGE_SCHEDULE,
    'shop': SHOP_SCHEDULE,
    'mobile': MOBILE_SCHEDULE,
}


def generate_ranges(
    base_rate: float,
    cooldown: float,
    initial_span: float = INITIAL_SPAN,
    multiplier: float = RANGE_MULTIPLIER,
    num_ranges: int = NUM_TIERS,
) -> list[RevenueRange]:
    """
    Generate the revenue ranges for a stream.

    Tier 1 starts at 0 and is fully billable at base_rate (there is no
    free tier). The final range ends at infinity.
    """
    ranges = []
    span = initial_span
    rate = base_rate
    start = 0.0
    for i in range(num_ranges):
        end = math.inf if i == num_ranges - 1 else start + span
        ranges.append(RevenueRange(tier=i + 1, start=start, end=end, rate=rate))
        start = end
        span *= multiplier
        rate = round(rate * (1 - cooldown), 10)
    return ranges


def calculate_usage_cost(revenue: float, ranges: list[RevenueRange]) -> float:
    """
    Charge revenue across the ranges: each tier's portion at that tier's rate.

    Zero revenue yields zero cost.
    """
    remaining = revenue
    cost = 0.0
    for rng in ranges:
        if remaining <= 0:
            break
        span = remaining if math.isinf(rng.end) else min(rng.span, remaining)
        cost += span * rng.rate
        remaining -= span
    return cost


def tier_boundaries(
    initial_span: float = INITIAL_SPAN,
    multiplier: float = RANGE_MULTIPLIER,
    num_tiers: int = NUM_TIERS,
) -> list[float]:
    """Cumulative upper boundaries of tiers 1..N-1 (the last tier is open)."""
    boundaries = []
    span = initial_span
    boundary = 0.0
    for _ in range(num_tiers - 1):
        boundary += span
        boundaries.append(boundary)
        span *= multiplier
    return boundaries


def detect_current_tier(total_revenue: float, num_tiers: int = NUM_TIERS) -> int:
    """Detect which tier (1-10) a total revenue falls into."""
    for tier, boundary in enumerate(tier_boundaries(num_tiers=num_tiers), start=1):
        if total_revenue < boundary:
            return tier
    return num_tiers


def marginal_rate(revenue: float, ranges: list[RevenueRange]) -> Optional[float]:
    """Rate charged on the next unit of revenue above `revenue`."""
    for rng in ranges:
        if rng.start <= revenue < rng.end:
            return rng.rate
    return ranges[-1].rate if ranges else None


def schedule_frame(schedule: StreamSchedule) -> pd.DataFrame:
    """Tier table for display and export."""
    ranges = schedule.ranges()
    rows = []
    for rng in ranges:
        cumulative_cost = calculate_usage_cost(rng.start, ranges)
        rows.append({
            'Tier': rng.tier,
            'From': rng.start,
            'To': None if math.isinf(rng.end) else rng.end,
            'Rate %': round(rng.rate * 100, 6),
            'Cost at Tier Start': cumulative_cost,
        })
    return pd.DataFrame(rows)
