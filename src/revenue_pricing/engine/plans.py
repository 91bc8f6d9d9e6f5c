"""
Plan comparison - Launch vs. Scale subscription plans.

Launch: fixed monthly fee plus a flat share of revenue.
Scale: fixed monthly fee, a per-department fee, and a take rate picked
from the revenue tier the business falls into.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LaunchConfig:
    fixed_monthly: float = 500.0  # €500/month
    revenue_percentage: float = 0.03  # 3%


@dataclass(frozen=True)
class ScaleConfig:
    fixed_monthly: float = 1000.0  # €1,000/month
    per_department: float = 100.0  # €100/department/month
    base_take_rate: float = 0.015  # 1.5% starting rate


@dataclass(frozen=True)
class ScaleTier:
    tier: int
    revenue_threshold: float
    take_rate: float
    revenue_multiplier: Optional[float] = None
    rate_reduction: Optional[float] = None


LAUNCH_CONFIG = LaunchConfig()
SCALE_CONFIG = ScaleConfig()

MIN_SCALE_TAKE_RATE = 0.007  # 0.7%
NUM_SCALE_TIERS = 15


def generate_scale_tiers(base_take_rate: float = SCALE_CONFIG.base_take_rate) -> list[ScaleTier]:
    """
    Generate the default Scale tiers.

    Tier 1 starts at €1M. Tier 2 doubles the threshold, every later tier
    multiplies it by 1.5. The rate drops 0.1pp for tiers 2 and 3 and
    0.05pp afterwards, never below 0.7%.
    """
    tiers = []
    revenue = 1_000_000.0
    rate = base_take_rate

    for i in range(1, NUM_SCALE_TIERS + 1):
        multiplier = None
        reduction = None
        if i == 2:
            multiplier, reduction = 2.0, 0.001
        elif i == 3:
            multiplier, reduction = 1.5, 0.001
        elif i > 3:
            multiplier, reduction = 1.5, 0.0005

        tiers.append(ScaleTier(
            tier=i,
            revenue_threshold=revenue,
            take_rate=rate,
            revenue_multiplier=multiplier,
            rate_reduction=reduction,
        ))

        # Next tier
        if i == 1:
            revenue *= 2
            rate -= 0.001
        else:
            revenue *= 1.5
            rate -= 0.001 if i == 2 else 0.0005
        rate = round(max(rate, MIN_SCALE_TAKE_RATE), 10)

    return tiers


@dataclass(frozen=True)
class LaunchPricingResult:
    fixed_cost_monthly: float
    fixed_cost_yearly: float
    revenue_cost: float
    total_monthly: float
    total_yearly: float
    effective_rate: float  # percentage
    type: str = 'launch'


@dataclass(frozen=True)
class ScalePricingResult:
    tier: int
    tier_take_rate: float
    fixed_cost_monthly: float
    per_department_cost_monthly: float
    total_fixed_monthly: float
    total_fixed_yearly: float
    revenue_cost: float
    total_yearly: float
    effective_rate: float  # percentage
    number_of_departments: int
    type: str = 'scale'


@dataclass(frozen=True)
class PricingComparison:
    launch: LaunchPricingResult
    scale: ScalePricingResult
    recommendation: str  # 'launch' or 'scale'
    savings_amount: float
    savings_percentage: float


def calculate_launch_pricing(annual_revenue: float, config: LaunchConfig = LAUNCH_CONFIG) -> LaunchPricingResult:
    fixed_yearly = config.fixed_monthly * 12
    revenue_cost = annual_revenue * config.revenue_percentage
    total_yearly = fixed_yearly + revenue_cost
    return LaunchPricingResult(
        fixed_cost_monthly=config.fixed_monthly,
        fixed_cost_yearly=fixed_yearly,
        revenue_cost=revenue_cost,
        total_monthly=total_yearly / 12,
        total_yearly=total_yearly,
        effective_rate=(total_yearly / annual_revenue) * 100 if annual_revenue > 0 else 0.0,
    )


def detect_scale_tier(annual_revenue: float, tiers: Optional[list[ScaleTier]] = None) -> ScaleTier:
    """Highest tier whose threshold the revenue reaches (tier 1 below €1M)."""
    tiers = tiers or generate_scale_tiers()
    selected = tiers[0]
    for tier in tiers:
        if annual_revenue >= tier.revenue_threshold:
            selected = tier
        else:
            break
    return selected


def calculate_scale_pricing(
    annual_revenue: float,
    number_of_departments: int,
    config: ScaleConfig = SCALE_CONFIG,
    tiers: Optional[list[ScaleTier]] = None,
) -> ScalePricingResult:
    tier = detect_scale_tier(annual_revenue, tiers)

    per_department_monthly = config.per_department * number_of_departments
    total_fixed_monthly = config.fixed_monthly + per_department_monthly
    total_fixed_yearly = total_fixed_monthly * 12
    revenue_cost = annual_revenue * tier.take_rate
    total_yearly = total_fixed_yearly + revenue_cost

    return ScalePricingResult(
        tier=tier.tier,
        tier_take_rate=tier.take_rate,
        fixed_cost_monthly=config.fixed_monthly,
        per_department_cost_monthly=per_department_monthly,
        total_fixed_monthly=total_fixed_monthly,
        total_fixed_yearly=total_fixed_yearly,
        revenue_cost=revenue_cost,
        total_yearly=total_yearly,
        effective_rate=(total_yearly / annual_revenue) * 100 if annual_revenue > 0 else 0.0,
        number_of_departments=number_of_departments,
    )


def compare_pricing(
    annual_revenue: float,
    number_of_departments: int,
    launch_config: LaunchConfig = LAUNCH_CONFIG,
    scale_config: ScaleConfig = SCALE_CONFIG,
    scale_tiers: Optional[list[ScaleTier]] = None,
) -> PricingComparison:
    """Compare Launch and Scale and recommend the cheaper plan (Launch on ties)."""
    launch = calculate_launch_pricing(annual_revenue, launch_config)
    scale = calculate_scale_pricing(annual_revenue, number_of_departments, scale_config, scale_tiers)

    recommendation = 'launch' if launch.total_yearly <= scale.total_yearly else 'scale'
    cheaper = min(launch.total_yearly, scale.total_yearly)
    expensive = max(launch.total_yearly, scale.total_yearly)
    savings = expensive - cheaper

    return PricingComparison(
        launch=launch,
        scale=scale,
        recommendation=recommendation,
        savings_amount=savings,
        savings_percentage=(savings / expensive) * 100 if expensive > 0 else 0.0,
    )
