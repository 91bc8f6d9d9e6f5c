"""Preset revenue scenarios (EUR is the source of truth)."""
from .models import RevenueInput


# Quick presets for the calculator
BASE_PRESETS_EUR = {
    'small': RevenueInput(garage=1_000_000, shop=500_000, mobile=200_000),
    'large': RevenueInput(garage=20_000_000, shop=15_000_000, mobile=5_000_000),
    'enterprise': RevenueInput(garage=150_000_000, shop=100_000_000, mobile=50_000_000),
}

# The only values the revenue slider snaps to
SLIDER_PRESETS_EUR = [
    100_000,
    500_000,
    2_000_000,
    5_000_000,
    7_000_000,
    10_000_000,
    15_000_000,
    20_000_000,
    40_000_000,
    60_000_000,
    80_000_000,
    100_000_000,
    200_000_000,
]
DEFAULT_SLIDER_INDEX = 2  # €2M

# Simplified split used to estimate cost from a single total
SLIDER_SPLIT = {'garage': 0.6, 'shop': 0.3, 'mobile': 0.1}

# Reference scenarios shown on the pricing page
EXAMPLE_SCENARIOS = [
    ('Small Business', RevenueInput(garage=750_000, shop=200_000, mobile=50_000), '€1M total revenue'),
    ('Growing Business', RevenueInput(garage=5_000_000, shop=3_000_000, mobile=0), '€8M total (no mobile)'),
    ('Large Business', RevenueInput(garage=6_000_000, shop=3_000_000, mobile=1_000_000), '€10M total revenue'),
    ('Enterprise', RevenueInput(garage=90_000_000, shop=80_000_000, mobile=24_000_000), '€194M total revenue'),
]

# Published example effective rates (percent) for marketing copy
EXAMPLE_RATES = {
    'small': {'revenue': 1_000_000, 'rate': 4.89},
    'large': {'revenue': 10_000_000, 'rate': 2.87},
    'enterprise': {'revenue': 80_000_000, 'rate': 1.42},
}


def split_total_revenue(total_eur: float) -> RevenueInput:
    """Estimate stream revenues from a single total using the slider split."""
    return RevenueInput(
        garage=total_eur * SLIDER_SPLIT['garage'],
        shop=total_eur * SLIDER_SPLIT['shop'],
        mobile=total_eur * SLIDER_SPLIT['mobile'],
    )


def get_preset(name: str) -> RevenueInput:
    """Look up a named preset."""
    key = str(name).strip().lower()
    if key not in BASE_PRESETS_EUR:
        raise ValueError(f"Unknown preset '{name}'. Available: {', '.join(BASE_PRESETS_EUR)}")
    return BASE_PRESETS_EUR[key]
