"""Presentation subpackage - formatting and breakdown views."""
from .formatting import (
    format_currency,
    format_compact_currency,
    format_percentage,
    format_rate,
    format_revenue,
    format_amount_with_spaces,
)
from .breakdown import PricingBreakdown, build_breakdown, get_tier_label, implied_total_revenue

__all__ = [
    'format_currency', 'format_compact_currency', 'format_percentage', 'format_rate',
    'format_revenue', 'format_amount_with_spaces',
    'PricingBreakdown', 'build_breakdown', 'get_tier_label', 'implied_total_revenue',
]
