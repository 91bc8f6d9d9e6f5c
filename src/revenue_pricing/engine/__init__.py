"""Engine subpackage - core pricing logic and currency conversion."""
from .pricing_engine import PricingEngine, calculate_pricing
from .currency import convert_to_base, convert_from_base, convert_between, convert_result
from .models import (
    ContractType,
    PricingOptions,
    PricingRequest,
    PricingResult,
    RevenueInput,
    StreamCosts,
)
from .tiers import detect_current_tier

__all__ = [
    'PricingEngine', 'calculate_pricing',
    'convert_to_base', 'convert_from_base', 'convert_between', 'convert_result',
    'ContractType', 'PricingOptions', 'PricingRequest', 'PricingResult',
    'RevenueInput', 'StreamCosts', 'detect_current_tier',
]
