"""
Data models for the pricing engine.

Uses dataclasses for structured, type-safe data representation.
Results are frozen: every input change produces a fresh result.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


STREAMS = ('garage', 'shop', 'mobile')


class ContractType(str, Enum):
    """Contract discount category applied to usage cost."""
    NONE = 'none'
    MONTHLY = 'monthly'
    YEARLY = 'yearly'

    @property
    def discount_rate(self) -> float:
        """Fractional discount (0.15 = 15% off)."""
        return CONTRACT_DISCOUNTS[self]

    @classmethod
    def parse(cls, value) -> 'ContractType':
        """Accept an enum member or its string value ('none', 'monthly', 'yearly')."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NONE
        return cls(str(value).strip().lower())


# Monthly subscribers get 15% off, yearly subscribers get 25% off
CONTRACT_DISCOUNTS = {
    ContractType.NONE: 0.0,
    ContractType.MONTHLY: 0.15,
    ContractType.YEARLY: 0.25,
}


@dataclass(frozen=True)
class TraceStep:
    """A single step in the pricing calculation trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class RevenueRange:
    """A revenue bracket charged at a single take-rate."""
    tier: int
    start: float
    end: float  # float('inf') for the last range
    rate: float  # fraction, e.g. 0.032 for 3.2%

    @property
    def span(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class RevenueInput:
    """Annual revenue per service stream, in a single currency."""
    garage: float = 0.0
    shop: float = 0.0
    mobile: float = 0.0

    @property
    def total(self) -> float:
        return self.garage + self.shop + self.mobile

    def as_dict(self) -> dict[str, float]:
        return {'garage': self.garage, 'shop': self.shop, 'mobile': self.mobile}

    @classmethod
    def from_dict(cls, data: dict) -> 'RevenueInput':
        return cls(
            garage=float(data.get('garage', 0) or 0),
            shop=float(data.get('shop', 0) or 0),
            mobile=float(data.get('mobile', 0) or 0),
        )


@dataclass(frozen=True)
class PricingOptions:
    """Options for a pricing calculation."""
    include_mobile: bool = True
    contract_type: ContractType = ContractType.NONE

    def __post_init__(self):
        # Allow plain strings ('yearly') from callers
        object.__setattr__(self, 'contract_type', ContractType.parse(self.contract_type))


@dataclass(frozen=True)
class PricingRequest:
    """A pricing request: revenues (EUR) plus options."""
    revenues: RevenueInput
    options: PricingOptions = field(default_factory=PricingOptions)


@dataclass(frozen=True)
class StreamCosts:
    """Usage cost per revenue stream."""
    garage: float = 0.0
    shop: float = 0.0
    mobile: float = 0.0

    @property
    def total(self) -> float:
        return self.garage + self.shop + self.mobile

    def as_dict(self) -> dict[str, float]:
        return {'garage': self.garage, 'shop': self.shop, 'mobile': self.mobile}


@dataclass(frozen=True)
class PricingResult:
    """
    Complete result of a pricing calculation.

    Derived, never persisted. Money fields are in the currency the
    calculation (or a later conversion) expressed them in.
    """
    usage: StreamCosts  # per stream, after discount
    subtotal: float  # before discount
    discount: float
    total: float
    effective_rate: float  # percentage, e.g. 2.85 for 2.85%
    contract_type: ContractType = ContractType.NONE
    include_mobile: bool = True
    currency: str = 'EUR'
    trace: tuple[TraceStep, ...] = ()

    @property
    def garage_cost(self) -> float:
        return self.usage.garage

    @property
    def shop_cost(self) -> float:
        return self.usage.shop

    @property
    def mobile_cost(self) -> float:
        return self.usage.mobile

    @property
    def monthly_total(self) -> float:
        return self.total / 12

    def get_trace_text(self) -> str:
        """Get human-readable result trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Flat dict for JSON responses and CSV export."""
        return {
            'currency': self.currency,
            'usage': self.usage.as_dict(),
            'subtotal': self.subtotal,
            'discount': self.discount,
            'total': self.total,
            'effective_rate': self.effective_rate,
            'contract_type': self.contract_type.value,
            'include_mobile': self.include_mobile,
        }
