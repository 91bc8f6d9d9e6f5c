"""
Behavioural properties of the tiered pricing model.
"""
import pytest

from revenue_pricing.engine import ContractType, PricingOptions, RevenueInput, calculate_pricing
from revenue_pricing.engine.presets import EXAMPLE_RATES


REVENUE_STEPS = [
    0, 1, 50_000, 99_999, 100_000, 100_001, 350_000, 975_000, 1_000_000,
    2_537_500, 5_000_000, 40_000_000, 200_000_000, 5_000_000_000,
]


def test_zero_revenue_yields_zero_total_and_rate():
    """No revenue costs nothing, whatever the options."""
    for contract in ContractType:
        for include_mobile in (True, False):
            result = calculate_pricing(
                {'garage': 0, 'shop': 0, 'mobile': 0},
                PricingOptions(include_mobile=include_mobile, contract_type=contract),
            )
            assert result.total == 0
            assert result.effective_rate == 0
            assert result.discount == 0


@pytest.mark.parametrize("revenues", [
    {'garage': 1_000_000, 'shop': 0, 'mobile': 0},
    {'garage': 5_000_000, 'shop': 3_000_000, 'mobile': 1_000_000},
    {'garage': 90_000_000, 'shop': 80_000_000, 'mobile': 24_000_000},
])
def test_no_contract_means_no_discount(revenues):
    result = calculate_pricing(revenues, contract_type='none')
    assert result.discount == 0
    assert result.total == result.subtotal


def test_excluded_mobile_revenue_has_no_effect():
    """With mobile excluded, changing mobile revenue must not change the total."""
    base = calculate_pricing({'garage': 2_000_000, 'shop': 1_000_000, 'mobile': 0}, include_mobile=False)
    for mobile in (1, 500_000, 50_000_000):
        result = calculate_pricing(
            {'garage': 2_000_000, 'shop': 1_000_000, 'mobile': mobile}, include_mobile=False
        )
        assert result.total == base.total
        assert result.usage.mobile == 0
        assert result.effective_rate == base.effective_rate


@pytest.mark.parametrize("stream", ['garage', 'shop', 'mobile'])
def test_cost_never_decreases_as_stream_grows(stream):
    """Increasing one stream while holding the others fixed never lowers the total."""
    others = {'garage': 1_000_000, 'shop': 500_000, 'mobile': 200_000}
    previous = None
    for revenue in REVENUE_STEPS:
        revenues = dict(others, **{stream: revenue})
        total = calculate_pricing(revenues, contract_type='yearly').total
        if previous is not None:
            assert total >= previous, f"{stream} total dropped at revenue {revenue}"
        previous = total


@pytest.mark.parametrize("stream", ['garage', 'shop', 'mobile'])
def test_effective_rate_never_increases_for_a_stream(stream):
    """A single stream's effective rate is non-increasing as its revenue grows."""
    previous = None
    for revenue in REVENUE_STEPS[1:]:
        revenues = {'garage': 0, 'shop': 0, 'mobile': 0, stream: revenue}
        rate = calculate_pricing(revenues).effective_rate
        if previous is not None:
            assert rate <= previous + 1e-9, f"{stream} rate rose at revenue {revenue}"
        previous = rate


@pytest.mark.parametrize("stream", ['garage', 'shop', 'mobile'])
def test_no_cliff_at_tier_boundaries(stream):
    """Cost is continuous across a boundary: one extra euro costs at most the top rate."""
    for boundary in (100_000, 350_000, 975_000):
        below = calculate_pricing({'garage': 0, 'shop': 0, 'mobile': 0, stream: boundary - 1}).total
        above = calculate_pricing({'garage': 0, 'shop': 0, 'mobile': 0, stream: boundary + 1}).total
        assert 0 < above - below <= 2 * 0.10 + 1e-9


def test_revenue_beyond_last_tier_accrues_at_lowest_rate():
    """Past the last boundary each extra euro is charged at the final tier rate."""
    from revenue_pricing.engine.tiers import GARAGE_SCHEDULE

    lowest = GARAGE_SCHEDULE.ranges()[-1].rate
    big = calculate_pricing({'garage': 10_000_000_000, 'shop': 0, 'mobile': 0}).total
    bigger = calculate_pricing({'garage': 11_000_000_000, 'shop': 0, 'mobile': 0}).total
    assert bigger - big == pytest.approx(1_000_000_000 * lowest)


def test_yearly_contract_scenario():
    """5M/3M/1M with a yearly contract is cheaper and below the small-tier example rate."""
    revenues = {'garage': 5_000_000, 'shop': 3_000_000, 'mobile': 1_000_000}

    yearly = calculate_pricing(revenues, include_mobile=True, contract_type='yearly')
    none = calculate_pricing(revenues, include_mobile=True, contract_type='none')

    assert yearly.total < none.total
    assert yearly.effective_rate < EXAMPLE_RATES['small']['rate']
    assert yearly.discount == pytest.approx(none.total * 0.25)
    assert yearly.total == pytest.approx(none.total * 0.75)


def test_monthly_discount_is_smaller_than_yearly():
    revenues = RevenueInput(garage=5_000_000, shop=3_000_000, mobile=1_000_000)
    monthly = calculate_pricing(revenues, contract_type=ContractType.MONTHLY)
    yearly = calculate_pricing(revenues, contract_type=ContractType.YEARLY)
    assert 0 < monthly.discount < yearly.discount


def test_effective_rate_is_a_percentage():
    """€100k of garage revenue sits entirely in tier 1 at 4%."""
    result = calculate_pricing({'garage': 100_000, 'shop': 0, 'mobile': 0})
    assert result.effective_rate == pytest.approx(4.0)


def test_result_carries_trace_and_options():
    result = calculate_pricing(
        RevenueInput(garage=1_000_000, shop=0, mobile=10), include_mobile=False, contract_type='monthly'
    )
    assert result.contract_type is ContractType.MONTHLY
    assert result.include_mobile is False
    assert result.currency == 'EUR'

    trace = result.get_trace_text()
    assert "Mobile excluded" in trace
    assert "Monthly contract 15% off" in trace


def test_result_is_immutable():
    result = calculate_pricing({'garage': 1_000_000, 'shop': 0, 'mobile': 0})
    with pytest.raises(AttributeError):
        result.total = 0


def test_unknown_contract_type_is_rejected():
    with pytest.raises(ValueError):
        calculate_pricing({'garage': 1}, contract_type='weekly')
