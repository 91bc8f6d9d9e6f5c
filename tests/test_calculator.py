"""
Tests for calculator session state: currency switching, presets, clamping.
"""
import math

import pytest

from revenue_pricing.engine import calculate_pricing
from revenue_pricing.engine.calculator import (
    CalculatorState,
    clamp_revenue,
    contract_savings,
    estimate_from_total,
    get_step_size,
)
from revenue_pricing.engine.models import ContractType, RevenueInput
from revenue_pricing.engine.presets import get_preset, split_total_revenue


def test_defaults():
    state = CalculatorState()
    assert state.currency == 'EUR'
    assert state.revenues == RevenueInput(garage=5_000_000, shop=3_000_000, mobile=1_000_000)
    assert state.include_mobile is True
    assert state.contract_type is ContractType.YEARLY


def test_switch_currency_converts_revenues():
    nok = CalculatorState().switch_currency('nok')
    assert nok.currency == 'NOK'
    assert nok.revenues == RevenueInput(garage=57_500_000, shop=34_500_000, mobile=11_500_000)

    back = nok.switch_currency('EUR')
    assert back.revenues == CalculatorState().revenues


def test_switch_currency_rounds_to_whole_units():
    usd = CalculatorState().switch_currency('USD')
    assert usd.revenues.garage == 5_500_000
    assert usd.revenues.garage == int(usd.revenues.garage)


def test_switch_to_same_currency_is_noop():
    state = CalculatorState()
    assert state.switch_currency('EUR') is state


def test_switch_to_unknown_currency_raises():
    with pytest.raises(ValueError):
        CalculatorState().switch_currency('XYZ')


def test_state_is_immutable():
    state = CalculatorState()
    updated = state.with_revenue('garage', 1_000_000)
    assert state.revenues.garage == 5_000_000
    assert updated.revenues.garage == 1_000_000


def test_apply_preset_in_display_currency():
    state = CalculatorState(currency='SEK').apply_preset('Small')
    small = get_preset('small')
    assert state.revenues.garage == pytest.approx(small.garage * 11.5)
    assert state.revenues.mobile == pytest.approx(small.mobile * 11.5)


def test_apply_preset_without_mobile():
    state = CalculatorState(include_mobile=False).apply_preset('enterprise')
    assert state.revenues.garage == 150_000_000
    assert state.revenues.mobile == 0


def test_unknown_preset():
    with pytest.raises(ValueError):
        CalculatorState().apply_preset('huge')


@pytest.mark.parametrize("raw", [-5, float('nan'), 'abc', None, float('inf')])
def test_invalid_input_clamps_to_zero(raw):
    assert clamp_revenue(raw) == 0


def test_clamp_caps_at_currency_ceiling():
    assert clamp_revenue(1e12, 'EUR') == 200_000_000
    assert clamp_revenue(1e12, 'NOK') == pytest.approx(2_300_000_000)
    assert clamp_revenue('1500') == 1500


def test_with_revenue_clamps_and_validates():
    state = CalculatorState().with_revenue('shop', -10)
    assert state.revenues.shop == 0
    with pytest.raises(ValueError):
        state.with_revenue('boat', 10)


def test_result_in_display_currency():
    eur = CalculatorState().result()
    nok = CalculatorState().switch_currency('NOK').result()

    assert nok.currency == 'NOK'
    assert nok.total == pytest.approx(eur.total * 11.5)
    assert nok.effective_rate == pytest.approx(eur.effective_rate)
    assert not math.isnan(nok.total)


def test_toggles_feed_the_result():
    state = CalculatorState().with_contract('none').with_mobile(False)
    result = state.result()
    assert result.contract_type is ContractType.NONE
    assert result.usage.mobile == 0
    assert result.discount == 0


def test_contract_savings():
    revenues = RevenueInput(garage=1_000_000)
    assert contract_savings(revenues, 'yearly') == pytest.approx(7_128)
    assert contract_savings(revenues, 'monthly') == pytest.approx(4_276.8)
    assert contract_savings(revenues, 'none') == 0
    assert contract_savings(revenues, 'yearly', currency='USD') == pytest.approx(7_128 * 1.10)


def test_estimate_from_total_uses_split():
    estimate = estimate_from_total(2_000_000, 'yearly', 'EUR')
    direct = calculate_pricing(split_total_revenue(2_000_000), contract_type='yearly')
    assert estimate.total == pytest.approx(direct.total)
    assert split_total_revenue(2_000_000) == RevenueInput(garage=1_200_000, shop=600_000, mobile=200_000)


@pytest.mark.parametrize("revenue, step", [
    (0, 50_000),
    (999_999, 50_000),
    (1_000_000, 500_000),
    (9_999_999, 500_000),
    (10_000_000, 5_000_000),
])
def test_step_size(revenue, step):
    assert get_step_size(revenue) == step
