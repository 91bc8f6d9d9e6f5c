"""
Golden test cases for pricing engine regression testing.
These tests capture the expected behavior of the pricing engine and
should fail if pricing logic changes unexpectedly.
"""
import csv
import os
import pytest

from revenue_pricing.engine import PricingEngine, PricingOptions, PricingRequest, RevenueInput


@pytest.fixture(scope="module")
def engine():
    """Create a single engine instance for all tests."""
    return PricingEngine()


def load_golden_cases():
    """Load golden test cases from CSV."""
    cases_path = os.path.join(os.path.dirname(__file__), 'golden_cases.csv')

    if not os.path.exists(cases_path):
        pytest.skip(f"Golden cases file not found: {cases_path}. Run generate_golden_cases.py first.")

    cases = []
    with open(cases_path, 'r', newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for row in reader:
            cases.append(row)

    return cases


@pytest.mark.parametrize("case", load_golden_cases(), ids=lambda c: c['case'])
def test_golden_case(engine, case):
    """Test that pricing matches expected golden case."""
    request = PricingRequest(
        revenues=RevenueInput(
            garage=float(case['garage']),
            shop=float(case['shop']),
            mobile=float(case['mobile']),
        ),
        options=PricingOptions(
            include_mobile=case['include_mobile'].lower() == 'true',
            contract_type=case['contract_type'],
        ),
    )

    result = engine.calculate(request)

    assert abs(result.subtotal - float(case['expected_subtotal'])) < 0.01, \
        f"Subtotal mismatch for {case['case']}: expected {case['expected_subtotal']}, got {result.subtotal:.2f}"

    assert abs(result.discount - float(case['expected_discount'])) < 0.01, \
        f"Discount mismatch for {case['case']}: expected {case['expected_discount']}, got {result.discount:.2f}"

    assert abs(result.total - float(case['expected_total'])) < 0.01, \
        f"Total mismatch for {case['case']}: expected {case['expected_total']}, got {result.total:.2f}"

    # Stream costs always add up to the total
    assert abs(result.usage.total - result.total) < 0.01


def test_engine_rejects_missing_schedule():
    """An engine must have a schedule for every revenue stream."""
    from revenue_pricing.engine.tiers import GARAGE_SCHEDULE

    with pytest.raises(ValueError, match="shop"):
        PricingEngine(schedules={'garage': GARAGE_SCHEDULE, 'mobile': GARAGE_SCHEDULE})
