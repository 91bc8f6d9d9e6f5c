#!/usr/bin/env python
"""
Check pipeline - prints the tier schedules and runs the test suite.

Usage:
    python scripts/build_all.py
"""
import subprocess
import sys
from pathlib import Path

from revenue_pricing.engine.presets import EXAMPLE_SCENARIOS
from revenue_pricing.engine.pricing_engine import calculate_pricing
from revenue_pricing.engine.tiers import DEFAULT_SCHEDULES, schedule_frame, tier_boundaries
from revenue_pricing.presentation.formatting import format_currency, format_rate


def main():
    print("=" * 60)
    print("REVENUE PRICING CHECK PIPELINE")
    print("=" * 60)
    print()

    print("[1/2] Tier schedules...")
    print(f"  Boundaries (EUR): {', '.join(format_currency(b) for b in tier_boundaries())}")
    for name, schedule in DEFAULT_SCHEDULES.items():
        print()
        print(f"  {name.upper()} (base {schedule.base_rate * 100:.1f}%, cooldown {schedule.cooldown * 100:.0f}%)")
        print(schedule_frame(schedule).to_string(index=False))

    print()
    print("  Example scenarios (no contract):")
    for description, revenues, label in EXAMPLE_SCENARIOS:
        result = calculate_pricing(revenues, include_mobile=revenues.mobile > 0)
        print(f"  {description:<18} {label:<24} {format_currency(result.total):>14}  {format_rate(result.effective_rate, 2)}")

    print()
    print("[2/2] Running tests...")

    test_result = subprocess.run(
        [sys.executable, '-m', 'pytest', 'tests', '-v', '--tb=short'],
        cwd=Path(__file__).parent.parent
    )

    if test_result.returncode != 0:
        print("\n❌ TESTS FAILED")
        sys.exit(1)

    print()
    print("=" * 60)
    print("✅ CHECK COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
