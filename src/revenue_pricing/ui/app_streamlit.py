"""
Streamlit UI for the Revenue Pricing Calculator.

Features:
- Currency switcher bound to the persisted preference
- Revenue inputs with quick presets, contract and mobile toggles
- Annual cost breakdown with CSV export
- Tier schedules, plan comparison and example scenarios
"""
import streamlit as st
import pandas as pd
from datetime import datetime

from revenue_pricing.config.currencies import SUPPORTED_CURRENCIES, get_currency_config
from revenue_pricing.config.settings import get_settings
from revenue_pricing.engine.calculator import CalculatorState, contract_savings, estimate_from_total, get_step_size
from revenue_pricing.engine.currency import convert_from_base, convert_to_base
from revenue_pricing.engine.models import ContractType, PricingOptions
from revenue_pricing.engine.plans import compare_pricing
from revenue_pricing.engine.presets import BASE_PRESETS_EUR, DEFAULT_SLIDER_INDEX, EXAMPLE_SCENARIOS, SLIDER_PRESETS_EUR, split_total_revenue
from revenue_pricing.engine.pricing_engine import calculate_pricing
from revenue_pricing.engine.tiers import DEFAULT_SCHEDULES, schedule_frame
from revenue_pricing.presentation.breakdown import build_breakdown
from revenue_pricing.presentation.formatting import format_compact_currency, format_currency, format_rate
from revenue_pricing.services.plan_config_service import PlanConfigService
from revenue_pricing.services.preference_service import PreferenceService


st.set_page_config(
    page_title="Revenue Pricing Calculator",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_preferences():
    """Get cached preference store."""
    settings = get_settings()
    return PreferenceService(settings.preferences_path, settings.default_currency)


@st.cache_resource
def get_plan_config():
    """Get cached plan configuration."""
    settings = get_settings()
    return PlanConfigService(settings.plan_config_csv, settings.scale_tiers_csv)


try:
    preferences = get_preferences()
    plan_config = get_plan_config()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


CONTRACT_LABELS = {
    ContractType.NONE: "No contract",
    ContractType.MONTHLY: "Monthly (save 15%)",
    ContractType.YEARLY: "Yearly (save 25%)",
}

# Calculator state lives in the session; every widget change replaces it
if 'calc' not in st.session_state:
    st.session_state.calc = CalculatorState(currency=preferences.load_currency())


def _reset_revenue_inputs():
    # Widget state overrides value=, so it must be cleared whenever calc changes outside the inputs
    for key in [k for k in st.session_state if str(k).startswith("rev_")]:
        del st.session_state[key]


def _on_currency_change():
    new_currency = st.session_state.currency_select
    _reset_revenue_inputs()
    st.session_state.calc = st.session_state.calc.switch_currency(new_currency)
    preferences.save_currency(new_currency)


# ============================================================================
# SIDEBAR: Calculation Context
# ============================================================================
with st.sidebar:
    st.header("⚙️ Calculation Context")

    with st.container(border=True):
        codes = list(SUPPORTED_CURRENCIES)
        st.selectbox(
            "Currency",
            options=codes,
            index=codes.index(st.session_state.calc.currency),
            format_func=lambda c: f"{c} | {SUPPORTED_CURRENCIES[c].name}",
            key="currency_select",
            on_change=_on_currency_change,
        )

        contract = st.radio(
            "Contract",
            options=list(CONTRACT_LABELS),
            index=list(CONTRACT_LABELS).index(st.session_state.calc.contract_type),
            format_func=lambda c: CONTRACT_LABELS[c],
        )
        include_mobile = st.toggle("Include mobile services", value=st.session_state.calc.include_mobile)

        st.session_state.calc = st.session_state.calc.with_contract(contract).with_mobile(include_mobile)

    st.divider()

    st.markdown("##### ⚡ Quick Presets")
    for preset in BASE_PRESETS_EUR:
        if st.button(preset.title(), use_container_width=True, key=f"preset_{preset}"):
            st.session_state.calc = st.session_state.calc.apply_preset(preset)
            _reset_revenue_inputs()
            st.rerun()


calc: CalculatorState = st.session_state.calc
currency = calc.currency
currency_config = get_currency_config(currency)


# ============================================================================
# MAIN CONTENT: TABBED INTERFACE
# ============================================================================
st.title("Revenue Pricing Calculator")
st.caption(f"v1.0 | Pricing Engine Active | {datetime.now().strftime('%Y-%m-%d')}")

tab1, tab2, tab3, tab4 = st.tabs(["🧮 Calculator", "📈 Tier Schedules", "⚖️ Plan Comparison", "📚 Examples"])


# ============================================================================
# TAB 1: CALCULATOR
# ============================================================================
with tab1:
    col1, col2 = st.columns([1.5, 1.5], gap="large")

    with col1:
        st.subheader("Annual Revenue")

        with st.container(border=True):
            for stream in ('garage', 'shop', 'mobile'):
                if stream == 'mobile' and not calc.include_mobile:
                    continue
                current = getattr(calc.revenues, stream)
                value = st.number_input(
                    f"{stream.title()} revenue ({currency_config.symbol})",
                    min_value=0.0,
                    max_value=float(currency_config.max_revenue),
                    value=float(min(current, currency_config.max_revenue)),
                    step=float(get_step_size(current)),
                    key=f"rev_{stream}_{currency}",
                )
                calc = calc.with_revenue(stream, value)
            st.session_state.calc = calc

    with col2:
        st.subheader("Annual Cost Breakdown")

        result = calc.result()
        breakdown = build_breakdown(result)

        with st.container(border=True):
            m1, m2 = st.columns(2)
            m1.metric("Total per year", breakdown.total_text)
            m2.metric("Effective rate", breakdown.effective_rate_text)

            st.caption(f"**Per month:** {breakdown.monthly_text}")
            st.markdown(f"**Tier {breakdown.tier}:** :{breakdown.tier_badge}[**{breakdown.tier_label}**]")

            st.divider()
            for line in breakdown.lines:
                st.markdown(f"{line.name}: **{line.usage_text}**")
            st.caption(f"**Usage total:** {breakdown.total_usage_text}")

            if breakdown.savings_message:
                st.markdown(f":green[**{breakdown.savings_message}**]")

            st.divider()
            export_df = breakdown.to_frame()
            st.download_button(
                "📥 CSV",
                data=export_df.to_csv(index=False),
                file_name=f"pricing_{currency.lower()}.csv",
                mime="text/csv",
                use_container_width=True
            )

    with st.expander("🔍 Calculation Details"):
        st.caption("Trace amounts are in EUR; the breakdown above is in the selected currency.")
        st.code(result.get_trace_text())


# ============================================================================
# TAB 2: TIER SCHEDULES
# ============================================================================
with tab2:
    st.subheader("📈 Tier Schedules")
    st.caption("Each tier's portion of revenue is charged at that tier's rate. Amounts in EUR.")

    stream_tabs = st.tabs([name.title() for name in DEFAULT_SCHEDULES])
    for stream_tab, schedule in zip(stream_tabs, DEFAULT_SCHEDULES.values()):
        with stream_tab:
            st.caption(f"Base rate {schedule.base_rate * 100:.1f}%, {schedule.cooldown * 100:.0f}% reduction per tier")
            st.dataframe(schedule_frame(schedule), use_container_width=True, hide_index=True)

    st.divider()
    st.markdown("##### Estimate from total revenue")
    slider_index = st.select_slider(
        "Total annual revenue",
        options=list(range(len(SLIDER_PRESETS_EUR))),
        value=DEFAULT_SLIDER_INDEX,
        format_func=lambda i: format_compact_currency(convert_from_base(SLIDER_PRESETS_EUR[i], currency), currency),
    )
    total_eur = SLIDER_PRESETS_EUR[slider_index]
    estimate = estimate_from_total(total_eur, calc.contract_type, currency)
    e1, e2, e3 = st.columns(3)
    e1.metric("Estimated cost", format_currency(estimate.total, currency))
    e2.metric("Effective rate", format_rate(estimate.effective_rate))
    savings = contract_savings(
        split_total_revenue(total_eur),
        calc.contract_type,
        currency=currency,
    )
    e3.metric("Contract savings", format_currency(savings, currency))


# ============================================================================
# TAB 3: PLAN COMPARISON
# ============================================================================
with tab3:
    st.subheader("⚖️ Launch vs. Scale")

    c1, c2 = st.columns(2)
    with c1:
        plan_revenue = st.number_input(
            f"Annual revenue ({currency_config.symbol})",
            min_value=0.0,
            value=float(round(convert_from_base(2_000_000, currency))),
            step=float(get_step_size(convert_from_base(2_000_000, currency))),
        )
    with c2:
        departments = st.number_input("Departments", min_value=0, value=2, step=1)

    comparison = compare_pricing(
        convert_to_base(plan_revenue, currency),
        int(departments),
        launch_config=plan_config.launch,
        scale_config=plan_config.scale,
        scale_tiers=plan_config.scale_tiers,
    )

    p1, p2 = st.columns(2)
    with p1:
        with st.container(border=True):
            st.markdown("##### 🚀 Launch")
            st.metric("Per year", format_currency(convert_from_base(comparison.launch.total_yearly, currency), currency))
            st.caption(f"Effective rate {format_rate(comparison.launch.effective_rate, 2)}")
    with p2:
        with st.container(border=True):
            st.markdown(f"##### 📊 Scale (tier {comparison.scale.tier})")
            st.metric("Per year", format_currency(convert_from_base(comparison.scale.total_yearly, currency), currency))
            st.caption(f"Effective rate {format_rate(comparison.scale.effective_rate, 2)}")

    st.success(
        f"**{comparison.recommendation.title()}** saves "
        f"{format_currency(convert_from_base(comparison.savings_amount, currency), currency)} "
        f"({comparison.savings_percentage:.1f}%)"
    )

    with st.expander("Scale tiers"):
        st.dataframe(plan_config.tiers_frame(), use_container_width=True, hide_index=True)


# ============================================================================
# TAB 4: EXAMPLES
# ============================================================================
with tab4:
    st.subheader("📚 Example Pricing Scenarios")

    rows = []
    for description, revenues, label in EXAMPLE_SCENARIOS:
        options = PricingOptions(include_mobile=revenues.mobile > 0, contract_type=calc.contract_type)
        result_eur = calculate_pricing(revenues, options)
        base_eur = calculate_pricing(revenues, PricingOptions(include_mobile=options.include_mobile))
        rows.append({
            'Scenario': description,
            'Revenue': label,
            'Garage': format_currency(convert_from_base(revenues.garage, currency), currency),
            'Shop': format_currency(convert_from_base(revenues.shop, currency), currency),
            'Mobile': format_currency(convert_from_base(revenues.mobile, currency), currency),
            'Base Price': format_currency(convert_from_base(base_eur.total, currency), currency),
            'Your Price': format_currency(convert_from_base(result_eur.total, currency), currency),
            'Effective Rate': format_rate(result_eur.effective_rate, 2),
        })
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
