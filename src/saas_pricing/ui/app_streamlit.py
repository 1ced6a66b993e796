"""
Streamlit UI for the SaaS Pricing Calculator.

Features:
- Six business inputs with hints, recalculated on every change
- Result cards for customers, price, revenue and profit
- Fixed pricing tiers and business insights
- Sensitivity chart over monthly visitors
- Export to CSV
"""
import streamlit as st
import sys
from pathlib import Path
from datetime import datetime

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from saas_pricing import __version__
from saas_pricing.config.settings import get_settings
from saas_pricing.engine import PricingInputs
from saas_pricing.engine.analysis import results_frame, sensitivity_table
from saas_pricing.presentation import (
    FIELD_HINTS,
    FIELD_LABELS,
    PresentationAdapter,
    PricingCalculator,
)


st.set_page_config(
    page_title="SaaS Pricing Calculator",
    layout="wide",
    initial_sidebar_state="expanded"
)

settings = get_settings()


def get_calculator() -> PricingCalculator:
    """One calculator per browser session; its display slots persist across reruns."""
    if 'calculator' not in st.session_state:
        st.session_state.calculator = PricingCalculator(
            adapter=PresentationAdapter(target={}),
            settings=settings,
        )
    return st.session_state.calculator


calculator = get_calculator()


# ============================================================================
# CUSTOM CSS & STYLING
# ============================================================================
st.markdown("""
    <style>
        .block-container {
            padding-top: 2rem;
            padding-bottom: 2rem;
        }
        .stMetric {
            background-color: #f0f2f6;
            padding: 10px;
            border-radius: 5px;
            border-left: 5px solid #667eea;
        }
    </style>
""", unsafe_allow_html=True)

# ============================================================================
# SIDEBAR: Business Inputs
# ============================================================================
with st.sidebar:
    st.header("📈 Business Inputs")

    raw_fields = {}
    with st.container(border=True):
        for name in PricingInputs.field_names():
            raw_fields[name] = st.text_input(
                FIELD_LABELS[name],
                value=settings.form_defaults.get(name, ""),
                help=FIELD_HINTS[name],
                key=f"input_{name}",
            )

    recalculate = st.button("🧮 Calculate Pricing", type="primary", use_container_width=True)

# Streamlit reruns the script on every input change, so each rerun is one trigger
if recalculate or st.session_state.get('last_raw_fields') != raw_fields:
    st.session_state.last_raw_fields = dict(raw_fields)
    calculator.calculate(raw_fields)

def show_notifications():
    """Error banners; the fragment re-polls itself so expired ones disappear without a click."""
    for notification in calculator.notifications.active():
        c1, c2 = st.columns([12, 1])
        c1.error(f"⚠️ {notification.message}")
        if c2.button("×", key=f"dismiss_{notification.id}"):
            calculator.notifications.dismiss(notification.id)
            st.rerun(scope="fragment")


# Poll only while a notification is on screen
poll_seconds = 1 if calculator.notifications.active() else None
st.fragment(run_every=poll_seconds)(show_notifications)()


# ============================================================================
# MAIN CONTENT
# ============================================================================
st.title("SaaS Pricing Calculator")
st.caption(f"v{__version__} | {datetime.now().strftime('%Y-%m-%d')}")

display = calculator.adapter
if calculator.last_results is None:
    st.info("Enter your business inputs to see recommended pricing.")
    st.stop()

results = calculator.last_results

m1, m2, m3, m4 = st.columns(4)
m1.metric("Total Customers", display.read('total-customers'))
m2.metric("Recommended Price", display.read('recommended-price'))
m3.metric("Monthly Revenue", display.read('monthly-revenue'))
m4.metric("Monthly Profit", display.read('profit'))

st.divider()
st.subheader("Pricing Tiers")
t1, t2, t3 = st.columns(3)
t1.metric("Basic", display.read('basic-price'))
t2.metric("Pro", display.read('pro-price'))
t3.metric("Enterprise", display.read('enterprise-price'))

st.divider()
st.subheader("Business Insights")
i1, i2, i3 = st.columns(3)
i1.metric("Customer Lifetime Value", display.read('clv'))
i2.metric("Payback Period", display.read('payback-period'))
i3.metric("Revenue per User", display.read('revenue-per-user'))

b1, b2, b3 = st.columns(3)
b1.metric("Gross Revenue", display.read('gross-revenue'))
b2.metric("Acquisition Costs", display.read('acquisition-costs'))
b3.metric("Operational Costs", display.read('operational-costs-display'))

with st.expander("🔍 Calculation Details"):
    for step in results.trace:
        if step.value:
            st.caption(f"**{step.step}**: {step.description} = `{step.value}`")
        else:
            st.caption(f"**{step.step}**: {step.description}")

# ============================================================================
# SENSITIVITY & EXPORT
# ============================================================================
st.divider()
st.subheader("📊 Visitors Sensitivity")

inputs = calculator.last_inputs
base_visitors = inputs.monthly_visitors
visitor_steps = [base_visitors * factor for factor in (0.25, 0.5, 0.75, 1.0, 1.5, 2.0, 3.0)]
table = sensitivity_table(inputs, 'monthly_visitors', visitor_steps, engine=calculator.engine)

st.line_chart(table[['monthly_revenue', 'gross_profit', 'total_acquisition_costs']].dropna())
st.dataframe(table, use_container_width=True)

export_df = results_frame(results, inputs)
st.download_button(
    "📥 Export Results CSV",
    data=export_df.to_csv(index=False),
    file_name="pricing_results.csv",
    mime="text/csv",
)
