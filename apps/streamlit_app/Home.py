import streamlit as st
import logging

# --- make the project root importable on Streamlit Cloud ---
import sys, os
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
# -----------------------------------------------------------

from fireplan.schema import FinancialProfile, Assumptions
from fireplan.projection import run
from fireplan.ages import horizon_years_from_age, retirement_offset_from_age, END_AGE
from fireplan.rates import to_base_units, from_base_units

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# -------------------------------------------------
# App configuration
# -------------------------------------------------
st.set_page_config(page_title="FIRE Planner — Asset Projection", layout="wide")
st.title("FIRE Planner — Asset Projection")
st.set_option("client.showErrorDetails", True)
st.caption("All amounts are in units of 10,000 (만원).")


def fmt_months(m):
    if m == float("inf"):
        return "never"
    return f"{int(m):,} months ({int(m) // 12}y {int(m) % 12}m)"


tab_profile, tab_money, tab_rates, tab_proj = st.tabs(["Profile", "Finances", "Rates", "Projection"])

# ===============================
# PROFILE TAB
# ===============================
with tab_profile:
    st.header("👤 Profile")
    c1, c2 = st.columns(2)
    with c1:
        current_age = st.number_input("Current age", value=30, min_value=0, max_value=END_AGE - 1, step=1)
    with c2:
        retire_on = st.checkbox("Set a retirement age", value=False)
        retirement_age = st.number_input("Retirement age", value=min(int(current_age) + 1, END_AGE - 1),
                                         min_value=int(current_age) + 1, max_value=END_AGE - 1,
                                         step=1) if retire_on and current_age < END_AGE - 1 else None

# ===============================
# FINANCES TAB
# ===============================
with tab_money:
    st.header("🏦 Finances")
    f1, f2 = st.columns(2)
    with f1:
        assets_mw   = st.number_input("Current assets", value=0, min_value=0, step=100)
        income_mw   = st.number_input("Monthly income", value=0, min_value=0, step=10)
    with f2:
        expenses_mw = st.number_input("Monthly expenses", value=0, min_value=0, step=10)
        side_mw     = st.number_input("Side income (monthly)", value=0, min_value=0, step=10)

# ===============================
# RATES TAB
# ===============================
with tab_rates:
    st.header("📈 Rates")
    annual_return = st.slider("Annual investment return %", min_value=0, max_value=20, value=4)
    r1, r2 = st.columns(2)
    with r1:
        income_growth = st.slider("Annual income growth %", min_value=0, max_value=20, value=2)
        max_annual_income = st.number_input("Maximum annual income", value=10_000, min_value=0, step=100)
    with r2:
        inflation = st.slider("Inflation %", min_value=0, max_value=10, value=2)
        growth_mode = st.radio("Growth timing", ["annual", "monthly"], index=0, horizontal=True,
                               help="annual: raises and inflation once a year; monthly: compounded every month")
    round_whole = st.checkbox("Round to whole units", value=True)

# ===============================
# PROJECTION TAB
# ===============================
with tab_proj:
    st.header("📆 Projection")
    st.caption(f"Simulating {horizon_years_from_age(current_age)} years, until age {END_AGE}.")

    # display units -> base units happens here, not in the engine
    # (max_annual_income is the exception: the engine scales it itself)
    profile = FinancialProfile(
        current_assets=to_base_units(assets_mw),
        monthly_income=to_base_units(income_mw),
        monthly_expenses=to_base_units(expenses_mw),
        side_income=to_base_units(side_mw),
        income_growth_rate=float(income_growth),
        inflation_rate=float(inflation),
        current_age=int(current_age),
        max_annual_income=float(max_annual_income),
    )
    assumptions = Assumptions(
        annual_return_rate=float(annual_return),
        growth_mode=growth_mode,
        retirement_offset_years=retirement_offset_from_age(retirement_age, current_age),
        round_whole=round_whole,
    )

    try:
        result = run(profile, assumptions)
    except Exception as e:
        st.error("Projection failed. Details below.")
        st.exception(e)
    else:
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Safety score", f"{result['safety_score']} / 100")
        m2.metric("Runway at today's burn", fmt_months(result["months_until_depletion"]))
        m3.metric("Time to 300× assets", fmt_months(result["months_to_target_or_never"]))
        broke = result["depletion_month"]
        m4.metric("Assets run out", "never" if broke is None else f"age {int(current_age) + broke // 12}")

        df = result["table"]
        if df.empty:
            st.caption("Nothing to project.")
        else:
            chart = df.groupby("Age").last()[["Assets", "Annual Income", "Annual Expenses"]]
            chart = chart.apply(from_base_units)
            st.subheader("📊 Assets and yearly cash flow")
            st.line_chart(chart)
            if assumptions.retirement_offset_years is not None:
                st.caption(f"Retirement age: {int(current_age) + assumptions.retirement_offset_years}")
            with st.expander("Monthly table", expanded=False):
                st.dataframe(df, use_container_width=True)
