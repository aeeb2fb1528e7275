import streamlit as st

from payout.core.errors import PayoutError
from payout.fx.rates import RateFetcher
from payout.intake.prompts import parse_currency
from payout.payouts.engine import PayoutEngine, PayoutRequest
from payout.reports.breakdown import BreakdownReport, breakdown_frame

st.set_page_config(page_title="Payout Estimator", page_icon="💰", layout="centered")
st.title("💰 Detailed Payout Breakdown")

engine = PayoutEngine()
schedule = engine.schedule

with st.form("payout"):
    gross = st.number_input("Medium payout amount (USD)", min_value=0.0, value=100.0, step=10.0)
    dest = st.selectbox("Destination currency", schedule.supported)
    submitted = st.form_submit_button("Estimate")

if submitted:
    try:
        if gross <= 0:
            st.error("Invalid USD amount.")
            st.stop()
        dest = parse_currency(dest, schedule)
        with RateFetcher() as fetcher:
            rate = fetcher.fetch_rate(dest)
    except PayoutError as e:
        st.error(e.message)
        st.stop()
    b = engine.compute(PayoutRequest(gross_usd=float(gross), destination=dest), rate)
    if not b.is_finite():
        st.error("Invalid USD amount.")
        st.stop()
    report = BreakdownReport(schedule, color=False)
    st.dataframe(breakdown_frame(b, schedule)[["Step", "Display"]], hide_index=True, use_container_width=True)
    st.metric(f"Final Payout ({dest})", report.format_local(b.local_amount, dest))
