"""Weekly report"""
import streamlit as st

from components.charts import create_weekly_bar
from components.state import get_ledger
from components.tables import render_records_table
from core.reports import records_to_frame, weekly_frame

st.set_page_config(page_title="Weekly Report", page_icon="📅", layout="wide")
st.title("📅 Weekly Report")

ledger = get_ledger()
weekly = weekly_frame(ledger)

if weekly.empty:
    st.info("No collections recorded yet.")
else:
    st.plotly_chart(create_weekly_bar(weekly), width='stretch')
    render_records_table(weekly)

st.divider()

max_week = max(len(weekly), 1)
week_no = st.number_input("Week", min_value=1, max_value=max_week + 1, value=max_week, step=1)

st.subheader(f"Collections in week {week_no}")
render_records_table(records_to_frame(ledger.get_collections_for_week(int(week_no))), "No collections this week")

st.subheader("Members still owing installments")
render_records_table(
    records_to_frame(ledger.get_expected_collections_for_week(int(week_no))),
    "All active members are fully paid",
)
