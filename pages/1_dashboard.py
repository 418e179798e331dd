"""Dashboard"""
import streamlit as st

from components.charts import create_collection_pie, create_weekly_bar, create_group_rate_bar
from components.metrics import render_overview_metrics
from components.state import get_ledger
from components.tables import render_records_table
from core.reports import group_summary_frame, weekly_frame

st.set_page_config(page_title="Dashboard", page_icon="📊", layout="wide")
st.title("📊 Dashboard")

ledger = get_ledger()
overall = ledger.get_overall_summary()

if overall.total_members == 0:
    st.info("No members yet. Add groups and members first.")
    st.stop()

render_overview_metrics(overall)

st.divider()

c1, c2 = st.columns(2)
with c1:
    st.plotly_chart(create_collection_pie(
        overall.total_principal_collected,
        overall.total_interest_collected,
        overall.principal_balance_outstanding,
        overall.interest_balance_outstanding,
    ), width='stretch')
with c2:
    groups = group_summary_frame(ledger)
    if groups.empty:
        st.info("No groups")
    else:
        st.plotly_chart(create_group_rate_bar(groups), width='stretch')

weekly = weekly_frame(ledger)
if not weekly.empty:
    st.plotly_chart(create_weekly_bar(weekly), width='stretch')

st.subheader("Groups")
render_records_table(group_summary_frame(ledger), "No groups")
