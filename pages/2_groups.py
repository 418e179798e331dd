"""Group management"""
import streamlit as st

from components.forms import render_group_form
from components.state import get_ledger
from components.tables import render_records_table
from core.reports import group_summary_frame, records_to_frame

st.set_page_config(page_title="Groups", page_icon="👥", layout="wide")
st.title("👥 Groups")

ledger = get_ledger()

with st.expander("Add group", expanded=not ledger.groups):
    fields = render_group_form(ledger)
    if fields:
        ledger.add_group(fields)
        st.success(f"Group {fields['groupNo']} added")
        st.rerun()

st.subheader("Collection status")
render_records_table(group_summary_frame(ledger), "No groups yet")

st.subheader("Group details")
render_records_table(records_to_frame(ledger.groups), "No groups yet")

if ledger.groups:
    st.divider()
    st.subheader("Delete group")
    labels = {g.id: f"{g.group_no} - {g.group_name}" for g in ledger.groups}
    selected = st.selectbox("Group", list(labels), format_func=labels.get)
    st.caption("Members and collections of the group are kept.")
    if st.button("Delete", type="secondary"):
        ledger.delete_group(selected)
        st.rerun()
