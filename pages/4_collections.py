"""Repayment collections"""
import streamlit as st

from components.forms import render_collection_form
from components.state import get_ledger
from components.tables import render_records_table
from core.reports import records_to_frame

st.set_page_config(page_title="Collections", page_icon="💵", layout="wide")
st.title("💵 Collections")

ledger = get_ledger()

st.subheader("Record collection")
fields = render_collection_form(ledger)
if fields:
    collection = ledger.add_collection(fields)
    if collection is None:
        st.error("Member not found, collection not recorded")
    else:
        st.success(
            f"Recorded {collection.amount_paid:,.2f}: principal {collection.principal_paid:,.2f}, "
            f"interest {collection.interest_paid:,.2f}"
        )
        st.rerun()

st.divider()
st.subheader("All collections")
render_records_table(records_to_frame(ledger.collections), "No collections yet")

if ledger.collections:
    labels = {
        c.id: f"{c.collection_date} {c.member_id} week {c.week_no}: {c.amount_paid:,.2f}"
        for c in ledger.collections
    }
    selected = st.selectbox("Collection", list(labels), format_func=labels.get)
    if st.button("Delete collection", type="secondary"):
        ledger.delete_collection(selected)
        st.rerun()
