"""Backup, restore and reports"""
import streamlit as st

from components.state import get_ledger
from config.settings import REPORT_FILE
from core.reports import export_report

st.set_page_config(page_title="Data", page_icon="💾", layout="wide")
st.title("💾 Data")

ledger = get_ledger()

st.subheader("Export")
st.download_button(
    "Download JSON backup",
    data=ledger.export_json(),
    file_name="microfinance_backup.json",
    mime="application/json",
)

if st.button("Write Excel report"):
    path = export_report(ledger)
    st.success(f"Report written to {path}")
    with open(path, "rb") as f:
        st.download_button("Download report", data=f.read(), file_name=REPORT_FILE.name)

st.divider()
st.subheader("Import")
st.caption("Groups, members or collections missing from the file are left unchanged.")
uploaded = st.file_uploader("JSON backup", type=["json"])
if uploaded is not None and st.button("Import", type="primary"):
    if ledger.import_json(uploaded.getvalue().decode("utf-8")):
        st.success("Data imported")
        st.rerun()
    else:
        st.error("The file could not be read; nothing was changed.")

st.divider()
st.subheader("Reset")
confirm = st.checkbox("I understand all groups, members and collections will be deleted")
if st.button("Clear all data", disabled=not confirm):
    ledger.clear_all_data()
    st.success("All data cleared")
    st.rerun()
