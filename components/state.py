"""Per-session ledger"""
import streamlit as st

from core.ledger import MicrofinanceLedger
from data_manager.storage import ExcelStore


def get_ledger() -> MicrofinanceLedger:
    """Open the ledger once per browser session"""
    if "ledger" not in st.session_state:
        st.session_state["ledger"] = MicrofinanceLedger.open(ExcelStore())
    return st.session_state["ledger"]
