"""Microfinance group lending tracker - main entry"""
import logging

import streamlit as st

from components.state import get_ledger
from config.settings import PAGE_TITLE, PAGE_ICON, LAYOUT, LOG_LEVEL, LOG_FORMAT

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
    initial_sidebar_state="expanded",
)

ledger = get_ledger()

st.title(f"{PAGE_ICON} {PAGE_TITLE}")

st.markdown("""
Track lending groups, their members' loans and the weekly repayment collections.

### Pages

| Page | What it does |
|------|--------------|
| 📊 **Dashboard** | Portfolio totals, recovery rates, charts |
| 👥 **Groups** | Create and remove groups, group collection rates |
| 🧑 **Members** | Borrowers, loan terms and balances |
| 💵 **Collections** | Record weekly payments, split into principal and interest |
| 📅 **Weekly Report** | Collections per week and members still owing installments |
| 💾 **Data** | JSON backup and restore, Excel report, reset |

### Quick start

1. Add a group in **Groups**
2. Add its members in **Members**
3. Record each meeting's payments in **Collections**
""")

with st.sidebar:
    st.markdown("### About")
    st.markdown(f"{len(ledger.groups)} groups, {len(ledger.members)} members, {len(ledger.collections)} collections")
    st.markdown("Data is stored in `data/microfinance_data.xlsx`")
