"""Member management"""
import streamlit as st

from components.forms import render_member_form
from components.metrics import render_member_metrics
from components.state import get_ledger
from components.tables import render_records_table
from config.constants import MemberStatus
from core.reports import member_summary_frame, records_to_frame

st.set_page_config(page_title="Members", page_icon="🧑", layout="wide")
st.title("🧑 Members")

ledger = get_ledger()

with st.expander("Add member", expanded=not ledger.members):
    fields = render_member_form(ledger)
    if fields:
        ledger.add_member(fields)
        st.success(f"Member {fields['memberId']} added")
        st.rerun()

st.subheader("Balances")
render_records_table(member_summary_frame(ledger), "No members yet")

if not ledger.members:
    st.stop()

st.divider()
labels = {m.id: f"{m.member_id} - {m.member_name}" for m in ledger.members}
selected = st.selectbox("Member", list(labels), format_func=labels.get)
member = next(m for m in ledger.members if m.id == selected)

summary = ledger.get_member_summary(member.member_id)
render_member_metrics(summary, member.weeks)

history = [c for c in ledger.collections if c.member_id == member.member_id]
render_records_table(records_to_frame(history), "No collections for this member")

c1, c2 = st.columns(2)
with c1:
    statuses = [s.value for s in MemberStatus]
    new_status = st.selectbox(
        "Status", statuses,
        index=statuses.index(member.status) if member.status in statuses else 0,
        format_func=lambda s: MemberStatus(s).label,
    )
    if st.button("Update status") and new_status != member.status:
        ledger.update_member(member.id, {"status": new_status})
        st.rerun()
with c2:
    st.caption("Collections of a deleted member are kept.")
    if st.button("Delete member", type="secondary"):
        ledger.delete_member(member.id)
        st.rerun()
