"""Metric cards"""
import streamlit as st

from data_manager.schema import OverallSummary, MemberSummary
from utils.formatters import fmt_amount, fmt_rate, fmt_weeks


def render_overview_metrics(overall: OverallSummary):
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Groups", overall.total_groups)
    with c2:
        st.metric("Members", overall.total_members)
    with c3:
        st.metric("Active loans", overall.active_loans)
    with c4:
        st.metric("Completed loans", overall.completed_loans)

    c5, c6, c7, c8 = st.columns(4)
    with c5:
        st.metric("Loan disbursed", fmt_amount(overall.total_loan_disbursed))
    with c6:
        st.metric("Collected", fmt_amount(overall.total_amount_collected))
    with c7:
        st.metric("Outstanding", fmt_amount(overall.total_balance_outstanding))
    with c8:
        st.metric("Average loan", fmt_amount(overall.average_loan_size))

    c9, c10, c11 = st.columns(3)
    with c9:
        st.metric("Collection rate", fmt_rate(overall.overall_collection_rate))
    with c10:
        st.metric("Principal recovery", fmt_rate(overall.principal_recovery_rate))
    with c11:
        st.metric("Interest recovery", fmt_rate(overall.interest_recovery_rate))


def render_member_metrics(summary: MemberSummary, weeks: int):
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Total payable", fmt_amount(summary.total_payable))
    with c2:
        st.metric("Collected", fmt_amount(summary.total_collected))
    with c3:
        st.metric("Balance", fmt_amount(summary.total_balance))
    with c4:
        st.metric("Weeks paid", f"{summary.weeks_paid} of {fmt_weeks(weeks)}")
