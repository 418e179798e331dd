"""Formatted tables"""
import pandas as pd
import streamlit as st

from config.constants import MemberStatus

MONEY_COLUMNS = [
    "loanAmount", "totalInterest", "totalPayable", "amountPaid", "principalPaid", "interestPaid",
    "totalPrincipalCollected", "totalInterestCollected", "principalBalance", "interestBalance",
    "totalCollected", "totalBalance", "totalLoanAmount", "principalCollected", "interestCollected",
    "amountCollected",
]

COLUMN_LABELS = {
    "groupNo": "Group No",
    "groupName": "Group",
    "groupHeadName": "Group head",
    "groupHead": "Group head",
    "headContact": "Contact",
    "meetingDay": "Meeting day",
    "formationDate": "Formed",
    "memberId": "Member ID",
    "memberName": "Member",
    "address": "Address",
    "landmark": "Landmark",
    "loanAmount": "Loan",
    "totalInterest": "Interest",
    "weeks": "Weeks",
    "startDate": "Start",
    "status": "Status",
    "collectionDate": "Date",
    "weekNo": "Week",
    "amountPaid": "Paid",
    "principalPaid": "Principal",
    "interestPaid": "Interest",
    "collectedBy": "Collected by",
    "totalPayable": "Payable",
    "totalPrincipalCollected": "Principal collected",
    "totalInterestCollected": "Interest collected",
    "principalCollected": "Principal collected",
    "interestCollected": "Interest collected",
    "principalBalance": "Principal balance",
    "interestBalance": "Interest balance",
    "totalCollected": "Collected",
    "totalBalance": "Balance",
    "weeksPaid": "Weeks paid",
    "totalMembers": "Members",
    "totalLoanAmount": "Loan",
    "collectionRate": "Collection rate (%)",
    "amountCollected": "Collected",
    "numberOfPayments": "Payments",
}


def render_records_table(df: pd.DataFrame, empty_message: str = "No data", hide_id: bool = True):
    """Render records or summaries with readable headers and money formatting"""
    if df.empty:
        st.info(empty_message)
        return

    display_df = df.copy()
    if hide_id and "id" in display_df.columns:
        display_df = display_df.drop(columns=["id"])

    for col in MONEY_COLUMNS:
        if col in display_df.columns:
            display_df[col] = display_df[col].apply(lambda x: f"{x:,.2f}")

    if "status" in display_df.columns:
        labels = {s.value: s.label for s in MemberStatus}
        display_df["status"] = display_df["status"].map(lambda s: labels.get(s, s))

    display_df = display_df.rename(columns=COLUMN_LABELS)
    st.dataframe(display_df, width='stretch', hide_index=True)
