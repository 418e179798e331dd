"""Input forms"""
from datetime import date
from typing import Optional

import streamlit as st

from config.constants import MemberStatus, CollectionStatus, MEETING_DAYS
from config.settings import DEFAULT_LOAN_WEEKS, DEFAULT_INTEREST_RATIO
from core.allocation import allocate_payment
from core.ledger import MicrofinanceLedger
from data_manager.data_validator import validate_group, validate_member, validate_collection


def render_group_form(ledger: MicrofinanceLedger, key_prefix: str = "new_group") -> Optional[dict]:
    """Returns the new group's fields once submitted and valid"""
    with st.form(f"{key_prefix}_form", clear_on_submit=True):
        c1, c2 = st.columns(2)
        with c1:
            group_no = st.text_input("Group No", key=f"{key_prefix}_no")
            group_name = st.text_input("Group name", key=f"{key_prefix}_name")
            meeting_day = st.selectbox("Meeting day", MEETING_DAYS, key=f"{key_prefix}_day")
        with c2:
            head_name = st.text_input("Group head", key=f"{key_prefix}_head")
            head_contact = st.text_input("Head contact", key=f"{key_prefix}_contact")
            formation_date = st.date_input("Formation date", value=date.today(), key=f"{key_prefix}_date")
        submitted = st.form_submit_button("Add group", type="primary")

    if not submitted:
        return None

    formation = formation_date.strftime("%Y-%m-%d")
    ok, msg = validate_group(
        group_no, group_name, meeting_day, formation,
        existing_group_nos=[g.group_no for g in ledger.groups],
    )
    if not ok:
        st.error(msg)
        return None
    return {
        "groupNo": group_no.strip(),
        "groupName": group_name.strip(),
        "groupHeadName": head_name,
        "headContact": head_contact,
        "meetingDay": meeting_day,
        "formationDate": formation,
    }


def render_member_form(ledger: MicrofinanceLedger, key_prefix: str = "new_member") -> Optional[dict]:
    group_nos = [g.group_no for g in ledger.groups]
    if not group_nos:
        st.info("Create a group first.")
        return None

    # outside the form so the interest suggestion follows the loan amount
    loan_amount = st.number_input(
        "Loan amount", min_value=0.0, value=10000.0, step=500.0, key=f"{key_prefix}_loan",
    )
    with st.form(f"{key_prefix}_form"):
        c1, c2 = st.columns(2)
        with c1:
            member_id = st.text_input("Member ID", key=f"{key_prefix}_id")
            member_name = st.text_input("Member name", key=f"{key_prefix}_name")
            group_no = st.selectbox("Group", group_nos, key=f"{key_prefix}_group")
            address = st.text_input("Address", key=f"{key_prefix}_address")
            landmark = st.text_input("Landmark", key=f"{key_prefix}_landmark")
        with c2:
            total_interest = st.number_input(
                "Total interest", min_value=0.0,
                value=round(loan_amount * DEFAULT_INTEREST_RATIO, 2), step=100.0,
                key=f"{key_prefix}_interest",
            )
            weeks = st.number_input("Weeks", min_value=1, value=DEFAULT_LOAN_WEEKS, step=1, key=f"{key_prefix}_weeks")
            start_date = st.date_input("Start date", value=date.today(), key=f"{key_prefix}_start")
            status = st.selectbox(
                "Status", [s.value for s in MemberStatus],
                format_func=lambda s: MemberStatus(s).label, key=f"{key_prefix}_status",
            )
        submitted = st.form_submit_button("Add member", type="primary")

    if not submitted:
        return None

    start = start_date.strftime("%Y-%m-%d")
    ok, msg = validate_member(
        member_id, member_name, group_no, loan_amount, total_interest, int(weeks), start, status,
        existing_member_ids=[m.member_id for m in ledger.members],
        known_group_nos=group_nos,
    )
    if not ok:
        st.error(msg)
        return None
    return {
        "memberId": member_id.strip(),
        "memberName": member_name.strip(),
        "address": address,
        "landmark": landmark,
        "groupNo": group_no,
        "loanAmount": loan_amount,
        "totalInterest": total_interest,
        "weeks": int(weeks),
        "startDate": start,
        "status": status,
    }


def render_collection_form(ledger: MicrofinanceLedger, key_prefix: str = "new_collection") -> Optional[dict]:
    members = ledger.members
    if not members:
        st.info("Add a member first.")
        return None

    labels = {m.member_id: f"{m.member_id} - {m.member_name} ({m.group_no})" for m in members}
    member_id = st.selectbox("Member", list(labels), format_func=labels.get, key=f"{key_prefix}_member")
    member = ledger.store.find_member(member_id)
    summary = ledger.get_member_summary(member_id)
    suggested = round(member.total_payable / member.weeks, 2) if member.weeks else 0.0

    with st.form(f"{key_prefix}_form"):
        c1, c2 = st.columns(2)
        with c1:
            week_no = st.number_input("Week", min_value=1, value=summary.weeks_paid + 1, step=1, key=f"{key_prefix}_week")
            amount_paid = st.number_input("Amount paid", min_value=0.0, value=suggested, step=50.0, key=f"{key_prefix}_amount")
            collection_date = st.date_input("Collection date", value=date.today(), key=f"{key_prefix}_date")
        with c2:
            status = st.selectbox("Status", [s.value for s in CollectionStatus], key=f"{key_prefix}_status")
            collected_by = st.text_input("Collected by", key=f"{key_prefix}_agent")
            principal, interest = allocate_payment(member.loan_amount, member.total_interest, amount_paid)
            st.caption(f"Principal {principal:,.2f} / Interest {interest:,.2f}")
        submitted = st.form_submit_button("Record collection", type="primary")

    if not submitted:
        return None

    collected_on = collection_date.strftime("%Y-%m-%d")
    ok, msg = validate_collection(
        member_id, int(week_no), amount_paid, collected_on,
        known_member_ids=list(labels),
    )
    if not ok:
        st.error(msg)
        return None
    return {
        "collectionDate": collected_on,
        "memberId": member_id,
        "groupNo": member.group_no,
        "weekNo": int(week_no),
        "amountPaid": amount_paid,
        "status": status,
        "collectedBy": collected_by,
    }
