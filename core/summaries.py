"""
Summary calculations over the record store.

Every function is a pure derivation from the current records and is recomputed
on each call. Collections are attributed to groups by their own stored group_no,
not by following member_id to the member's current group.
"""
from typing import List, Optional

from config.constants import MemberStatus
from core.allocation import round2, safe_pct
from data_manager.record_store import RecordStore
from data_manager.schema import (
    Collection, MemberSummary, GroupSummary, OverallSummary, WeeklyData,
)


def member_summary(store: RecordStore, member_id: str) -> Optional[MemberSummary]:
    member = store.find_member(member_id)
    if member is None:
        return None

    member_collections = [c for c in store.collections if c.member_id == member_id]
    total_principal_collected = sum(c.principal_paid for c in member_collections)
    total_interest_collected = sum(c.interest_paid for c in member_collections)
    total_payable = member.loan_amount + member.total_interest
    total_collected = total_principal_collected + total_interest_collected

    return MemberSummary(
        member_id=member.member_id,
        member_name=member.member_name,
        group_no=member.group_no,
        loan_amount=member.loan_amount,
        total_payable=total_payable,
        total_principal_collected=total_principal_collected,
        total_interest_collected=total_interest_collected,
        principal_balance=member.loan_amount - total_principal_collected,
        interest_balance=member.total_interest - total_interest_collected,
        total_collected=total_collected,
        total_balance=total_payable - total_collected,
        weeks_paid=len(member_collections),
        status=member.status,
    )


def all_member_summaries(store: RecordStore) -> List[MemberSummary]:
    summaries = (member_summary(store, m.member_id) for m in store.members)
    return [s for s in summaries if s is not None]


def group_summary(store: RecordStore, group_no: str) -> Optional[GroupSummary]:
    group = store.find_group(group_no)
    if group is None:
        return None

    group_members = [m for m in store.members if m.group_no == group_no]
    group_collections = [c for c in store.collections if c.group_no == group_no]

    total_loan_amount = sum(m.loan_amount for m in group_members)
    total_interest_amount = sum(m.total_interest for m in group_members)
    total_payable = total_loan_amount + total_interest_amount

    principal_collected = sum(c.principal_paid for c in group_collections)
    interest_collected = sum(c.interest_paid for c in group_collections)
    total_collected = principal_collected + interest_collected

    return GroupSummary(
        group_no=group.group_no,
        group_name=group.group_name,
        group_head=group.group_head_name,
        total_members=len(group_members),
        total_loan_amount=total_loan_amount,
        total_payable=total_payable,
        principal_collected=principal_collected,
        interest_collected=interest_collected,
        principal_balance=total_loan_amount - principal_collected,
        interest_balance=total_interest_amount - interest_collected,
        total_collected=total_collected,
        total_balance=total_payable - total_collected,
        collection_rate=safe_pct(total_collected, total_payable),
    )


def all_group_summaries(store: RecordStore) -> List[GroupSummary]:
    summaries = (group_summary(store, g.group_no) for g in store.groups)
    return [s for s in summaries if s is not None]


def overall_summary(store: RecordStore) -> OverallSummary:
    members = store.members
    collections = store.collections

    total_loan_disbursed = sum(m.loan_amount for m in members)
    total_interest_amount = sum(m.total_interest for m in members)
    total_payable = total_loan_disbursed + total_interest_amount

    total_principal_collected = sum(c.principal_paid for c in collections)
    total_interest_collected = sum(c.interest_paid for c in collections)
    total_amount_collected = total_principal_collected + total_interest_collected

    active_loans = sum(1 for m in members if m.status == MemberStatus.ACTIVE.value)
    completed_loans = sum(1 for m in members if m.status == MemberStatus.COMPLETED.value)

    return OverallSummary(
        total_groups=len(store.groups),
        total_members=len(members),
        active_loans=active_loans,
        completed_loans=completed_loans,
        total_loan_disbursed=total_loan_disbursed,
        total_payable=total_payable,
        total_principal_collected=total_principal_collected,
        total_interest_collected=total_interest_collected,
        total_amount_collected=total_amount_collected,
        principal_balance_outstanding=total_loan_disbursed - total_principal_collected,
        interest_balance_outstanding=total_interest_amount - total_interest_collected,
        total_balance_outstanding=total_payable - total_amount_collected,
        overall_collection_rate=safe_pct(total_amount_collected, total_payable),
        principal_recovery_rate=safe_pct(total_principal_collected, total_loan_disbursed),
        interest_recovery_rate=safe_pct(total_interest_collected, total_interest_amount),
        average_loan_size=round2(total_loan_disbursed / len(members)) if members else 0,
    )


def weekly_data(store: RecordStore) -> List[WeeklyData]:
    """One zero-filled entry per week from 1 to the highest recorded week"""
    max_week = max((c.week_no for c in store.collections), default=0)
    max_week = max(max_week, 0)

    result = []
    for week_no in range(1, max_week + 1):
        week_collections = collections_for_week(store, week_no)
        result.append(WeeklyData(
            week_no=week_no,
            amount_collected=sum(c.amount_paid for c in week_collections),
            number_of_payments=len(week_collections),
        ))
    return result


def collections_for_week(store: RecordStore, week_no: int) -> List[Collection]:
    return [c for c in store.collections if c.week_no == week_no]


def expected_collections_for_week(store: RecordStore, week_no: int) -> List[MemberSummary]:
    """Active members that still owe installments.

    week_no is accepted but not used: the result is the same for every week.
    """
    result = []
    for summary in all_member_summaries(store):
        member = store.find_member(summary.member_id)
        if member is None:
            continue
        if summary.weeks_paid < member.weeks and member.status == MemberStatus.ACTIVE.value:
            result.append(summary)
    return result
