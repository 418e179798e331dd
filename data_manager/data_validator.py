from typing import Tuple

from config.constants import MemberStatus, MEETING_DAYS
from utils.date_utils import parse_iso_date


def validate_group(
    group_no: str,
    group_name: str,
    meeting_day: str,
    formation_date: str,
    existing_group_nos: list = (),
) -> Tuple[bool, str]:
    """Check group input, returns (is_valid, error message)"""
    if not group_no or not group_no.strip():
        return False, "Group number is required"

    if group_no in existing_group_nos:
        return False, f"Group number {group_no} already exists"

    if not group_name or not group_name.strip():
        return False, "Group name is required"

    if meeting_day and meeting_day not in MEETING_DAYS:
        return False, f"Invalid meeting day: {meeting_day}"

    if formation_date and parse_iso_date(formation_date) is None:
        return False, "Formation date must be YYYY-MM-DD"

    return True, ""


def validate_member(
    member_id: str,
    member_name: str,
    group_no: str,
    loan_amount: float,
    total_interest: float,
    weeks: int,
    start_date: str,
    status: str = MemberStatus.ACTIVE.value,
    existing_member_ids: list = (),
    known_group_nos: list = None,
) -> Tuple[bool, str]:
    if not member_id or not member_id.strip():
        return False, "Member ID is required"

    if member_id in existing_member_ids:
        return False, f"Member ID {member_id} already exists"

    if not member_name or not member_name.strip():
        return False, "Member name is required"

    if known_group_nos is not None and group_no not in known_group_nos:
        return False, f"Unknown group: {group_no}"

    if loan_amount < 0:
        return False, "Loan amount cannot be negative"

    if total_interest < 0:
        return False, "Total interest cannot be negative"

    if weeks <= 0:
        return False, "Number of weeks must be greater than 0"

    if start_date and parse_iso_date(start_date) is None:
        return False, "Start date must be YYYY-MM-DD"

    if status not in [e.value for e in MemberStatus]:
        return False, f"Invalid status: {status}"

    return True, ""


def validate_collection(
    member_id: str,
    week_no: int,
    amount_paid: float,
    collection_date: str,
    known_member_ids: list = None,
) -> Tuple[bool, str]:
    if known_member_ids is not None and member_id not in known_member_ids:
        return False, f"Unknown member: {member_id}"

    if week_no < 1:
        return False, "Week number starts at 1"

    if amount_paid <= 0:
        return False, "Amount paid must be greater than 0"

    if collection_date and parse_iso_date(collection_date) is None:
        return False, "Collection date must be YYYY-MM-DD"

    return True, ""
