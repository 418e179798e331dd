from datetime import date
from typing import Optional

from dateutil import parser
from dateutil.relativedelta import relativedelta


def parse_iso_date(value: str) -> Optional[date]:
    """Parse YYYY-MM-DD, returns None when the text is not a date"""
    if not value:
        return None
    try:
        return parser.isoparse(value).date()
    except (ValueError, OverflowError):
        return None


def today_iso() -> str:
    return date.today().strftime("%Y-%m-%d")


def installment_due_date(start_date: date, week_no: int) -> date:
    """Due date of the week_no-th weekly installment"""
    return start_date + relativedelta(weeks=week_no)
