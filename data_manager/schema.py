"""Record types and their camelCase serialized form"""
import logging
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

logger = logging.getLogger(__name__)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _snake(name: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in name)


def _to_float(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    return float(value)


def _to_int(value: Any) -> int:
    if value is None or value == "":
        return 0
    return int(float(value))


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class Record:
    """Serialized form uses camelCase keys, attributes use snake_case."""

    _converters = {}

    def to_dict(self) -> Dict[str, Any]:
        return {_camel(k): v for k, v in asdict(self).items()}

    @classmethod
    def field_names(cls) -> set:
        return {f.name for f in fields(cls)}

    @classmethod
    def normalize_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Map camelCase or snake_case keys to attribute names and coerce values.

        Unknown keys are dropped.
        """
        known = cls.field_names()
        result = {}
        for key, value in data.items():
            name = key if key in known else _snake(key)
            if name not in known:
                logger.debug("Ignoring unknown %s field %r", cls.__name__, key)
                continue
            converter = cls._converters.get(name, _to_str)
            result[name] = converter(value)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        return cls(**cls.normalize_fields(data))


@dataclass
class Group(Record):
    id: str = ""
    group_no: str = ""
    group_name: str = ""
    group_head_name: str = ""
    head_contact: str = ""
    meeting_day: str = ""
    formation_date: str = ""


@dataclass
class Member(Record):
    id: str = ""
    member_id: str = ""
    member_name: str = ""
    address: str = ""
    landmark: str = ""
    group_no: str = ""
    loan_amount: float = 0.0
    total_interest: float = 0.0
    weeks: int = 0
    start_date: str = ""
    status: str = "Active"

    _converters = {
        "loan_amount": _to_float,
        "total_interest": _to_float,
        "weeks": _to_int,
    }

    @property
    def total_payable(self) -> float:
        return self.loan_amount + self.total_interest


@dataclass
class Collection(Record):
    id: str = ""
    collection_date: str = ""
    member_id: str = ""
    group_no: str = ""
    week_no: int = 0
    amount_paid: float = 0.0
    principal_paid: float = 0.0
    interest_paid: float = 0.0
    status: str = "Paid"
    collected_by: str = ""

    _converters = {
        "week_no": _to_int,
        "amount_paid": _to_float,
        "principal_paid": _to_float,
        "interest_paid": _to_float,
    }


# ---- Derived views ----

@dataclass
class MemberSummary(Record):
    member_id: str
    member_name: str
    group_no: str
    loan_amount: float
    total_payable: float
    total_principal_collected: float
    total_interest_collected: float
    principal_balance: float
    interest_balance: float
    total_collected: float
    total_balance: float
    weeks_paid: int
    status: str


@dataclass
class GroupSummary(Record):
    group_no: str
    group_name: str
    group_head: str
    total_members: int
    total_loan_amount: float
    total_payable: float
    principal_collected: float
    interest_collected: float
    principal_balance: float
    interest_balance: float
    total_collected: float
    total_balance: float
    collection_rate: float


@dataclass
class OverallSummary(Record):
    total_groups: int
    total_members: int
    active_loans: int
    completed_loans: int
    total_loan_disbursed: float
    total_payable: float
    total_principal_collected: float
    total_interest_collected: float
    total_amount_collected: float
    principal_balance_outstanding: float
    interest_balance_outstanding: float
    total_balance_outstanding: float
    overall_collection_rate: float
    principal_recovery_rate: float
    interest_recovery_rate: float
    average_loan_size: float


@dataclass
class WeeklyData(Record):
    week_no: int
    amount_collected: float
    number_of_payments: int
