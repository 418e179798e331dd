"""Repayment allocation: splits a payment into principal and interest"""
import logging
import math
from typing import Tuple

logger = logging.getLogger(__name__)


def round2(value: float) -> float:
    """Round half up to 2 decimals on the scaled value"""
    return math.floor(value * 100 + 0.5) / 100


def round_pct(ratio: float) -> float:
    """Ratio -> percentage with 2 decimals: 0.123456 -> 12.35"""
    return math.floor(ratio * 10000 + 0.5) / 100


def safe_pct(numerator: float, denominator: float) -> float:
    return round_pct(numerator / denominator) if denominator > 0 else 0


def allocate_payment(
    loan_amount: float,
    total_interest: float,
    amount_paid: float,
) -> Tuple[float, float]:
    """Split by the ratio of the original loan terms: returns (principal, interest)

    A loan with nothing payable allocates nothing.
    """
    total_payable = loan_amount + total_interest
    if total_payable == 0:
        logger.warning("Loan has nothing payable, payment of %s left unallocated", amount_paid)
        return 0.0, 0.0

    principal_ratio = loan_amount / total_payable
    interest_ratio = total_interest / total_payable

    principal_paid = round2(amount_paid * principal_ratio)
    interest_paid = round2(amount_paid * interest_ratio)
    return principal_paid, interest_paid
