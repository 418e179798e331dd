from config.settings import AMOUNT_PRECISION, RATE_PRECISION


def fmt_amount(value: float) -> str:
    """1234567.891 -> 1,234,567.89"""
    return f"{value:,.{AMOUNT_PRECISION}f}"


def fmt_rate(value: float) -> str:
    """Already a percentage: 45.5 -> 45.50%"""
    return f"{value:.{RATE_PRECISION}f}%"


def fmt_weeks(weeks: int) -> str:
    return f"{weeks} week" if weeks == 1 else f"{weeks} weeks"
