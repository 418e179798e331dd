"""Display formatting tests"""
from utils.date_utils import parse_iso_date, installment_due_date
from utils.formatters import fmt_amount, fmt_rate, fmt_weeks


class TestFormatters:
    def test_amount(self):
        assert fmt_amount(1234567.891) == "1,234,567.89"
        assert fmt_amount(0) == "0.00"

    def test_rate(self):
        assert fmt_rate(6.59) == "6.59%"

    def test_weeks(self):
        assert fmt_weeks(1) == "1 week"
        assert fmt_weeks(14) == "14 weeks"


class TestDates:
    def test_parse(self):
        assert parse_iso_date("2025-01-06").isoformat() == "2025-01-06"
        assert parse_iso_date("") is None
        assert parse_iso_date("06/01/2025") is None

    def test_installment_due_date(self):
        start = parse_iso_date("2025-01-01")
        assert installment_due_date(start, 1).isoformat() == "2025-01-08"
        assert installment_due_date(start, 14).isoformat() == "2025-04-09"
