"""Payment allocation tests"""
import pytest

from core.allocation import allocate_payment, round2, round_pct, safe_pct


class TestRounding:
    def test_round2_half_up(self):
        # 0.125 is exact in binary, so this is a true tie
        assert round2(0.125) == 0.13
        assert round(0.125, 2) == 0.12

    def test_round2_negative_tie_goes_up(self):
        assert round2(-0.125) == -0.12

    def test_round2_plain(self):
        assert round2(714.2857142857) == 714.29
        assert round2(285.7142857142) == 285.71

    def test_round_pct(self):
        assert round_pct(6000 / 35000) == 17.14
        assert round_pct(1) == 100.0
        assert round_pct(0) == 0.0

    def test_safe_pct_zero_denominator(self):
        assert safe_pct(100, 0) == 0
        assert safe_pct(0, 0) == 0


class TestAllocatePayment:
    def test_sample_member_payment(self):
        """M001: 10000 loan + 4000 interest, pays 1000"""
        principal, interest = allocate_payment(10000, 4000, 1000)
        assert principal == 714.29
        assert interest == 285.71

    def test_larger_loan(self):
        principal, interest = allocate_payment(15000, 6000, 1500)
        assert principal == 1071.43
        assert interest == 428.57

    def test_no_interest(self):
        assert allocate_payment(5000, 0, 700) == (700.0, 0.0)

    def test_zero_payable_allocates_nothing(self):
        assert allocate_payment(0, 0, 500) == (0.0, 0.0)

    def test_zero_payment(self):
        assert allocate_payment(10000, 4000, 0) == (0.0, 0.0)

    @pytest.mark.parametrize("loan, interest, amount", [
        (10000, 4000, 1000),
        (12000, 4800, 1200),
        (8000, 3200, 333.33),
        (7000, 2100, 649.99),
        (20000, 8000, 1),
    ])
    def test_split_within_one_cent(self, loan, interest, amount):
        principal_paid, interest_paid = allocate_payment(loan, interest, amount)
        assert abs(round2(principal_paid) + round2(interest_paid) - amount) <= 0.01 + 1e-9
