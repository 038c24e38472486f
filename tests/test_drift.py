"""
Deterministic drift guard against recorded fixtures.
"""

import pytest

from financial_analysis.calculations import analyze_amortization, analyze_lease


def close(actual, expected, epsilon=1e-2):
    return abs(actual - expected) <= epsilon


@pytest.mark.drift
class TestDrift:
    """Outputs for the basic fixtures must not move."""

    def test_amortization_basic_fixture_stable(self, load_fixture):
        fixture = load_fixture("amortization.basic.json")
        result = analyze_amortization(fixture["input"])
        expected = fixture["expected"]
        assert close(result.monthly_payment, expected["monthlyPayment"], 0.05)
        assert close(result.total_payments, expected["totalPayments"], 0.5)
        assert close(result.total_interest, expected["totalInterest"], 0.5)

    def test_lease_basic_fixture_stable(self, load_fixture):
        fixture = load_fixture("lease.basic.json")
        result = analyze_lease(fixture["input"])
        expected = fixture["expected"]
        assert close(result.monthly_payment, expected["monthlyPayment"], 0.5)
        assert close(result.total_payments, expected["totalPayments"], 0.5)
        assert close(result.total_interest, expected["totalInterest"], 0.5)
