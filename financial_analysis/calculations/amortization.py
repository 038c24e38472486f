"""
Loan Amortization Calculations

Computes the level payment of a fully amortizing loan and its
period-by-period schedule. The final period absorbs rounding drift so the
schedule always ends at a zero balance.
"""

from decimal import Decimal
from typing import Any

from financial_analysis.calculations.schemas import (
    AnalysisResult,
    validate_amortization_input,
)
from financial_analysis.calculations.schedule import (
    ONE,
    ZERO,
    monthly_rate,
    precise_context,
    round_currency,
    to_decimal,
    walk_schedule,
)


def calculate_payment(principal: Decimal, rate: Decimal, term_months: int) -> Decimal:
    """
    Calculate the unrounded level payment.

    Matches Excel's PMT() function (sign flipped to positive).

    Args:
        principal: Loan principal amount
        rate: Monthly rate as decimal (e.g., 0.005 for 6% annual)
        term_months: Total amortization period in months

    Returns:
        Monthly payment amount
    """
    if rate == 0:
        return principal / term_months

    return principal * rate / (ONE - (ONE + rate) ** -term_months)


def analyze(data: Any) -> AnalysisResult:
    """
    Generate a full amortization schedule.

    Args:
        data: Mapping or AmortizationInput with principal, annualRate, termMonths

    Returns:
        AnalysisResult whose totals are sums of the rounded schedule rows

    Raises:
        ValidationError: If the input is rejected
    """
    inputs = validate_amortization_input(data)

    rate = monthly_rate(inputs.annual_rate)

    with precise_context(rate):
        principal = to_decimal(inputs.principal)
        payment = calculate_payment(principal, rate, inputs.term_months)

        schedule, total_payments, total_interest = walk_schedule(
            principal, rate, inputs.term_months, payment, terminal_balance=ZERO
        )

        return AnalysisResult(
            monthly_payment=float(round_currency(payment)),
            total_payments=float(round_currency(total_payments)),
            total_interest=float(round_currency(total_interest)),
            schedule=schedule,
        )
