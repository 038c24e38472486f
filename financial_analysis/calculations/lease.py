"""
Lease Calculations

A lease amortizes the asset's value down to its residual rather than to
zero. The payment is the present value of an annuity with a future value:

    payment = (PV - FV / (1 + r)^n) * r / (1 - (1 + r)^-n)
"""

from decimal import Decimal
from typing import Any

from financial_analysis.calculations.schemas import AnalysisResult, validate_lease_input
from financial_analysis.calculations.schedule import (
    ONE,
    monthly_rate,
    precise_context,
    round_currency,
    to_decimal,
    walk_schedule,
)


def calculate_payment(
    principal: Decimal, residual_value: Decimal, rate: Decimal, term_months: int
) -> Decimal:
    """
    Calculate the unrounded level lease payment.

    Args:
        principal: Capitalized value of the asset (PV)
        residual_value: Value retained at term end (FV)
        rate: Monthly rate as decimal
        term_months: Lease term in months

    Returns:
        Monthly payment amount
    """
    if rate == 0:
        return (principal - residual_value) / term_months

    discount = (ONE + rate) ** -term_months
    return (principal - residual_value * discount) * rate / (ONE - discount)


def analyze(data: Any) -> AnalysisResult:
    """
    Generate a lease schedule ending exactly at the residual value.

    Args:
        data: Mapping or LeaseInput; residualValue defaults to 0

    Returns:
        AnalysisResult with totalInterest = totalPayments - (principal - residual)

    Raises:
        ValidationError: If the input is rejected
    """
    inputs = validate_lease_input(data)

    rate = monthly_rate(inputs.annual_rate)

    with precise_context(rate):
        principal = to_decimal(inputs.principal)
        residual = to_decimal(inputs.residual_value)
        payment = calculate_payment(principal, residual, rate, inputs.term_months)

        schedule, total_payments, _ = walk_schedule(
            principal, rate, inputs.term_months, payment, terminal_balance=residual
        )

        total_payments = round_currency(total_payments)
        total_interest = total_payments - (principal - residual)

        return AnalysisResult(
            monthly_payment=float(round_currency(payment)),
            total_payments=float(total_payments),
            total_interest=float(round_currency(total_interest)),
            schedule=schedule,
        )
