"""
Decimal helpers and the shared period walk.

Both analyzers derive a constant payment, then fold over periods 1..n
applying interest-then-principal to a running balance. The last period's
principal is a plug that lands the balance exactly on the terminal value
(zero for a loan, the residual for a lease).
"""

from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from typing import List, Tuple

from financial_analysis.calculations.schemas import ScheduleEntry

PRECISION = 34
CENT = Decimal("0.01")
ZERO = Decimal("0")
ONE = Decimal("1")
MONTHS_PER_YEAR = 12


def to_decimal(value: float) -> Decimal:
    """Convert a float to Decimal through its shortest repr, not its binary value."""
    return Decimal(str(value))


def round_currency(value: Decimal) -> Decimal:
    """Round to cents, half away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def monthly_rate(annual_rate: float) -> Decimal:
    """Periodic rate for simple monthly compounding."""
    with localcontext(Context(prec=PRECISION)):
        return to_decimal(annual_rate) / MONTHS_PER_YEAR


def precise_context(rate: Decimal = ZERO):
    """
    Local decimal context for the payment formula and the walk.

    Precision grows with the number of leading zeros in rate, so 1 + rate
    keeps every significant digit of rate and 1 - (1 + rate)^-n never
    cancels to zero.
    """
    extra = max(0, -rate.adjusted()) if rate else 0
    return localcontext(Context(prec=PRECISION + extra))


def walk_schedule(
    principal: Decimal,
    rate: Decimal,
    term_months: int,
    payment: Decimal,
    terminal_balance: Decimal = ZERO,
) -> Tuple[List[ScheduleEntry], Decimal, Decimal]:
    """
    Build the period-by-period schedule.

    Args:
        principal: Opening balance
        rate: Periodic (monthly) rate
        term_months: Number of periods
        payment: Unrounded constant payment
        terminal_balance: Balance the final period must land on

    Returns:
        (schedule, total_payments, total_interest) where the totals are sums
        of the rounded values recorded in the schedule
    """
    schedule: List[ScheduleEntry] = []
    balance = principal
    recorded_payment = round_currency(payment)
    total_payments = ZERO
    total_interest = ZERO

    for month in range(1, term_months + 1):
        interest = balance * rate

        if month == term_months:
            principal_pmt = balance - terminal_balance
        else:
            principal_pmt = payment - interest

        balance -= principal_pmt

        recorded_interest = round_currency(interest)
        total_payments += recorded_payment
        total_interest += recorded_interest

        schedule.append(
            ScheduleEntry(
                month=month,
                payment=float(recorded_payment),
                principal=float(round_currency(principal_pmt)),
                interest=float(recorded_interest),
                balance=float(round_currency(max(ZERO, balance))),
            )
        )

    return schedule, total_payments, total_interest
