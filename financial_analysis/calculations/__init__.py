"""
Financial Calculation Engine

Pure, stateless analyzers for installment loans and residual-value leases.
All payment math runs on Decimal; recorded values are rounded to cents.
"""

from pydantic import ValidationError

from financial_analysis.calculations import amortization, lease, schedule
from financial_analysis.calculations.amortization import analyze as analyze_amortization
from financial_analysis.calculations.lease import analyze as analyze_lease
from financial_analysis.calculations.schemas import (
    AmortizationInput,
    AnalysisResult,
    LeaseInput,
    ScheduleEntry,
    is_valid_financial_input,
    validate_amortization_input,
    validate_lease_input,
)

__all__ = [
    "amortization",
    "lease",
    "schedule",
    "analyze_amortization",
    "analyze_lease",
    "AmortizationInput",
    "AnalysisResult",
    "LeaseInput",
    "ScheduleEntry",
    "ValidationError",
    "is_valid_financial_input",
    "validate_amortization_input",
    "validate_lease_input",
]
