"""
Input and result models for the analysis engine.

Inputs are validated with pydantic before any arithmetic runs. Field names
on the wire are camelCase; Python code may use either the snake_case
attribute names or the aliases.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Ceiling for currency inputs; payments and totals stay finite floats.
MAX_AMOUNT = 1e15


class AmortizationInput(BaseModel):
    """Validated input for a fully amortizing loan."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    principal: float = Field(
        gt=0,
        le=MAX_AMOUNT,
        strict=True,
        allow_inf_nan=False,
        description="Principal amount",
    )
    annual_rate: float = Field(
        ge=0,
        le=1,
        strict=True,
        allow_inf_nan=False,
        alias="annualRate",
        description="Annual interest rate (0-1)",
    )
    term_months: int = Field(
        gt=0, strict=True, alias="termMonths", description="Term in months"
    )


class LeaseInput(AmortizationInput):
    """Validated input for a lease that retains a residual value at term end."""

    residual_value: float = Field(
        default=0.0,
        ge=0,
        le=MAX_AMOUNT,
        strict=True,
        allow_inf_nan=False,
        alias="residualValue",
        description="Residual value",
    )


class ScheduleEntry(BaseModel):
    """One period of a payment schedule, currency fields rounded to cents."""

    model_config = ConfigDict(frozen=True)

    month: int
    payment: float
    principal: float
    interest: float
    balance: float


class AnalysisResult(BaseModel):
    """Payment, totals and the full period-by-period schedule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    monthly_payment: float = Field(alias="monthlyPayment")
    total_payments: float = Field(alias="totalPayments")
    total_interest: float = Field(alias="totalInterest")
    schedule: List[ScheduleEntry]


def _coerce(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return data


def validate_amortization_input(data: Any) -> AmortizationInput:
    """
    Validate raw amortization input.

    Raises:
        ValidationError: If any field violates its constraint
    """
    if isinstance(data, AmortizationInput) and not isinstance(data, LeaseInput):
        return data
    return AmortizationInput.model_validate(_coerce(data))


def validate_lease_input(data: Any) -> LeaseInput:
    """
    Validate raw lease input, defaulting residualValue to 0.

    Raises:
        ValidationError: If any field violates its constraint
    """
    if isinstance(data, LeaseInput):
        return data
    return LeaseInput.model_validate(_coerce(data))


def is_valid_financial_input(data: Any) -> bool:
    """Return True if data passes the lease (superset) input schema."""
    try:
        validate_lease_input(data)
    except ValidationError:
        return False
    return True
