# This project was developed with assistance from AI tools.
"""Mortgage rate and feasibility check schemas."""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import Field, field_serializer

from . import CamelModel
from ..services.affordability import FeasibilityResult
from ..services.rates import MortgageRate

# Upper bound of the INTEGER maturity_period column
MAX_MATURITY_PERIOD = 2_147_483_647


class MortgageRateResponse(CamelModel):
    """One entry of the rate catalog."""

    maturity_period: int
    interest_rate: float
    last_update: datetime | None = None

    @field_serializer("last_update")
    def serialize_last_update(self, value: datetime | None) -> str | None:
        # yyyy-MM-ddTHH:mm:ss.SSS, UTC
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}"

    @classmethod
    def from_domain(cls, rate: MortgageRate) -> "MortgageRateResponse":
        return cls(
            maturity_period=rate.maturity_period,
            interest_rate=float(rate.interest_rate),
            last_update=rate.last_update,
        )


class MortgageCheckRequest(CamelModel):
    """Input for the mortgage feasibility check."""

    maturity_period: int = Field(ge=1, le=MAX_MATURITY_PERIOD, description="Loan duration in years.")
    income: Decimal = Field(gt=0, description="Applicant's annual income.")
    loan_value: Decimal = Field(gt=0, description="Requested loan amount.")
    home_value: Decimal = Field(gt=0, description="Value of the home being bought.")


class MortgageCheckResponse(CamelModel):
    """Feasibility check outcome. ``monthly_cost`` is 0 when not feasible."""

    feasible: bool
    monthly_cost: float

    @classmethod
    def from_domain(cls, result: FeasibilityResult) -> "MortgageCheckResponse":
        return cls(feasible=result.feasible, monthly_cost=float(result.monthly_cost))
