# This project was developed with assistance from AI tools.
"""Mortgage affordability calculation.

Pure math, no I/O. A loan is feasible when it is at most four times the
applicant's income and at most the home value; a feasible loan gets the
fixed-rate amortization payment:

    C = P * i * (1 + i)^n / ((1 + i)^n - 1)

where P is the loan value, i the monthly rate (annual / 12) and n the number
of monthly payments (years * 12). All arithmetic uses ``Decimal`` with 34
significant digits and the payment is rounded half-up to cents.
"""

import decimal
import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .errors import ErrorKind, Result
from .rates import MortgageRate

logger = logging.getLogger(__name__)

MAX_INCOME_MULTIPLE = Decimal(4)
MONTHS_PER_YEAR = 12

# IEEE 754 decimal128 precision
_CALC_CONTEXT = decimal.Context(prec=34, rounding=decimal.ROUND_HALF_EVEN)
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Applicant:
    """Monetary inputs of a single feasibility check. Validated by the calculator."""

    income: Decimal | None
    loan_value: Decimal | None
    home_value: Decimal | None


@dataclass(frozen=True)
class FeasibilityResult:
    """Whether the loan is affordable and, if so, its monthly cost."""

    feasible: bool
    monthly_cost: Decimal

    @classmethod
    def not_feasible(cls) -> "FeasibilityResult":
        return cls(feasible=False, monthly_cost=Decimal(0))


def _is_positive(value) -> bool:
    return value is not None and value > 0


def _validate(rate: MortgageRate, applicant: Applicant) -> Result[FeasibilityResult] | None:
    """Return a failed result for the first invalid input, or None."""
    checks = (
        ("income", "income", applicant.income),
        ("loan_value", "loan value", applicant.loan_value),
        ("home_value", "home value", applicant.home_value),
        ("maturity_period", "maturity period", rate.maturity_period),
    )
    for field_name, label, value in checks:
        if not _is_positive(value):
            logger.error("Invalid %s: %s. It must be greater than zero.", label, value)
            return Result.fail(
                ErrorKind.VALIDATION,
                f"Invalid {label}: It must be greater than zero.",
                field=field_name,
            )
    if rate.interest_rate is None:
        logger.error("Invalid interest rate: it is missing.")
        return Result.fail(
            ErrorKind.VALIDATION,
            "Invalid interest rate: It must not be null.",
            field="interest_rate",
        )
    return None


def calculate_monthly_cost(
    maturity_period: int, interest_rate: Decimal, loan_value: Decimal,
) -> Decimal:
    """Fixed-rate monthly payment, rounded half-up to 2 decimals.

    A zero rate has no interest to amortize, so the loan is split evenly
    across the payments (the closed form would divide by zero).
    """
    n = maturity_period * MONTHS_PER_YEAR
    with decimal.localcontext(_CALC_CONTEXT):
        loan = Decimal(loan_value)
        i = Decimal(interest_rate) / MONTHS_PER_YEAR
        if i == 0:
            cost = loan / n
        else:
            factor = (1 + i) ** n
            cost = loan * (i * factor) / (factor - 1)
        return cost.quantize(_CENTS, rounding=ROUND_HALF_UP)


def check_mortgage_feasibility(
    rate: MortgageRate, applicant: Applicant,
) -> Result[FeasibilityResult]:
    """Decide whether the loan is affordable and compute its monthly cost.

    Validation always runs first, even when the caller already checked the
    maturity period. Both affordability caps are evaluated; either one makes
    the loan infeasible, in which case the monthly cost is zero.
    """
    invalid = _validate(rate, applicant)
    if invalid is not None:
        return invalid

    logger.info(
        "Calculating mortgage feasibility for income: %s, home value: %s, "
        "maturity period: %s years, loan: %s",
        applicant.income,
        applicant.home_value,
        rate.maturity_period,
        applicant.loan_value,
    )

    exceeds_income = applicant.loan_value > applicant.income * MAX_INCOME_MULTIPLE
    exceeds_home_value = applicant.loan_value > applicant.home_value
    if exceeds_income:
        logger.info("Loan exceeds %s times the income. Mortgage is not feasible.", MAX_INCOME_MULTIPLE)
    if exceeds_home_value:
        logger.info("Loan exceeds the home value. Mortgage is not feasible.")
    if exceeds_income or exceeds_home_value:
        return Result.ok(FeasibilityResult.not_feasible())

    monthly_cost = calculate_monthly_cost(
        rate.maturity_period, rate.interest_rate, applicant.loan_value,
    )
    logger.info("Mortgage is feasible. Calculated monthly cost: %s", monthly_cost)
    return Result.ok(FeasibilityResult(feasible=True, monthly_cost=monthly_cost))
