# This project was developed with assistance from AI tools.
"""Mortgage feasibility check use case.

Validates the maturity period, looks up the rate for it and hands the
applicant's figures to the affordability calculator. Income, loan and home
values are validated by the calculator, not here.
"""

import logging
from collections.abc import Callable
from decimal import Decimal

from .affordability import Applicant, FeasibilityResult, check_mortgage_feasibility
from .errors import ErrorKind, Result
from .rates import MortgageRate, RateStore

logger = logging.getLogger(__name__)

Calculator = Callable[[MortgageRate, Applicant], Result[FeasibilityResult]]


class FeasibilityService:
    """Orchestrates rate lookup and affordability calculation for one request."""

    def __init__(self, rate_store: RateStore, calculator: Calculator = check_mortgage_feasibility):
        self._rate_store = rate_store
        self._calculator = calculator

    async def check_feasibility(
        self,
        maturity_period: int | None,
        income: Decimal | None,
        loan_value: Decimal | None,
        home_value: Decimal | None,
    ) -> Result[FeasibilityResult]:
        logger.info(
            "Checking mortgage feasibility for maturity period: %s years, income: %s, "
            "loan value: %s, home value: %s",
            maturity_period,
            income,
            loan_value,
            home_value,
        )

        # Checked before querying so an invalid period never reaches the store
        if maturity_period is None or maturity_period <= 0:
            logger.error(
                "Invalid maturity period: %s. It must be greater than zero.", maturity_period,
            )
            return Result.fail(
                ErrorKind.INVALID_ARGUMENT,
                "Invalid maturity period: It must be greater than zero.",
                field="maturity_period",
            )

        rate = await self._rate_store.find_by_maturity_period(maturity_period)
        if rate is None:
            logger.error(
                "No mortgage rate was found related to maturity period of: %s years. "
                "Cannot check mortgage feasibility",
                maturity_period,
            )
            return Result.fail(
                ErrorKind.NOT_FOUND,
                f"Could not find mortgage rate for maturity period of {maturity_period} years",
                field="maturity_period",
            )

        applicant = Applicant(income=income, loan_value=loan_value, home_value=home_value)
        return self._calculator(rate, applicant)
