# This project was developed with assistance from AI tools.
"""Mortgage REST endpoints: rate catalog and feasibility check."""

import logging

from db import get_db
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..schemas.mortgage import MortgageCheckRequest, MortgageCheckResponse, MortgageRateResponse
from ..services.errors import ErrorKind, MortgageError
from ..services.feasibility import FeasibilityService
from ..services.rates import InMemoryRateStore, MortgageRateRepository, RateCatalogService, RateStore
from ..services.seed import default_rates

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

# Built on first use when RATE_STORE=memory; shared across requests, never written after seeding.
_memory_store: InMemoryRateStore | None = None


class MortgageRequestError(HTTPException):
    """HTTPException that remembers which input field was rejected.

    The field is reported under its wire (camelCase) name.
    """

    def __init__(self, error: MortgageError):
        super().__init__(
            status_code=_ERROR_STATUS.get(error.kind, status.HTTP_400_BAD_REQUEST),
            detail=error.message,
        )
        self.field = to_camel(error.field) if error.field else None


def memory_rate_store() -> InMemoryRateStore:
    """Process-wide in-memory store holding the default rate catalog."""
    global _memory_store
    if _memory_store is None:
        _memory_store = InMemoryRateStore(default_rates())
    return _memory_store


def get_rate_store(session: AsyncSession = Depends(get_db)) -> RateStore:
    """Request-scoped rate store, SQL-backed unless RATE_STORE=memory.

    The session only connects on first query, so the memory store never touches the database.
    """
    if settings.RATE_STORE == "memory":
        return memory_rate_store()
    return MortgageRateRepository(session)


def get_feasibility_service(rate_store: RateStore = Depends(get_rate_store)) -> FeasibilityService:
    return FeasibilityService(rate_store)


def get_rate_catalog_service(rate_store: RateStore = Depends(get_rate_store)) -> RateCatalogService:
    return RateCatalogService(rate_store)


@router.get("/interest-rates", response_model=list[MortgageRateResponse])
async def get_interest_rates(
    catalog: RateCatalogService = Depends(get_rate_catalog_service),
) -> list[MortgageRateResponse]:
    """Return every known mortgage rate, in storage order."""
    logger.info("Getting all mortgage rates")
    rates = await catalog.list_all_rates()
    return [MortgageRateResponse.from_domain(rate) for rate in rates]


@router.post("/mortgage-check", response_model=MortgageCheckResponse)
async def check_mortgage(
    req: MortgageCheckRequest,
    service: FeasibilityService = Depends(get_feasibility_service),
) -> MortgageCheckResponse:
    """Decide whether a mortgage is feasible and, if so, its monthly cost."""
    logger.info("Checking mortgage feasibility")
    result = await service.check_feasibility(
        req.maturity_period, req.income, req.loan_value, req.home_value,
    )
    if not result:
        raise MortgageRequestError(result.error)
    return MortgageCheckResponse.from_domain(result.unwrap())
