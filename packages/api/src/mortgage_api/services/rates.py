# This project was developed with assistance from AI tools.
"""Mortgage rate lookup and catalog listing.

``RateStore`` is the read-only port the services depend on. The SQL-backed
``MortgageRateRepository`` is wired in by the route layer; ``InMemoryRateStore``
serves tests and database-less runs. A missing rate is reported as ``None``,
never as an exception.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from typing import Protocol

from db import MortgageRateRow
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MortgageRate:
    """Interest terms offered for a loan duration.

    ``interest_rate`` is the nominal annual rate as a fraction (0.05 = 5%).
    """

    maturity_period: int | None
    interest_rate: Decimal
    last_update: datetime | None = None


class RateStore(Protocol):
    """Read-only access to the rate catalog."""

    async def find_all(self) -> list[MortgageRate]: ...

    async def find_by_maturity_period(self, maturity_period: int) -> MortgageRate | None: ...


def to_domain(row: MortgageRateRow) -> MortgageRate:
    """Map a persistence row to the domain value."""
    return MortgageRate(
        maturity_period=row.maturity_period,
        interest_rate=Decimal(row.interest_rate),
        last_update=row.last_update,
    )


class MortgageRateRepository:
    """``RateStore`` backed by the ``mortgage_rates`` table."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_all(self) -> list[MortgageRate]:
        stmt = select(MortgageRateRow).order_by(MortgageRateRow.id)
        result = await self._session.execute(stmt)
        return [to_domain(row) for row in result.scalars().all()]

    async def find_by_maturity_period(self, maturity_period: int) -> MortgageRate | None:
        stmt = select(MortgageRateRow).where(MortgageRateRow.maturity_period == maturity_period)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return to_domain(row) if row is not None else None


class InMemoryRateStore:
    """Dict-backed ``RateStore``; keeps insertion order."""

    def __init__(self, rates: Iterable[MortgageRate] = ()):
        self._rates: dict[int, MortgageRate] = {}
        for rate in rates:
            self.put(rate)

    def put(self, rate: MortgageRate) -> None:
        if rate.last_update is None:
            rate = MortgageRate(
                maturity_period=rate.maturity_period,
                interest_rate=rate.interest_rate,
                last_update=datetime.now(UTC),
            )
        self._rates[rate.maturity_period] = rate

    async def find_all(self) -> list[MortgageRate]:
        return list(self._rates.values())

    async def find_by_maturity_period(self, maturity_period: int) -> MortgageRate | None:
        return self._rates.get(maturity_period)


class RateCatalogService:
    """Lists every known rate, unfiltered."""

    def __init__(self, rate_store: RateStore):
        self._rate_store = rate_store

    async def list_all_rates(self) -> list[MortgageRate]:
        logger.info("Finding all mortgage rates in the system")
        rates = await self._rate_store.find_all()
        logger.info("Found %d mortgage rates", len(rates))
        return rates
