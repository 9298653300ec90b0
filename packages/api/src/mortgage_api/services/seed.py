# This project was developed with assistance from AI tools.
"""Default rate catalog seeding.

Populates ``mortgage_rates`` for local runs and demos. Existing rows are left
alone unless ``force`` is set, in which case the table is replaced.

Simulated for demonstration purposes -- not real market rates.
"""

import logging
from datetime import UTC, datetime
from decimal import Decimal

from db import MortgageRateRow
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .rates import MortgageRate

logger = logging.getLogger(__name__)

DEFAULT_RATES: dict[int, Decimal] = {
    10: Decimal("0.03500"),
    15: Decimal("0.03750"),
    20: Decimal("0.04000"),
    25: Decimal("0.04250"),
    30: Decimal("0.04500"),
}


def default_rates() -> list[MortgageRate]:
    """The default catalog as domain values, for stores that live in memory."""
    return [
        MortgageRate(maturity_period=period, interest_rate=rate)
        for period, rate in sorted(DEFAULT_RATES.items())
    ]


async def seed_rates(
    session: AsyncSession,
    rates: dict[int, Decimal] | None = None,
    force: bool = False,
) -> dict:
    """Insert the rate catalog. Returns a summary dict."""
    rates = DEFAULT_RATES if rates is None else rates

    existing = await session.scalar(select(func.count()).select_from(MortgageRateRow))
    if existing and not force:
        logger.info("Rate catalog already holds %d rates, skipping seed", existing)
        return {"status": "already_seeded", "rates": existing}

    if existing:
        await session.execute(delete(MortgageRateRow))
        logger.info("Cleared %d existing rates", existing)

    now = datetime.now(UTC)
    for maturity_period, interest_rate in sorted(rates.items()):
        session.add(
            MortgageRateRow(
                maturity_period=maturity_period,
                interest_rate=interest_rate,
                last_update=now,
            )
        )
    await session.commit()

    logger.info("Seeded %d mortgage rates", len(rates))
    return {
        "status": "seeded",
        "seeded_at": now.isoformat(),
        "rates": len(rates),
    }
