# This project was developed with assistance from AI tools.
"""
Mortgage rate catalog -- persistence model

One row per maturity period. Rows are maintained by the rate-management
process; the mortgage service only reads them.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Numeric, func

from .database import Base


class MortgageRateRow(Base):
    """Interest rate offered for a given loan maturity."""

    __tablename__ = "mortgage_rates"
    __table_args__ = (
        CheckConstraint("maturity_period > 0", name="ck_mortgage_rates_maturity_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    maturity_period = Column(Integer, unique=True, nullable=False, index=True)
    interest_rate = Column(Numeric(6, 5), nullable=False)
    last_update = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False,
    )

    def __repr__(self):
        return f"<MortgageRateRow(maturity_period={self.maturity_period}, rate={self.interest_rate})>"
