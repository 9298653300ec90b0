# This project was developed with assistance from AI tools.
"""create mortgage_rates

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-12 09:41:17.203518

"""

import sqlalchemy as sa
from alembic import op

revision = "3c1f9a2b7d40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "mortgage_rates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("maturity_period", sa.Integer(), nullable=False),
        sa.Column("interest_rate", sa.Numeric(6, 5), nullable=False),
        sa.Column(
            "last_update",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("maturity_period > 0", name="ck_mortgage_rates_maturity_positive"),
    )
    op.create_index(
        "ix_mortgage_rates_maturity_period", "mortgage_rates", ["maturity_period"], unique=True,
    )


def downgrade() -> None:
    op.drop_index("ix_mortgage_rates_maturity_period", table_name="mortgage_rates")
    op.drop_table("mortgage_rates")
