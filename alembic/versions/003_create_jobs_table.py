"""create jobs table

Revision ID: 003
Revises: 002
Create Date: 2026-10-12 00:20:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("paid", sa.Boolean(), nullable=True),
        sa.Column("payment_date", sa.DateTime(), nullable=True),
        sa.Column("contract_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["contract_id"], ["contracts.id"]),
        sa.CheckConstraint(
            "price > 0",
            name="ck_jobs_price_positive"
        ),
        # CHECK constraint: payment_date is set if and only if the job is paid
        sa.CheckConstraint(
            "(paid IS NULL AND payment_date IS NULL) OR (paid AND payment_date IS NOT NULL)",
            name="ck_jobs_paid_payment_date"
        ),
    )
    op.create_index("ix_jobs_id", "jobs", ["id"], unique=False)
    op.create_index("ix_jobs_contract_id", "jobs", ["contract_id"], unique=False)
    op.create_index("ix_jobs_payment_date", "jobs", ["payment_date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_jobs_payment_date", table_name="jobs")
    op.drop_index("ix_jobs_contract_id", table_name="jobs")
    op.drop_index("ix_jobs_id", table_name="jobs")
    op.drop_table("jobs")
