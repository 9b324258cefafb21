"""create profiles table

Revision ID: 001
Revises:
Create Date: 2026-10-12 00:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("profession", sa.String(length=255), nullable=False),
        sa.Column("balance", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        # CHECK constraint: a payment can never overdraw a profile
        sa.CheckConstraint(
            "balance >= 0",
            name="ck_profiles_balance_non_negative"
        ),
        sa.CheckConstraint(
            "type IN ('client', 'contractor')",
            name="ck_profiles_type_valid"
        ),
    )
    op.create_index("ix_profiles_id", "profiles", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_profiles_id", table_name="profiles")
    op.drop_table("profiles")
