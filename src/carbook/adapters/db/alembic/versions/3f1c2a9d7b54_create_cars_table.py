"""create cars table

Revision ID: 3f1c2a9d7b54
Revises:
Create Date: 2026-10-19 09:12:41.518204

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b54"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

BIGINT_PK = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "cars",
        sa.Column(
            "id",
            BIGINT_PK,
            autoincrement=True,
            nullable=False,
            comment="Store-assigned identifier; never reused.",
        ),
        sa.Column("make", sa.String(length=255), nullable=False, comment="Manufacturer."),
        sa.Column("model", sa.String(length=255), nullable=False, comment="Model name."),
        sa.Column("color", sa.String(length=255), nullable=False, comment="Body color."),
        sa.Column("owner", sa.String(length=255), nullable=False, comment="Owner name."),
        sa.Column("year", sa.Integer(), nullable=False, comment="Model year."),
        sa.Column(
            "is_booked",
            sa.Boolean(create_constraint=False),
            nullable=False,
            comment="Whether the car is currently booked.",
        ),
        sa.Column(
            "created_at",
            sa.BigInteger(),
            nullable=False,
            comment="Creation time, nanoseconds since the Unix epoch.",
        ),
        sa.Column(
            "updated_at",
            sa.BigInteger(),
            nullable=True,
            comment="Last update time (ns since epoch); NULL until first update.",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_cars")),
        sa.CheckConstraint(
            "updated_at IS NULL OR updated_at >= created_at",
            name=op.f("ck_cars_updated_after_created"),
        ),
        sa.CheckConstraint("year >= 0", name=op.f("ck_cars_year_nonneg")),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("cars")
