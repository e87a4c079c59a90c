"""Car table schema.

One row per live car. Deleted cars are removed, not flagged.

Constraints (enforced here):

| Constraint                            | Purpose                                   |
|---------------------------------------|-------------------------------------------|
| PRIMARY KEY(id) AUTOINCREMENT         | ids are never reused (SQLite and Postgres) |
| CHECK(updated_at >= created_at)       | an update never precedes creation         |
| CHECK(year >= 0)                      | year is an unsigned value                 |
"""

from __future__ import annotations

from sqlalchemy import Boolean, CheckConstraint, Column, Integer, String, Table

from carbook.adapters.db.metadata import metadata
from carbook.adapters.db.sa_types import BIGINT_PK, NANOS

__all__ = ["cars", "TEXT_LENGTH"]

TEXT_LENGTH = 255

cars = Table(
    "cars",
    metadata,
    Column(
        "id",
        BIGINT_PK,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier; never reused.",
    ),
    Column("make", String(TEXT_LENGTH), nullable=False, comment="Manufacturer."),
    Column("model", String(TEXT_LENGTH), nullable=False, comment="Model name."),
    Column("color", String(TEXT_LENGTH), nullable=False, comment="Body color."),
    Column("owner", String(TEXT_LENGTH), nullable=False, comment="Owner name."),
    Column("year", Integer, nullable=False, comment="Model year."),
    Column(
        "is_booked",
        Boolean(create_constraint=False),
        nullable=False,
        comment="Whether the car is currently booked.",
    ),
    Column(
        "created_at",
        NANOS,
        nullable=False,
        comment="Creation time, nanoseconds since the Unix epoch.",
    ),
    Column(
        "updated_at",
        NANOS,
        nullable=True,
        comment="Last update time (ns since epoch); NULL until first update.",
    ),
    CheckConstraint(
        "updated_at IS NULL OR updated_at >= created_at",
        name="updated_after_created",
    ),
    CheckConstraint("year >= 0", name="year_nonneg"),
    sqlite_autoincrement=True,
)
