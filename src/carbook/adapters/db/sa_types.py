"""Portable SQLAlchemy column types for CARBOOK."""

from sqlalchemy import BigInteger, Integer

__all__ = ["BIGINT_PK", "NANOS"]

# SQLite only gives never-reused rowids to an INTEGER PRIMARY KEY AUTOINCREMENT
BIGINT_PK = BigInteger().with_variant(Integer(), "sqlite")

# Nanoseconds since the epoch (~1.8e18 today) need 64 bits
NANOS = BigInteger()
