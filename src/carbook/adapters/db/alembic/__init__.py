"""Alembic migration scripts for the CARBOOK schema."""
