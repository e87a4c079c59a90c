"""Alembic round-trip smoke test for SQLite.

Runs *upgrade → downgrade* against a temporary file-backed database and
checks that the migrated schema matches the SQLAlchemy metadata.
"""

from __future__ import annotations

from alembic import command
from alembic.autogenerate import compare_metadata
from alembic.runtime.migration import MigrationContext
from sqlalchemy import create_engine, inspect, text

from carbook import config
from carbook.adapters.db.metadata import metadata

# pylint: disable=magic-value-comparison


def table_names(eng) -> set[str]:
    return set(inspect(eng).get_table_names())


def test_upgrade_downgrade_roundtrip(sqlite_url: str):
    """upgrade head creates `cars`; downgrade base drops it."""
    command.upgrade(config.build_alembic_config(sqlite_url), "head")
    eng = create_engine(sqlite_url)
    try:
        assert "cars" in table_names(eng)
        command.downgrade(config.build_alembic_config(sqlite_url), "base")
        eng.dispose()
        assert "cars" not in table_names(eng)
    finally:
        eng.dispose()


def test_migrated_schema_matches_metadata(sqlite_engine_file):
    """Autogenerate finds nothing to change after upgrade head."""
    with sqlite_engine_file.connect() as conn:
        ctx = MigrationContext.configure(conn, opts={"compare_type": False})
        assert compare_metadata(ctx, metadata) == []


def test_migrated_table_uses_autoincrement(sqlite_engine_file):
    """AUTOINCREMENT keeps SQLite from reusing the ids of deleted rows."""
    with sqlite_engine_file.connect() as conn:
        ddl = conn.execute(
            text("SELECT sql FROM sqlite_master WHERE type='table' AND name='cars'")
        ).scalar_one()
    assert "AUTOINCREMENT" in ddl.upper()
    assert "ck_cars_updated_after_created" in ddl
