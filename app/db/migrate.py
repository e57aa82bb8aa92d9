"""Schema bootstrap plus small, idempotent SQLite migrations."""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import text
from sqlalchemy.engine import Engine

from .session import Base

logger = logging.getLogger(__name__)

# Columns added after the first release. Additive only, never dropped.
ADDRESS_COLUMNS: dict[str, str] = {
    "complement": "TEXT",
    "latitude": "FLOAT",
    "longitude": "FLOAT",
}


def _column_names(engine: Engine, table: str) -> set[str]:
    """Names of the columns SQLite currently has for ``table``."""

    with engine.connect() as conn:
        rows = conn.execute(text(f"PRAGMA table_info({table})")).mappings().all()
    return {row["name"] for row in rows}


def _add_column_sqlite(engine: Engine, table: str, col_def: str) -> None:
    with engine.begin() as conn:
        conn.execute(text(f"ALTER TABLE {table} ADD COLUMN {col_def}"))


def _create_index_if_not_exists(engine: Engine, table: str, name: str, cols: Iterable[str], unique: bool = False) -> None:
    cols_sql = ", ".join(cols)
    unique_sql = "UNIQUE " if unique else ""
    with engine.begin() as conn:
        conn.execute(text(f"CREATE {unique_sql}INDEX IF NOT EXISTS {name} ON {table} ({cols_sql})"))


def run_migrations(engine: Engine) -> None:
    """Bring an existing SQLite schema up to what the models expect."""

    if engine.dialect.name != "sqlite":
        logger.debug("Skipping SQLite migrations for dialect %s", engine.dialect.name)
        return

    existing = _column_names(engine, "addresses")
    if not existing:
        return
    for name, dtype in ADDRESS_COLUMNS.items():
        if name not in existing:
            logger.info("Adding column addresses.%s", name)
            _add_column_sqlite(engine, "addresses", f"{name} {dtype}")

    # Street-name search compares lower(street_name), so index that expression.
    _create_index_if_not_exists(engine, "addresses", "ix_addresses_street_name_lower", ["lower(street_name)"])


def init_db(engine: Engine) -> None:
    # Registers the models on Base.metadata before create_all runs.
    from ..models import address as _address  # noqa: F401

    Base.metadata.create_all(bind=engine)
    run_migrations(engine)
