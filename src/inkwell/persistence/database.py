"""Database-backed persistence using SQLAlchemy Core.

The payload is stored as one row of a ``(name, content, updated_at)`` table,
keyed by a logical record name. Any SQLAlchemy-supported database works;
tests use SQLite.

Example:
    >>> strategy = DatabaseStrategy("sqlite:///notes.db", record="draft")
    >>> strategy.save("Hello").ok
    True
    >>> strategy.load()
    'Hello'
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from inkwell.errors import StorageBackendError
from inkwell.persistence.result import SaveResult
from inkwell.utils.logger import get_logger

logger = get_logger(__name__)


def _documents_table(name: str, metadata: MetaData) -> Table:
    return Table(
        name,
        metadata,
        Column("name", String(255), primary_key=True),
        Column("content", Text, nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
    )


class DatabaseStrategy:
    """Persist the payload to a named record in a SQL database.

    Accepts either a database URL (the strategy then owns the engine and
    ``dispose()`` releases it) or a caller-built Engine (left untouched).
    The table is created on first save when missing.
    """

    __slots__ = ("_engine", "_owns_engine", "_record", "_table")

    def __init__(
        self,
        engine: Engine | str,
        *,
        record: str = "default",
        table: str = "documents",
    ) -> None:
        if isinstance(engine, str):
            self._engine = create_engine(engine)
            self._owns_engine = True
        else:
            self._engine = engine
            self._owns_engine = False
        self._record = record
        self._table = _documents_table(table, MetaData())

    @property
    def destination(self) -> str:
        return f"{self._table.name}/{self._record}"

    def save(self, data: str) -> SaveResult:
        """Upsert ``data`` into the configured record in one transaction.

        A rejected payload rolls the transaction back; the stored record is
        left as it was.
        """
        table = self._table
        now = datetime.now(timezone.utc)
        try:
            table.metadata.create_all(self._engine, checkfirst=True)
            with self._engine.begin() as conn:
                updated = conn.execute(
                    update(table)
                    .where(table.c.name == self._record)
                    .values(content=data, updated_at=now)
                )
                if updated.rowcount == 0:
                    conn.execute(
                        insert(table).values(name=self._record, content=data, updated_at=now)
                    )
        except (SQLAlchemyError, UnicodeError) as e:
            reason = getattr(e, "orig", None) or e
            error = StorageBackendError(str(reason), destination=self.destination)
            error.__cause__ = e
            logger.debug("Database write to %s failed: %s", self.destination, e)
            return SaveResult.failure(error)
        return SaveResult.success(self.destination, len(data))

    def load(self) -> str | None:
        """Return the stored payload for this record, or None.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the database cannot be read
        """
        table = self._table
        table.metadata.create_all(self._engine, checkfirst=True)
        with self._engine.connect() as conn:
            return conn.execute(
                select(table.c.content).where(table.c.name == self._record)
            ).scalar_one_or_none()

    def dispose(self) -> None:
        """Release the connection pool if this strategy created the engine."""
        if self._owns_engine:
            self._engine.dispose()

    def __repr__(self) -> str:
        return f"DatabaseStrategy({self._engine.url!r}, record={self._record!r})"
