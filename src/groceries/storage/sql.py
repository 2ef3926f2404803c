"""
SQL storage backend: one key/value table shared by every collection
"""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import JSON, Integer, MetaData, PrimaryKeyConstraint, String, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool

from ..logging import get_logger
from .base import Record, StorageBackend, StorageException

logger = get_logger(__name__)

naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=naming_convention)


class Records(Base):
    __tablename__ = "records"
    __table_args__ = (PrimaryKeyConstraint("collection", "key", name="records_pkey"),)

    collection: Mapped[str] = mapped_column(String(64), nullable=False)
    key: Mapped[int] = mapped_column(Integer, nullable=False)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)


class SqlStorage(StorageBackend):
    """Stores records as JSON documents in a ``records`` table.

    The table is created on first use. In-memory SQLite URLs share a single
    connection so every session sees the same database.
    """

    def __init__(self, database_url: str, echo: bool = False):
        super().__init__()
        self.database_url = database_url

        engine_kwargs: dict[str, Any] = {"echo": echo}
        if database_url.startswith("sqlite") and ":memory:" in database_url:
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        self._engine = create_async_engine(database_url, **engine_kwargs)
        self._session_local = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        self._schema_ready = False
        self._schema_lock = asyncio.Lock()

    async def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        async with self._schema_lock:
            if self._schema_ready:
                return
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            self._schema_ready = True
            logger.info("SQL storage initialized", database_url=self.database_url)

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a session that commits on success and rolls back on error."""
        await self._ensure_schema()
        async with self._session_local() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error("SQL storage operation failed", error=str(e))
                raise StorageException(f"Database error: {e}") from e
            except Exception:
                await session.rollback()
                raise

    async def read_all(self, collection: str) -> list[Record]:
        async with self._session() as session:
            stmt = select(Records).where(Records.collection == collection).order_by(Records.key)
            result = await session.execute(stmt)
            return [dict(row.data) for row in result.scalars().all()]

    async def read(self, collection: str, key: int) -> Record | None:
        async with self._session() as session:
            row = await session.get(Records, (collection, int(key)))
            return dict(row.data) if row is not None else None

    async def write(self, collection: str, key: int, record: Record) -> None:
        async with self._session() as session:
            row = await session.get(Records, (collection, int(key)))
            if row is None:
                session.add(Records(collection=collection, key=int(key), data=record))
            else:
                row.data = record

    async def exists(self, collection: str, key: int) -> bool:
        async with self._session() as session:
            return await session.get(Records, (collection, int(key))) is not None

    async def close(self) -> None:
        await self._engine.dispose()
