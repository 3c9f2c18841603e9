import asyncio
import logging
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from order_intake.domain.exceptions import PersistenceError
from order_intake.infrastructure.db_schema import metadata
from order_intake.infrastructure.repositories import SQLAlchemyOrderRepository

logger = logging.getLogger(__name__)


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def init_store(engine: AsyncEngine, timeout: float) -> async_sessionmaker[AsyncSession]:
    """Проверка соединения и создание таблиц при старте"""
    session_factory = create_session_factory(engine)
    try:
        await asyncio.wait_for(SQLAlchemyOrderRepository(session_factory).ping(), timeout=timeout)
    except asyncio.TimeoutError:
        raise PersistenceError(f"store ping timed out after {timeout}s")
    logger.info("Хранилище доступно")

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Таблица orders готова")
    return session_factory
