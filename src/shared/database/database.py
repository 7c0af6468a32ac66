import asyncio
import logging

from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()


class DatabaseSettings(BaseModel):
    db_url: str
    max_attempts: int = 5
    retry_delay_seconds: float = 5.0


class Database:
    def __init__(self, db_settings: DatabaseSettings) -> None:
        self.settings = db_settings
        self._engine = create_async_engine(db_settings.db_url)
        self.session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(self._engine, expire_on_commit=False)
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> bool:
        """
        Open a first connection to the store, retrying a fixed number of times.

        Returns True once a connection succeeds. After the last failed attempt the
        database stays marked as not connected and False is returned.
        """
        remaining = self.settings.max_attempts
        while remaining:
            try:
                async with self._engine.connect() as conn:
                    await conn.execute(text("SELECT 1"))
                self._connected = True
                logger.info("Connected to database")
                return True
            except (OSError, SQLAlchemyError) as e:
                remaining -= 1
                logger.error("Error connecting to database: %s", e)
                if remaining:
                    logger.info("Retrying connection... %d attempts left", remaining)
                    await asyncio.sleep(self.settings.retry_delay_seconds)

        logger.error("Giving up on database connection after %d attempts", self.settings.max_attempts)
        return False

    async def create_tables(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        self._connected = False
        await self._engine.dispose()
