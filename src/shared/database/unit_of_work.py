from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.database import Database
from src.shared.database.entity_mapper import EntityMapper


class UnitOfWork:
    def __init__(
        self,
        db: Database,
        entity_mapper: EntityMapper,
    ) -> None:
        self.db = db
        self.session: AsyncSession
        self.entity_mapper = entity_mapper

    async def __aenter__(self):
        self.session = self.db.session_maker()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            await self.commit()
        else:
            await self.rollback()
        if self.session:
            await self.session.close()

    def _map_to_entity(self, model_instance: Any):
        return self.entity_mapper.map_to_entity(model_instance)

    async def add(self, model_instance: Any):
        """Insert the model and flush so the store-generated id is available on the returned entity."""
        entity = self._map_to_entity(model_instance)
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def update(self, model_instance: Any) -> bool:
        """
        Overwrite the stored row with the model's values.

        The row is loaded inside this session first; returns False without
        writing when it no longer exists.
        """
        entity = self._map_to_entity(model_instance)
        persistent = await self.session.get(type(entity), entity.id)
        if persistent is None:
            return False
        await self.session.merge(entity)
        return True

    async def delete(self, model_instance: Any):
        entity = self._map_to_entity(model_instance)
        persistent = await self.session.get(type(entity), entity.id)
        if persistent is not None:
            await self.session.delete(persistent)

    async def commit(self):
        try:
            await self.session.commit()
        except Exception as e:
            await self.rollback()
            raise e

    async def rollback(self):
        await self.session.rollback()
