from typing import Optional

from sqlalchemy import select

from src.app.core.domain.models import TechnicalSheet
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database
from src.app.infrastructure.entities.technical_sheet_entity import TechnicalSheetEntity
from src.app.infrastructure.mappers.technical_sheet_mapper import TechnicalSheetMapper


class TechnicalSheetRepository(BaseRepository[TechnicalSheetEntity, TechnicalSheet]):
    """Repository for TechnicalSheet operations."""

    def __init__(self, db: Database, mapper: TechnicalSheetMapper):
        super().__init__(db, mapper)

    async def get_by_id(self, sheet_id: int) -> Optional[TechnicalSheet]:
        """Get a technical sheet by ID."""
        return await self.find_one(
            select(TechnicalSheetEntity).where(TechnicalSheetEntity.id == sheet_id)
        )

    async def get_latest_for_client(self, client_id: int) -> Optional[TechnicalSheet]:
        """Get the most recently created sheet (highest ID) of a client."""
        return await self.find_one(
            select(TechnicalSheetEntity)
            .where(TechnicalSheetEntity.client_id == client_id)
            .order_by(TechnicalSheetEntity.id.desc())
            .limit(1)
        )
