from typing import Optional

from sqlalchemy import select, func

from src.app.core.domain.models import Client
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper


class ClientRepository(BaseRepository[ClientEntity, Client]):
    """Repository for Client operations."""

    def __init__(self, db: Database, mapper: ClientMapper):
        super().__init__(db, mapper)

    async def get_by_id(self, client_id: int) -> Optional[Client]:
        """Get a client by ID."""
        return await self.find_one(
            select(ClientEntity).where(ClientEntity.id == client_id)
        )

    async def list_clients(self, search: str | None = None) -> list[Client]:
        """
        List clients in insertion order, optionally filtered by name.

        Args:
            search: Case-insensitive substring to look for in the client name.
                    '%' and '_' in the term are matched literally.

        Returns:
            Matching clients, or every client when no search term is given.
        """
        stmt = select(ClientEntity).order_by(ClientEntity.id)
        if search:
            stmt = stmt.where(ClientEntity.name.icontains(search, autoescape=True))
        return await self.find_all(stmt)

    async def count(self) -> int:
        """Total number of clients."""
        return await self.scalar(select(func.count()).select_from(ClientEntity))
