import logging

from src.app.core.domain.models import Client
from src.app.core.validation import CLIENT_REQUIRED_FIELDS, require_fields
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import EntityNotFound
from src.client.schemas import ClientRequest

from src.app.infrastructure.client_repository import ClientRepository

logger = logging.getLogger(__name__)


class ClientService:
    """Service for handling Client business logic."""

    def __init__(self, repository: ClientRepository, unit_of_work: UnitOfWork):
        self.repository = repository
        self.unit_of_work = unit_of_work

    async def create_client(self, request: ClientRequest) -> Client:
        """Create a new client."""
        require_fields(request, CLIENT_REQUIRED_FIELDS)

        client = Client(
            name=request.name,
            birthdate=request.birthdate,
            phone=request.phone,
        )
        async with self.unit_of_work:
            entity = await self.unit_of_work.add(client)

        return client.model_copy(update={"id": entity.id})

    async def get_client(self, client_id: int) -> Client:
        """Get a client by ID."""
        client = await self.repository.get_by_id(client_id)
        if not client:
            raise EntityNotFound("Client", client_id)
        return client

    async def update_client(self, client_id: int, request: ClientRequest) -> Client:
        """Replace the name, birthdate and phone of an existing client."""
        require_fields(request, CLIENT_REQUIRED_FIELDS)

        client = await self.get_client(client_id)
        updated = client.model_copy(
            update={
                "name": request.name,
                "birthdate": request.birthdate,
                "phone": request.phone,
            }
        )
        async with self.unit_of_work:
            if not await self.unit_of_work.update(updated):
                raise EntityNotFound("Client", client_id)

        return updated

    async def delete_client(self, client_id: int) -> None:
        """
        Delete a client.

        Technical sheets and appointments of the client are kept; they stop
        showing up in client-joined listings.
        """
        client = await self.get_client(client_id)
        async with self.unit_of_work:
            await self.unit_of_work.delete(client)
        logger.info("Deleted client %s", client_id)

    async def list_clients(self, search: str | None = None) -> list[Client]:
        """List all clients, or those whose name contains the search term (case-insensitive)."""
        return await self.repository.list_clients(search)
