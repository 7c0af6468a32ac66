from fastapi import APIRouter, Depends, HTTPException, Query, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.client_service import ClientService
from src.client.schemas import ClientRequest, ClientResponse, ClientListResponse, SuccessResponse
from src.app.api.mappers import to_client_response
from src.shared.exceptions import EntityNotFound, RequiredFieldsMissing
from src.app.logging import get_logger

router = APIRouter(prefix="/clients", tags=["clients"])
logger = get_logger(__name__)


@router.post("", response_model=ClientResponse)
@inject
async def create_client(
    request: ClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Create a new client and echo it back with its ID."""
    try:
        client = await service.create_client(request)
        return to_client_response(client)
    except RequiredFieldsMissing as e:
        logger.error(f"Failed to create client due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=ClientListResponse)
@inject
async def list_clients(
    search: str | None = Query(default=None, description="Case-insensitive part of the client name"),
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientListResponse:
    """List all clients, optionally filtered by name."""
    clients = await service.list_clients(search)
    return ClientListResponse(clients=[to_client_response(client) for client in clients])


@router.put("/{client_id}", response_model=SuccessResponse)
@inject
async def update_client(
    client_id: int,
    request: ClientRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> SuccessResponse:
    """Replace the name, birthdate and phone of a client."""
    try:
        await service.update_client(client_id, request)
    except RequiredFieldsMissing as e:
        logger.error(f"Failed to update client due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFound as e:
        logger.error(f"Client not found for update: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessResponse(message="Client updated successfully.")


@router.delete("/{client_id}", response_model=SuccessResponse)
@inject
async def delete_client(
    client_id: int,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> SuccessResponse:
    """Delete a client. Their technical sheets and appointments are kept."""
    try:
        await service.delete_client(client_id)
    except EntityNotFound as e:
        logger.error(f"Client not found for deletion: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessResponse(message="Client deleted successfully.")
