from fastapi import APIRouter, Depends, HTTPException, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.technical_sheet_service import TechnicalSheetService
from src.client.schemas import (
    CreateTechnicalSheetRequest,
    SuccessResponse,
    TechnicalSheetResponse,
    UpdateTechnicalSheetRequest,
)
from src.app.api.mappers import to_technical_sheet_response
from src.shared.exceptions import EntityNotFound, RequiredFieldsMissing
from src.app.logging import get_logger

router = APIRouter(prefix="/technical-sheets", tags=["technical-sheets"])
logger = get_logger(__name__)


@router.get("/{client_id}", response_model=TechnicalSheetResponse)
@inject
async def get_latest_technical_sheet(
    client_id: int,
    service: TechnicalSheetService = Depends(Provide[Container.technical_sheet_service]),
) -> TechnicalSheetResponse:
    """Get the most recent technical sheet of a client."""
    try:
        sheet = await service.get_latest_sheet(client_id)
        return to_technical_sheet_response(sheet)
    except EntityNotFound as e:
        logger.error(f"Technical sheet not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=TechnicalSheetResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_technical_sheet(
    request: CreateTechnicalSheetRequest,
    service: TechnicalSheetService = Depends(Provide[Container.technical_sheet_service]),
) -> TechnicalSheetResponse:
    """
    Record a technical sheet for a client.

    Raises:
        HTTPException 400: If clientId, datetime, rimel or gestante is missing
        HTTPException 404: If the client does not exist
    """
    try:
        sheet = await service.create_sheet(request)
        return to_technical_sheet_response(sheet)
    except RequiredFieldsMissing as e:
        logger.error(f"Failed to create technical sheet due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFound as e:
        logger.error(f"Failed to create technical sheet, client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{client_id}", response_model=SuccessResponse)
@inject
async def update_technical_sheet(
    client_id: int,
    request: UpdateTechnicalSheetRequest,
    service: TechnicalSheetService = Depends(Provide[Container.technical_sheet_service]),
) -> SuccessResponse:
    """
    Replace the fields of a client's technical sheet.

    The body may carry the ``id`` of the sheet to update; otherwise the
    client's latest sheet is updated.
    """
    try:
        await service.update_sheet(client_id, request)
    except RequiredFieldsMissing as e:
        logger.error(f"Failed to update technical sheet due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFound as e:
        logger.error(f"Technical sheet not found for update: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessResponse(message="Technical sheet updated successfully.")
