from fastapi import APIRouter, Depends, HTTPException, Query, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.appointment_service import AppointmentService
from src.client.schemas import (
    AppointmentListResponse,
    AppointmentResponse,
    CreateAppointmentRequest,
    SuccessResponse,
)
from src.app.api.mappers import to_appointment_list_item, to_appointment_response
from src.shared.exceptions import ConflictingEntityFound, EntityNotFound, RequiredFieldsMissing
from src.app.logging import get_logger

router = APIRouter(prefix="/appointments", tags=["appointments"])
logger = get_logger(__name__)


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_appointment(
    request: CreateAppointmentRequest,
    service: AppointmentService = Depends(Provide[Container.appointment_service]),
) -> AppointmentResponse:
    """
    Book an appointment.

    Raises:
        HTTPException 400: If a required field is missing
        HTTPException 404: If the client does not exist
        HTTPException 409: If the date and time slot is already booked
    """
    try:
        appointment = await service.create_appointment(request)
        return to_appointment_response(appointment)
    except RequiredFieldsMissing as e:
        logger.error(f"Failed to create appointment due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFound as e:
        logger.error(f"Failed to create appointment, client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictingEntityFound as e:
        logger.error(f"Failed to create appointment: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("", response_model=AppointmentListResponse)
@inject
async def list_appointments(
    status_filter: str | None = Query(
        default=None,
        alias="status",
        description="'concluidos' for concluded appointments, pending ones otherwise",
    ),
    service: AppointmentService = Depends(Provide[Container.appointment_service]),
) -> AppointmentListResponse:
    """List appointments with their client's name."""
    listings = await service.list_appointments(status_filter)
    return AppointmentListResponse(
        appointments=[to_appointment_list_item(listing) for listing in listings]
    )


@router.put("/{appointment_id}/conclude", response_model=SuccessResponse)
@inject
async def conclude_appointment(
    appointment_id: int,
    service: AppointmentService = Depends(Provide[Container.appointment_service]),
) -> SuccessResponse:
    """Mark an appointment as concluded."""
    try:
        await service.conclude_appointment(appointment_id)
    except EntityNotFound as e:
        logger.error(f"Appointment not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessResponse(message="Appointment concluded.")
