from fastapi import APIRouter, Depends
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.dashboard_service import DashboardService
from src.client.schemas import ClientAppointmentCountResponse, DashboardResponse
from src.app.api.mappers import to_client_appointment_count_response, to_dashboard_response

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
@inject
async def get_dashboard(
    service: DashboardService = Depends(Provide[Container.dashboard_service]),
) -> DashboardResponse:
    """Total number of appointments and clients."""
    return to_dashboard_response(await service.get_summary())


@router.get("/appointments-by-client", response_model=list[ClientAppointmentCountResponse])
@inject
async def get_appointments_by_client(
    service: DashboardService = Depends(Provide[Container.dashboard_service]),
) -> list[ClientAppointmentCountResponse]:
    """Number of appointments booked by each client."""
    counts = await service.appointments_by_client()
    return [to_client_appointment_count_response(count) for count in counts]
