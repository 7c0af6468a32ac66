"""Python client for the Lash Studio API."""
from src.client.studio_client import StudioClient
from src.client.schemas import (
    AppointmentListResponse,
    AppointmentResponse,
    ClientAppointmentCountResponse,
    ClientRequest,
    ClientResponse,
    CreateAppointmentRequest,
    CreateTechnicalSheetRequest,
    DashboardResponse,
    SuccessResponse,
    TechnicalSheetResponse,
    UpdateTechnicalSheetRequest,
)

__all__ = [
    "StudioClient",
    "AppointmentListResponse",
    "AppointmentResponse",
    "ClientAppointmentCountResponse",
    "ClientRequest",
    "ClientResponse",
    "CreateAppointmentRequest",
    "CreateTechnicalSheetRequest",
    "DashboardResponse",
    "SuccessResponse",
    "TechnicalSheetResponse",
    "UpdateTechnicalSheetRequest",
]
