"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import (
    Appointment,
    AppointmentListing,
    Client,
    ClientAppointmentCount,
    DashboardSummary,
    TechnicalSheet,
)
from src.client.schemas import (
    AppointmentClientResponse,
    AppointmentListItemResponse,
    AppointmentResponse,
    ClientAppointmentCountResponse,
    ClientResponse,
    DashboardResponse,
    TechnicalSheetResponse,
)


def to_client_response(client: Client) -> ClientResponse:
    """
    Convert a Client domain model to ClientResponse API schema.

    Args:
        client: Domain model

    Returns:
        API response schema
    """
    return ClientResponse(
        id=client.id,
        name=client.name,
        birthdate=client.birthdate,
        phone=client.phone,
    )


def to_technical_sheet_response(sheet: TechnicalSheet) -> TechnicalSheetResponse:
    """Convert a TechnicalSheet domain model to its API schema (client ID exposed as clientId)."""
    return TechnicalSheetResponse(
        id=sheet.id,
        client_id=sheet.client_id,
        **sheet.model_dump(exclude={"id", "client_id"}),
    )


def to_appointment_response(appointment: Appointment) -> AppointmentResponse:
    return AppointmentResponse(
        id=appointment.id,
        client_id=appointment.client_id,
        procedure=appointment.procedure,
        date=appointment.date,
        time=appointment.time,
        concluida=appointment.concluida,
    )


def to_appointment_list_item(listing: AppointmentListing) -> AppointmentListItemResponse:
    """Nest the client's name under ``client`` as the listing pages expect."""
    return AppointmentListItemResponse(
        id=listing.id,
        procedure=listing.procedure,
        date=listing.date,
        time=listing.time,
        client=AppointmentClientResponse(name=listing.client_name),
    )


def to_dashboard_response(summary: DashboardSummary) -> DashboardResponse:
    return DashboardResponse(
        total_appointments=summary.total_appointments,
        total_clients=summary.total_clients,
    )


def to_client_appointment_count_response(count: ClientAppointmentCount) -> ClientAppointmentCountResponse:
    return ClientAppointmentCountResponse(
        client_id=count.client_id,
        client_name=count.client_name,
        appointment_count=count.appointment_count,
    )
