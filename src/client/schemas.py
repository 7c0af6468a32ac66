"""API schemas for client, technical sheet and appointment requests and responses."""
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Requests
#
# Fields are optional at the schema level: presence is checked by the
# validation layer so that a missing field answers 400 with the list of
# missing fields.
# =============================================================================


class ClientRequest(BaseModel):
    """Request schema for creating or replacing a client."""
    name: str | None = None
    birthdate: str | None = None
    phone: str | None = None


class TechnicalSheetFields(BaseModel):
    """Form fields shared by technical sheet requests and responses."""
    datetime: str | None = None
    rimel: str | None = None
    gestante: str | None = None
    procedimento_olhos: str | None = None
    alergia: str | None = None
    especificar_alergia: str | None = None
    tireoide: str | None = None
    problema_ocular: str | None = None
    especificar_ocular: str | None = None
    oncologico: str | None = None
    dorme_lado: str | None = None
    dorme_lado_posicao: str | None = None
    problema_informar: str | None = None
    procedimento: str | None = None
    mapping: str | None = None
    estilo: str | None = None
    modelo_fios: str | None = None
    espessura: str | None = None
    curvatura: str | None = None
    adesivo: str | None = None
    observacao: str | None = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class CreateTechnicalSheetRequest(TechnicalSheetFields):
    """Request schema for creating a technical sheet."""
    client_id: int | None = Field(default=None, alias="clientId")


class UpdateTechnicalSheetRequest(TechnicalSheetFields):
    """
    Request schema for replacing a technical sheet of a client.

    ``id`` selects the sheet to update; without it the client's latest
    sheet is updated.
    """
    id: int | None = Field(default=None, description="ID of the sheet to update")


class CreateAppointmentRequest(BaseModel):
    """Request schema for booking an appointment."""
    client_id: int | None = Field(default=None, alias="clientId")
    procedure: str | None = None
    date: str | None = None
    time: str | None = None

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Responses
# =============================================================================


class SuccessResponse(BaseModel):
    """Acknowledgement returned by update, delete and conclude operations."""
    success: bool = True
    message: str | None = None


class ClientResponse(BaseModel):
    """Response schema for client data returned by the API."""
    id: int
    name: str
    birthdate: str
    phone: str

    model_config = ConfigDict(from_attributes=True)


class ClientListResponse(BaseModel):
    clients: list[ClientResponse]


class TechnicalSheetResponse(TechnicalSheetFields):
    """Response schema for a stored technical sheet."""
    id: int
    client_id: int = Field(..., alias="clientId")


class AppointmentResponse(BaseModel):
    """Response schema for a booked appointment."""
    id: int
    client_id: int = Field(..., alias="clientId")
    procedure: str
    date: str
    time: str
    concluida: bool = False

    model_config = ConfigDict(populate_by_name=True)


class AppointmentClientResponse(BaseModel):
    name: str


class AppointmentListItemResponse(BaseModel):
    """Appointment row of a listing, with the client's name nested under ``client``."""
    id: int
    procedure: str
    date: str
    time: str
    client: AppointmentClientResponse


class AppointmentListResponse(BaseModel):
    appointments: list[AppointmentListItemResponse]


class DashboardResponse(BaseModel):
    """Totals shown on the dashboard page."""
    total_appointments: int = Field(..., alias="totalAppointments")
    total_clients: int = Field(..., alias="totalClients")

    model_config = ConfigDict(populate_by_name=True)


class ClientAppointmentCountResponse(BaseModel):
    client_id: int
    client_name: str
    appointment_count: int
