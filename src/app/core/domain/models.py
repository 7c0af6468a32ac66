"""Domain models used in business logic."""
from enum import StrEnum

from pydantic import BaseModel, Field


class Client(BaseModel):
    """Domain model for Client used in business logic."""
    id: int | None = Field(default=None, description="Store-generated client ID")
    name: str
    birthdate: str
    phone: str

    model_config = {"from_attributes": True}


# Optional anamnesis and procedure fields of a technical sheet, in form order.
TECHNICAL_SHEET_FORM_FIELDS: tuple[str, ...] = (
    "procedimento_olhos",
    "alergia",
    "especificar_alergia",
    "tireoide",
    "problema_ocular",
    "especificar_ocular",
    "oncologico",
    "dorme_lado",
    "dorme_lado_posicao",
    "problema_informar",
    "procedimento",
    "mapping",
    "estilo",
    "modelo_fios",
    "espessura",
    "curvatura",
    "adesivo",
    "observacao",
)


class TechnicalSheet(BaseModel):
    """
    Technical sheet (ficha técnica) filled in for a client before a lash procedure.

    A client accumulates sheets over time; the one with the highest id is the
    current sheet.
    """
    id: int | None = Field(default=None, description="Store-generated sheet ID")
    client_id: int
    datetime: str
    rimel: str
    gestante: str
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

    model_config = {"from_attributes": True}


class AppointmentStatus(StrEnum):
    """Listing filter for appointments."""
    PENDING = "pendentes"
    CONCLUDED = "concluidos"

    @classmethod
    def from_query(cls, value: str | None) -> "AppointmentStatus":
        """Anything other than 'concluidos' lists pending appointments."""
        return cls.CONCLUDED if value == cls.CONCLUDED.value else cls.PENDING


class Appointment(BaseModel):
    """Domain model for a scheduled appointment."""
    id: int | None = Field(default=None, description="Store-generated appointment ID")
    client_id: int
    procedure: str
    date: str
    time: str
    concluida: bool = Field(default=False, description="Whether the appointment was completed")

    model_config = {"from_attributes": True}

    def conclude(self) -> None:
        self.concluida = True


class AppointmentListing(BaseModel):
    """Appointment joined with the name of its client."""
    id: int
    procedure: str
    date: str
    time: str
    client_name: str


class ClientAppointmentCount(BaseModel):
    """Number of appointments booked by one client."""
    client_id: int
    client_name: str
    appointment_count: int


class DashboardSummary(BaseModel):
    total_appointments: int = Field(..., ge=0)
    total_clients: int = Field(..., ge=0)
