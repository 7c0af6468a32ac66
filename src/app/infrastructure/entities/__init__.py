"""Database entities for the infrastructure layer."""
from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.entities.technical_sheet_entity import TechnicalSheetEntity
from src.app.infrastructure.entities.appointment_entity import AppointmentEntity

__all__ = [
    "ClientEntity",
    "TechnicalSheetEntity",
    "AppointmentEntity",
]
