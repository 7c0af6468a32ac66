"""Infrastructure mappers for converting between domain models and database entities."""
from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.mappers.technical_sheet_mapper import TechnicalSheetMapper
from src.app.infrastructure.mappers.appointment_mapper import AppointmentMapper

__all__ = [
    "ClientMapper",
    "TechnicalSheetMapper",
    "AppointmentMapper",
]
