from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Appointment
from src.app.infrastructure.entities.appointment_entity import AppointmentEntity


class AppointmentMapper(BaseEntityMapper[Appointment, AppointmentEntity]):
    """Mapper for converting between Appointment domain model and AppointmentEntity."""

    @staticmethod
    def to_entity(model_instance: Appointment) -> AppointmentEntity:
        """Convert an Appointment (domain model) to AppointmentEntity (database entity)."""
        return AppointmentEntity(
            id=model_instance.id,
            client_id=model_instance.client_id,
            procedure=model_instance.procedure,
            date=model_instance.date,
            time=model_instance.time,
            concluida=model_instance.concluida,
        )

    @staticmethod
    def to_model(entity: AppointmentEntity) -> Appointment:
        """Convert an AppointmentEntity to Appointment; a NULL flag reads as not concluded."""
        return Appointment(
            id=entity.id,
            client_id=entity.client_id,
            procedure=entity.procedure,
            date=entity.date,
            time=entity.time,
            concluida=bool(entity.concluida),
        )
