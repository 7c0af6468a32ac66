import logging

from sqlalchemy.exc import IntegrityError

from src.app.core.domain.models import Appointment, AppointmentListing, AppointmentStatus
from src.app.core.validation import APPOINTMENT_REQUIRED_FIELDS, require_fields
from src.app.infrastructure.appointment_repository import AppointmentRepository
from src.app.infrastructure.client_repository import ClientRepository
from src.client.schemas import CreateAppointmentRequest
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import ConflictingEntityFound, EntityNotFound

logger = logging.getLogger(__name__)


class AppointmentService:
    """Service for booking, listing and concluding appointments."""

    def __init__(
        self,
        client_repository: ClientRepository,
        appointment_repository: AppointmentRepository,
        unit_of_work: UnitOfWork,
    ):
        """
        Initialize the appointment service.

        Args:
            client_repository: Repository used to check that the client exists
            appointment_repository: Repository for appointment operations
            unit_of_work: Unit of work for database transactions
        """
        self.client_repository = client_repository
        self.appointment_repository = appointment_repository
        self.unit_of_work = unit_of_work

    async def create_appointment(self, request: CreateAppointmentRequest) -> Appointment:
        """
        Book an appointment for a client on a free date and time.

        Raises:
            RequiredFieldsMissing: If clientId, procedure, date or time is missing
            EntityNotFound: If the client does not exist
            ConflictingEntityFound: If the date and time slot is already booked
        """
        require_fields(request, APPOINTMENT_REQUIRED_FIELDS)

        client = await self.client_repository.get_by_id(request.client_id)
        if not client:
            raise EntityNotFound("Client", request.client_id)

        slot = f"{request.date} {request.time}"
        if await self.appointment_repository.get_by_slot(request.date, request.time):
            raise ConflictingEntityFound("Appointment", "slot", slot)

        appointment = Appointment(
            client_id=request.client_id,
            procedure=request.procedure,
            date=request.date,
            time=request.time,
        )

        # The unique slot index catches concurrent bookings that passed the check above
        try:
            async with self.unit_of_work:
                entity = await self.unit_of_work.add(appointment)
        except IntegrityError as e:
            raise ConflictingEntityFound("Appointment", "slot", slot) from e

        return appointment.model_copy(update={"id": entity.id})

    async def get_appointment(self, appointment_id: int) -> Appointment:
        """Get an appointment by ID."""
        appointment = await self.appointment_repository.get_by_id(appointment_id)
        if not appointment:
            raise EntityNotFound("Appointment", appointment_id)
        return appointment

    async def list_appointments(self, status: str | None = None) -> list[AppointmentListing]:
        """List concluded appointments for status 'concluidos', pending ones otherwise."""
        return await self.appointment_repository.list_with_client(
            AppointmentStatus.from_query(status)
        )

    async def conclude_appointment(self, appointment_id: int) -> Appointment:
        """
        Mark an appointment as concluded.

        Concluding an appointment that is already concluded succeeds and leaves it unchanged.
        """
        appointment = await self.get_appointment(appointment_id)
        if appointment.concluida:
            logger.info("Appointment %s already concluded", appointment_id)
            return appointment

        appointment.conclude()
        async with self.unit_of_work:
            if not await self.unit_of_work.update(appointment):
                raise EntityNotFound("Appointment", appointment_id)
        return appointment
