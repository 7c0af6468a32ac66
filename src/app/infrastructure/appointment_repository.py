from typing import Optional

from sqlalchemy import select, func, or_

from src.app.core.domain.models import (
    Appointment,
    AppointmentListing,
    AppointmentStatus,
    ClientAppointmentCount,
)
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database
from src.app.infrastructure.entities.appointment_entity import AppointmentEntity
from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.appointment_mapper import AppointmentMapper


class AppointmentRepository(BaseRepository[AppointmentEntity, Appointment]):
    """Repository for Appointment operations, including the client join queries."""

    def __init__(self, db: Database, mapper: AppointmentMapper):
        super().__init__(db, mapper)

    async def get_by_id(self, appointment_id: int) -> Optional[Appointment]:
        """Get an appointment by ID."""
        return await self.find_one(
            select(AppointmentEntity).where(AppointmentEntity.id == appointment_id)
        )

    async def get_by_slot(self, date: str, time: str) -> Optional[Appointment]:
        """Get the appointment booked for a date and time, if any."""
        return await self.find_one(
            select(AppointmentEntity).where(
                AppointmentEntity.date == date,
                AppointmentEntity.time == time,
            )
        )

    async def list_with_client(self, status: AppointmentStatus) -> list[AppointmentListing]:
        """
        List appointments of the given status together with their client's name.

        The join with clients is an inner join: appointments whose client no longer
        exists are left out. Pending appointments include rows where the concluded
        flag was never set.

        Args:
            status: CONCLUDED for completed appointments, PENDING otherwise

        Returns:
            Listings ordered by appointment ID
        """
        if status == AppointmentStatus.CONCLUDED:
            status_filter = AppointmentEntity.concluida.is_(True)
        else:
            status_filter = or_(
                AppointmentEntity.concluida.is_(False),
                AppointmentEntity.concluida.is_(None),
            )

        stmt = (
            select(
                AppointmentEntity.id,
                AppointmentEntity.procedure,
                AppointmentEntity.date,
                AppointmentEntity.time,
                ClientEntity.name,
            )
            .select_from(AppointmentEntity)
            .join(ClientEntity, ClientEntity.id == AppointmentEntity.client_id)
            .where(status_filter)
            .order_by(AppointmentEntity.id)
        )
        rows = await self.find_rows(stmt)
        return [
            AppointmentListing(
                id=appointment_id,
                procedure=procedure,
                date=date,
                time=time,
                client_name=client_name,
            )
            for appointment_id, procedure, date, time, client_name in rows
        ]

    async def count(self) -> int:
        """Total number of appointments, whatever their status."""
        return await self.scalar(select(func.count()).select_from(AppointmentEntity))

    async def count_by_client(self) -> list[ClientAppointmentCount]:
        """Count appointments per existing client, concluded ones included."""
        appointment_count = func.count(AppointmentEntity.id).label("appointment_count")
        stmt = (
            select(ClientEntity.id, ClientEntity.name, appointment_count)
            .select_from(AppointmentEntity)
            .join(ClientEntity, ClientEntity.id == AppointmentEntity.client_id)
            .group_by(ClientEntity.id, ClientEntity.name)
            .order_by(ClientEntity.id)
        )
        rows = await self.find_rows(stmt)
        return [
            ClientAppointmentCount(
                client_id=client_id,
                client_name=client_name,
                appointment_count=count,
            )
            for client_id, client_name, count in rows
        ]
