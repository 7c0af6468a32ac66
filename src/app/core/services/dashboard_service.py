from src.app.core.domain.models import ClientAppointmentCount, DashboardSummary
from src.app.infrastructure.appointment_repository import AppointmentRepository
from src.app.infrastructure.client_repository import ClientRepository


class DashboardService:
    """Read-only aggregates for the dashboard page."""

    def __init__(
        self,
        client_repository: ClientRepository,
        appointment_repository: AppointmentRepository,
    ):
        self.client_repository = client_repository
        self.appointment_repository = appointment_repository

    async def get_summary(self) -> DashboardSummary:
        """Unfiltered totals of appointments and clients."""
        return DashboardSummary(
            total_appointments=await self.appointment_repository.count(),
            total_clients=await self.client_repository.count(),
        )

    async def appointments_by_client(self) -> list[ClientAppointmentCount]:
        """Appointment count per client, for every appointment whose client still exists."""
        return await self.appointment_repository.count_by_client()
