"""HTTP client for consuming the Lash Studio API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    AppointmentListResponse,
    AppointmentResponse,
    ClientAppointmentCountResponse,
    ClientListResponse,
    ClientRequest,
    ClientResponse,
    CreateAppointmentRequest,
    CreateTechnicalSheetRequest,
    DashboardResponse,
    SuccessResponse,
    TechnicalSheetResponse,
    UpdateTechnicalSheetRequest,
)


class StudioClient:
    """HTTP client for interacting with the Lash Studio API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the studio client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:3000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    @staticmethod
    def _payload(request) -> dict:
        return request.model_dump(mode="json", by_alias=True, exclude_none=True)

    # =========================================================================
    # Clients
    # =========================================================================

    async def create_client(self, request: ClientRequest) -> ClientResponse:
        """
        Create a new client.

        Raises:
            httpx.HTTPStatusError: If the request fails (400 when a field is missing)
        """
        response: Response = await self.client.post("/api/clients", json=self._payload(request))
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def list_clients(self, search: str | None = None) -> list[ClientResponse]:
        """List clients, optionally filtered by a case-insensitive part of the name."""
        params = {"search": search} if search else None
        response: Response = await self.client.get("/api/clients", params=params)
        response.raise_for_status()
        return ClientListResponse(**response.json()).clients

    async def update_client(self, client_id: int, request: ClientRequest) -> SuccessResponse:
        """
        Replace a client's fields.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.put(
            f"/api/clients/{client_id}", json=self._payload(request)
        )
        response.raise_for_status()
        return SuccessResponse(**response.json())

    async def delete_client(self, client_id: int) -> SuccessResponse:
        response: Response = await self.client.delete(f"/api/clients/{client_id}")
        response.raise_for_status()
        return SuccessResponse(**response.json())

    # =========================================================================
    # Technical sheets
    # =========================================================================

    async def get_technical_sheet(self, client_id: int) -> TechnicalSheetResponse:
        """Get the latest technical sheet of a client."""
        response: Response = await self.client.get(f"/api/technical-sheets/{client_id}")
        response.raise_for_status()
        return TechnicalSheetResponse(**response.json())

    async def create_technical_sheet(self, request: CreateTechnicalSheetRequest) -> TechnicalSheetResponse:
        response: Response = await self.client.post(
            "/api/technical-sheets", json=self._payload(request)
        )
        response.raise_for_status()
        return TechnicalSheetResponse(**response.json())

    async def update_technical_sheet(
        self, client_id: int, request: UpdateTechnicalSheetRequest
    ) -> SuccessResponse:
        """
        Replace the fields of a client's technical sheet.

        Args:
            client_id: ID of the client owning the sheet
            request: New form values; set ``id`` to target a specific sheet

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if no sheet matches)
        """
        response: Response = await self.client.put(
            f"/api/technical-sheets/{client_id}", json=self._payload(request)
        )
        response.raise_for_status()
        return SuccessResponse(**response.json())

    # =========================================================================
    # Appointments
    # =========================================================================

    async def create_appointment(self, request: CreateAppointmentRequest) -> AppointmentResponse:
        """
        Book an appointment.

        Raises:
            httpx.HTTPStatusError: If the request fails (409 when the slot is taken)
        """
        response: Response = await self.client.post("/api/appointments", json=self._payload(request))
        response.raise_for_status()
        return AppointmentResponse(**response.json())

    async def list_appointments(self, status: str | None = None) -> AppointmentListResponse:
        """List pending appointments, or concluded ones with status='concluidos'."""
        params = {"status": status} if status else None
        response: Response = await self.client.get("/api/appointments", params=params)
        response.raise_for_status()
        return AppointmentListResponse(**response.json())

    async def conclude_appointment(self, appointment_id: int) -> SuccessResponse:
        response: Response = await self.client.put(f"/api/appointments/{appointment_id}/conclude")
        response.raise_for_status()
        return SuccessResponse(**response.json())

    # =========================================================================
    # Dashboard
    # =========================================================================

    async def get_dashboard(self) -> DashboardResponse:
        response: Response = await self.client.get("/api/dashboard")
        response.raise_for_status()
        return DashboardResponse(**response.json())

    async def get_appointments_by_client(self) -> list[ClientAppointmentCountResponse]:
        response: Response = await self.client.get("/api/appointments-by-client")
        response.raise_for_status()
        return [ClientAppointmentCountResponse(**row) for row in response.json()]
