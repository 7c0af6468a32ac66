"""Technical sheet (ficha técnica) operations."""
from src.app.core.domain.models import TechnicalSheet, TECHNICAL_SHEET_FORM_FIELDS
from src.app.core.validation import (
    TECHNICAL_SHEET_CREATE_REQUIRED_FIELDS,
    TECHNICAL_SHEET_UPDATE_REQUIRED_FIELDS,
    require_fields,
)
from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.technical_sheet_repository import TechnicalSheetRepository
from src.client.schemas import (
    CreateTechnicalSheetRequest,
    TechnicalSheetFields,
    UpdateTechnicalSheetRequest,
)
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import EntityNotFound


def _form_values(request: TechnicalSheetFields) -> dict:
    return {
        "datetime": request.datetime,
        "rimel": request.rimel,
        "gestante": request.gestante,
        **{field: getattr(request, field) for field in TECHNICAL_SHEET_FORM_FIELDS},
    }


class TechnicalSheetService:
    """Service for handling TechnicalSheet business logic."""

    def __init__(
        self,
        client_repository: ClientRepository,
        sheet_repository: TechnicalSheetRepository,
        unit_of_work: UnitOfWork,
    ):
        self.client_repository = client_repository
        self.sheet_repository = sheet_repository
        self.unit_of_work = unit_of_work

    async def create_sheet(self, request: CreateTechnicalSheetRequest) -> TechnicalSheet:
        """
        Record a new technical sheet for an existing client.

        Raises:
            RequiredFieldsMissing: If clientId, datetime, rimel or gestante is missing
            EntityNotFound: If the client does not exist
        """
        require_fields(request, TECHNICAL_SHEET_CREATE_REQUIRED_FIELDS)

        client = await self.client_repository.get_by_id(request.client_id)
        if not client:
            raise EntityNotFound("Client", request.client_id)

        sheet = TechnicalSheet(client_id=request.client_id, **_form_values(request))
        async with self.unit_of_work:
            entity = await self.unit_of_work.add(sheet)

        return sheet.model_copy(update={"id": entity.id})

    async def get_latest_sheet(self, client_id: int) -> TechnicalSheet:
        """Get the client's current sheet, i.e. the most recently created one."""
        sheet = await self.sheet_repository.get_latest_for_client(client_id)
        if not sheet:
            raise EntityNotFound("Technical sheet for client", client_id)
        return sheet

    async def update_sheet(self, client_id: int, request: UpdateTechnicalSheetRequest) -> TechnicalSheet:
        """
        Replace every form field of one of the client's sheets.

        The sheet is selected by ``request.id`` when given, and must belong to the
        client. Otherwise the client's latest sheet is updated. Optional fields
        left out of the request are cleared.

        Raises:
            RequiredFieldsMissing: If datetime, rimel or gestante is missing
            EntityNotFound: If no matching sheet exists for the client
        """
        require_fields(request, TECHNICAL_SHEET_UPDATE_REQUIRED_FIELDS)

        if request.id is not None:
            sheet = await self.sheet_repository.get_by_id(request.id)
            if not sheet or sheet.client_id != client_id:
                raise EntityNotFound("Technical sheet", request.id)
        else:
            sheet = await self.get_latest_sheet(client_id)

        updated = sheet.model_copy(update=_form_values(request))
        async with self.unit_of_work:
            if not await self.unit_of_work.update(updated):
                raise EntityNotFound("Technical sheet", updated.id)

        return updated
