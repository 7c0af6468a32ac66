import pytest
import pytest_asyncio

from src.app.core.domain.models import TechnicalSheet
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.database.entity_mapper import EntityMapper

from src.app.infrastructure.technical_sheet_repository import TechnicalSheetRepository
from src.app.infrastructure.mappers.technical_sheet_mapper import TechnicalSheetMapper


@pytest_asyncio.fixture
async def sheet_repository(clean_database):
    return TechnicalSheetRepository(clean_database, TechnicalSheetMapper())


@pytest_asyncio.fixture
async def unit_of_work(clean_database):
    entity_mapper = EntityMapper(
        entity_mappings={
            TechnicalSheet: TechnicalSheetMapper.to_entity,
        }
    )
    return UnitOfWork(clean_database, entity_mapper)


def make_sheet(client_id: int, datetime: str, **fields) -> TechnicalSheet:
    return TechnicalSheet(client_id=client_id, datetime=datetime, rimel="nao", gestante="nao", **fields)


@pytest.mark.asyncio
async def test_get_by_id_maps_every_field(sheet_repository, unit_of_work):
    """Test that optional form fields survive a round trip through the table."""
    sheet = make_sheet(
        1,
        "2025-01-01T10:00",
        alergia="sim",
        especificar_alergia="latex",
        mapping="gatinho",
        modelo_fios="fio a fio",
        observacao="sensivel ao adesivo",
    )
    async with unit_of_work:
        entity = await unit_of_work.add(sheet)

    retrieved = await sheet_repository.get_by_id(entity.id)

    assert retrieved == sheet.model_copy(update={"id": entity.id})
    assert retrieved.tireoide is None


@pytest.mark.asyncio
async def test_get_latest_for_client_returns_highest_id(sheet_repository, unit_of_work):
    async with unit_of_work:
        await unit_of_work.add(make_sheet(1, "2025-01-01T10:00"))
        await unit_of_work.add(make_sheet(2, "2025-01-02T10:00"))
        latest = await unit_of_work.add(make_sheet(1, "2024-12-31T10:00"))
        await unit_of_work.add(make_sheet(2, "2025-01-03T10:00"))

    retrieved = await sheet_repository.get_latest_for_client(1)

    # Latest by creation, not by the datetime field
    assert retrieved is not None
    assert retrieved.id == latest.id
    assert retrieved.datetime == "2024-12-31T10:00"


@pytest.mark.asyncio
async def test_get_latest_for_client_without_sheets(sheet_repository, unit_of_work):
    async with unit_of_work:
        await unit_of_work.add(make_sheet(1, "2025-01-01T10:00"))

    assert await sheet_repository.get_latest_for_client(2) is None
