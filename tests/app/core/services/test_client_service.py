import pytest

from src.client.schemas import ClientRequest
from src.shared.exceptions import EntityNotFound, RequiredFieldsMissing


def ana() -> ClientRequest:
    return ClientRequest(name="Ana Souza", birthdate="1990-05-10", phone="11999990000")


@pytest.mark.asyncio
async def test_create_client_successfully(client_service, client_repository):
    # Act
    created_client = await client_service.create_client(ana())

    # Assert
    assert created_client.id is not None
    assert created_client.name == "Ana Souza"
    assert created_client.birthdate == "1990-05-10"
    assert created_client.phone == "11999990000"
    # Verify it was actually saved to the database
    db_client = await client_repository.get_by_id(created_client.id)
    assert db_client == created_client


@pytest.mark.asyncio
async def test_create_client_requires_every_field(client_service, client_repository):
    # Act & Assert
    with pytest.raises(RequiredFieldsMissing):
        await client_service.create_client(ClientRequest(name="Ana", birthdate="1990-05-10"))

    assert await client_repository.count() == 0


@pytest.mark.asyncio
async def test_update_client_replaces_fields(client_service, client_repository):
    # Arrange
    created = await client_service.create_client(ana())

    # Act
    await client_service.update_client(
        created.id, ClientRequest(name="Ana Lima", birthdate="1990-05-11", phone="11888880000")
    )

    # Assert
    db_client = await client_repository.get_by_id(created.id)
    assert db_client.name == "Ana Lima"
    assert db_client.birthdate == "1990-05-11"
    assert db_client.phone == "11888880000"


@pytest.mark.asyncio
async def test_update_client_with_same_values_succeeds(client_service):
    created = await client_service.create_client(ana())

    updated = await client_service.update_client(created.id, ana())

    assert updated == created


@pytest.mark.asyncio
async def test_update_client_raises_not_found(client_service):
    with pytest.raises(EntityNotFound):
        await client_service.update_client(999, ana())


@pytest.mark.asyncio
async def test_update_client_deleted_after_lookup(client_service, client_repository, monkeypatch):
    """A client deleted between the lookup and the write is not brought back."""
    # Arrange
    created = await client_service.create_client(ana())
    await client_service.delete_client(created.id)

    async def stale_lookup(client_id):
        return created

    monkeypatch.setattr(client_service.repository, "get_by_id", stale_lookup)

    # Act & Assert
    with pytest.raises(EntityNotFound):
        await client_service.update_client(
            created.id, ClientRequest(name="Ana Lima", birthdate="1990-05-10", phone="1")
        )

    assert await client_repository.get_by_id(created.id) is None
    assert await client_repository.count() == 0


@pytest.mark.asyncio
async def test_update_client_validates_before_lookup(client_service):
    """Missing fields are reported even for an unknown client."""
    with pytest.raises(RequiredFieldsMissing):
        await client_service.update_client(999, ClientRequest(name="Ana"))


@pytest.mark.asyncio
async def test_delete_client(client_service, client_repository):
    created = await client_service.create_client(ana())

    await client_service.delete_client(created.id)

    assert await client_repository.get_by_id(created.id) is None


@pytest.mark.asyncio
async def test_delete_client_raises_not_found(client_service):
    with pytest.raises(EntityNotFound):
        await client_service.delete_client(999)


@pytest.mark.asyncio
async def test_list_clients_with_search(client_service):
    await client_service.create_client(ana())
    await client_service.create_client(ClientRequest(name="Joana Costa", birthdate="1988-02-02", phone="2"))

    assert [c.name for c in await client_service.list_clients()] == ["Ana Souza", "Joana Costa"]
    assert [c.name for c in await client_service.list_clients("SOUZA")] == ["Ana Souza"]
    assert [c.name for c in await client_service.list_clients("ana")] == ["Ana Souza", "Joana Costa"]
    assert await client_service.list_clients("pedro") == []
