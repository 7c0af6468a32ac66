import pytest
import pytest_asyncio

from src.client.schemas import ClientRequest, CreateAppointmentRequest
from src.shared.exceptions import ConflictingEntityFound, EntityNotFound, RequiredFieldsMissing


@pytest_asyncio.fixture
async def client_id(client_service):
    client = await client_service.create_client(
        ClientRequest(name="Ana", birthdate="1990-05-10", phone="119")
    )
    return client.id


def booking(client_id: int, date: str = "2025-01-01", time: str = "14:00") -> CreateAppointmentRequest:
    return CreateAppointmentRequest(client_id=client_id, procedure="Volume russo", date=date, time=time)


@pytest.mark.asyncio
async def test_create_appointment(appointment_service, appointment_repository, client_id):
    appointment = await appointment_service.create_appointment(booking(client_id))

    assert appointment.id is not None
    assert appointment.client_id == client_id
    assert appointment.concluida is False
    assert await appointment_repository.get_by_id(appointment.id) == appointment


@pytest.mark.asyncio
async def test_create_appointment_requires_fields(appointment_service, client_id):
    with pytest.raises(RequiredFieldsMissing) as exc_info:
        await appointment_service.create_appointment(
            CreateAppointmentRequest(client_id=client_id, procedure="", date="2025-01-01")
        )

    assert exc_info.value.missing == ["procedure", "time"]


@pytest.mark.asyncio
async def test_create_appointment_for_unknown_client(appointment_service):
    with pytest.raises(EntityNotFound):
        await appointment_service.create_appointment(booking(999))


@pytest.mark.asyncio
async def test_same_slot_conflicts(appointment_service, appointment_repository, client_id):
    await appointment_service.create_appointment(booking(client_id))

    with pytest.raises(ConflictingEntityFound, match="2025-01-01 14:00"):
        await appointment_service.create_appointment(booking(client_id))

    assert await appointment_repository.count() == 1


@pytest.mark.asyncio
async def test_concurrent_booking_of_same_slot_conflicts(
    appointment_service, appointment_repository, client_id, monkeypatch
):
    """A booking that passes the slot check but loses on the unique index is a conflict."""
    await appointment_service.create_appointment(booking(client_id))

    async def slot_looks_free(date, time):
        return None

    monkeypatch.setattr(appointment_service.appointment_repository, "get_by_slot", slot_looks_free)

    with pytest.raises(ConflictingEntityFound, match="2025-01-01 14:00"):
        await appointment_service.create_appointment(booking(client_id))

    assert await appointment_repository.count() == 1


@pytest.mark.asyncio
async def test_concluded_appointment_still_holds_its_slot(appointment_service, client_id):
    appointment = await appointment_service.create_appointment(booking(client_id))
    await appointment_service.conclude_appointment(appointment.id)

    with pytest.raises(ConflictingEntityFound):
        await appointment_service.create_appointment(booking(client_id))


@pytest.mark.asyncio
async def test_different_slots_both_succeed(appointment_service, appointment_repository, client_id):
    await appointment_service.create_appointment(booking(client_id, time="14:00"))
    await appointment_service.create_appointment(booking(client_id, time="15:00"))
    await appointment_service.create_appointment(booking(client_id, date="2025-01-02", time="14:00"))

    assert await appointment_repository.count() == 3


@pytest.mark.asyncio
async def test_conclude_appointment(appointment_service, appointment_repository, client_id):
    appointment = await appointment_service.create_appointment(booking(client_id))

    concluded = await appointment_service.conclude_appointment(appointment.id)

    assert concluded.concluida is True
    assert (await appointment_repository.get_by_id(appointment.id)).concluida is True


@pytest.mark.asyncio
async def test_conclude_twice_succeeds(appointment_service, appointment_repository, client_id):
    appointment = await appointment_service.create_appointment(booking(client_id))

    await appointment_service.conclude_appointment(appointment.id)
    again = await appointment_service.conclude_appointment(appointment.id)

    assert again.concluida is True
    assert (await appointment_repository.get_by_id(appointment.id)).concluida is True


@pytest.mark.asyncio
async def test_conclude_unknown_appointment(appointment_service):
    with pytest.raises(EntityNotFound):
        await appointment_service.conclude_appointment(999)


@pytest.mark.asyncio
async def test_list_appointments_by_status(appointment_service, client_id):
    first = await appointment_service.create_appointment(booking(client_id, time="09:00"))
    second = await appointment_service.create_appointment(booking(client_id, time="10:00"))
    await appointment_service.conclude_appointment(second.id)

    pending = await appointment_service.list_appointments()
    concluded = await appointment_service.list_appointments("concluidos")
    other = await appointment_service.list_appointments("whatever")

    assert [a.id for a in pending] == [first.id]
    assert [a.id for a in concluded] == [second.id]
    assert other == pending
    assert concluded[0].client_name == "Ana"
