from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import select

from realestate.exceptions import DataAccessError, DbFailureKind, FieldCoercionError
from realestate.exceptions.integrity_classifier import ConstraintKind
from realestate.models import Client, DealType, Deal
from realestate.repositories.base_repository import BaseRepository
from realestate.repositories.client_repository import ClientRepository


@pytest.fixture
def clients(db_session) -> ClientRepository:
    return ClientRepository(db_session)


@pytest.mark.asyncio
class TestBaseRepositoryCreate:

    async def test_create_returns_entity_with_generated_id(self, clients):
        """
        Behavior:
            - create(...) inserts the row and returns it with its id populated.

        Importance:
            - Services return the new id to API callers straight from this object.

        Postconditions:
            - The row lives until the test transaction is rolled back.
        """
        client = await clients.create(first_name="Анна", last_name="Смирнова", email="anna@example.com")

        assert isinstance(client.id, int)
        assert client.first_name == "Анна"
        assert (await clients.find_by_id(client.id)).email == "anna@example.com"

    async def test_create_missing_required_column_is_an_integrity_violation(self, clients):
        with pytest.raises(DataAccessError) as exc_info:
            await clients.create(first_name="Анна")

        assert exc_info.value.kind is DbFailureKind.INTEGRITY_VIOLATION
        assert exc_info.value.integrity.kind is ConstraintKind.NOT_NULL
        assert exc_info.value.operation == "INSERT"

    async def test_create_with_dangling_foreign_key_fails(self, db_session, reference_data, make_client, make_realtor):
        """
        Behavior:
            - A deal pointing at a property id that does not exist is rejected by the database.

        Importance:
            - The foreign keys are the last line of defence behind service checks.
        """
        client = await make_client()
        realtor = await make_realtor()
        repo = BaseRepository(db_session, Deal)

        with pytest.raises(DataAccessError) as exc_info:
            await repo.create(
                deal_date=date(2024, 1, 1),
                deal_cost=Decimal("100"),
                id_property=999_999,
                id_realtor=realtor.id,
                id_client=client.id,
                id_deal_type=reference_data.sale,
            )

        assert exc_info.value.kind is DbFailureKind.INTEGRITY_VIOLATION

    async def test_unknown_attribute_is_classified_as_other(self, clients):
        with pytest.raises(DataAccessError) as exc_info:
            await clients.create(first_name="Анна", last_name="Смирнова", salary=10)

        assert exc_info.value.kind is DbFailureKind.OTHER


@pytest.mark.asyncio
class TestBaseRepositoryRead:

    async def test_find_by_id_missing_is_not_found(self, clients):
        with pytest.raises(DataAccessError) as exc_info:
            await clients.find_by_id(424242)

        assert exc_info.value.kind is DbFailureKind.NOT_FOUND
        assert exc_info.value.entity == "Client"
        assert exc_info.value.entity_id == 424242

    async def test_get_and_exists(self, clients, make_client):
        client = await make_client()

        assert (await clients.get(client.id)).id == client.id
        assert await clients.get(424242) is None
        assert await clients.exists(client.id) is True
        assert await clients.exists(424242) is False

    async def test_find_all_uses_canonical_order(self, clients, make_client):
        await make_client(last_name="Яковлев", first_name="Борис")
        await make_client(last_name="Абрамов", first_name="Олег")
        await make_client(last_name="Абрамов", first_name="Антон")

        names = [(c.last_name, c.first_name) for c in await clients.find_all()]

        assert names == [("Абрамов", "Антон"), ("Абрамов", "Олег"), ("Яковлев", "Борис")]

    async def test_count(self, clients, make_client):
        before = await clients.count()
        await make_client()
        await make_client()

        assert await clients.count() == before + 2

    async def test_exists_by_field_can_exclude_own_row(self, clients, make_client):
        """
        Behavior:
            - A value held by row A is "taken" for everyone except row A itself.

        Importance:
            - Re-saving an entity with its own email must not be reported as a duplicate.
        """
        client = await make_client(email="own@example.com")

        assert await clients.exists_by_field(Client.email, "own@example.com") is True
        assert await clients.exists_by_field(Client.email, "own@example.com", exclude_id=client.id) is False

    async def test_lock_reports_existence(self, clients, make_client):
        client = await make_client()

        assert await clients.lock(client.id) is True
        assert await clients.lock(424242) is False


@pytest.mark.asyncio
class TestBaseRepositoryUpdate:

    async def test_update_touches_only_present_keys(self, clients, make_client):
        client = await make_client(first_name="Иван", last_name="Иванов", phone="+79001112233")

        updated = await clients.update(client.id, {"firstName": "Игорь"})
        stored = await clients.find_by_id(client.id)

        assert updated is True
        assert stored.first_name == "Игорь"
        assert stored.last_name == "Иванов"
        assert stored.phone == "+79001112233"

    @pytest.mark.parametrize("updates", [None, {}, {"unknownField": "x"}])
    async def test_nothing_recognized_reports_not_updated(self, clients, make_client, updates):
        """
        Behavior:
            - Empty, absent or only-unknown maps return False and change nothing.

        Importance:
            - The API answers 404 "not updated" for these instead of a silent success.
        """
        client = await make_client(first_name="Иван")

        assert await clients.update(client.id, updates) is False
        assert (await clients.find_by_id(client.id)).first_name == "Иван"

    async def test_update_missing_row_reports_not_updated(self, clients):
        assert await clients.update(424242, {"firstName": "Игорь"}) is False

    async def test_update_with_bad_value_raises_coercion_error(self, clients, make_client):
        client = await make_client()

        with pytest.raises(FieldCoercionError) as exc_info:
            await clients.update(client.id, {"firstName": ""})

        assert "firstName" in exc_info.value.field_errors

    async def test_read_only_repository_refuses_updates(self, db_session):
        repo = BaseRepository(db_session, DealType)

        with pytest.raises(TypeError):
            await repo.update(1, {"dealTypeName": "x"})


@pytest.mark.asyncio
class TestBaseRepositoryDelete:

    async def test_delete_existing_and_missing(self, clients, make_client, db_session):
        client = await make_client()
        client_id = client.id

        assert await clients.delete(client_id) is True
        assert await clients.delete(client_id) is False

        result = await db_session.execute(select(Client.id).where(Client.id == client_id))
        assert result.scalar() is None

    async def test_delete_referenced_row_is_an_integrity_violation(self, db_session, make_deal):
        deal = await make_deal()
        client_id = deal.id_client

        with pytest.raises(DataAccessError) as exc_info:
            await ClientRepository(db_session).delete(client_id)

        assert exc_info.value.kind is DbFailureKind.INTEGRITY_VIOLATION
