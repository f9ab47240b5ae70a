from unittest.mock import AsyncMock

import pytest

from realestate.exceptions import BusinessRuleViolationError, DataValidationError, EntityNotFoundError
from realestate.schemas import ClientCreate, RealtorCreate
from realestate.services import ClientService, RealtorService
from realestate.services.person_service import PersonService


@pytest.fixture
def realtor_service(db_session) -> RealtorService:
    return RealtorService(db_session)


@pytest.fixture
def client_service(db_session) -> ClientService:
    return ClientService(db_session)


def _realtor(**overrides) -> RealtorCreate:
    data = {
        "first_name": "Мария",
        "last_name": "Соколова",
        "phone": "+7 (900) 555-12-34",
        "email": "sokolova@example.com",
        "experience_years": 8,
    }
    data.update(overrides)
    return RealtorCreate(**data)


@pytest.mark.asyncio
class TestRealtorLifecycle:

    async def test_create_fetch_update_delete(self, realtor_service):
        """
        Behavior:
            - save() returns the new id and the realtor can be read back.
            - Updating a realtor with their own email is not a duplicate.
            - delete_by_id() removes a realtor without deals.

        Importance:
            - This is the everyday path of the realtors screen.
        """
        realtor_id = await realtor_service.save(_realtor())

        realtor = await realtor_service.find_by_id(realtor_id)
        assert realtor.last_name == "Соколова"
        assert realtor.experience_years == 8

        assert await realtor_service.update(realtor_id, {"email": "sokolova@example.com", "experienceYears": "9"})
        assert (await realtor_service.find_by_id(realtor_id)).experience_years == 9

        assert await realtor_service.delete_by_id(realtor_id) is True
        assert await realtor_service.exists(realtor_id) is False

    async def test_duplicate_email_is_a_field_error(self, realtor_service, make_realtor):
        await make_realtor(email="taken@example.com")

        with pytest.raises(DataValidationError) as exc_info:
            await realtor_service.save(_realtor(email="taken@example.com"))

        assert set(exc_info.value.field_errors) == {"email"}

    async def test_duplicate_phone_on_update_is_a_field_error(self, realtor_service, make_realtor):
        first = await make_realtor(phone="+79001234567")
        second = await make_realtor()
        second_id = second.id

        with pytest.raises(DataValidationError) as exc_info:
            await realtor_service.update(second_id, {"phone": first.phone})

        assert "phone" in exc_info.value.field_errors

    async def test_all_invalid_fields_are_reported_at_once(self, realtor_service):
        with pytest.raises(DataValidationError) as exc_info:
            await realtor_service.save(_realtor(first_name="", email="bad", phone="123", experience_years=150))

        assert set(exc_info.value.field_errors) == {"firstName", "email", "phone", "experienceYears"}
        assert await realtor_service.count() == 0

    async def test_experience_search(self, realtor_service, make_realtor):
        senior = await make_realtor(experience_years=15)
        await make_realtor(experience_years=1)

        found = await realtor_service.find_by_experience_at_least(10)

        assert [r.id for r in found] == [senior.id]

    async def test_negative_experience_threshold_is_rejected(self, realtor_service):
        with pytest.raises(DataValidationError) as exc_info:
            await realtor_service.find_by_experience_at_least(-1)
        assert "minExperience" in exc_info.value.field_errors


@pytest.mark.asyncio
class TestPersonUpdateEdgeCases:

    async def test_empty_update_map_is_rejected(self, client_service, make_client):
        client = await make_client()

        with pytest.raises(DataValidationError) as exc_info:
            await client_service.update(client.id, {})

        assert "updates" in exc_info.value.field_errors

    async def test_only_unknown_keys_updates_nothing(self, client_service, make_client):
        """
        Behavior:
            - Keys the client has no field for are ignored; with nothing left the update reports False.
        """
        client = await make_client()

        assert await client_service.update(client.id, {"nickname": "Ваня"}) is False

    async def test_update_of_missing_client_is_not_found(self, client_service):
        with pytest.raises(EntityNotFoundError):
            await client_service.update(999_999, {"firstName": "Иван"})

    async def test_find_by_email_missing_is_not_found(self, client_service):
        with pytest.raises(EntityNotFoundError) as exc_info:
            await client_service.find_by_email("ghost@example.com")
        assert "ghost@example.com" in exc_info.value.message

    async def test_find_by_id_missing_is_not_found(self, client_service):
        with pytest.raises(EntityNotFoundError) as exc_info:
            await client_service.find_by_id(424242)
        assert exc_info.value.entity_id == 424242

    async def test_client_search_by_last_name(self, client_service, make_client):
        target = await make_client(last_name="Orlova")
        await make_client(last_name="Belova")

        assert [c.id for c in await client_service.search(last_name="orl")] == [target.id]

    async def test_save_client_without_contacts(self, client_service):
        client_id = await client_service.save(ClientCreate(first_name="Олег", last_name="Сидоров"))

        client = await client_service.find_by_id(client_id)
        assert client.email is None
        assert client.phone is None


@pytest.mark.asyncio
class TestDeleteWithDeals:

    async def test_realtor_with_deals_cannot_be_deleted(self, realtor_service, make_deal):
        """
        Behavior:
            - Deleting a realtor who still has a deal raises BusinessRuleViolationError.
            - The realtor row is still there afterwards.

        Importance:
            - Deals must never lose their realtor.
        """
        deal = await make_deal()
        realtor_id = deal.id_realtor

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await realtor_service.delete_by_id(realtor_id)

        assert exc_info.value.rule_name == "REALTOR_HAS_RELATED_DEALS"
        assert exc_info.value.http_status() == 409
        assert str(realtor_id) in exc_info.value.message
        assert await realtor_service.exists(realtor_id) is True

    async def test_client_with_deals_cannot_be_deleted(self, client_service, make_deal):
        deal = await make_deal()
        client_id = deal.id_client

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await client_service.delete_by_id(client_id)

        assert exc_info.value.rule_name == "CLIENT_HAS_RELATED_DEALS"
        assert await client_service.exists(client_id) is True

    async def test_deleting_missing_client_returns_false(self, client_service):
        assert await client_service.delete_by_id(999_999) is False


class TestPersonServiceContract:

    def test_subclass_without_deal_check_cannot_be_built(self):
        """
        Behavior:
            - A person service that does not say how to find its deals fails at construction,
              not on the first delete.
        """

        class IncompleteService(PersonService):
            entity_type = "Client"
            repository_cls = ClientService.repository_cls

        with pytest.raises(TypeError):
            IncompleteService(AsyncMock())
