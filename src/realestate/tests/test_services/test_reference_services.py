import pytest

from realestate.exceptions import EntityNotFoundError
from realestate.services import DealTypeService, GeographyService, PropertyTypeService


@pytest.fixture
def geography(db_session) -> GeographyService:
    return GeographyService(db_session)


@pytest.mark.asyncio
class TestTypeLookups:

    async def test_find_by_name(self, db_session, reference_data):
        assert (await DealTypeService(db_session).find_by_name("Продажа")).id == reference_data.sale
        assert (await PropertyTypeService(db_session).find_by_name("Квартира")).id == reference_data.flat

    async def test_unknown_name_is_not_found(self, db_session, reference_data):
        with pytest.raises(EntityNotFoundError) as exc_info:
            await PropertyTypeService(db_session).find_by_name("Замок")

        assert exc_info.value.entity_type == "PropertyType"
        assert "Замок" in exc_info.value.message

    async def test_types_are_listed_by_name(self, db_session, reference_data):
        names = [t.deal_type_name for t in await DealTypeService(db_session).find_all()]
        assert names == ["Аренда", "Продажа"]


@pytest.mark.asyncio
class TestGeography:

    async def test_missing_level_is_reported_under_its_own_name(self, geography, reference_data):
        """
        Behavior:
            - A missing street id is reported as a missing "Street", not as a generic geography error.
        """
        with pytest.raises(EntityNotFoundError) as exc_info:
            await geography.find_street_by_id(123_456)

        assert exc_info.value.entity_type == "Street"
        assert exc_info.value.entity_id == 123_456

    async def test_region_by_code(self, geography, reference_data):
        region = await geography.find_region_by_code("77")
        assert region.id == reference_data.moscow_region

    async def test_unknown_region_code_is_not_found(self, geography, reference_data):
        with pytest.raises(EntityNotFoundError):
            await geography.find_region_by_code("99")

    async def test_cities_of_a_country(self, geography, reference_data):
        cities = await geography.find_cities_by_country(reference_data.russia)
        assert [c.city_name for c in cities] == ["Москва", "Санкт-Петербург"]

    async def test_districts_of_a_country(self, geography, reference_data):
        districts = await geography.find_districts_by_country(reference_data.russia)
        assert {d.id for d in districts} == {reference_data.tverskoy, reference_data.central}

    async def test_search_districts_by_city(self, geography, reference_data):
        rows = await geography.search_districts(city_id=reference_data.moscow)

        assert [r.district_name for r in rows] == ["Тверской"]
        assert rows[0].region_name == "Москва"

    async def test_street_by_name_and_city(self, geography, reference_data):
        street = await geography.find_street_by_name_and_city("Невский проспект", reference_data.spb)
        assert street.id == reference_data.nevsky

    async def test_street_by_name_in_wrong_city_is_not_found(self, geography, reference_data):
        with pytest.raises(EntityNotFoundError):
            await geography.find_street_by_name_and_city("Невский проспект", reference_data.moscow)
