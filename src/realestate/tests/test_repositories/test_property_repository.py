from decimal import Decimal

import pytest

from realestate.exceptions import DataAccessError, DbFailureKind
from realestate.repositories.property_repository import PropertyRepository


@pytest.fixture
def properties(db_session) -> PropertyRepository:
    return PropertyRepository(db_session)


@pytest.mark.asyncio
class TestPropertyFinders:

    async def test_price_range_is_inclusive_and_ordered_by_cost(self, properties, make_property):
        """
        Behavior:
            - Properties costing exactly min or max are included.
            - Results come cheapest first.
        """
        low = await make_property(cost=Decimal("1000000.00"))
        high = await make_property(cost=Decimal("3000000.00"))
        await make_property(cost=Decimal("3000000.01"))
        middle = await make_property(cost=Decimal("2000000.00"))

        found = await properties.find_by_price_range(Decimal("1000000"), Decimal("3000000"))

        assert [p.id for p in found] == [low.id, middle.id, high.id]

    async def test_find_by_city_and_type(self, properties, make_property, reference_data):
        moscow_flat = await make_property()
        spb_house = await make_property(
            id_property_type=reference_data.house,
            id_region=reference_data.spb_region,
            id_city=reference_data.spb,
            id_district=reference_data.central,
            id_street=reference_data.nevsky,
        )

        assert [p.id for p in await properties.find_by_city_id(reference_data.spb)] == [spb_house.id]
        assert [p.id for p in await properties.find_by_property_type_id(reference_data.flat)] == [moscow_flat.id]


@pytest.mark.asyncio
class TestPropertyJoinedReads:

    async def test_with_details_carries_every_ancestor_name(self, properties, make_property):
        prop = await make_property(house_letter="А")
        prop_id = prop.id

        details = await properties.find_by_id_with_details(prop_id)

        assert details.id_property == prop_id
        assert details.property_type_name == "Квартира"
        assert details.street_name == "Тверская"
        assert details.district_name == "Тверской"
        assert details.city_name == "Москва"
        assert details.region_code == "77"
        assert details.country_name == "Россия"
        assert details.house_letter == "А"
        assert details.cost == Decimal("12000000.00")

    async def test_with_details_for_missing_id_raises_not_found(self, properties):
        with pytest.raises(DataAccessError) as exc_info:
            await properties.find_by_id_with_details(999_999)

        assert exc_info.value.kind is DbFailureKind.NOT_FOUND
        assert exc_info.value.entity_id == 999_999

    async def test_table_rows_truncate_description(self, properties, make_property):
        """
        Behavior:
            - The table shows at most the first 100 characters of the description.

        Importance:
            - Long descriptions would otherwise blow up the property list layout.
        """
        await make_property(description="д" * 250)
        await make_property(description=None, cost=Decimal("13000000.00"))

        rows = await properties.find_all_for_table()

        assert len(rows[0].short_description) == 100
        assert rows[1].short_description is None

    async def test_search_filters_combine(self, properties, make_property, reference_data):
        arbat = await make_property(id_street=reference_data.arbat, cost=Decimal("9000000"))
        await make_property(id_street=reference_data.arbat, cost=Decimal("25000000"))
        await make_property(cost=Decimal("9500000"))

        rows = await properties.search(
            max_price=Decimal("10000000"),
            city_id=reference_data.moscow,
            street_id=reference_data.arbat,
        )

        assert [r.id_property for r in rows] == [arbat.id]
        assert rows[0].street_name == "Арбат"

    async def test_search_without_criteria_returns_all_rows(self, properties, make_property):
        await make_property()
        await make_property()

        assert len(await properties.search()) == 2

    async def test_report_rows_are_ordered_by_id(self, properties, make_property):
        expensive = await make_property(cost=Decimal("50000000"))
        cheap = await make_property(cost=Decimal("1000000"))

        rows = await properties.find_all_for_report()

        assert [r.id_property for r in rows] == sorted([expensive.id, cheap.id])
        assert rows[0].region_name == "Москва"
