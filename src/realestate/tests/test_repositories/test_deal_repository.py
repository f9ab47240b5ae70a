from datetime import date
from decimal import Decimal

import pytest

from realestate.repositories.deal_repository import DealRepository
from realestate.repositories.payment_repository import PaymentRepository


@pytest.fixture
def deals(db_session) -> DealRepository:
    return DealRepository(db_session)


@pytest.fixture
def payments(db_session) -> PaymentRepository:
    return PaymentRepository(db_session)


@pytest.mark.asyncio
class TestDealFinders:

    async def test_date_range_is_inclusive_and_newest_first(self, deals, make_deal):
        """
        Behavior:
            - Deals dated on either end of the window are included.
            - Results come newest first.
        """
        first = await make_deal(deal_date=date(2024, 1, 1))
        last = await make_deal(deal_date=date(2024, 1, 31))
        await make_deal(deal_date=date(2024, 2, 1))

        found = await deals.find_by_date_range(date(2024, 1, 1), date(2024, 1, 31))

        assert [d.id for d in found] == [last.id, first.id]

    async def test_same_day_deals_are_ordered_by_cost_descending(self, deals, make_deal):
        cheap = await make_deal(deal_cost=Decimal("100"))
        dear = await make_deal(deal_cost=Decimal("900"))

        assert [d.id for d in await deals.find_by_date(date(2024, 3, 15))] == [dear.id, cheap.id]

    async def test_cost_range(self, deals, make_deal):
        inside = await make_deal(deal_cost=Decimal("5000000"))
        await make_deal(deal_cost=Decimal("4999999.99"))

        found = await deals.find_by_cost_range(Decimal("5000000"), Decimal("6000000"))

        assert [d.id for d in found] == [inside.id]

    async def test_total_amount(self, deals, make_deal):
        assert await deals.total_amount() == Decimal("0")

        await make_deal(deal_cost=Decimal("100.50"))
        await make_deal(deal_cost=Decimal("200.25"))

        assert await deals.total_amount() == Decimal("300.75")

    async def test_exists_for_parents(self, deals, make_deal, make_client):
        """
        Behavior:
            - exists_for_* reports whether a client, realtor or property is used by a deal.

        Importance:
            - Services refuse to delete a parent that still has deals.
        """
        deal = await make_deal()
        idle = await make_client()

        assert await deals.exists_for_client(deal.id_client) is True
        assert await deals.exists_for_realtor(deal.id_realtor) is True
        assert await deals.exists_for_property(deal.id_property) is True
        assert await deals.exists_for_client(idle.id) is False


@pytest.mark.asyncio
class TestDealJoinedReads:

    async def test_details_expose_every_related_entity(self, deals, make_deal, make_client, make_realtor):
        client = await make_client(first_name="Иван", last_name="Иванов", middle_name="Иванович")
        realtor = await make_realtor(experience_years=7)
        deal = await make_deal(id_client=client.id, id_realtor=realtor.id)
        deal_id = deal.id

        details = await deals.find_by_id_with_details(deal_id)

        assert details.id_deal == deal_id
        assert details.client_middle_name == "Иванович"
        assert details.realtor_experience_years == 7
        assert details.property_house_number == "10"
        assert details.deal_type_name == "Продажа"
        assert details.street_name == "Тверская"
        assert details.country_name == "Россия"

    async def test_table_row_formats_names_and_short_address(self, deals, make_deal, make_client, make_property):
        """
        Behavior:
            - client_name is "Last First Middle" with the middle name only when present.
            - property_address is "street, house-apartment", dropping "-apartment" when there is none.
        """
        client = await make_client(first_name="Анна", last_name="Смирнова", middle_name=None)
        house = await make_property(house_number="7", apartment_number=None)
        await make_deal(id_client=client.id, id_property=house.id)

        rows = await deals.find_all_for_table()

        assert rows[0].client_name == "Смирнова Анна"
        assert rows[0].property_address == "Тверская, 7"
        assert rows[0].realtor_name == "Петров Петр"

    async def test_table_row_address_with_apartment(self, deals, make_deal):
        await make_deal()

        assert (await deals.find_all_for_table())[0].property_address == "Тверская, 10-25"

    async def test_search_by_window_realtor_and_type(self, deals, make_deal, make_realtor, reference_data):
        realtor = await make_realtor()
        target = await make_deal(id_realtor=realtor.id, deal_date=date(2024, 5, 10))
        await make_deal(id_realtor=realtor.id, deal_date=date(2024, 5, 10), id_deal_type=reference_data.rent)
        await make_deal(deal_date=date(2024, 5, 10))

        rows = await deals.search(
            start=date(2024, 5, 10),
            end=date(2024, 5, 10),
            realtor_id=realtor.id,
            deal_type_id=reference_data.sale,
        )

        assert [r.id_deal for r in rows] == [target.id]

    async def test_report_rows(self, deals, make_deal):
        await make_deal()

        [row] = await deals.find_all_for_report()

        assert row.deal_date == date(2024, 3, 15)
        assert row.deal_cost == Decimal("11500000.00")
        assert row.deal_type_name == "Продажа"


@pytest.mark.asyncio
class TestPaymentSearch:

    async def test_end_date_includes_the_whole_day(self, payments, make_deal, make_payment):
        """
        Behavior:
            - A payment dated on the end date is included.
            - A payment dated the day after the end date is excluded.

        Importance:
            - "Payments up to March 31" must include March 31 itself.
        """
        deal = await make_deal()
        on_end = await make_payment(id_deal=deal.id, payment_date=date(2024, 3, 31))
        await make_payment(id_deal=deal.id, payment_date=date(2024, 4, 1))
        on_start = await make_payment(id_deal=deal.id, payment_date=date(2024, 3, 1))
        await make_payment(id_deal=deal.id, payment_date=date(2024, 2, 29))

        rows = await payments.search(start=date(2024, 3, 1), end=date(2024, 3, 31))

        assert [r.id_payment for r in rows] == [on_end.id, on_start.id]

    async def test_search_by_deal(self, payments, make_payment):
        target = await make_payment()
        await make_payment()

        rows = await payments.search(deal_id=target.id_deal)

        assert [r.id_payment for r in rows] == [target.id]

    async def test_table_rows_carry_city_address(self, payments, make_payment):
        await make_payment()

        [row] = await payments.find_all_with_details()

        assert row.property_address == "Москва, Тверская, 10-25"
        assert row.client_name == "Иванов Иван"
        assert row.deal_date == date(2024, 3, 15)

    async def test_find_by_deal_id_newest_first(self, payments, make_deal, make_payment):
        deal = await make_deal()
        older = await make_payment(id_deal=deal.id, payment_date=date(2024, 3, 16))
        newer = await make_payment(id_deal=deal.id, payment_date=date(2024, 3, 25))

        assert [p.id for p in await payments.find_by_deal_id(deal.id)] == [newer.id, older.id]

    async def test_report_rows(self, payments, make_payment):
        await make_payment(amount=Decimal("250000.00"))

        [row] = await payments.find_all_for_report()

        assert row.amount == Decimal("250000.00")
        assert row.deal_type_name == "Продажа"
        assert row.deal_cost == Decimal("11500000.00")
