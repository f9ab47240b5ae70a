"""Payment data access."""

from datetime import date, timedelta

from sqlalchemy import Select, select

from realestate.models import City, Client, Deal, DealType, Payment, Property, Street
from realestate.schemas.views import PaymentReportRow, PaymentTableRow

from .base_repository import BaseRepository
from .expressions import city_address, full_name
from .fields import FieldRegistry, FieldSpec, integer, iso_date, positive_decimal
from .filters import apply_filters, at_least, below, equals
from .row_mappers import map_payment_report_row, map_payment_table_row


def _table_select() -> Select:
    return (
        select(
            Payment.id.label("id_payment"),
            Payment.payment_date,
            Payment.amount,
            Deal.id.label("id_deal"),
            Deal.deal_date,
            full_name(Client.last_name, Client.first_name, Client.middle_name).label("client_name"),
            city_address(City.city_name, Street.street_name, Property.house_number, Property.apartment_number)
            .label("property_address"),
        )
        .select_from(Payment)
        .join(Deal, Deal.id == Payment.id_deal)
        .join(Client, Client.id == Deal.id_client)
        .join(Property, Property.id == Deal.id_property)
        .join(Street, Street.id == Property.id_street)
        .join(City, City.id == Property.id_city)
    )


def _report_select() -> Select:
    return (
        select(
            Payment.id.label("id_payment"),
            Payment.payment_date,
            Payment.amount,
            full_name(Client.last_name, Client.first_name, Client.middle_name).label("client_name"),
            DealType.deal_type_name,
            Deal.deal_cost,
        )
        .select_from(Payment)
        .join(Deal, Deal.id == Payment.id_deal)
        .join(Client, Client.id == Deal.id_client)
        .join(DealType, DealType.id == Deal.id_deal_type)
    )


class PaymentRepository(BaseRepository[Payment]):
    model = Payment
    default_order = (Payment.payment_date.desc(), Payment.id.desc())
    update_fields = FieldRegistry({
        "paymentDate": FieldSpec(Payment.payment_date, iso_date),
        "amount": FieldSpec(Payment.amount, positive_decimal),
        "idDeal": FieldSpec(Payment.id_deal, integer),
    })

    async def find_by_deal_id(self, deal_id: int) -> list[Payment]:
        return await self.find_where(select(Payment).where(Payment.id_deal == deal_id))

    async def find_all_with_details(self) -> list[PaymentTableRow]:
        return await self.fetch_rows(self.ordered(_table_select()), map_payment_table_row)

    async def search(
        self,
        deal_id: int | None = None,
        start: date | None = None,
        end: date | None = None,
    ) -> list[PaymentTableRow]:
        """
        Table rows for a deal and/or a date window.

        The window includes the whole end day: payments are matched with
        `payment_date >= start AND payment_date < end + 1 day`.
        """
        stmt = apply_filters(
            _table_select(),
            equals(Payment.id_deal, deal_id),
            at_least(Payment.payment_date, start),
            below(Payment.payment_date, end + timedelta(days=1) if end is not None else None),
        )
        return await self.fetch_rows(self.ordered(stmt), map_payment_table_row)

    async def find_all_for_report(self) -> list[PaymentReportRow]:
        return await self.fetch_rows(self.ordered(_report_select()), map_payment_report_row)
