"""
Deal data access.

Deals are listed newest first (and by cost within a day). Joined reads come in
three shapes: full details (client, realtor, property and every reference
name), table rows with display names, and report rows for CSV export.
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import Select, func, select
from sqlalchemy.orm import aliased

from realestate.models import (
    City,
    Client,
    Country,
    Deal,
    DealType,
    District,
    Property,
    PropertyType,
    Realtor,
    Region,
    Street,
)
from realestate.schemas.views import DealReportRow, DealTableRow, DealWithDetails

from .base_repository import BaseRepository
from .expressions import city_address, full_name, short_address
from .fields import FieldRegistry, FieldSpec, integer, iso_date, positive_decimal
from .filters import apply_filters, at_least, at_most, equals
from .row_mappers import map_deal_report_row, map_deal_table_row, map_deal_with_details

# the deal's own property row, aliased so its columns can be labelled "property_*"
prop = aliased(Property, name="prop")


def _details_select() -> Select:
    return (
        select(
            Deal.id.label("id_deal"),
            Deal.deal_date,
            Deal.deal_cost,
            Deal.id_property,
            Deal.id_realtor,
            Deal.id_client,
            Deal.id_deal_type,
            Client.first_name.label("client_first_name"),
            Client.last_name.label("client_last_name"),
            Client.middle_name.label("client_middle_name"),
            Client.phone.label("client_phone"),
            Client.email.label("client_email"),
            Realtor.first_name.label("realtor_first_name"),
            Realtor.last_name.label("realtor_last_name"),
            Realtor.middle_name.label("realtor_middle_name"),
            Realtor.phone.label("realtor_phone"),
            Realtor.email.label("realtor_email"),
            Realtor.experience_years.label("realtor_experience_years"),
            prop.area.label("property_area"),
            prop.cost.label("property_cost"),
            prop.description.label("property_description"),
            prop.postal_code.label("property_postal_code"),
            prop.house_number.label("property_house_number"),
            prop.house_letter.label("property_house_letter"),
            prop.building_number.label("property_building_number"),
            prop.apartment_number.label("property_apartment_number"),
            PropertyType.property_type_name,
            DealType.deal_type_name,
            Country.country_name,
            Region.name.label("region_name"),
            City.city_name,
            District.district_name,
            Street.street_name,
        )
        .select_from(Deal)
        .join(Client, Client.id == Deal.id_client)
        .join(Realtor, Realtor.id == Deal.id_realtor)
        .join(prop, prop.id == Deal.id_property)
        .join(PropertyType, PropertyType.id == prop.id_property_type)
        .join(DealType, DealType.id == Deal.id_deal_type)
        .join(Country, Country.id == prop.id_country)
        .join(Region, Region.id == prop.id_region)
        .join(City, City.id == prop.id_city)
        .join(District, District.id == prop.id_district)
        .join(Street, Street.id == prop.id_street)
    )


def _table_select() -> Select:
    return (
        select(
            Deal.id.label("id_deal"),
            Deal.deal_date,
            Deal.deal_cost,
            full_name(Client.last_name, Client.first_name, Client.middle_name).label("client_name"),
            Client.phone.label("client_phone"),
            full_name(Realtor.last_name, Realtor.first_name, Realtor.middle_name).label("realtor_name"),
            short_address(Street.street_name, prop.house_number, prop.apartment_number).label("property_address"),
            PropertyType.property_type_name,
            DealType.deal_type_name,
        )
        .select_from(Deal)
        .join(Client, Client.id == Deal.id_client)
        .join(Realtor, Realtor.id == Deal.id_realtor)
        .join(prop, prop.id == Deal.id_property)
        .join(PropertyType, PropertyType.id == prop.id_property_type)
        .join(DealType, DealType.id == Deal.id_deal_type)
        .join(Street, Street.id == prop.id_street)
    )


def _report_select() -> Select:
    return (
        select(
            Deal.id.label("id_deal"),
            Deal.deal_date,
            Deal.deal_cost,
            city_address(City.city_name, Street.street_name, prop.house_number, prop.apartment_number)
            .label("property_address"),
            full_name(Realtor.last_name, Realtor.first_name, Realtor.middle_name).label("realtor_name"),
            full_name(Client.last_name, Client.first_name, Client.middle_name).label("client_name"),
            DealType.deal_type_name,
        )
        .select_from(Deal)
        .join(Client, Client.id == Deal.id_client)
        .join(Realtor, Realtor.id == Deal.id_realtor)
        .join(prop, prop.id == Deal.id_property)
        .join(DealType, DealType.id == Deal.id_deal_type)
        .join(City, City.id == prop.id_city)
        .join(Street, Street.id == prop.id_street)
    )


class DealRepository(BaseRepository[Deal]):
    model = Deal
    default_order = (Deal.deal_date.desc(), Deal.deal_cost.desc(), Deal.id.desc())
    update_fields = FieldRegistry({
        "dealDate": FieldSpec(Deal.deal_date, iso_date),
        "dealCost": FieldSpec(Deal.deal_cost, positive_decimal),
        "idProperty": FieldSpec(Deal.id_property, integer),
        "idRealtor": FieldSpec(Deal.id_realtor, integer),
        "idClient": FieldSpec(Deal.id_client, integer),
        "idDealType": FieldSpec(Deal.id_deal_type, integer),
    })

    # =================================================================================================================
    # Plain rows
    # =================================================================================================================

    async def find_by_date(self, deal_date: date) -> list[Deal]:
        return await self.find_where(select(Deal).where(Deal.deal_date == deal_date))

    async def find_by_date_range(self, start: date, end: date) -> list[Deal]:
        """Both ends inclusive."""
        return await self.find_where(select(Deal).where(Deal.deal_date.between(start, end)))

    async def find_by_realtor_id(self, realtor_id: int) -> list[Deal]:
        return await self.find_where(select(Deal).where(Deal.id_realtor == realtor_id))

    async def find_by_client_id(self, client_id: int) -> list[Deal]:
        return await self.find_where(select(Deal).where(Deal.id_client == client_id))

    async def find_by_property_id(self, property_id: int) -> list[Deal]:
        return await self.find_where(select(Deal).where(Deal.id_property == property_id))

    async def find_by_deal_type_id(self, deal_type_id: int) -> list[Deal]:
        return await self.find_where(select(Deal).where(Deal.id_deal_type == deal_type_id))

    async def find_by_cost_range(self, min_cost: Decimal, max_cost: Decimal) -> list[Deal]:
        return await self.find_where(select(Deal).where(Deal.deal_cost.between(min_cost, max_cost)))

    async def total_amount(self) -> Decimal:
        """Sum of all deal costs; 0 when there are no deals."""
        stmt = select(func.coalesce(func.sum(Deal.deal_cost), 0))
        result = await self.fetch_scalar(stmt)
        return Decimal(str(result))

    # =================================================================================================================
    # Referential checks (used before deleting a parent row)
    # =================================================================================================================

    async def exists_for_realtor(self, realtor_id: int) -> bool:
        return await self.exists_by_field(Deal.id_realtor, realtor_id)

    async def exists_for_property(self, property_id: int) -> bool:
        return await self.exists_by_field(Deal.id_property, property_id)

    async def exists_for_client(self, client_id: int) -> bool:
        return await self.exists_by_field(Deal.id_client, client_id)

    # =================================================================================================================
    # Joined reads
    # =================================================================================================================

    async def find_all_with_details(self) -> list[DealWithDetails]:
        return await self.fetch_rows(self.ordered(_details_select()), map_deal_with_details)

    async def find_by_id_with_details(self, deal_id: int) -> DealWithDetails:
        return await self.fetch_row(
            _details_select().where(Deal.id == deal_id), map_deal_with_details, deal_id
        )

    async def find_by_date_with_details(self, deal_date: date) -> list[DealWithDetails]:
        stmt = _details_select().where(Deal.deal_date == deal_date)
        return await self.fetch_rows(self.ordered(stmt), map_deal_with_details)

    async def find_by_date_range_with_details(self, start: date, end: date) -> list[DealWithDetails]:
        stmt = _details_select().where(Deal.deal_date.between(start, end))
        return await self.fetch_rows(self.ordered(stmt), map_deal_with_details)

    async def find_by_realtor_id_with_details(self, realtor_id: int) -> list[DealWithDetails]:
        stmt = _details_select().where(Deal.id_realtor == realtor_id)
        return await self.fetch_rows(self.ordered(stmt), map_deal_with_details)

    async def find_by_client_id_with_details(self, client_id: int) -> list[DealWithDetails]:
        stmt = _details_select().where(Deal.id_client == client_id)
        return await self.fetch_rows(self.ordered(stmt), map_deal_with_details)

    async def find_all_for_table(self) -> list[DealTableRow]:
        return await self.fetch_rows(self.ordered(_table_select()), map_deal_table_row)

    async def search(
        self,
        start: date | None = None,
        end: date | None = None,
        realtor_id: int | None = None,
        client_id: int | None = None,
        deal_type_id: int | None = None,
    ) -> list[DealTableRow]:
        """Table rows matching every given criterion; the date window is inclusive."""
        stmt = apply_filters(
            _table_select(),
            at_least(Deal.deal_date, start),
            at_most(Deal.deal_date, end),
            equals(Deal.id_realtor, realtor_id),
            equals(Deal.id_client, client_id),
            equals(Deal.id_deal_type, deal_type_id),
        )
        return await self.fetch_rows(self.ordered(stmt), map_deal_table_row)

    async def find_all_for_report(self) -> list[DealReportRow]:
        return await self.fetch_rows(self.ordered(_report_select()), map_deal_report_row)
