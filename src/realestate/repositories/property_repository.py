"""
Property data access.

Besides plain rows, properties are read in three joined shapes: with full
details (every reference name), as table rows for the list page, and as
report rows for the CSV export. All three share one join over the property
type and the geography hierarchy.
"""

from decimal import Decimal

from sqlalchemy import Select, select

from realestate.models import City, Country, District, Property, PropertyType, Region, Street
from realestate.schemas.views import PropertyReportRow, PropertyTableRow, PropertyWithDetails

from .base_repository import BaseRepository
from .expressions import truncated
from .fields import FieldRegistry, FieldSpec, integer, optional_text, positive_decimal, required_text
from .filters import apply_filters, at_least, at_most, equals
from .row_mappers import map_property_report_row, map_property_table_row, map_property_with_details

SHORT_DESCRIPTION_LENGTH = 100


def _joined(*columns) -> Select:
    return (
        select(*columns)
        .select_from(Property)
        .join(PropertyType, PropertyType.id == Property.id_property_type)
        .join(Country, Country.id == Property.id_country)
        .join(Region, Region.id == Property.id_region)
        .join(City, City.id == Property.id_city)
        .join(District, District.id == Property.id_district)
        .join(Street, Street.id == Property.id_street)
    )


def _details_select() -> Select:
    return _joined(
        Property.id.label("id_property"),
        Property.area,
        Property.cost,
        Property.description,
        Property.postal_code,
        Property.house_number,
        Property.house_letter,
        Property.building_number,
        Property.apartment_number,
        Property.id_property_type,
        PropertyType.property_type_name,
        Property.id_country,
        Country.country_name,
        Property.id_region,
        Region.name.label("region_name"),
        Region.code.label("region_code"),
        Property.id_city,
        City.city_name,
        Property.id_district,
        District.district_name,
        Property.id_street,
        Street.street_name,
    )


def _table_select() -> Select:
    return _joined(
        Property.id.label("id_property"),
        PropertyType.property_type_name,
        Property.area,
        Property.cost,
        truncated(Property.description, SHORT_DESCRIPTION_LENGTH).label("short_description"),
        City.city_name,
        District.district_name,
        Street.street_name,
        Property.house_number,
        Property.apartment_number,
        Property.house_letter,
        Property.building_number,
    )


def _report_select() -> Select:
    return _joined(
        Property.id.label("id_property"),
        Property.area,
        Property.cost,
        Property.description,
        PropertyType.property_type_name,
        Property.postal_code,
        Property.house_number,
        Property.house_letter,
        Property.building_number,
        Property.apartment_number,
        Street.street_name,
        District.district_name,
        City.city_name,
        Region.code.label("region_code"),
        Region.name.label("region_name"),
        Country.country_name,
    )


class PropertyRepository(BaseRepository[Property]):
    model = Property
    default_order = (Property.cost, Property.id)
    update_fields = FieldRegistry({
        "area": FieldSpec(Property.area, positive_decimal),
        "cost": FieldSpec(Property.cost, positive_decimal),
        "description": FieldSpec(Property.description, optional_text),
        "postalCode": FieldSpec(Property.postal_code, optional_text),
        "houseNumber": FieldSpec(Property.house_number, required_text),
        "houseLetter": FieldSpec(Property.house_letter, optional_text),
        "buildingNumber": FieldSpec(Property.building_number, optional_text),
        "apartmentNumber": FieldSpec(Property.apartment_number, optional_text),
        "idPropertyType": FieldSpec(Property.id_property_type, integer),
        "idCountry": FieldSpec(Property.id_country, integer),
        "idRegion": FieldSpec(Property.id_region, integer),
        "idCity": FieldSpec(Property.id_city, integer),
        "idDistrict": FieldSpec(Property.id_district, integer),
        "idStreet": FieldSpec(Property.id_street, integer),
    })

    # =================================================================================================================
    # Plain rows
    # =================================================================================================================

    async def find_by_price_range(self, min_price: Decimal, max_price: Decimal) -> list[Property]:
        """Both bounds inclusive."""
        return await self.find_where(select(Property).where(Property.cost.between(min_price, max_price)))

    async def find_by_city_id(self, city_id: int) -> list[Property]:
        return await self.find_where(select(Property).where(Property.id_city == city_id))

    async def find_by_property_type_id(self, property_type_id: int) -> list[Property]:
        return await self.find_where(select(Property).where(Property.id_property_type == property_type_id))

    # =================================================================================================================
    # Joined reads
    # =================================================================================================================

    async def find_all_with_details(self) -> list[PropertyWithDetails]:
        return await self.fetch_rows(self.ordered(_details_select()), map_property_with_details)

    async def find_by_id_with_details(self, property_id: int) -> PropertyWithDetails:
        stmt = _details_select().where(Property.id == property_id)
        return await self.fetch_row(stmt, map_property_with_details, property_id)

    async def find_by_price_range_with_details(
        self, min_price: Decimal, max_price: Decimal
    ) -> list[PropertyWithDetails]:
        stmt = _details_select().where(Property.cost.between(min_price, max_price))
        return await self.fetch_rows(self.ordered(stmt), map_property_with_details)

    async def find_by_city_id_with_details(self, city_id: int) -> list[PropertyWithDetails]:
        stmt = _details_select().where(Property.id_city == city_id)
        return await self.fetch_rows(self.ordered(stmt), map_property_with_details)

    async def find_by_property_type_id_with_details(self, property_type_id: int) -> list[PropertyWithDetails]:
        stmt = _details_select().where(Property.id_property_type == property_type_id)
        return await self.fetch_rows(self.ordered(stmt), map_property_with_details)

    async def find_all_for_table(self) -> list[PropertyTableRow]:
        return await self.fetch_rows(self.ordered(_table_select()), map_property_table_row)

    async def search(
        self,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        city_id: int | None = None,
        property_type_id: int | None = None,
        district_id: int | None = None,
        street_id: int | None = None,
    ) -> list[PropertyTableRow]:
        """Table rows matching every given criterion; price bounds are inclusive."""
        stmt = apply_filters(
            _table_select(),
            at_least(Property.cost, min_price),
            at_most(Property.cost, max_price),
            equals(Property.id_city, city_id),
            equals(Property.id_property_type, property_type_id),
            equals(Property.id_district, district_id),
            equals(Property.id_street, street_id),
        )
        return await self.fetch_rows(self.ordered(stmt), map_property_table_row)

    async def find_all_for_report(self) -> list[PropertyReportRow]:
        return await self.fetch_rows(
            _report_select().order_by(Property.id), map_property_report_row
        )
