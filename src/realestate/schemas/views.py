"""
Denormalized read projections (DTOs).

Each one is produced from a single joined result row by a row mapper in
`realestate.repositories.row_mappers`. Field names match the SQL labels the
repositories select, so mapping is a by-name copy.
"""

from datetime import date
from decimal import Decimal

from .common import ReadModel


# ---------------------------------------------------------------- property

class PropertyWithDetails(ReadModel):
    id_property: int
    area: Decimal
    cost: Decimal
    description: str | None = None
    postal_code: str | None = None
    house_number: str
    house_letter: str | None = None
    building_number: str | None = None
    apartment_number: str | None = None
    id_property_type: int
    property_type_name: str
    id_country: int
    country_name: str
    id_region: int
    region_name: str
    region_code: str | None = None
    id_city: int
    city_name: str
    id_district: int
    district_name: str
    id_street: int
    street_name: str


class PropertyTableRow(ReadModel):
    id_property: int
    property_type_name: str
    area: Decimal
    cost: Decimal
    short_description: str | None = None
    city_name: str
    district_name: str
    street_name: str
    house_number: str
    apartment_number: str | None = None
    house_letter: str | None = None
    building_number: str | None = None


class PropertyReportRow(ReadModel):
    id_property: int
    area: Decimal
    cost: Decimal
    description: str | None = None
    property_type_name: str
    postal_code: str | None = None
    house_number: str
    house_letter: str | None = None
    building_number: str | None = None
    apartment_number: str | None = None
    street_name: str
    district_name: str
    city_name: str
    region_code: str | None = None
    region_name: str
    country_name: str


# ---------------------------------------------------------------- deal

class DealWithDetails(ReadModel):
    id_deal: int
    deal_date: date
    deal_cost: Decimal
    id_property: int
    id_realtor: int
    id_client: int
    id_deal_type: int

    client_first_name: str
    client_last_name: str
    client_middle_name: str | None = None
    client_phone: str | None = None
    client_email: str | None = None

    realtor_first_name: str
    realtor_last_name: str
    realtor_middle_name: str | None = None
    realtor_phone: str | None = None
    realtor_email: str | None = None
    realtor_experience_years: int

    property_area: Decimal
    property_cost: Decimal
    property_description: str | None = None
    property_postal_code: str | None = None
    property_house_number: str
    property_house_letter: str | None = None
    property_building_number: str | None = None
    property_apartment_number: str | None = None

    property_type_name: str
    deal_type_name: str
    country_name: str
    region_name: str
    city_name: str
    district_name: str
    street_name: str


class DealTableRow(ReadModel):
    id_deal: int
    deal_date: date
    deal_cost: Decimal
    client_name: str
    client_phone: str | None = None
    realtor_name: str
    property_address: str
    property_type_name: str
    deal_type_name: str


class DealReportRow(ReadModel):
    id_deal: int
    deal_date: date
    deal_cost: Decimal
    property_address: str
    realtor_name: str
    client_name: str
    deal_type_name: str


# ---------------------------------------------------------------- payment

class PaymentTableRow(ReadModel):
    id_payment: int
    payment_date: date
    amount: Decimal
    id_deal: int
    deal_date: date
    client_name: str
    property_address: str


class PaymentReportRow(ReadModel):
    id_payment: int
    payment_date: date
    amount: Decimal
    client_name: str
    deal_type_name: str
    deal_cost: Decimal


# ---------------------------------------------------------------- geography

class RegionWithDetails(ReadModel):
    id_region: int
    name: str
    code: str | None = None
    id_country: int
    country_name: str


class CityWithDetails(ReadModel):
    id_city: int
    city_name: str
    id_region: int
    region_name: str
    region_code: str | None = None
    id_country: int
    country_name: str


class DistrictWithDetails(ReadModel):
    id_district: int
    district_name: str
    id_city: int
    city_name: str
    id_region: int
    region_name: str
    id_country: int
    country_name: str


class StreetWithDetails(ReadModel):
    id_street: int
    street_name: str
    id_city: int
    city_name: str
    id_region: int
    region_name: str
    id_country: int
    country_name: str
