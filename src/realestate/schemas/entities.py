"""
Entity schemas.

`*Read` models mirror one table row (the primary key is exposed as `idClient`,
`idRealtor`, ...). `*Create` models carry the create payload; every field is
optional at this level because the services validate and report all field
problems at once.
"""

from datetime import date
from decimal import Decimal

from pydantic import AliasChoices, Field
from pydantic.alias_generators import to_camel

from .common import CamelModel, ReadModel


def _pk(name: str) -> AliasChoices:
    # ORM objects expose the key as `id`; JSON callers send the camelCase name
    return AliasChoices(to_camel(name), name, "id")


# ---------------------------------------------------------------- people

class ClientRead(ReadModel):
    id_client: int = Field(validation_alias=_pk("id_client"))
    first_name: str
    last_name: str
    middle_name: str | None = None
    phone: str | None = None
    email: str | None = None


class ClientCreate(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    phone: str | None = None
    email: str | None = None


class RealtorRead(ReadModel):
    id_realtor: int = Field(validation_alias=_pk("id_realtor"))
    first_name: str
    last_name: str
    middle_name: str | None = None
    phone: str | None = None
    email: str | None = None
    experience_years: int


class RealtorCreate(ClientCreate):
    # kept loose: "5" from a form is parsed by the service, which reports the range error
    experience_years: int | str | None = None


# ---------------------------------------------------------------- reference

class PropertyTypeRead(ReadModel):
    id_property_type: int = Field(validation_alias=_pk("id_property_type"))
    property_type_name: str


class DealTypeRead(ReadModel):
    id_deal_type: int = Field(validation_alias=_pk("id_deal_type"))
    deal_type_name: str


class CountryRead(ReadModel):
    id_country: int = Field(validation_alias=_pk("id_country"))
    country_name: str


class RegionRead(ReadModel):
    id_region: int = Field(validation_alias=_pk("id_region"))
    name: str
    code: str | None = None
    id_country: int


class CityRead(ReadModel):
    id_city: int = Field(validation_alias=_pk("id_city"))
    city_name: str
    id_region: int


class DistrictRead(ReadModel):
    id_district: int = Field(validation_alias=_pk("id_district"))
    district_name: str
    id_city: int


class StreetRead(ReadModel):
    id_street: int = Field(validation_alias=_pk("id_street"))
    street_name: str
    id_city: int


# ---------------------------------------------------------------- property

class PropertyRead(ReadModel):
    id_property: int = Field(validation_alias=_pk("id_property"))
    area: Decimal
    cost: Decimal
    description: str | None = None
    postal_code: str | None = None
    house_number: str
    house_letter: str | None = None
    building_number: str | None = None
    apartment_number: str | None = None
    id_property_type: int
    id_country: int
    id_region: int
    id_city: int
    id_district: int
    id_street: int


class PropertyCreate(CamelModel):
    area: Decimal | None = None
    cost: Decimal | None = None
    description: str | None = None
    postal_code: str | None = None
    house_number: str | None = None
    house_letter: str | None = None
    building_number: str | None = None
    apartment_number: str | None = None
    id_property_type: int | None = None
    id_country: int | None = None
    id_region: int | None = None
    id_city: int | None = None
    id_district: int | None = None
    id_street: int | None = None


# ---------------------------------------------------------------- deal / payment

class DealRead(ReadModel):
    id_deal: int = Field(validation_alias=_pk("id_deal"))
    deal_date: date
    deal_cost: Decimal
    id_property: int
    id_realtor: int
    id_client: int
    id_deal_type: int


class DealCreate(CamelModel):
    deal_date: date | None = None
    deal_cost: Decimal | None = None
    id_property: int | None = None
    id_realtor: int | None = None
    id_client: int | None = None
    id_deal_type: int | None = None


class PaymentRead(ReadModel):
    id_payment: int = Field(validation_alias=_pk("id_payment"))
    payment_date: date
    amount: Decimal
    id_deal: int


class PaymentCreate(CamelModel):
    payment_date: date | None = None
    amount: Decimal | None = None
    id_deal: int | None = None
