"""
Row mappers: one joined result row -> one DTO.

The read queries label every selected expression with the DTO field name, so
each mapper is a by-name copy of the row. Mappers are pure and stateless.
"""

from typing import Callable, TypeVar

from pydantic import BaseModel
from sqlalchemy import RowMapping

from realestate.schemas.views import (
    CityWithDetails,
    DealReportRow,
    DealTableRow,
    DealWithDetails,
    DistrictWithDetails,
    PaymentReportRow,
    PaymentTableRow,
    PropertyReportRow,
    PropertyTableRow,
    PropertyWithDetails,
    RegionWithDetails,
    StreetWithDetails,
)

DtoT = TypeVar("DtoT", bound=BaseModel)
RowMapper = Callable[[RowMapping], DtoT]


def row_mapper(dto_cls: type[DtoT]) -> RowMapper:
    def map_row(row: RowMapping) -> DtoT:
        return dto_cls.model_validate(dict(row))

    map_row.__name__ = f"map_{dto_cls.__name__}"
    map_row.__qualname__ = map_row.__name__
    return map_row


map_property_with_details = row_mapper(PropertyWithDetails)
map_property_table_row = row_mapper(PropertyTableRow)
map_property_report_row = row_mapper(PropertyReportRow)

map_deal_with_details = row_mapper(DealWithDetails)
map_deal_table_row = row_mapper(DealTableRow)
map_deal_report_row = row_mapper(DealReportRow)

map_payment_table_row = row_mapper(PaymentTableRow)
map_payment_report_row = row_mapper(PaymentReportRow)

map_region_with_details = row_mapper(RegionWithDetails)
map_city_with_details = row_mapper(CityWithDetails)
map_district_with_details = row_mapper(DistrictWithDetails)
map_street_with_details = row_mapper(StreetWithDetails)
