from .common import CamelModel, ReadModel, IdResponse, MessageResponse, CountResponse
from .entities import (
    ClientRead, ClientCreate,
    RealtorRead, RealtorCreate,
    PropertyTypeRead, DealTypeRead,
    CountryRead, RegionRead, CityRead, DistrictRead, StreetRead,
    PropertyRead, PropertyCreate,
    DealRead, DealCreate,
    PaymentRead, PaymentCreate,
)
from .views import (
    PropertyWithDetails, PropertyTableRow, PropertyReportRow,
    DealWithDetails, DealTableRow, DealReportRow,
    PaymentTableRow, PaymentReportRow,
    RegionWithDetails, CityWithDetails, DistrictWithDetails, StreetWithDetails,
)
