"""
All ORM models, importable from one place:

    from realestate.models import Client, Deal, Street

Importing this package also registers every table on `Base.metadata`.
"""

from .client import Client
from .realtor import Realtor
from .reference import PropertyType, DealType
from .geography import Country, Region, City, District, Street
from .property import Property
from .deal import Deal, Payment

__all__ = [
    "Client",
    "Realtor",
    "PropertyType",
    "DealType",
    "Country",
    "Region",
    "City",
    "District",
    "Street",
    "Property",
    "Deal",
    "Payment",
]
