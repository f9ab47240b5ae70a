"""
Repository layer: one data access object per entity (one per level for the
geography hierarchy).

Usage:
    from realestate.repositories import ClientRepository, DealRepository
"""

from .base_repository import BaseRepository
from .client_repository import ClientRepository
from .realtor_repository import RealtorRepository
from .property_repository import PropertyRepository
from .deal_repository import DealRepository
from .payment_repository import PaymentRepository
from .reference_repository import DealTypeRepository, PropertyTypeRepository
from .geography_repository import (
    CountryRepository,
    RegionRepository,
    CityRepository,
    DistrictRepository,
    StreetRepository,
)

__all__ = [
    "BaseRepository",
    "ClientRepository",
    "RealtorRepository",
    "PropertyRepository",
    "DealRepository",
    "PaymentRepository",
    "DealTypeRepository",
    "PropertyTypeRepository",
    "CountryRepository",
    "RegionRepository",
    "CityRepository",
    "DistrictRepository",
    "StreetRepository",
]
