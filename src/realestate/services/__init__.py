"""
Service layer: validation, business rules and transaction ownership.

Usage:
    from realestate.services import ClientService
    service = ClientService(db_session)
"""

from .client_service import ClientService
from .realtor_service import RealtorService
from .property_service import PropertyService
from .deal_service import DealService
from .payment_service import PaymentService
from .reference_service import DealTypeService, PropertyTypeService
from .geography_service import GeographyService
from .csv_export import CsvExportService

__all__ = [
    "ClientService",
    "RealtorService",
    "PropertyService",
    "DealService",
    "PaymentService",
    "DealTypeService",
    "PropertyTypeService",
    "GeographyService",
    "CsvExportService",
]
