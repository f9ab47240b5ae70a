# realestate/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py                    # domain errors raised by services (public API)
# │   ├── data_access.py             # DbFailureKind + repository error boundary
# │   ├── integrity_classifier.py    # IntegrityError -> constraint kind / columns
# │   └── handler.py                 # translation, logging and user-facing wording

from .base import (
    RealEstateError,
    EntityNotFoundError,
    DataValidationError,
    DatabaseError,
    BusinessRuleViolationError,
)
from .data_access import DbFailureKind, DataAccessError, FieldCoercionError

__all__ = [
    "RealEstateError",
    "EntityNotFoundError",
    "DataValidationError",
    "DatabaseError",
    "BusinessRuleViolationError",
    "DbFailureKind",
    "DataAccessError",
    "FieldCoercionError",
]
