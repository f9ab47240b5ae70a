"""Small helpers shared by the REST routers."""

from typing import Any

from realestate.exceptions import EntityNotFoundError
from realestate.schemas import MessageResponse


def updated_or_404(updated: bool, entity_type: str, entity_id: Any, message: str) -> MessageResponse:
    """An update that touched no row is reported as not found."""
    if not updated:
        raise EntityNotFoundError(entity_type, entity_id)
    return MessageResponse(message=message)


def deleted_or_404(deleted: bool, entity_type: str, entity_id: Any, message: str) -> MessageResponse:
    if not deleted:
        raise EntityNotFoundError(entity_type, entity_id)
    return MessageResponse(message=message)
