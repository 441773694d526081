"""
Custom exceptions for the walks service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, database, etc.).
"""

import uuid
from typing import Dict, List, Optional


class WalksServiceException(Exception):
    """Base exception for all walks service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundException(WalksServiceException):
    """Raised when a record with the requested id does not exist."""

    def __init__(self, entity: str, entity_id: uuid.UUID):
        super().__init__(
            message=f"{entity} not found: {entity_id}",
            details={"entity": entity, "id": str(entity_id)},
        )


class ValidationException(WalksServiceException):
    """
    Raised when a request fails field-level validation.

    Carries every accumulated error keyed by wire field name.
    """

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(
            message=f"Validation failed for {fields}",
            details={"errors": errors},
        )


class ReferenceConflictException(WalksServiceException):
    """Raised when a delete is refused because walks still reference the record."""

    def __init__(self, entity: str, entity_id: uuid.UUID, walk_count: int):
        super().__init__(
            message=f"{entity} {entity_id} is referenced by {walk_count} walk(s)",
            details={"entity": entity, "id": str(entity_id), "walk_count": walk_count},
        )


class RepositoryException(WalksServiceException):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Repository {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )
