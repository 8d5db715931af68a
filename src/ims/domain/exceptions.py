"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field value or business rule was violated."""


class DuplicateSkuError(ValidationError):
    """Another live product already uses the requested SKU."""

    def __init__(self, sku: str) -> None:
        super().__init__(f"SKU '{sku}' already exists")
        self.sku = sku


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageUnavailableError(DomainException):
    """The product collection could not be read from or written to storage."""


class RemoteServiceError(StorageUnavailableError):
    """The remote inventory API failed or could not be reached."""
