"""Domain-level exceptions.

All pricing rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value was outside its domain (negative price, bad percentage...)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """A product code is not in the catalogue."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Product with code '{code}' not found in catalogue")
        self.code = code
