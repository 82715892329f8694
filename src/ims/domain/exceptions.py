"""Domain-level exceptions.

Every failure the inventory core can report is a subclass of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field was empty or a numeric field was out of range."""


class NotFoundError(DomainException):
    """An operation referenced a product id that does not exist."""


class PersistenceError(DomainException):
    """The key-value store could not be read or written."""
