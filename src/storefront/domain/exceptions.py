"""Exceptions raised below the CLI.

``DomainException`` covers broken business rules: the CLI shows its
message as-is. ``RepositoryError`` covers a store that could not be read
or written: the CLI reports it as "<action> failed". Neither is retried.
"""


class DomainException(Exception):
    """Base class for business rule violations."""


class ValidationError(DomainException):
    """Input or state breaks a storefront rule (bad price, empty cart, ...)."""


class EntityNotFoundError(DomainException):
    """No product or order has the requested ID."""


class RepositoryError(Exception):
    """A repository could not read from or write to its store."""
