"""Infrastructure-level exceptions.

These describe failures talking to the outside world (the document store,
sign-in), as opposed to business rule violations in ``domain.exceptions``.
Both families are caught at the CLI and shown to the user; neither is
retried.
"""

from storefront.domain.exceptions import RepositoryError


class StorefrontError(Exception):
    """Base class for infrastructure failures."""


class PersistenceError(StorefrontError, RepositoryError):
    """A read from or write to the document store failed."""


class AuthError(StorefrontError):
    """Signing in to scope store access failed."""
