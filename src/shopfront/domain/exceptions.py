"""Domain-level exceptions.

Every failure a use case can report is a subclass of DomainException so the
HTTP and CLI layers can catch them uniformly and map each kind to a status
code or a user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a business rule was violated."""


class AuthenticationError(DomainException):
    """Credentials or bearer token are missing, invalid or expired."""


class PermissionDeniedError(DomainException):
    """The caller is authenticated but not allowed to perform the action."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ConflictError(DomainException):
    """A unique key is already taken."""


class StorageError(DomainException):
    """The backing store could not be read or written."""


class ConfigurationError(DomainException):
    """The server is missing required configuration."""
