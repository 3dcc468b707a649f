class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class ConflictError(DomainError):
    """Raised when an entity is not in a state that allows the action."""


class PunchFormatError(ValidationError):
    """Raised when a punch cell is not a valid time of day."""


class ImportFileError(DomainError):
    """Raised when an uploaded attendance file cannot be read at all."""


class ConcurrencyError(DomainError):
    """Raised when a salary write keeps losing the optimistic version check."""
