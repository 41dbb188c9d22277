class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidCredentialError(ValidationError):
    """Raised when a supplied password does not match the stored one."""


class ConflictError(DomainError):
    """Raised when an operation would duplicate an existing entity or mark."""


class NotFoundError(DomainError):
    """Raised when a required entity does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials or a session token are invalid."""


class AuthorizationError(DomainError):
    """Raised when a caller is identified but not allowed to proceed."""


class TokenExpiredError(AuthorizationError):
    """Raised when a correctly signed session token has expired."""


class StorageUnavailableError(DomainError):
    """Raised when the backing store cannot be reached or fails mid-operation."""
