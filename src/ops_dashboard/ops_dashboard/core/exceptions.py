class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid (blocks submission before any store call)."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or the session has expired."""


class StoreError(DomainError):
    """Base class for document store failures."""


class StoreReadError(StoreError):
    """Raised when a query or subscription against the document store fails."""


class StoreWriteError(StoreError):
    """Raised when add/update/delete fails (transport, permission or missing id)."""


class NotFoundError(StoreWriteError):
    """Raised when a write targets an identifier that does not exist."""


class ImageUploadError(DomainError):
    """Raised when the image store rejects or fails an upload."""


class ImageDeleteUnavailable(DomainError):
    """Raised when an image cannot be deleted because no privileged credential is configured."""
