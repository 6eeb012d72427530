class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee (or other entity) does not exist."""


class ClassificationError(DomainError):
    """Raised when the anomaly classifier fails or returns an invalid verdict.

    A failed classification is never treated as a "normal shift" verdict.
    """
