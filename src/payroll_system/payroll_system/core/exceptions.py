class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a persisted record does not exist."""


class SpreadsheetError(DomainError):
    """Raised when an uploaded attendance sheet has no usable header or rows."""
