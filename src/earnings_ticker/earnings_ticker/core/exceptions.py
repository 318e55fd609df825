class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FormatError(ValidationError):
    """Raised when a time-of-day string does not match HH:MM AM/PM."""


class InvalidSalaryError(ValidationError):
    """Raised when the salary is non-numeric or not strictly positive."""


class InvalidCurrencyError(ValidationError):
    """Raised when the currency label is empty."""


class InvertedWindowError(ValidationError):
    """Raised when the shift end is not after the shift start."""


class StoreError(DomainError):
    """Raised when the state store cannot persist the ticker state."""
