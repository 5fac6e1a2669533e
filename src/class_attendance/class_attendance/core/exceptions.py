class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedDate(ValidationError):
    """Raised when a date string is not a valid YYYY-MM-DD calendar date."""


class InvalidClass(ValidationError):
    """Raised when a report or sheet is requested without a class name."""


class InvalidPeriod(ValidationError):
    """Raised when a report month/year is out of range."""


class InvalidRecord(ValidationError):
    """Raised when a stored document is missing fields or has the wrong shape."""


class CommentNotAllowed(ValidationError):
    """Raised when a comment is written for a status the comment policy forbids."""
