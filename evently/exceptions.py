"""
Custom exceptions for the application.
"""

class EventlyError(Exception):
    """Base exception for ticketing errors."""
    pass

class NotFoundError(EventlyError):
    """Raised when a requested record does not exist."""
    pass

class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""
    pass

class EventNotFoundError(NotFoundError):
    """Raised when an event is not found."""
    pass

class UnauthorizedError(EventlyError):
    """Raised when a user acts on an event they do not organize."""
    pass

class ValidationError(EventlyError):
    """Raised when a required argument is missing or malformed."""
    pass

class DataAccessError(EventlyError):
    """Generic error raised by the data layer after logging the underlying failure."""
    pass
