class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""


class AuthenticationError(DomainError):
    """Raised when the admin password is wrong."""


class AuthorizationError(DomainError):
    """Raised when a caller lacks admin access."""


class ClockActionRejected(DomainError):
    """Raised when a clock action is not allowed in the current state.

    Clock-in while a shift is open, or clock-out with no open shift.
    """
