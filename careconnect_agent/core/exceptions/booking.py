"""
Booking-related exceptions.
"""


class BookingError(Exception):
    """Base exception for booking errors."""
    pass


class BookingNotFoundError(BookingError):
    """Exception raised when a booking id does not exist."""
    pass


class InvalidStatusTransitionError(BookingError):
    """Exception raised when a booking status change is not allowed."""

    def __init__(self, current: str, target: str):
        super().__init__(f"Cannot move booking from {current} to {target}")
        self.current = current
        self.target = target


class AuthenticationRequiredError(BookingError):
    """Exception raised when a booking is attempted without a user id."""
    pass
