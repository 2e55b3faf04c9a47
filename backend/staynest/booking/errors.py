"""Booking engine exceptions.

Every error carries a human-readable message and the HTTP status the API
layer should answer with. ``retryable`` marks conditions a caller can
recover from by choosing different dates.
"""


class BookingError(Exception):
    """Base class for all booking engine errors."""

    status_code: int = 400
    code: str = "booking_error"
    retryable: bool = False
    default_message = "Booking request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthenticatedError(BookingError):
    status_code = 401
    code = "unauthenticated"
    default_message = "You must be logged in to access this route"


class ProfileRequiredError(BookingError):
    """The identity is known but has not created a marketplace profile yet."""

    status_code = 403
    code = "profile_required"
    default_message = "Create a profile before booking"


class PropertyNotFoundError(BookingError):
    status_code = 404
    code = "property_not_found"
    default_message = "Property not found"


class BookingNotFoundError(BookingError):
    status_code = 404
    code = "booking_not_found"
    default_message = "Booking not found"


class InvalidRangeError(BookingError):
    status_code = 422
    code = "invalid_range"
    default_message = "check_out must be after check_in"


class InvalidPriceError(BookingError):
    status_code = 422
    code = "invalid_price"
    default_message = "Nightly price must be greater than zero"


class BookingConflictError(BookingError):
    """Dates overlap a confirmed booking. Expected under concurrent load."""

    status_code = 409
    code = "booking_conflict"
    retryable = True
    default_message = "Dates conflict with an existing booking"


class PersistenceError(BookingError):
    status_code = 503
    code = "persistence_error"
    default_message = "Could not save the booking, please try again"
