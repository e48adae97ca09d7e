"""
Error kinds raised by the admission core.

Each carries the user-facing message and the HTTP status the transport
layer answers with.
"""


class BookingError(Exception):
    kind = "BookingError"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFields(BookingError):
    kind = "InvalidFields"


class InvalidDateFormat(BookingError):
    kind = "InvalidDateFormat"

    def __init__(self, field: str = "date"):
        super().__init__(f"Invalid {field} format, use DD-MM-YYYY")
        self.field = field


class InvalidRange(BookingError):
    kind = "InvalidRange"

    def __init__(self, message: str = "endDate must be after startDate"):
        super().__init__(message)


class ClassUnavailable(BookingError):
    kind = "ClassUnavailable"

    def __init__(self, message: str = "Class is not available on the specified date"):
        super().__init__(message)


class CapacityExceeded(BookingError):
    kind = "CapacityExceeded"

    def __init__(self, message: str = "No available slots for the selected class on this date"):
        super().__init__(message)


class PersistenceFailure(BookingError):
    """The snapshot write failed after the in-memory append was made."""

    kind = "PersistenceFailure"
    status_code = 500
