"""
Exceptions raised by the itinerary models.

Every exception here signals a broken precondition: the caller passed
something the operation does not accept. Domain outcomes such as an
unmet minimum layover are reported as booleans, never as exceptions.
"""


class ItineraryError(Exception):
    """Base exception for all itinerary model errors."""

    pass


class InvalidLegError(ItineraryError, ValueError):
    """Raised when a leg is built from a blank airport or bad minutes."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        message = f"Invalid leg {field}={value!r}: {reason}"
        super().__init__(message)


class InvalidAirportCodeError(ItineraryError, ValueError):
    """Raised when an airport code is blank after trimming."""

    def __init__(self, value: str, context: str = "airport") -> None:
        self.value = value
        message = f"{context} must not be blank (got {value!r})"
        super().__init__(message)


class NullArgumentError(ItineraryError, TypeError):
    """Raised when a required argument is None."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} must not be None")


class EmptySequenceError(ItineraryError, IndexError):
    """Raised when removing a leg from an empty itinerary."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() called on an empty itinerary")


class WrongLegCountError(ItineraryError):
    """Raised when a layover operation needs a different number of legs."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        message = f"Itinerary must hold exactly {expected} legs, has {actual}"
        super().__init__(message)


class NegativeThresholdError(ItineraryError, ValueError):
    """Raised when a minimum layover threshold is negative."""

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be >= 0 (got {value})")
