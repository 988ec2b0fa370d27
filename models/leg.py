"""Flight leg data model."""

from dataclasses import dataclass
from typing import Any, Dict

from models.exceptions import InvalidLegError, NullArgumentError


def normalize_airport_code(code: str, name: str) -> str:
    """
    Trim and uppercase an airport code.

    Args:
        code: Raw airport code (e.g., " ord ")
        name: Argument name used in error messages

    Returns:
        Canonical code (e.g., "ORD")

    Raises:
        NullArgumentError: If code is None
        TypeError: If code is not a string
        InvalidLegError: If code is blank after trimming
    """
    if code is None:
        raise NullArgumentError(name)
    if not isinstance(code, str):
        raise TypeError(f"{name} must be a str, got {type(code).__name__}")
    trimmed = code.strip()
    if not trimmed:
        raise InvalidLegError(name, code, "airport code must not be blank")
    return trimmed.upper()


@dataclass(frozen=True)
class Leg:
    """
    A single flight leg.

    Legs are immutable, so the same instance can sit in several
    itineraries without one of them changing what another sees.

    Attributes:
        from_airport: Departure airport code, trimmed and uppercased
        to_airport: Arrival airport code, trimmed and uppercased
        depart_minute: Departure time in minutes from a reference instant
        arrive_minute: Arrival time in minutes from the same instant
    """
    from_airport: str
    to_airport: str
    depart_minute: int
    arrive_minute: int

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "from_airport",
            normalize_airport_code(self.from_airport, "from_airport")
        )
        object.__setattr__(
            self, "to_airport",
            normalize_airport_code(self.to_airport, "to_airport")
        )

        for name in ("depart_minute", "arrive_minute"):
            value = getattr(self, name)
            if value is None:
                raise NullArgumentError(name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidLegError(name, value, "must be an integer")

        if self.depart_minute < 0:
            raise InvalidLegError(
                "depart_minute", self.depart_minute, "must be >= 0"
            )
        if self.arrive_minute < 0:
            raise InvalidLegError(
                "arrive_minute", self.arrive_minute, "must be >= 0"
            )
        if self.arrive_minute < self.depart_minute:
            raise InvalidLegError(
                "arrive_minute",
                self.arrive_minute,
                f"must be >= depart_minute ({self.depart_minute})"
            )

    @property
    def flight_minutes(self) -> int:
        """Time in the air."""
        return self.arrive_minute - self.depart_minute

    def to_dict(self) -> Dict[str, Any]:
        """Serialize leg to dictionary."""
        return {
            "from_airport": self.from_airport,
            "to_airport": self.to_airport,
            "depart_minute": self.depart_minute,
            "arrive_minute": self.arrive_minute,
            "flight_minutes": self.flight_minutes
        }

    def __str__(self) -> str:
        return (
            f"{self.from_airport}->{self.to_airport} "
            f"({self.depart_minute}→{self.arrive_minute})"
        )
