"""Itinerary data model."""

from collections import deque
from typing import Any, Deque, Dict
import logging

from models.baggage_policy import BaggagePolicy
from models.exceptions import (
    EmptySequenceError,
    NegativeThresholdError,
    NullArgumentError,
    WrongLegCountError,
)
from models.leg import Leg

logger = logging.getLogger(__name__)


class Itinerary:
    """
    Ordered sequence of flight legs making up one journey.

    Legs are stored in travel order. The itinerary does not check that
    adjacent legs are chronologically consistent; a bad pair shows up
    as a negative layover.

    The kernel is deliberately small: add/remove at either end, length
    and clear. Everything else (origin, destination, layover checks) is
    built from those operations only, by removing a leg, reading it and
    putting it back where it was.
    """

    def __init__(self):
        self._legs: Deque[Leg] = deque()

    # Kernel

    def add_to_front(self, leg: Leg) -> None:
        """Insert leg as the new first leg."""
        self._check_leg(leg)
        self._legs.appendleft(leg)
        logger.debug(f"Added {leg} at front ({self.length()} legs)")

    def remove_from_front(self) -> Leg:
        """Remove and return the first leg."""
        if not self._legs:
            raise EmptySequenceError("remove_from_front")
        leg = self._legs.popleft()
        logger.debug(f"Removed {leg} from front ({self.length()} legs)")
        return leg

    def add_to_end(self, leg: Leg) -> None:
        """Insert leg as the new last leg."""
        self._check_leg(leg)
        self._legs.append(leg)
        logger.debug(f"Added {leg} at end ({self.length()} legs)")

    def remove_from_end(self) -> Leg:
        """Remove and return the last leg."""
        if not self._legs:
            raise EmptySequenceError("remove_from_end")
        leg = self._legs.pop()
        logger.debug(f"Removed {leg} from end ({self.length()} legs)")
        return leg

    def length(self) -> int:
        """Number of legs."""
        return len(self._legs)

    def clear(self) -> None:
        """Remove every leg."""
        logger.debug(f"Clearing itinerary with {self.length()} legs")
        self._legs.clear()

    # Secondary operations, built on the kernel only

    def origin(self) -> str:
        """
        Departure airport of the first leg.

        Returns:
            Airport code, or "" if the itinerary is empty
        """
        if self.length() == 0:
            return ""

        first = self.remove_from_front()
        self.add_to_front(first)

        return first.from_airport

    def destination(self) -> str:
        """
        Arrival airport of the last leg.

        Returns:
            Airport code, or "" if the itinerary is empty
        """
        if self.length() == 0:
            return ""

        last = self.remove_from_end()
        self.add_to_end(last)

        return last.to_airport

    def layover_time(self) -> int:
        """
        Minutes between the first leg's arrival and the second's departure.

        Requires exactly two legs. The result is negative when the
        second leg departs before the first one lands.

        Returns:
            Layover in minutes

        Raises:
            WrongLegCountError: If the itinerary does not hold two legs
        """
        if self.length() != 2:
            raise WrongLegCountError(expected=2, actual=self.length())

        first = self.remove_from_front()
        second = self.remove_from_front()
        try:
            layover = second.depart_minute - first.arrive_minute
        finally:
            self.add_to_end(first)
            self.add_to_end(second)

        if layover < 0:
            logger.warning(
                f"Negative layover of {layover} min at {first.to_airport}: "
                f"{second} departs before {first} arrives"
            )
        else:
            logger.debug(f"Layover at {first.to_airport}: {layover} min")

        return layover

    def is_connection_valid(self, min_layover_minutes: int) -> bool:
        """
        Check the layover meets a minimum.

        Args:
            min_layover_minutes: Minimum acceptable layover (>= 0)

        Returns:
            True if layover_time() >= min_layover_minutes
        """
        self._check_threshold("min_layover_minutes", min_layover_minutes)
        return self.layover_time() >= min_layover_minutes

    def is_connection_valid_for_policy(
        self,
        policy: BaggagePolicy,
        min_through: int,
        min_recheck: int
    ) -> bool:
        """
        Check the layover against the minimum for a baggage policy.

        Args:
            policy: Baggage handling at the connection
            min_through: Minimum layover when bags are through-checked
            min_recheck: Minimum layover when bags must be rechecked

        Returns:
            True if the layover meets the threshold the policy selects
        """
        if policy is None:
            raise NullArgumentError("policy")
        if not isinstance(policy, BaggagePolicy):
            raise TypeError(
                f"policy must be a BaggagePolicy, got {type(policy).__name__}"
            )
        self._check_threshold("min_through", min_through)
        self._check_threshold("min_recheck", min_recheck)

        if policy == BaggagePolicy.THROUGH_CHECK:
            threshold = min_through
        else:
            threshold = min_recheck
        return self.is_connection_valid(threshold)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize itinerary to dictionary."""
        return {
            "legs": [leg.to_dict() for leg in self._legs],
            "origin": self.origin(),
            "destination": self.destination()
        }

    @staticmethod
    def _check_threshold(name: str, value: int) -> None:
        if value is None:
            raise NullArgumentError(name)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
        if value < 0:
            raise NegativeThresholdError(name, value)

    @staticmethod
    def _check_leg(leg: Leg) -> None:
        if leg is None:
            raise NullArgumentError("leg")
        if not isinstance(leg, Leg):
            raise TypeError(f"leg must be a Leg, got {type(leg).__name__}")

    def __len__(self) -> int:
        return self.length()

    def __repr__(self) -> str:
        leg_str = ", ".join(str(leg) for leg in self._legs)
        return f"Itinerary([{leg_str}])"
