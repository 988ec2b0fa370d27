"""Minimum layover rules and per-airport overrides."""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Dict, Optional, Tuple
import logging

from models.baggage_policy import BaggagePolicy
from models.exceptions import (
    InvalidAirportCodeError,
    NegativeThresholdError,
    NullArgumentError,
)

logger = logging.getLogger(__name__)


@dataclass
class LayoverRules:
    """
    Default minimum connection times per baggage policy.

    A bag that is through-checked needs less time at the connection
    than one the passenger must reclaim and check in again.
    """
    min_through_connection: timedelta = timedelta(minutes=60)
    min_recheck_connection: timedelta = timedelta(minutes=120)

    def __post_init__(self) -> None:
        if self.min_through_connection < timedelta(0):
            raise NegativeThresholdError(
                "min_through_connection", self.min_through_minutes
            )
        if self.min_recheck_connection < timedelta(0):
            raise NegativeThresholdError(
                "min_recheck_connection", self.min_recheck_minutes
            )

    @property
    def min_through_minutes(self) -> int:
        """Minimum through-check connection in minutes."""
        return int(self.min_through_connection.total_seconds() // 60)

    @property
    def min_recheck_minutes(self) -> int:
        """Minimum recheck connection in minutes."""
        return int(self.min_recheck_connection.total_seconds() // 60)

    def threshold_for(self, policy: BaggagePolicy) -> int:
        """Minimum connection in minutes for the given policy."""
        if policy is None:
            raise NullArgumentError("policy")
        if policy == BaggagePolicy.THROUGH_CHECK:
            return self.min_through_minutes
        return self.min_recheck_minutes


@dataclass
class LayoverRulesRegistry:
    """
    Minimum connection times overridden per (airport, policy).

    Airports without an override fall back to the registry's
    LayoverRules. Codes are trimmed and uppercased like Leg codes,
    so " ord " and "ORD" are the same key.
    """
    defaults: LayoverRules = field(default_factory=LayoverRules)
    _minimums: Dict[Tuple[str, BaggagePolicy], int] = field(
        default_factory=dict, init=False, repr=False
    )

    def set_minimum(
        self,
        airport: str,
        policy: BaggagePolicy,
        minutes: int
    ) -> None:
        """
        Record the minimum connection for an airport and policy.

        Args:
            airport: Connection airport code
            policy: Baggage policy the minimum applies to
            minutes: Minimum connection in minutes (>= 0)
        """
        key = self._key(airport, policy)
        if minutes is None:
            raise NullArgumentError("minutes")
        if not isinstance(minutes, int) or isinstance(minutes, bool):
            raise TypeError(f"minutes must be an int, got {type(minutes).__name__}")
        if minutes < 0:
            raise NegativeThresholdError("minutes", minutes)

        logger.debug(f"Minimum connection at {key[0]} ({policy.name}): {minutes} min")
        self._minimums[key] = minutes

    def value_or_default(
        self,
        airport: str,
        policy: BaggagePolicy,
        fallback: int
    ) -> int:
        """Stored minimum for (airport, policy), or fallback if none."""
        return self._minimums.get(self._key(airport, policy), fallback)

    def thresholds_for(self, airport: str) -> Tuple[int, int]:
        """
        Minimums to use at an airport.

        Returns:
            Tuple of (min_through, min_recheck) in minutes, ready to pass
            to Itinerary.is_connection_valid_for_policy
        """
        min_through = self.value_or_default(
            airport,
            BaggagePolicy.THROUGH_CHECK,
            self.defaults.min_through_minutes
        )
        min_recheck = self.value_or_default(
            airport,
            BaggagePolicy.RECHECK_REQUIRED,
            self.defaults.min_recheck_minutes
        )
        return min_through, min_recheck

    @staticmethod
    def _key(
        airport: str,
        policy: Optional[BaggagePolicy]
    ) -> Tuple[str, BaggagePolicy]:
        if policy is None:
            raise NullArgumentError("policy")
        if not isinstance(policy, BaggagePolicy):
            raise TypeError(
                f"policy must be a BaggagePolicy, got {type(policy).__name__}"
            )
        if airport is None:
            raise NullArgumentError("airport")
        if not isinstance(airport, str):
            raise TypeError(f"airport must be a str, got {type(airport).__name__}")
        code = airport.strip().upper()
        if not code:
            raise InvalidAirportCodeError(airport)
        return code, policy

    def __len__(self) -> int:
        return len(self._minimums)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        airport, policy = item
        if not isinstance(policy, BaggagePolicy) or not isinstance(airport, str):
            return False
        code = airport.strip().upper()
        return (code, policy) in self._minimums
