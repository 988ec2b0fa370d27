"""Baggage handling policy model."""

from enum import Enum


class BaggagePolicy(Enum):
    """How checked bags are handled at a connection."""
    THROUGH_CHECK = "through_check"  # Bag transfers automatically
    RECHECK_REQUIRED = "recheck_required"  # Passenger reclaims and rechecks
