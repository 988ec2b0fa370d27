"""Core data models for flight itineraries and connection checks."""

from models.baggage_policy import BaggagePolicy
from models.exceptions import (
    ItineraryError,
    InvalidLegError,
    InvalidAirportCodeError,
    NullArgumentError,
    EmptySequenceError,
    WrongLegCountError,
    NegativeThresholdError,
)
from models.leg import Leg
from models.itinerary import Itinerary
from models.layover_rules import LayoverRules, LayoverRulesRegistry

__all__ = [
    "BaggagePolicy",
    "ItineraryError",
    "InvalidLegError",
    "InvalidAirportCodeError",
    "NullArgumentError",
    "EmptySequenceError",
    "WrongLegCountError",
    "NegativeThresholdError",
    "Leg",
    "Itinerary",
    "LayoverRules",
    "LayoverRulesRegistry",
]
