"""Pytest fixtures for itinerary tests."""

import pytest
from datetime import timedelta
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import BaggagePolicy, Itinerary, Leg, LayoverRules, LayoverRulesRegistry
from data.generators.demo_itinerary import generate_demo_itinerary


@pytest.fixture
def demo_legs():
    """CMH -> ORD -> SFO with an 85 minute layover at ORD."""
    return [
        Leg(from_airport="CMH", to_airport="ORD", depart_minute=440, arrive_minute=515),
        Leg(from_airport="ORD", to_airport="SFO", depart_minute=600, arrive_minute=775)
    ]


@pytest.fixture
def two_leg_itinerary(demo_legs):
    """Itinerary holding the two demo legs in travel order."""
    itinerary = Itinerary()
    for leg in demo_legs:
        itinerary.add_to_end(leg)
    return itinerary


@pytest.fixture
def empty_itinerary():
    """Freshly constructed itinerary."""
    return Itinerary()


@pytest.fixture
def default_rules():
    """Standard layover rules."""
    return LayoverRules(
        min_through_connection=timedelta(minutes=60),
        min_recheck_connection=timedelta(minutes=120)
    )


@pytest.fixture
def registry(default_rules):
    """Registry with a slower recheck minimum at ORD."""
    rules = LayoverRulesRegistry(defaults=default_rules)
    rules.set_minimum("ORD", BaggagePolicy.RECHECK_REQUIRED, 150)
    return rules


@pytest.fixture
def demo_instance():
    """Full demo itinerary and rules."""
    return generate_demo_itinerary()


@pytest.fixture
def snapshot():
    """Read every leg out through the kernel and restore the itinerary."""
    def _snapshot(itinerary):
        legs = []
        while itinerary.length() > 0:
            legs.append(itinerary.remove_from_front())
        for leg in legs:
            itinerary.add_to_end(leg)
        return legs
    return _snapshot
