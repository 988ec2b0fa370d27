"""Demo itinerary generator.

Builds the one-connection Columbus -> Chicago -> San Francisco trip
used by the command-line demo and the integration tests.
"""

from typing import Tuple

from models import Itinerary, Leg, LayoverRules


def clock_minutes(hour: int, minute: int = 0) -> int:
    """Convert a clock time on the reference day to minutes."""
    return hour * 60 + minute


def generate_demo_itinerary() -> Tuple[Itinerary, LayoverRules]:
    """
    Generate the demo itinerary.

    Returns:
        Tuple of (itinerary, rules)

    Dataset Details:
        - CMH -> ORD 07:20-08:35, ORD -> SFO 10:00-12:55
        - 85 minute layover at ORD
        - Default rules: 60 min through-check, 120 min recheck
    """
    itinerary = Itinerary()
    itinerary.add_to_end(Leg(
        from_airport="CMH",
        to_airport="ORD",
        depart_minute=clock_minutes(7, 20),
        arrive_minute=clock_minutes(8, 35)
    ))
    itinerary.add_to_end(Leg(
        from_airport="ORD",
        to_airport="SFO",
        depart_minute=clock_minutes(10, 0),
        arrive_minute=clock_minutes(12, 55)
    ))

    return itinerary, LayoverRules()


def _format_clock(minutes: int) -> str:
    days, rest = divmod(minutes, 24 * 60)
    clock = f"{rest // 60:02d}:{rest % 60:02d}"
    return f"{clock}+{days}" if days else clock


def print_itinerary_summary(itinerary: Itinerary, rules: LayoverRules) -> None:
    """Print a summary of the itinerary."""
    print("\n" + "=" * 60)
    print("                 DEMO ITINERARY")
    print("=" * 60)

    print("\nLEGS:")
    print("-" * 60)
    print(f"{'#':<3} {'From':<5} {'To':<5} {'Depart':>8} {'Arrive':>8} {'Minutes':>8}")
    print("-" * 60)
    for i, leg in enumerate(itinerary.to_dict()["legs"], start=1):
        print(
            f"{i:<3} {leg['from_airport']:<5} {leg['to_airport']:<5} "
            f"{_format_clock(leg['depart_minute']):>8} "
            f"{_format_clock(leg['arrive_minute']):>8} "
            f"{leg['flight_minutes']:>8}"
        )

    print("\nRULES:")
    print("-" * 60)
    print(f"  Min Through-Check Connection: {rules.min_through_minutes} minutes")
    print(f"  Min Recheck Connection:       {rules.min_recheck_minutes} minutes")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    itinerary, rules = generate_demo_itinerary()
    print_itinerary_summary(itinerary, rules)
