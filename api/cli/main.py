"""Command-line interface for the itinerary connection demo."""

import argparse
import logging
import json
import sys
from pathlib import Path
from typing import Any, Dict

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from data.generators.demo_itinerary import (
    generate_demo_itinerary,
    print_itinerary_summary
)
from models import BaggagePolicy


def setup_logging(level: str = "INFO", log_file: str = None) -> None:
    """Configure logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=handlers
    )


def run_demo(
    min_through: int = None,
    min_recheck: int = None,
    verbose: bool = False,
    output_file: str = None
) -> Dict[str, Any]:
    """
    Run the connection checks on the demo itinerary.

    Args:
        min_through: Minimum through-check layover (default from rules)
        min_recheck: Minimum recheck layover (default from rules)
        verbose: Print the itinerary table before the results
        output_file: Optional path for a JSON report

    Returns:
        Report dictionary with the printed values
    """
    logger = logging.getLogger(__name__)

    logger.info("Generating demo itinerary...")
    itinerary, rules = generate_demo_itinerary()

    if min_through is None:
        min_through = rules.min_through_minutes
    if min_recheck is None:
        min_recheck = rules.min_recheck_minutes

    if verbose:
        print_itinerary_summary(itinerary, rules)

    through_valid = itinerary.is_connection_valid_for_policy(
        BaggagePolicy.THROUGH_CHECK, min_through, min_recheck
    )
    recheck_valid = itinerary.is_connection_valid_for_policy(
        BaggagePolicy.RECHECK_REQUIRED, min_through, min_recheck
    )

    print(f"Leg count: {itinerary.length()}")
    print(f"Origin: {itinerary.origin()}")
    print(f"Destination: {itinerary.destination()}")
    print(f"Layover time (min): {itinerary.layover_time()}")
    print(f"Valid (THROUGH_CHECK, min={min_through})? {through_valid}")
    print(f"Valid (RECHECK_REQUIRED, min={min_recheck})? {recheck_valid}")

    report = {
        "itinerary": itinerary.to_dict(),
        "leg_count": itinerary.length(),
        "layover_minutes": itinerary.layover_time(),
        "min_through": min_through,
        "min_recheck": min_recheck,
        "valid": {
            BaggagePolicy.THROUGH_CHECK.name: through_valid,
            BaggagePolicy.RECHECK_REQUIRED.name: recheck_valid
        }
    }

    if output_file:
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(report, f, indent=2)
        logger.info(f"Report saved to {output_file}")

    return report


def main(argv=None):
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Check a two-leg itinerary's connection against baggage policies"
    )

    parser.add_argument(
        "--min-through",
        type=int,
        default=None,
        help="Minimum layover in minutes for through-checked bags (default: 60)"
    )

    parser.add_argument(
        "--min-recheck",
        type=int,
        default=None,
        help="Minimum layover in minutes when bags are rechecked (default: 120)"
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file for report JSON"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Log file path"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print the itinerary table before the results"
    )

    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.log_level, args.log_file)

    run_demo(
        min_through=args.min_through,
        min_recheck=args.min_recheck,
        verbose=args.verbose,
        output_file=args.output
    )


if __name__ == "__main__":
    main()
