#!/usr/bin/env python3
"""
Flight Itinerary Connection Checker

Main entry point for the itinerary demo.
"""

import sys
from pathlib import Path

# Ensure the package is in the path
sys.path.insert(0, str(Path(__file__).parent))

from api.cli.main import main

if __name__ == "__main__":
    main()
