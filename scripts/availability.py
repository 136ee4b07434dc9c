"""
Availability command-line entry point.

    python scripts/availability.py month person.json --month 1 --year 2024
    python scripts/availability.py index person.json --until 2024-04-01

The input file holds the person's weekly `availability`, their `meetings`
and optionally `now` (ISO datetime or epoch milliseconds; defaults to the
current time).
Results are printed to stdout as JSON.
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from availability_engine.core.config_manager import Config
from availability_engine.models import (
    availability_from_list, coerce_datetime, meeting_from_dict, parse_iso_datetime
)
from availability_engine.services.availability_service import AvailabilityService
from availability_engine.utils.logger import setup_logger

logger = setup_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Project weekly availability into bookable time.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    month = subparsers.add_parser("month", help="Bookable 30 min timeslots for a month")
    month.add_argument("input", type=Path, help="JSON file with availability and meetings")
    month.add_argument("--month", type=int, required=True, help="Month (1 = January)")
    month.add_argument("--year", type=int, required=True, help="Year")

    index = subparsers.add_parser("index", help="Start instants for the search index")
    index.add_argument("input", type=Path, help="JSON file with availability and meetings")
    index.add_argument("--until", help="Horizon as ISO datetime (default: 3 months out)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)

    if not Config.validate():
        logger.error("Configuration validation failed")
        return 1

    try:
        with open(args.input, 'r', encoding='utf-8') as f:
            data = json.load(f)

        baseline = availability_from_list(data.get('availability', []))
        meetings = [meeting_from_dict(m) for m in data.get('meetings', [])]
        now = datetime.now()
        if data.get('now') is not None:
            now = coerce_datetime(data['now'])
            if now is None:
                raise ValueError(f"Invalid now value: {data['now']!r}")
        service = AvailabilityService()

        if args.command == "month":
            result = service.month_availability(baseline, meetings, args.month, args.year, now).to_list()
        else:
            until = parse_iso_datetime(args.until) if args.until else None
            if args.until and until is None:
                raise ValueError(f"Invalid --until value: {args.until}")
            result = service.search_availability(baseline, meetings, now, until)

        print(json.dumps(result, indent=2))
        return 0

    except FileNotFoundError as e:
        logger.error("Missing required file", exc_info=True)
        logger.error(f"Could not find: {e.filename}")
        return 1

    except (ValueError, KeyError, OSError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"Could not process {args.input}: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
