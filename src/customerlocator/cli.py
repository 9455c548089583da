"""
customerlocator CLI entrypoint.

Prints the customers living within a radius of a reference point, sorted by user id:

    customerlocator --file data/customers.json --radius 100 --location 53.3393,-6.2576841

Defaults for the file, radius and reference point come from settings
(`customerlocator.config.settings`). All locating logic lives in
`customerlocator.locator.locator.CustomerLocator`.
"""

from __future__ import annotations

import argparse
import logging
import sys

from customerlocator.config.settings import get_settings
from customerlocator.core.geo import Coordinate, parse_coordinate
from customerlocator.core.logging import configure_logging
from customerlocator.core.units import DistanceKm
from customerlocator.datasources.json_lines import CustomerJsonLinesFile
from customerlocator.locator.locator import CustomerLocator, LocatorError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOCATOR_ERROR = 1
EXIT_USAGE_ERROR = 2


def _parse_radius(text: str) -> DistanceKm:
    try:
        return DistanceKm(float(text))
    except ValueError as exc:
        raise ValueError(f"Radius parse error: invalid kilometers value '{text}'") from exc


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the customerlocator CLI."""
    parser = argparse.ArgumentParser(
        prog="customerlocator",
        description="List customers within a radius (km) of a location, sorted by user id.",
    )
    parser.add_argument("-f", "--file", default=None, help="JSON-lines customers file.")
    parser.add_argument("-r", "--radius", default=None, help="Radius in kilometers (default from settings).")
    parser.add_argument(
        "-l",
        "--location",
        default=None,
        help="Reference point as LAT,LON (default from settings).",
    )
    parser.add_argument(
        "-s",
        "--silent",
        "--quiet",
        dest="quiet",
        action="store_true",
        help="Do not print matching customers.",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    settings = get_settings()

    try:
        radius = (
            _parse_radius(args.radius)
            if args.radius is not None
            else DistanceKm(settings.locator.default_radius_km)
        )
        location: Coordinate = (
            parse_coordinate(args.location)
            if args.location is not None
            else settings.locator.reference.to_coordinate()
        )
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_USAGE_ERROR

    path = args.file or settings.locator.customers_path
    try:
        locator = CustomerLocator.from_source(CustomerJsonLinesFile(path))
    except LocatorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_LOCATOR_ERROR

    customers = locator.locate_within(radius, location)
    customers.sort_by_user_id()
    logger.info("%d customers within %s of %s", len(customers), radius, location)

    if not args.quiet:
        for customer in customers:
            print(f"{customer} is {customer.distance_from(location)} from provided location.")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m customerlocator.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
