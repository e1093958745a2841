"""Resolve an address with the configured geocoder and optionally measure distance to a point."""

import argparse
import asyncio
import logging
import sys

from freshoz.config import settings
from freshoz.schemas.geo import Address, Coordinates
from freshoz.services.geocoding import get_resolver
from freshoz.utils.geo import haversine_distance, km_to_miles

logging.basicConfig(level=settings.log_level, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)


async def geocode(address: Address, target: Coordinates | None = None) -> bool:
    """Print coordinates for an address and return True if it resolved."""
    resolver = get_resolver(settings)
    coordinates = await resolver.resolve(address)

    if coordinates is None:
        print(f"Could not resolve: {address.canonical()}")
        return False

    print(f"{address.canonical()}")
    print(f"  latitude:  {coordinates.latitude:.6f}")
    print(f"  longitude: {coordinates.longitude:.6f}")

    if target is not None:
        distance_km = haversine_distance(coordinates, target)
        print(
            f"  distance to ({target.latitude}, {target.longitude}): "
            f"{distance_km:.2f} km ({km_to_miles(distance_km):.2f} mi)"
        )
    return True


def main() -> None:
    parser = argparse.ArgumentParser(
        description=f"Geocode an address (backend: {settings.geocoder_backend})."
    )
    parser.add_argument("--street", required=True)
    parser.add_argument("--city", required=True)
    parser.add_argument("--state", required=True)
    parser.add_argument("--zip", required=True, dest="zip_code")
    parser.add_argument(
        "--to",
        nargs=2,
        type=float,
        metavar=("LAT", "LNG"),
        help="Also print the straight-line distance to this point",
    )
    args = parser.parse_args()

    address = Address(street=args.street, city=args.city, state=args.state, zip=args.zip_code)
    target = Coordinates(latitude=args.to[0], longitude=args.to[1]) if args.to else None

    ok = asyncio.run(geocode(address, target))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
