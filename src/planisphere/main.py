import argparse
import math
import sys
from datetime import datetime, timezone
from typing import List, Optional, Tuple

import numpy as np

from . import __version__
from .catalogue import StarCatalogue, load_catalogue
from .color import color_for_temperature
from .coordinates import (
    CartesianCoordinates,
    EquatorialToHorizontalConversion,
    GeographicCoordinates,
    HorizontalCoordinates,
    StereographicProjection,
)
from .errors import PlanisphereError, TimeParseError, handle_error
from .models import CelestialObject, Star, describe
from .sky import ObservedSky

# Compass point names used for octants
_CARDINALS = ("N", "E", "S", "W")


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Compute the sky seen by an observer and its planisphere projection."
    )
    parser.add_argument(
        "--utc-time",
        type=str,
        default=None,
        help="ISO-8601 UTC timestamp (default: current time)",
    )
    parser.add_argument(
        "--lon",
        type=float,
        default=6.57,
        help="Observer longitude in degrees, positive east (default: 6.57)",
    )
    parser.add_argument(
        "--lat",
        type=float,
        default=46.52,
        help="Observer latitude in degrees (default: 46.52)",
    )
    parser.add_argument(
        "--center-az",
        type=float,
        default=180.0,
        help="Azimuth of the projection centre in degrees (default: 180)",
    )
    parser.add_argument(
        "--center-alt",
        type=float,
        default=15.0,
        help="Altitude of the projection centre in degrees (default: 15)",
    )
    parser.add_argument(
        "--stars",
        type=str,
        default=None,
        help="Path to a HYG database CSV file (default: no stars)",
    )
    parser.add_argument(
        "--asterisms",
        type=str,
        default=None,
        help="Path to an asterism file, used together with --stars",
    )
    parser.add_argument(
        "--brightest",
        type=int,
        default=0,
        metavar="N",
        help="List the N brightest stars above the horizon",
    )
    parser.add_argument(
        "--closest-to",
        type=float,
        nargs=2,
        metavar=("AZ", "ALT"),
        default=None,
        help="Report the object closest to this azimuth and altitude in degrees",
    )
    parser.add_argument(
        "--max-distance",
        type=float,
        default=0.01,
        help="Maximum distance on the plane for --closest-to (default: 0.01)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print detailed internal state",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"planisphere {__version__}",
    )
    return parser.parse_args(argv)


def parse_utc_time(utc_time: Optional[str]) -> datetime:
    """Parse an ISO-8601 timestamp into an aware datetime.

    Args:
        utc_time: Timestamp such as "2020-04-22T20:30:00Z", None for now.
            Timestamps without an offset are taken as UTC.

    Returns:
        Time zone aware datetime

    Raises:
        TimeParseError: If utc_time cannot be parsed
    """
    if utc_time is None:
        return datetime.now(timezone.utc)

    text = utc_time
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        when = datetime.fromisoformat(text)
    except ValueError:
        raise TimeParseError(utc_time)

    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when


def observe(
    when: datetime,
    lon_deg: float,
    lat_deg: float,
    center_az_deg: float,
    center_alt_deg: float,
    stars_path: Optional[str] = None,
    asterisms_path: Optional[str] = None,
) -> Tuple[ObservedSky, StereographicProjection]:
    """Build the projection and the observed sky for the given settings.

    Raises:
        PlanisphereError: If a setting is invalid or a catalogue cannot be loaded
    """
    where = GeographicCoordinates.of_deg(lon_deg, lat_deg)
    center = HorizontalCoordinates.of_deg(center_az_deg, center_alt_deg)
    projection = StereographicProjection(center)

    if stars_path is not None:
        catalogue = load_catalogue(stars_path, asterisms_path)
    elif asterisms_path is not None:
        raise PlanisphereError(
            "An asterism file was given without a star database",
            suggestions=["Pass the HYG database with --stars"],
        )
    else:
        catalogue = StarCatalogue((), ())

    return ObservedSky(when, where, projection, catalogue), projection


def _horizontal(
    projection: StereographicProjection, position: CartesianCoordinates
) -> Optional[HorizontalCoordinates]:
    if not (math.isfinite(position.x) and math.isfinite(position.y)):
        return None
    return projection.inverse_apply(position)


def format_object(
    body: CelestialObject,
    position: CartesianCoordinates,
    projection: StereographicProjection,
) -> str:
    """One line describing an object, its horizontal and plane position."""
    azalt = _horizontal(projection, position)
    if azalt is None:
        return f"{describe(body):<16} opposite the projection centre"
    return (
        f"{describe(body):<16} az {azalt.az_deg:7.2f}° "
        f"({azalt.az_octant_name(*_CARDINALS):<2}) alt {azalt.alt_deg:6.2f}°  "
        f"mag {body.magnitude:6.2f}  plane {position}"
    )


def brightest_stars(
    sky: ObservedSky,
    when: datetime,
    where: GeographicCoordinates,
    count: int,
) -> List[Tuple[Star, CartesianCoordinates]]:
    """The count brightest stars above the horizon, brightest first."""
    if not sky.stars:
        return []
    conversion = EquatorialToHorizontalConversion(when, where)
    ra = np.array([star.equatorial_position.ra for star in sky.stars])
    dec = np.array([star.equatorial_position.dec for star in sky.stars])
    _, alt = conversion.apply_arrays(ra, dec)

    positions = sky.star_positions.reshape(-1, 2)
    visible = [
        (star, CartesianCoordinates(float(x), float(y)))
        for star, (x, y), above in zip(sky.stars, positions, alt > 0)
        if above
    ]
    visible.sort(key=lambda entry: entry[0].magnitude)
    return visible[:count]


def print_verbose_info(sky: ObservedSky, when: datetime, projection) -> None:
    """Print detailed internal state information for verbose output."""
    print("=== VERBOSE: Internal State ===")
    print()

    print("Observation:")
    print(f"  UTC time: {when.astimezone(timezone.utc).isoformat()}")
    print(f"  Projection: {projection!r}")
    print()

    print("Sun:")
    print(f"  Ecliptic position: {sky.sun.ecliptic_position}")
    print(f"  Equatorial position: {sky.sun.equatorial_position}")
    print(f"  Mean anomaly: {math.degrees(sky.sun.mean_anomaly):.4f}°")
    print(f"  Angular size: {math.degrees(sky.sun.angular_size):.4f}°")
    print()

    print("Moon:")
    print(f"  Equatorial position: {sky.moon.equatorial_position}")
    print(f"  Phase: {sky.moon.phase:.4f}")
    print(f"  Angular size: {math.degrees(sky.moon.angular_size):.4f}°")
    print()

    print("Catalogue:")
    print(f"  Stars: {len(sky.stars)}")
    print(f"  Asterisms: {len(sky.asterisms)}")
    print("=== END VERBOSE ===")
    print()


def run(
    utc_time: Optional[str] = None,
    lon_deg: float = 6.57,
    lat_deg: float = 46.52,
    center_az_deg: float = 180.0,
    center_alt_deg: float = 15.0,
    stars_path: Optional[str] = None,
    asterisms_path: Optional[str] = None,
    brightest: int = 0,
    closest_to: Optional[Tuple[float, float]] = None,
    max_distance: float = 0.01,
    verbose: bool = False,
) -> int:
    """Compute one sky snapshot and print it.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        when = parse_utc_time(utc_time)
    except TimeParseError as e:
        return handle_error(e, "parsing UTC time")

    try:
        sky, projection = observe(
            when,
            lon_deg,
            lat_deg,
            center_az_deg,
            center_alt_deg,
            stars_path,
            asterisms_path,
        )
    except PlanisphereError as e:
        return handle_error(e, "observing the sky")

    try:
        if verbose:
            print_verbose_info(sky, when, projection)

        print(f"Sky at {when.isoformat()} from ({lon_deg:.2f}°, {lat_deg:.2f}°)")
        print(format_object(sky.sun, sky.sun_position, projection))
        print(format_object(sky.moon, sky.moon_position, projection))
        for planet in sky.planets:
            print(format_object(planet, sky.position_of(planet), projection))

        if brightest > 0:
            print()
            print("Brightest stars above the horizon:")
            for star, position in brightest_stars(
                sky, when, GeographicCoordinates.of_deg(lon_deg, lat_deg), brightest
            ):
                color = color_for_temperature(star.color_temperature)
                print(f"{format_object(star, position, projection)}  color {color}")

        if closest_to is not None:
            az_deg, alt_deg = closest_to
            point = projection.apply(HorizontalCoordinates.of_deg(az_deg, alt_deg))
            print()
            closest = sky.object_closest_to(point, max_distance)
            if closest is None:
                print(f"No object within {max_distance} of {point}")
            else:
                print(f"Closest object: {describe(closest)}")

        return 0

    except Exception as e:
        return handle_error(e, "printing the observed sky")


def main():
    """CLI entry point."""
    args = parse_args()

    exit_code = run(
        utc_time=args.utc_time,
        lon_deg=args.lon,
        lat_deg=args.lat,
        center_az_deg=args.center_az,
        center_alt_deg=args.center_alt,
        stars_path=args.stars,
        asterisms_path=args.asterisms,
        brightest=args.brightest,
        closest_to=tuple(args.closest_to) if args.closest_to else None,
        max_distance=args.max_distance,
        verbose=args.verbose,
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
