"""
Opt-in range checks for coordinate input.

The projection formulas accept any float and produce undefined (but not
exceptional) results outside their domain, e.g. latitudes beyond the poles or
UTM positions whose footprint latitude reaches 90 degrees. These validators
let callers reject such input up front; they never alter in-range values.

The plain constructors and conversion methods do not call these functions.
The ``create`` factories on the coordinate classes do.
"""

import logging
import math
import numbers
from typing import Any

from utm_convert.exceptions import InputRangeError

logger = logging.getLogger(__name__)


MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

# Latitude band covered by UTM (polar regions use UPS)
MIN_UTM_LATITUDE = -80.0
MAX_UTM_LATITUDE = 84.0

MIN_ZONE = 1
MAX_ZONE = 60

MINUTES_PER_DEGREE = 60.0

LATITUDE_DIRECTIONS = frozenset("NSns")
LONGITUDE_DIRECTIONS = frozenset("EWew")


def _reject(name: str, value: Any, message: str) -> None:
    logger.debug("Rejected %s=%r: %s", name, value, message)
    raise InputRangeError(name, value, message)


def _require_finite(name: str, value: Any) -> None:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        _reject(name, value, f"{name} must be a real number, got {type(value).__name__}")
    if not math.isfinite(value):
        _reject(name, value, f"{name} must be finite, got {value}")


def validate_latitude(latitude: float, utm_band: bool = False) -> None:
    """Check a latitude in decimal degrees.

    Args:
        latitude: Latitude to check.
        utm_band: If True, restrict to the UTM band [-80, 84] instead of [-90, 90].

    Raises:
        InputRangeError: If the latitude is not finite or out of range.
    """
    _require_finite("latitude", latitude)
    low, high = (MIN_UTM_LATITUDE, MAX_UTM_LATITUDE) if utm_band else (MIN_LATITUDE, MAX_LATITUDE)
    if not low <= latitude <= high:
        _reject("latitude", latitude, f"Latitude must be in range [{low}, {high}]. Got {latitude}")


def validate_longitude(longitude: float) -> None:
    """Check that a longitude is a finite number (any value wraps through the zone formula)."""
    _require_finite("longitude", longitude)


def validate_zone(zone: Any) -> None:
    """Check a UTM zone number is an integer in [1, 60].

    Raises:
        InputRangeError: If the zone is not an integer or out of range.
    """
    if not isinstance(zone, numbers.Integral) or isinstance(zone, bool):
        _reject("zone", zone, f"Zone must be an integer, got {type(zone).__name__}")
    if not MIN_ZONE <= zone <= MAX_ZONE:
        _reject("zone", zone, f"Zone must be in range [{MIN_ZONE}, {MAX_ZONE}]. Got {zone}")


def validate_utm(zone: Any, easting: float, northing: float) -> None:
    """Check a UTM position: valid zone and finite easting/northing."""
    validate_zone(zone)
    _require_finite("easting", easting)
    _require_finite("northing", northing)


def validate_degree_minute(
    name: str,
    direction: Any,
    degrees: Any,
    minutes: Any,
    allowed_directions: frozenset,
    max_degrees: float,
) -> None:
    """Check one half (latitude or longitude) of a degree-minute coordinate.

    Args:
        name: "latitude" or "longitude", used in error messages.
        direction: Direction letter.
        degrees: Whole degrees, must be a non-negative integer.
        minutes: Minutes, must be in [0, 60).
        allowed_directions: Accepted direction letters.
        max_degrees: Upper bound of degrees + minutes / 60.

    Raises:
        InputRangeError: If any part is invalid.
    """
    if not isinstance(direction, str) or direction not in allowed_directions:
        _reject(f"{name}_direction", direction,
                f"{name.capitalize()} direction must be one of "
                f"{', '.join(sorted(allowed_directions))}. Got {direction!r}")
    if not isinstance(degrees, numbers.Integral) or isinstance(degrees, bool) or degrees < 0:
        _reject(f"{name}_degrees", degrees,
                f"{name.capitalize()} degrees must be a non-negative integer. Got {degrees!r}")
    _require_finite(f"{name}_minutes", minutes)
    if not 0 <= minutes < MINUTES_PER_DEGREE:
        _reject(f"{name}_minutes", minutes,
                f"{name.capitalize()} minutes must be in range [0, 60). Got {minutes}")
    if degrees + minutes / MINUTES_PER_DEGREE > max_degrees:
        _reject(f"{name}_degrees", degrees,
                f"{name.capitalize()} must not exceed {max_degrees} degrees. "
                f"Got {degrees} degrees {minutes} minutes")
