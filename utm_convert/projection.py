"""
Transverse Mercator projection formulas for UTM.

This module implements the forward (geodetic -> UTM) and inverse
(UTM -> geodetic) Universal Transverse Mercator projection using the series
expansions of USGS Professional Paper 1395 (Snyder, 1987), in the form
published by Dr. Steve Dutch. Both directions are closed-form: there is no
iteration and no convergence tolerance.

Conventions:
    - Zones are 6 degrees wide, zone 1 starting at longitude -180.
    - Scale on the central meridian k0 = 0.9996.
    - False easting 500000 m, false northing 0 m in *both* hemispheres.
      Southern-hemisphere points therefore have negative northings; the
      conventional +10,000,000 m southern offset is deliberately not applied.

Accuracy Notes:
    - Forward/inverse round trip reproduces latitude/longitude to better than
      1e-6 degrees for latitudes in the UTM band [-80, 84] within the zone.
    - Near the poles cos(phi1) approaches zero and the inverse series blows up;
      results for such input are undefined (see utm_convert.validation for
      opt-in range checks).

References:
    - Snyder, J.P. (1987). Map Projections - A Working Manual. USGS PP 1395,
      pp. 60-64.
    - Dutch, S. "Converting UTM to Latitude and Longitude (Or Vice Versa)".
"""

import logging
import math
from typing import Optional, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from utm_convert.datum import DatumRecord
from utm_convert.types import Degrees, Meters

logger = logging.getLogger(__name__)


# Scale on the central meridian
K0 = 0.9996

# Easting of the central meridian
FALSE_EASTING = 500000.0

# Width of a UTM zone in degrees
ZONE_WIDTH_DEG = 6


def utm_zone(longitude: Degrees) -> int:
    """Return the UTM zone containing a longitude.

    Zone 1 starts at -180 and numbers increase eastward. Longitudes outside
    [-180, 180) are not wrapped: the formula simply keeps counting.

    Args:
        longitude: Longitude in decimal degrees.

    Returns:
        1 + floor((longitude + 180) / 6)
    """
    return 1 + math.floor((longitude + 180) / ZONE_WIDTH_DEG)


def central_meridian(zone: int) -> Degrees:
    """Longitude of the central meridian of a zone, in degrees."""
    return Degrees(3 + ZONE_WIDTH_DEG * (zone - 1) - 180)


def _footprint_e1(eccentricity: float) -> float:
    """e1 of USGS PP 1395, used by the footprint latitude series."""
    root = math.sqrt(1 - eccentricity * eccentricity)
    return (1 - root) / (1 + root)


def geodetic_to_utm(
    latitude: Degrees,
    longitude: Degrees,
    ellipsoid: DatumRecord,
    zone: Optional[int] = None,
) -> Tuple[int, Meters, Meters]:
    """Project a latitude/longitude onto UTM.

    Args:
        latitude: Latitude in decimal degrees (positive north).
        longitude: Longitude in decimal degrees (positive east).
        ellipsoid: Reference ellipsoid parameters.
        zone: Zone to project into. None selects the zone containing
            the longitude; any explicit value is used as given.

    Returns:
        Tuple of (zone, easting, northing), easting/northing in meters.
        Northing is negative south of the equator.
    """
    eqrad = ellipsoid.equatorial_radius
    eccentricity = ellipsoid.eccentricity
    esq = ellipsoid.eccentricity_squared
    e0sq = ellipsoid.second_eccentricity_squared

    drad = math.pi / 180
    phi = latitude * drad

    if zone is None:
        zone = utm_zone(longitude)
    zcm = central_meridian(zone)

    N = eqrad / math.sqrt(1 - (eccentricity * math.sin(phi)) ** 2)
    T = math.tan(phi) ** 2
    C = e0sq * math.cos(phi) ** 2
    A = (longitude - zcm) * drad * math.cos(phi)

    # Arc length along the central meridian
    M = phi * (1 - esq * (1 / 4 + esq * (3 / 64 + 5 * esq / 256)))
    M = M - math.sin(2 * phi) * (esq * (3 / 8 + esq * (3 / 32 + 45 * esq / 1024)))
    M = M + math.sin(4 * phi) * (esq * esq * (15 / 256 + esq * 45 / 1024))
    M = M - math.sin(6 * phi) * (esq * esq * esq * (35 / 3072))
    M = M * eqrad

    easting = K0 * N * A * (1 + A * A * ((1 - T + C) / 6
                                         + A * A * (5 - 18 * T + T * T + 72 * C - 58 * e0sq) / 120))
    easting = easting + FALSE_EASTING
    northing = K0 * (M + N * math.tan(phi) * (A * A * (
        1 / 2 + A * A * ((5 - T + 9 * C + 4 * C * C) / 24
                         + A * A * (61 - 58 * T + T * T + 600 * C - 330 * e0sq) / 720))))

    logger.debug(
        "Projected (%s, %s) to zone %d easting %s northing %s",
        latitude, longitude, zone, easting, northing,
    )
    return zone, Meters(easting), Meters(northing)


def utm_to_geodetic(
    zone: int,
    easting: Meters,
    northing: Meters,
    ellipsoid: DatumRecord,
) -> Tuple[Degrees, Degrees]:
    """Invert a UTM position back to latitude/longitude.

    The footprint latitude phi1 is computed from the rectifying latitude mu
    and then corrected with polynomials in D = (easting - 500000) / (N1 k0).

    Args:
        zone: UTM zone number of the position.
        easting: Easting in meters (500000 on the central meridian).
        northing: Northing in meters, negative in the southern hemisphere.
        ellipsoid: Reference ellipsoid parameters.

    Returns:
        Tuple of (latitude, longitude) in decimal degrees.
    """
    eqrad = ellipsoid.equatorial_radius
    eccentricity = ellipsoid.eccentricity
    esq = ellipsoid.eccentricity_squared
    e0sq = ellipsoid.second_eccentricity_squared

    drad = math.pi / 180
    zcm = central_meridian(zone)
    e1 = _footprint_e1(eccentricity)

    M = northing / K0
    mu = M / (eqrad * (1 - esq * (1 / 4 + esq * (3 / 64 + 5 * esq / 256))))

    # Footprint latitude
    phi1 = (mu + e1 * (3 / 2 - 27 * e1 * e1 / 32) * math.sin(2 * mu)
            + e1 * e1 * (21 / 16 - 55 * e1 * e1 / 32) * math.sin(4 * mu))
    phi1 = phi1 + e1 * e1 * e1 * (math.sin(6 * mu) * 151 / 96 + e1 * math.sin(8 * mu) * 1097 / 512)

    C1 = e0sq * math.cos(phi1) ** 2
    T1 = math.tan(phi1) ** 2
    N1 = eqrad / math.sqrt(1 - (eccentricity * math.sin(phi1)) ** 2)
    R1 = N1 * (1 - eccentricity * eccentricity) / (1 - (eccentricity * math.sin(phi1)) ** 2)

    D = (easting - FALSE_EASTING) / (N1 * K0)
    phi = (D * D) * (1 / 2 - D * D * (5 + 3 * T1 + 10 * C1 - 4 * C1 * C1 - 9 * e0sq) / 24)
    phi = phi + D ** 6 * (61 + 90 * T1 + 298 * C1 + 45 * T1 * T1 - 252 * e0sq - 3 * C1 * C1) / 720
    phi = phi1 - (N1 * math.tan(phi1) / R1) * phi

    lng = D * (1 + D * D * ((-1 - 2 * T1 - C1) / 6
                            + D * D * (5 - 2 * C1 + 28 * T1 - 3 * C1 * C1 + 8 * e0sq + 24 * T1 * T1) / 120)) \
        / math.cos(phi1)

    latitude = phi / drad
    longitude = zcm + lng / drad
    logger.debug(
        "Inverted zone %d easting %s northing %s to (%s, %s)",
        zone, easting, northing, latitude, longitude,
    )
    return Degrees(latitude), Degrees(longitude)


# Vectorized versions for batch processing
def geodetic_to_utm_batch(
    latitudes: ArrayLike,
    longitudes: ArrayLike,
    ellipsoid: DatumRecord,
    zone: Optional[Union[int, ArrayLike]] = None,
) -> Tuple[NDArray[np.int64], NDArray[np.float64], NDArray[np.float64]]:
    """Vectorized geodetic to UTM projection.

    Uses the same series as geodetic_to_utm, element-wise.

    Args:
        latitudes: Latitudes in decimal degrees.
        longitudes: Longitudes in decimal degrees (broadcast against latitudes).
        ellipsoid: Reference ellipsoid.
        zone: Zone(s) to project into; None computes each point's own zone.

    Returns:
        (zones, eastings, northings) arrays.
    """
    lat = np.asarray(latitudes, dtype=np.float64)
    lng = np.asarray(longitudes, dtype=np.float64)
    lat, lng = np.broadcast_arrays(lat, lng)

    if zone is None:
        zones = 1 + np.floor((lng + 180) / ZONE_WIDTH_DEG).astype(np.int64)
    else:
        zones = np.broadcast_to(np.asarray(zone, dtype=np.int64), lat.shape)

    eqrad = ellipsoid.equatorial_radius
    eccentricity = ellipsoid.eccentricity
    esq = ellipsoid.eccentricity_squared
    e0sq = ellipsoid.second_eccentricity_squared

    phi = np.radians(lat)
    zcm = 3 + ZONE_WIDTH_DEG * (zones - 1) - 180

    N = eqrad / np.sqrt(1 - (eccentricity * np.sin(phi)) ** 2)
    T = np.tan(phi) ** 2
    C = e0sq * np.cos(phi) ** 2
    A = np.radians(lng - zcm) * np.cos(phi)

    M = phi * (1 - esq * (1 / 4 + esq * (3 / 64 + 5 * esq / 256)))
    M = M - np.sin(2 * phi) * (esq * (3 / 8 + esq * (3 / 32 + 45 * esq / 1024)))
    M = M + np.sin(4 * phi) * (esq * esq * (15 / 256 + esq * 45 / 1024))
    M = M - np.sin(6 * phi) * (esq * esq * esq * (35 / 3072))
    M = M * eqrad

    eastings = K0 * N * A * (1 + A * A * ((1 - T + C) / 6
                                          + A * A * (5 - 18 * T + T * T + 72 * C - 58 * e0sq) / 120))
    eastings = eastings + FALSE_EASTING
    northings = K0 * (M + N * np.tan(phi) * (A * A * (
        1 / 2 + A * A * ((5 - T + 9 * C + 4 * C * C) / 24
                         + A * A * (61 - 58 * T + T * T + 600 * C - 330 * e0sq) / 720))))

    return np.array(zones), eastings, northings


def utm_to_geodetic_batch(
    zones: Union[int, ArrayLike],
    eastings: ArrayLike,
    northings: ArrayLike,
    ellipsoid: DatumRecord,
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Vectorized UTM to geodetic inversion.

    Args:
        zones: Zone number(s), broadcast against eastings/northings.
        eastings: Eastings in meters.
        northings: Northings in meters.
        ellipsoid: Reference ellipsoid.

    Returns:
        (latitudes, longitudes) arrays in decimal degrees.
    """
    zone_arr = np.asarray(zones, dtype=np.int64)
    x = np.asarray(eastings, dtype=np.float64)
    y = np.asarray(northings, dtype=np.float64)
    zone_arr, x, y = np.broadcast_arrays(zone_arr, x, y)

    eqrad = ellipsoid.equatorial_radius
    eccentricity = ellipsoid.eccentricity
    esq = ellipsoid.eccentricity_squared
    e0sq = ellipsoid.second_eccentricity_squared

    zcm = 3 + ZONE_WIDTH_DEG * (zone_arr - 1) - 180
    e1 = _footprint_e1(eccentricity)

    M = y / K0
    mu = M / (eqrad * (1 - esq * (1 / 4 + esq * (3 / 64 + 5 * esq / 256))))

    phi1 = (mu + e1 * (3 / 2 - 27 * e1 * e1 / 32) * np.sin(2 * mu)
            + e1 * e1 * (21 / 16 - 55 * e1 * e1 / 32) * np.sin(4 * mu))
    phi1 = phi1 + e1 * e1 * e1 * (np.sin(6 * mu) * 151 / 96 + e1 * np.sin(8 * mu) * 1097 / 512)

    C1 = e0sq * np.cos(phi1) ** 2
    T1 = np.tan(phi1) ** 2
    N1 = eqrad / np.sqrt(1 - (eccentricity * np.sin(phi1)) ** 2)
    R1 = N1 * (1 - eccentricity * eccentricity) / (1 - (eccentricity * np.sin(phi1)) ** 2)

    D = (x - FALSE_EASTING) / (N1 * K0)
    phi = (D * D) * (1 / 2 - D * D * (5 + 3 * T1 + 10 * C1 - 4 * C1 * C1 - 9 * e0sq) / 24)
    phi = phi + D ** 6 * (61 + 90 * T1 + 298 * C1 + 45 * T1 * T1 - 252 * e0sq - 3 * C1 * C1) / 720
    phi = phi1 - (N1 * np.tan(phi1) / R1) * phi

    lng = D * (1 + D * D * ((-1 - 2 * T1 - C1) / 6
                            + D * D * (5 - 2 * C1 + 28 * T1 - 3 * C1 * C1 + 8 * e0sq + 24 * T1 * T1) / 120)) \
        / np.cos(phi1)

    return np.degrees(phi), zcm + np.degrees(lng)
