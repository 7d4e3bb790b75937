"""
Convenience conversions from raw UTM numbers to text.

Each function builds a UTMCoordinate, inverts it on the configured datum
(wgs84 by default) and renders the result with the configured number of
fractional digits (3 by default).
"""

import logging
from typing import Optional

from utm_convert.config import ConversionConfig, get_default_config
from utm_convert.coordinates import GeodeticCoordinate, UTMCoordinate
from utm_convert.types import Meters

logger = logging.getLogger(__name__)


def _to_geodetic(
    zone: int,
    easting: Meters,
    northing: Meters,
    config: ConversionConfig,
) -> GeodeticCoordinate:
    logger.debug(
        "Converting zone %s easting %s northing %s on %s",
        zone, easting, northing, config.datum,
    )
    return UTMCoordinate(zone, easting, northing).to_geodetic(config.datum)


def convert_utm_to_latitude_string(
    zone: int,
    easting: Meters,
    northing: Meters,
    config: Optional[ConversionConfig] = None,
) -> str:
    """
    Convert a UTM position to its latitude, as text.

    Args:
        zone: UTM zone number
        easting: Easting in meters
        northing: Northing in meters (negative south of the equator)
        config: Conversion settings (default: 3 digits, wgs84)

    Returns:
        Latitude rounded to config.fraction_digits, e.g. "40.713"

    Raises:
        UnknownDatumError: If config names an unknown datum
    """
    config = config or get_default_config()
    return _to_geodetic(zone, easting, northing, config).format_latitude(config.fraction_digits)


def convert_utm_to_longitude_string(
    zone: int,
    easting: Meters,
    northing: Meters,
    config: Optional[ConversionConfig] = None,
) -> str:
    """
    Convert a UTM position to its longitude, as text.

    Args:
        zone: UTM zone number
        easting: Easting in meters
        northing: Northing in meters (negative south of the equator)
        config: Conversion settings (default: 3 digits, wgs84)

    Returns:
        Longitude rounded to config.fraction_digits, e.g. "-74.006"
    """
    config = config or get_default_config()
    return _to_geodetic(zone, easting, northing, config).format_longitude(config.fraction_digits)


def convert_utm_to_dms_string(
    zone: int,
    easting: Meters,
    northing: Meters,
    config: Optional[ConversionConfig] = None,
) -> str:
    """
    Convert a UTM position to a "lat, lng" string.

    Note:
        Despite the name, the result is in decimal degrees ("40.713, -74.006"),
        not degrees/minutes/seconds. Existing callers depend on this output;
        use utm_convert.formatting.decimal_degrees_to_dms for true DMS text.

    Args:
        zone: UTM zone number
        easting: Easting in meters
        northing: Northing in meters (negative south of the equator)
        config: Conversion settings (default: 3 digits, wgs84)

    Returns:
        "lat, lng" with each value rounded to config.fraction_digits
    """
    config = config or get_default_config()
    return _to_geodetic(zone, easting, northing, config).format(config.fraction_digits)
