"""
UTM / latitude-longitude coordinate conversion.

This package converts positions between three representations using the
Transverse Mercator projection over a selectable reference ellipsoid:

    - UTM: zone, easting, northing
    - Decimal degrees: signed latitude/longitude
    - Degree-minute: direction letter, whole degrees, minutes

Example Usage:
    >>> from utm_convert import GeodeticCoordinate, UTMCoordinate
    >>>
    >>> utm = GeodeticCoordinate(40.7128, -74.0060, "wgs84").to_utm()
    >>> print(utm.zone)
    18
    >>> print(UTMCoordinate(31, 500000, 0).to_geodetic("wgs84"))
    0.000, 3.000

Available Classes:
    Coordinates:
        - GeodeticCoordinate: decimal-degree latitude/longitude + datum
        - UTMCoordinate: zone/easting/northing (datum chosen on conversion)
        - DegreeMinuteCoordinate: N/S, E/W with whole degrees and minutes

    Datums:
        - Datum: enumeration of the 14 supported ellipsoids
        - DatumRecord: equatorial radius and inverse flattening

    Configuration:
        - ConversionConfig: fraction digits and datum for text conversions
"""

from utm_convert.config import ConversionConfig, get_default_config
from utm_convert.converters import (
    convert_utm_to_dms_string,
    convert_utm_to_latitude_string,
    convert_utm_to_longitude_string,
)
from utm_convert.coordinates import (
    DegreeMinuteCoordinate,
    GeodeticCoordinate,
    UTMCoordinate,
)
from utm_convert.datum import (
    DATUMS,
    DEFAULT_DATUM,
    Datum,
    DatumRecord,
    available_datums,
    lookup_datum,
)
from utm_convert.exceptions import (
    InputRangeError,
    ParseError,
    UnknownDatumError,
    UTMConvertError,
)
from utm_convert.formatting import (
    DEFAULT_FRACTION_DIGITS,
    decimal_degrees_to_dms,
    parse_numeric_string,
    to_fixed,
)

# Define public API
__all__ = [
    # Coordinates
    'GeodeticCoordinate',
    'UTMCoordinate',
    'DegreeMinuteCoordinate',

    # Datums
    'Datum',
    'DatumRecord',
    'DATUMS',
    'DEFAULT_DATUM',
    'lookup_datum',
    'available_datums',

    # Conversion facades
    'convert_utm_to_latitude_string',
    'convert_utm_to_longitude_string',
    'convert_utm_to_dms_string',

    # Formatting
    'DEFAULT_FRACTION_DIGITS',
    'decimal_degrees_to_dms',
    'parse_numeric_string',
    'to_fixed',

    # Configuration
    'ConversionConfig',
    'get_default_config',

    # Errors
    'UTMConvertError',
    'UnknownDatumError',
    'ParseError',
    'InputRangeError',
]

# Package metadata
__version__ = '0.1.0'
__description__ = 'UTM, decimal-degree and degree-minute coordinate conversion'
