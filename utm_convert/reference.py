"""
Reference Transverse Mercator projection via pyproj.

ReferenceProjector builds a PROJ ``tmerc`` definition with exactly the UTM
conventions used by utm_convert.projection (same ellipsoid, k0 = 0.9996,
false easting 500000 m, false northing 0 m in both hemispheres) so the series
implementation can be checked against PROJ's independent algorithm.

Note: always_xy=True is used so coordinates are always ordered
(longitude, latitude) / (easting, northing) regardless of CRS axis order.
"""

import logging
from typing import Tuple

from pyproj import CRS, Transformer

from utm_convert.datum import DEFAULT_DATUM, DatumID, lookup_datum
from utm_convert.projection import FALSE_EASTING, K0, central_meridian
from utm_convert.types import Degrees, Meters

logger = logging.getLogger(__name__)


class ReferenceProjector:
    """
    PROJ-backed projector for one UTM zone on one datum.

    Usage:
        >>> ref = ReferenceProjector(zone=18, datum="wgs84")
        >>> easting, northing = ref.to_utm(40.7128, -74.0060)
        >>> lat, lng = ref.to_geodetic(easting, northing)
    """

    def __init__(self, zone: int, datum: DatumID = DEFAULT_DATUM):
        """
        Initialize the projector.

        Args:
            zone: UTM zone number
            datum: Datum identifier (default: wgs84)

        Raises:
            UnknownDatumError: If the datum is not known
        """
        ellipsoid = lookup_datum(datum)
        self.zone = zone
        self.datum = datum

        ellps = f"+a={ellipsoid.equatorial_radius!r} +rf={ellipsoid.inverse_flattening!r}"
        self.geographic_crs = CRS.from_proj4(f"+proj=longlat {ellps} +no_defs")
        self.projected_crs = CRS.from_proj4(
            f"+proj=tmerc +lat_0=0 +lon_0={central_meridian(zone)} +k_0={K0} "
            f"+x_0={FALSE_EASTING} +y_0=0 {ellps} +units=m +no_defs"
        )
        self._to_utm = Transformer.from_crs(self.geographic_crs, self.projected_crs, always_xy=True)
        self._to_geodetic = Transformer.from_crs(self.projected_crs, self.geographic_crs, always_xy=True)
        logger.debug("Reference projector for zone %d on %s", zone, datum)

    def to_utm(self, latitude: Degrees, longitude: Degrees) -> Tuple[Meters, Meters]:
        """
        Project latitude/longitude into this zone.

        Returns:
            Tuple of (easting, northing) in meters
        """
        easting, northing = self._to_utm.transform(longitude, latitude)
        return Meters(easting), Meters(northing)

    def to_geodetic(self, easting: Meters, northing: Meters) -> Tuple[Degrees, Degrees]:
        """
        Invert easting/northing in this zone.

        Returns:
            Tuple of (latitude, longitude) in decimal degrees
        """
        longitude, latitude = self._to_geodetic.transform(easting, northing)
        return Degrees(latitude), Degrees(longitude)
