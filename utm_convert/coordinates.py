"""Immutable coordinate value objects.

Three representations of a position, each a frozen dataclass:

    - GeodeticCoordinate: signed decimal-degree latitude/longitude plus datum
    - UTMCoordinate: zone, easting, northing (no datum; supplied on conversion)
    - DegreeMinuteCoordinate: direction letter, whole degrees and minutes

GeodeticCoordinate is the hub. UTM and degree-minute coordinates convert to
each other only through it.

Example:
    >>> nyc = GeodeticCoordinate(40.7128, -74.0060)
    >>> utm = nyc.to_utm()
    >>> utm.zone
    18
    >>> str(utm.to_geodetic("wgs84"))
    '40.713, -74.006'
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from utm_convert import projection
from utm_convert.datum import DEFAULT_DATUM, DatumID, lookup_datum
from utm_convert.formatting import DEFAULT_FRACTION_DIGITS, format_number, to_fixed
from utm_convert.types import Degrees, Meters, Minutes
from utm_convert.validation import (
    LATITUDE_DIRECTIONS,
    LONGITUDE_DIRECTIONS,
    MAX_LATITUDE,
    validate_degree_minute,
    validate_latitude,
    validate_longitude,
    validate_utm,
)


@dataclass(frozen=True)
class GeodeticCoordinate:
    """Latitude/longitude in signed decimal degrees on a given datum.

    Attributes:
        latitude: Latitude in degrees, positive north. Conceptually in
            [-90, 90]; not enforced by the constructor.
        longitude: Longitude in degrees, positive east. Not wrapped.
        datum: Datum identifier (default "wgs84").
    """

    latitude: Degrees
    longitude: Degrees
    datum: DatumID = DEFAULT_DATUM

    @classmethod
    def create(
        cls,
        latitude: Degrees,
        longitude: Degrees,
        datum: DatumID = DEFAULT_DATUM,
    ) -> GeodeticCoordinate:
        """Create a coordinate after checking ranges and the datum.

        Raises:
            InputRangeError: If latitude is outside [-90, 90] or either value
                is not finite.
            UnknownDatumError: If the datum is not known.
        """
        validate_latitude(latitude)
        validate_longitude(longitude)
        lookup_datum(datum)
        return cls(latitude, longitude, datum)

    def compute_utm_zone(self) -> int:
        """UTM zone containing this longitude (independent of datum)."""
        return projection.utm_zone(self.longitude)

    def to_utm(self, datum: Optional[DatumID] = None, zone: Optional[int] = None) -> UTMCoordinate:
        """Project onto UTM.

        Args:
            datum: Datum to project with; None uses this coordinate's datum.
            zone: Zone to project into; None uses compute_utm_zone().

        Returns:
            UTMCoordinate. Southern-hemisphere northings are negative (no
            10,000,000 m false northing).

        Raises:
            UnknownDatumError: If the datum is not known.
        """
        ellipsoid = lookup_datum(self.datum if datum is None else datum)
        zone, easting, northing = projection.geodetic_to_utm(
            self.latitude, self.longitude, ellipsoid, zone
        )
        return UTMCoordinate(zone, easting, northing)

    def to_degree_minute(self) -> DegreeMinuteCoordinate:
        """Split into direction letters, whole degrees and minutes."""
        latitude = self.latitude
        lat_direction = "N"
        if latitude < 0:
            lat_direction = "S"
            latitude = -latitude
        lat_degrees = math.floor(latitude)
        lat_minutes = 60.0 * (latitude - lat_degrees)

        longitude = self.longitude
        lng_direction = "E"
        if longitude < 0:
            lng_direction = "W"
            longitude = -longitude
        lng_degrees = math.floor(longitude)
        lng_minutes = 60.0 * (longitude - lng_degrees)

        return DegreeMinuteCoordinate(
            lat_direction, lat_degrees, Minutes(lat_minutes),
            lng_direction, lng_degrees, Minutes(lng_minutes),
            self.datum,
        )

    def format_latitude(self, fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
        """Latitude as fixed-point text, e.g. "40.713"."""
        return to_fixed(self.latitude, fraction_digits)

    def format_longitude(self, fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
        """Longitude as fixed-point text, e.g. "-74.006"."""
        return to_fixed(self.longitude, fraction_digits)

    def format(self, fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
        """Render as "lat, lng" with the given number of fractional digits."""
        return f"{self.format_latitude(fraction_digits)}, {self.format_longitude(fraction_digits)}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class UTMCoordinate:
    """A position in a UTM zone.

    The datum is deliberately not stored: the same zone/easting/northing maps
    to different latitudes/longitudes on different ellipsoids, so the datum is
    chosen when converting.

    Attributes:
        zone: Zone number (1-60 for real positions).
        easting: Meters, 500000 on the central meridian.
        northing: Meters from the equator, negative to the south.
    """

    zone: int
    easting: Meters
    northing: Meters

    @classmethod
    def create(cls, zone: int, easting: Meters, northing: Meters) -> UTMCoordinate:
        """Create a coordinate after checking the zone and that values are finite.

        Raises:
            InputRangeError: If the zone is not an integer in [1, 60] or a
                value is not finite.
        """
        validate_utm(zone, easting, northing)
        return cls(zone, easting, northing)

    @property
    def central_meridian(self) -> Degrees:
        """Longitude of this zone's central meridian."""
        return projection.central_meridian(self.zone)

    def to_geodetic(self, datum: DatumID = DEFAULT_DATUM) -> GeodeticCoordinate:
        """Invert to latitude/longitude on the given datum.

        Raises:
            UnknownDatumError: If the datum is not known.
        """
        ellipsoid = lookup_datum(datum)
        latitude, longitude = projection.utm_to_geodetic(
            self.zone, self.easting, self.northing, ellipsoid
        )
        return GeodeticCoordinate(latitude, longitude, datum)

    def to_degree_minute(self, datum: DatumID = DEFAULT_DATUM) -> DegreeMinuteCoordinate:
        """Convert to degree-minute form via to_geodetic(datum)."""
        return self.to_geodetic(datum).to_degree_minute()

    def __str__(self) -> str:
        return (
            f"Zone {format_number(self.zone)} "
            f"Easting {format_number(self.easting)} "
            f"Northing {format_number(self.northing)}"
        )


@dataclass(frozen=True)
class DegreeMinuteCoordinate:
    """Sexagesimal degree/minute coordinate with direction letters.

    Attributes:
        lat_direction: "N" or "S" (either case).
        lat_degrees: Whole degrees of latitude.
        lat_minutes: Minutes of latitude, [0, 60).
        lng_direction: "E" or "W" (either case).
        lng_degrees: Whole degrees of longitude.
        lng_minutes: Minutes of longitude, [0, 60).
        datum: Datum identifier (default "wgs84").
    """

    lat_direction: str
    lat_degrees: int
    lat_minutes: Minutes
    lng_direction: str
    lng_degrees: int
    lng_minutes: Minutes
    datum: DatumID = DEFAULT_DATUM

    @classmethod
    def create(
        cls,
        lat_direction: str,
        lat_degrees: int,
        lat_minutes: Minutes,
        lng_direction: str,
        lng_degrees: int,
        lng_minutes: Minutes,
        datum: DatumID = DEFAULT_DATUM,
    ) -> DegreeMinuteCoordinate:
        """Create a coordinate after checking every field.

        Raises:
            InputRangeError: If a direction letter is invalid, degrees are not
                a non-negative integer, minutes are outside [0, 60), or the
                total exceeds 90 (latitude) / 180 (longitude) degrees.
            UnknownDatumError: If the datum is not known.
        """
        validate_degree_minute("latitude", lat_direction, lat_degrees, lat_minutes,
                               LATITUDE_DIRECTIONS, MAX_LATITUDE)
        validate_degree_minute("longitude", lng_direction, lng_degrees, lng_minutes,
                               LONGITUDE_DIRECTIONS, 180.0)
        lookup_datum(datum)
        return cls(lat_direction, lat_degrees, lat_minutes,
                   lng_direction, lng_degrees, lng_minutes, datum)

    def to_geodetic(self) -> GeodeticCoordinate:
        """Convert to signed decimal degrees (S and W become negative)."""
        latitude = self.lat_degrees + self.lat_minutes / 60.0
        if self.lat_direction.upper() == "S":
            latitude = -latitude
        longitude = self.lng_degrees + self.lng_minutes / 60.0
        if self.lng_direction.upper() == "W":
            longitude = -longitude
        return GeodeticCoordinate(Degrees(latitude), Degrees(longitude), self.datum)

    def to_utm(self, zone: Optional[int] = None) -> UTMCoordinate:
        """Project onto UTM using this coordinate's datum."""
        return self.to_geodetic().to_utm(self.datum, zone)

    def __str__(self) -> str:
        return " ".join([
            self.lat_direction.upper(),
            format_number(self.lat_degrees),
            format_number(self.lat_minutes),
            self.lng_direction.upper(),
            format_number(self.lng_degrees),
            format_number(self.lng_minutes),
        ])
