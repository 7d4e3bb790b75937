"""
Reference ellipsoids (datums) for the Transverse Mercator projection.

Each datum is identified by a short lower-case string (``"wgs84"``,
``"clarke1866"``, ...) and maps to the two numbers the projection needs: the
equatorial radius and the inverse flattening. Everything else (polar radius,
eccentricities) is derived.

Identifiers are matched exactly and case-sensitively. ``Datum`` members are
``str`` subclasses and can be passed wherever an identifier string is expected.

References:
    - Dutch, S. "Converting UTM to Latitude and Longitude (Or Vice Versa)",
      University of Wisconsin-Green Bay (ellipsoid table).
    - NIMA TR8350.2, Third Edition (WGS84 parameters).
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from utm_convert.exceptions import UnknownDatumError
from utm_convert.types import Meters

logger = logging.getLogger(__name__)


class Datum(str, Enum):
    """Identifiers of the supported reference ellipsoids."""

    WGS84 = "wgs84"
    NAD83 = "nad83"
    GRS80 = "grs80"
    WGS72 = "wgs72"
    AUST1965 = "aust1965"
    KRASOVSKY1940 = "krasovsky1940"
    NA1927 = "na1927"
    INTL1924 = "intl1924"
    HAYFORD1909 = "hayford1909"
    CLARKE1880 = "clarke1880"
    CLARKE1866 = "clarke1866"
    AIRY1830 = "airy1830"
    BESSEL1841 = "bessel1841"
    EVEREST1830 = "everest1830"


DatumID = Union[Datum, str]

DEFAULT_DATUM = Datum.WGS84.value


@dataclass(frozen=True)
class DatumRecord:
    """Ellipsoid parameters for one datum.

    Attributes:
        equatorial_radius: Semi-major axis a in meters.
        inverse_flattening: 1/f, where f = (a - b) / a.
    """

    equatorial_radius: Meters
    inverse_flattening: float

    def __post_init__(self) -> None:
        if not self.equatorial_radius > 0:
            raise ValueError(f"Equatorial radius must be positive, got {self.equatorial_radius}")
        if not self.inverse_flattening > 0:
            raise ValueError(f"Inverse flattening must be positive, got {self.inverse_flattening}")

    @property
    def flattening(self) -> float:
        """Polar flattening f."""
        return 1 / self.inverse_flattening

    @property
    def polar_radius(self) -> Meters:
        """Semi-minor axis b = a(1 - f) in meters."""
        return Meters(self.equatorial_radius * (1 - self.flattening))

    @property
    def eccentricity_squared(self) -> float:
        """First eccentricity squared, 1 - (b/a)^2."""
        ratio = self.polar_radius / self.equatorial_radius
        return 1 - ratio * ratio

    @property
    def eccentricity(self) -> float:
        """First eccentricity e."""
        return math.sqrt(self.eccentricity_squared)

    @property
    def second_eccentricity_squared(self) -> float:
        """Second eccentricity squared, e^2 / (1 - e^2) (e' squared in PP1395)."""
        e = self.eccentricity
        return e * e / (1 - e * e)


DATUMS: Mapping[str, DatumRecord] = MappingProxyType({
    "wgs84": DatumRecord(Meters(6378137.0), 298.2572236),
    "nad83": DatumRecord(Meters(6378137.0), 298.2572236),
    "grs80": DatumRecord(Meters(6378137.0), 298.2572215),
    "wgs72": DatumRecord(Meters(6378135.0), 298.2597208),
    "aust1965": DatumRecord(Meters(6378160.0), 298.2497323),
    "krasovsky1940": DatumRecord(Meters(6378245.0), 298.2997381),
    "na1927": DatumRecord(Meters(6378206.4), 294.9786982),
    "intl1924": DatumRecord(Meters(6378388.0), 296.9993621),
    "hayford1909": DatumRecord(Meters(6378388.0), 296.9993621),
    "clarke1880": DatumRecord(Meters(6378249.1), 293.4660167),
    "clarke1866": DatumRecord(Meters(6378206.4), 294.9786982),
    "airy1830": DatumRecord(Meters(6377563.4), 299.3247788),
    "bessel1841": DatumRecord(Meters(6377397.2), 299.1527052),
    "everest1830": DatumRecord(Meters(6377276.3), 300.8021499),
})


def lookup_datum(datum: DatumID) -> DatumRecord:
    """Return the ellipsoid parameters for a datum identifier.

    Args:
        datum: One of the 14 identifiers (case-sensitive) or a ``Datum`` member.

    Returns:
        The matching DatumRecord.

    Raises:
        UnknownDatumError: If the identifier is not in the table.
    """
    key = datum.value if isinstance(datum, Datum) else datum
    if isinstance(key, str) and key in DATUMS:
        return DATUMS[key]
    logger.debug("Rejected datum identifier %r", datum)
    raise UnknownDatumError(datum)


def available_datums() -> Tuple[str, ...]:
    """Identifiers of all supported datums, in table order."""
    return tuple(DATUMS)
