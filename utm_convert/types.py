"""
Unit type annotations for coordinate values.

These NewType aliases document the unit a number is expressed in without any
runtime cost. They let signatures such as ``to_utm(...) -> Meters`` say what
they mean and let mypy catch degrees passed where radians are expected.

Usage Example:
    >>> from utm_convert.types import Degrees, Meters
    >>>
    >>> def offset_from_meridian(longitude: Degrees, zone: int) -> Degrees:
    ...     pass
"""

from typing import NewType

# Angular units
Degrees = NewType('Degrees', float)
"""Angle in decimal degrees (latitude, longitude, central meridian)"""

Radians = NewType('Radians', float)
"""Angle in radians (intermediate trigonometric calculations)"""

Minutes = NewType('Minutes', float)
"""Arc minutes, 1/60 of a degree (degree-minute coordinates)"""

Seconds = NewType('Seconds', float)
"""Arc seconds, 1/3600 of a degree (DMS strings)"""

# Distance units
Meters = NewType('Meters', float)
"""Projected distance in meters (easting, northing, ellipsoid radii)"""
