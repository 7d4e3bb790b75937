"""Unit tests for utm_convert.projection formulas."""

import numpy as np
import pytest

from utm_convert.datum import lookup_datum
from utm_convert.projection import (
    FALSE_EASTING,
    K0,
    central_meridian,
    geodetic_to_utm,
    geodetic_to_utm_batch,
    utm_to_geodetic,
    utm_to_geodetic_batch,
    utm_zone,
)

WGS84 = lookup_datum("wgs84")


class TestZones:
    """Tests for utm_zone and central_meridian."""

    @pytest.mark.parametrize(
        "longitude,zone",
        [
            (-180.0, 1),
            (-174.0001, 1),
            (-174.0, 2),
            (-74.006, 18),
            (-0.0014, 30),
            (0.0, 31),
            (3.0, 31),
            (151.2093, 56),
            (179.999, 60),
        ],
    )
    def test_utm_zone(self, longitude: float, zone: int) -> None:
        assert utm_zone(longitude) == zone

    def test_utm_zone_not_clamped(self) -> None:
        """Out-of-range longitudes keep counting; wrapping is the caller's job."""
        assert utm_zone(180.0) == 61
        assert utm_zone(-186.0) == 0

    @pytest.mark.parametrize("zone,meridian", [(1, -177), (18, -75), (30, -3), (31, 3), (60, 177)])
    def test_central_meridian(self, zone: int, meridian: int) -> None:
        assert central_meridian(zone) == meridian


class TestForwardProjection:
    """Tests for geodetic_to_utm."""

    def test_equator_on_central_meridian_is_exact(self) -> None:
        """The origin of zone 31 projects without distortion."""
        zone, easting, northing = geodetic_to_utm(0.0, 3.0, WGS84)
        assert zone == 31
        assert easting == 500000.0
        assert northing == 0.0

    def test_new_york(self) -> None:
        zone, easting, northing = geodetic_to_utm(40.7128, -74.0060, WGS84)
        assert zone == 18
        assert easting == pytest.approx(583959.3723, abs=0.01)
        assert northing == pytest.approx(4507350.9984, abs=0.01)

    def test_southern_hemisphere_northing_is_negative(self) -> None:
        """No 10,000,000 m false northing is applied south of the equator."""
        zone, easting, northing = geodetic_to_utm(-33.8688, 151.2093, WGS84)
        assert zone == 56
        assert easting == pytest.approx(334368.6336, abs=0.01)
        assert northing == pytest.approx(-3749051.6547, abs=0.01)

    def test_zone_override(self) -> None:
        """An explicit zone is used even when the point lies outside it."""
        zone, easting, northing = geodetic_to_utm(51.4778, -0.0014, WGS84, zone=31)
        assert zone == 31
        assert easting < FALSE_EASTING

        natural_zone, _, _ = geodetic_to_utm(51.4778, -0.0014, WGS84)
        assert natural_zone == 30

    def test_datum_changes_result(self) -> None:
        _, easting, northing = geodetic_to_utm(40.7128, -74.0060, lookup_datum("clarke1866"))
        assert easting == pytest.approx(583961.6165, abs=0.01)
        assert northing == pytest.approx(4507139.6238, abs=0.01)

    def test_central_meridian_scale(self) -> None:
        """Along the central meridian easting is exactly the false easting."""
        _, easting, northing = geodetic_to_utm(45.0, -75.0, WGS84)
        assert easting == FALSE_EASTING
        # Meridian arc to 45N is about 4984944 m; scaled by k0
        assert northing == pytest.approx(4984944.4 * K0, abs=1.0)


class TestInverseProjection:
    """Tests for utm_to_geodetic."""

    def test_zone_origin(self) -> None:
        latitude, longitude = utm_to_geodetic(31, 500000.0, 0.0, WGS84)
        assert latitude == 0.0
        assert longitude == 3.0

    def test_new_york(self) -> None:
        latitude, longitude = utm_to_geodetic(18, 583959.3723, 4507350.9984, WGS84)
        assert latitude == pytest.approx(40.7128, abs=1e-6)
        assert longitude == pytest.approx(-74.0060, abs=1e-6)

    def test_southern_hemisphere(self) -> None:
        latitude, longitude = utm_to_geodetic(56, 334368.6336, -3749051.6547, WGS84)
        assert latitude == pytest.approx(-33.8688, abs=1e-6)
        assert longitude == pytest.approx(151.2093, abs=1e-6)

    @pytest.mark.parametrize(
        "latitude,longitude",
        [(84.0, -177.0001), (-80.0, 179.999), (0.0001, -174.0001), (51.4778, -0.0014)],
        ids=["north-limit", "south-limit", "zone-edge-equator", "greenwich"],
    )
    def test_round_trip(self, latitude: float, longitude: float) -> None:
        zone, easting, northing = geodetic_to_utm(latitude, longitude, WGS84)
        lat_back, lng_back = utm_to_geodetic(zone, easting, northing, WGS84)
        assert lat_back == pytest.approx(latitude, abs=1e-7)
        assert lng_back == pytest.approx(longitude, abs=1e-7)


class TestBatchProjection:
    """The numpy batch functions agree with the scalar formulas."""

    LATITUDES = np.array([40.7128, -33.8688, 0.0, 84.0, -80.0, 51.4778])
    LONGITUDES = np.array([-74.0060, 151.2093, 3.0, -177.0001, 179.999, -0.0014])

    def test_forward_matches_scalar(self) -> None:
        zones, eastings, northings = geodetic_to_utm_batch(self.LATITUDES, self.LONGITUDES, WGS84)

        for i, (lat, lng) in enumerate(zip(self.LATITUDES, self.LONGITUDES)):
            zone, easting, northing = geodetic_to_utm(float(lat), float(lng), WGS84)
            assert zones[i] == zone
            assert eastings[i] == pytest.approx(easting, abs=1e-6)
            assert northings[i] == pytest.approx(northing, abs=1e-6)

    def test_forward_with_fixed_zone(self) -> None:
        zones, eastings, _ = geodetic_to_utm_batch([51.4778, 51.4778], [-0.0014, 0.0014], WGS84, zone=31)
        np.testing.assert_array_equal(zones, [31, 31])
        _, expected_easting, _ = geodetic_to_utm(51.4778, -0.0014, WGS84, zone=31)
        assert eastings[0] == pytest.approx(expected_easting, abs=1e-6)

    def test_inverse_matches_scalar(self) -> None:
        zones, eastings, northings = geodetic_to_utm_batch(self.LATITUDES, self.LONGITUDES, WGS84)
        latitudes, longitudes = utm_to_geodetic_batch(zones, eastings, northings, WGS84)

        np.testing.assert_allclose(latitudes, self.LATITUDES, atol=1e-7)
        np.testing.assert_allclose(longitudes, self.LONGITUDES, atol=1e-7)

        lat, lng = utm_to_geodetic(int(zones[0]), float(eastings[0]), float(northings[0]), WGS84)
        assert latitudes[0] == pytest.approx(lat, abs=1e-9)
        assert longitudes[0] == pytest.approx(lng, abs=1e-9)

    def test_inverse_broadcasts_scalar_zone(self) -> None:
        latitudes, longitudes = utm_to_geodetic_batch(31, [500000.0, 500000.0], [0.0, 0.0], WGS84)
        np.testing.assert_allclose(latitudes, [0.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(longitudes, [3.0, 3.0], atol=1e-12)
