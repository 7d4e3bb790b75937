"""Unit tests for utm_convert.datum module."""

import math

import pytest

from utm_convert.datum import (
    DATUMS,
    DEFAULT_DATUM,
    Datum,
    DatumRecord,
    available_datums,
    lookup_datum,
)
from utm_convert.exceptions import UnknownDatumError

EXPECTED_IDS = (
    "wgs84", "nad83", "grs80", "wgs72", "aust1965", "krasovsky1940", "na1927",
    "intl1924", "hayford1909", "clarke1880", "clarke1866", "airy1830",
    "bessel1841", "everest1830",
)


class TestDatumTable:
    """Tests for the static datum table."""

    def test_contains_exactly_fourteen_datums(self) -> None:
        """The table holds the 14 documented identifiers in order."""
        assert available_datums() == EXPECTED_IDS

    def test_default_is_wgs84(self) -> None:
        assert DEFAULT_DATUM == "wgs84"

    def test_table_is_read_only(self) -> None:
        """The mapping cannot be mutated."""
        with pytest.raises(TypeError):
            DATUMS["custom"] = DatumRecord(6378000.0, 300.0)  # type: ignore[index]

    @pytest.mark.parametrize("datum_id", EXPECTED_IDS)
    def test_records_satisfy_invariants(self, datum_id: str) -> None:
        """Every record has a positive radius and inverse flattening."""
        record = lookup_datum(datum_id)
        assert record.equatorial_radius > 0
        assert record.inverse_flattening > 0

    def test_wgs84_values(self) -> None:
        record = lookup_datum("wgs84")
        assert record.equatorial_radius == 6378137.0
        assert record.inverse_flattening == 298.2572236

    def test_identical_ellipsoids(self) -> None:
        """Datums sharing an ellipsoid have identical records."""
        assert lookup_datum("wgs84") == lookup_datum("nad83")
        assert lookup_datum("intl1924") == lookup_datum("hayford1909")
        assert lookup_datum("na1927") == lookup_datum("clarke1866")


class TestLookupDatum:
    """Tests for lookup_datum."""

    def test_enum_member_accepted(self) -> None:
        """Datum enum members resolve like their string values."""
        assert lookup_datum(Datum.CLARKE1866) is lookup_datum("clarke1866")

    @pytest.mark.parametrize(
        "datum",
        ["unknown", "WGS84", "wgs84 ", "", None, 84],
        ids=["unknown", "upper-case", "trailing-space", "empty", "none", "int"],
    )
    def test_unknown_datum_raises(self, datum) -> None:
        """Lookup is exact and case-sensitive."""
        with pytest.raises(UnknownDatumError) as exc_info:
            lookup_datum(datum)
        assert exc_info.value.datum == datum

    def test_unknown_datum_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid datum"):
            lookup_datum("unknown")


class TestDatumRecord:
    """Tests for DatumRecord derived parameters."""

    def test_derived_wgs84_parameters(self) -> None:
        record = lookup_datum("wgs84")
        assert record.flattening == pytest.approx(1 / 298.2572236)
        assert record.polar_radius == pytest.approx(6356752.314, abs=1e-3)
        assert record.eccentricity_squared == pytest.approx(0.00669438, abs=1e-8)
        assert record.eccentricity == pytest.approx(math.sqrt(record.eccentricity_squared))
        assert record.second_eccentricity_squared == pytest.approx(0.00673950, abs=1e-8)

    @pytest.mark.parametrize(
        "radius,inverse_flattening",
        [(0.0, 298.0), (-1.0, 298.0), (6378137.0, 0.0), (6378137.0, -298.0)],
    )
    def test_invalid_parameters_rejected(self, radius: float, inverse_flattening: float) -> None:
        with pytest.raises(ValueError):
            DatumRecord(radius, inverse_flattening)

    def test_frozen(self) -> None:
        record = lookup_datum("wgs84")
        with pytest.raises(AttributeError):
            record.equatorial_radius = 1.0  # type: ignore[misc]
