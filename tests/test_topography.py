"""Tests for reference data and terrain signals."""

import pytest

from before_humans.core.topography import FAR_FROM_RIVER_KM, ReferenceData, Topography
from before_humans.exceptions import ReferenceDataError
from before_humans.utils.geo import distance_to_line, km_distance, point_in_ring

from conftest import SQUARE


@pytest.fixture
def topography(reference):
    return Topography(reference)


class TestGeoHelpers:
    """Test flat-earth helpers."""

    def test_point_in_ring(self):
        """Test ray casting inside and outside."""
        assert point_in_ring(0.05, 51.45, SQUARE)
        assert not point_in_ring(0.15, 51.45, SQUARE)
        assert not point_in_ring(0.05, 51.55, SQUARE)

    def test_km_distance(self):
        """Test the fixed kilometre factors."""
        assert km_distance(0.0, 51.0, 1.0, 51.0) == pytest.approx(70.0)
        assert km_distance(0.0, 51.0, 0.0, 52.0) == pytest.approx(111.0)

    def test_distance_to_line_clamps(self):
        """Test that points beyond a segment end measure to the endpoint."""
        line = [(0.0, 51.0), (0.1, 51.0)]
        assert distance_to_line(0.05, 51.01, line) == pytest.approx(1.11)
        assert distance_to_line(0.2, 51.0, line) == pytest.approx(7.0)


class TestReferenceData:
    """Test reference data validation."""

    def test_london_loads(self):
        """Test that the bundled data validates."""
        ref = ReferenceData.london()
        assert len(ref.elevation_points) == 48
        assert len(ref.marshes) == 20
        assert len(ref.forests) == 8
        assert len(ref.tributaries) == 15

    def test_open_ring_rejected(self, reference_factory):
        """Test that an unclosed boundary is rejected."""
        with pytest.raises(ReferenceDataError):
            reference_factory(boundary=SQUARE[:-1])

    def test_short_ring_rejected(self, reference_factory):
        """Test that a ring with fewer than four positions is rejected."""
        with pytest.raises(ReferenceDataError):
            reference_factory(river_polygon=[(0, 0), (1, 1), (0, 0)])

    def test_elevation_points_required(self, reference_factory):
        """Test that an empty control point list is rejected."""
        with pytest.raises(ReferenceDataError):
            reference_factory(elevation_points=[])

    def test_centerline_needs_two_vertices(self, reference_factory):
        """Test that a single-vertex centerline is rejected."""
        with pytest.raises(ReferenceDataError):
            reference_factory(river_centerline=[(0.0, 51.45)])


class TestElevation:
    """Test inverse-distance-weighted elevation."""

    def test_exact_at_control_point(self, topography):
        """Test that a control point returns its own elevation."""
        assert topography.elevation(0.05, 51.45) == 3
        assert topography.elevation(0.02, 51.49) == 45

    def test_exact_within_ten_metres(self, topography):
        """Test the snap radius around control points."""
        assert topography.elevation(0.05 + 0.0001, 51.45) == 3

    def test_bounded_by_controls(self, topography):
        """Test that interpolated values stay within the control range."""
        for lng in (0.01, 0.04, 0.07, 0.095):
            for lat in (51.41, 51.44, 51.47, 51.49):
                assert 3 <= topography.elevation(lng, lat) <= 70


class TestRiverDistances:
    """Test river distance signals."""

    def test_centerline_distance(self, topography):
        """Test distance to the straight centerline."""
        assert topography.major_river_distance(0.05, 51.46) == pytest.approx(1.11)

    def test_edge_distance_inside(self, topography):
        """Test that the bank distance is zero inside the river."""
        assert topography.major_river_edge_distance(0.05, 51.45) == 0.0

    def test_edge_distance_outside(self, topography):
        """Test the bank distance just north of the strip."""
        assert topography.major_river_edge_distance(0.05, 51.46) == pytest.approx(0.555)

    def test_edge_distance_outside_band(self, topography):
        """Test the sentinel outside the river's latitude band."""
        assert topography.major_river_edge_distance(0.05, 51.60) == FAR_FROM_RIVER_KM
        assert topography.major_river_edge_distance(0.05, 51.40) == FAR_FROM_RIVER_KM

    def test_tributary_distance(self, topography):
        """Test distance to the nearest tributary."""
        assert topography.nearest_tributary_distance(0.03, 51.49) == pytest.approx(0.0)
        assert topography.nearest_tributary_distance(0.0, 51.40) > 3.0


class TestRiverLatitude:
    """Test south-bank detection."""

    def test_interpolation(self, reference_factory):
        """Test linear interpolation along the centerline."""
        topo = Topography(reference_factory(river_centerline=[(0.0, 51.40), (0.1, 51.50)]))
        assert topo.major_river_latitude(0.05) == pytest.approx(51.45)

    def test_beyond_ends(self, reference_factory):
        """Test that the nearest endpoint is used outside the line."""
        topo = Topography(reference_factory(river_centerline=[(0.0, 51.40), (0.1, 51.50)]))
        assert topo.major_river_latitude(-1.0) == 51.40
        assert topo.major_river_latitude(1.0) == 51.50

    def test_vertical_segment(self, reference_factory):
        """Test that a zero-width segment returns its start latitude."""
        topo = Topography(reference_factory(
            river_centerline=[(0.0, 51.40), (0.05, 51.42), (0.05, 51.48), (0.1, 51.50)]
        ))
        # The first spanning segment ends at 0.05
        assert topo.major_river_latitude(0.05) == pytest.approx(51.42)

    def test_south_bank(self, topography):
        """Test both sides of the river."""
        assert topography.is_south_bank(0.05, 51.42)
        assert not topography.is_south_bank(0.05, 51.48)


class TestZones:
    """Test marsh and woodland hint zones."""

    def test_in_marsh(self, topography):
        assert topography.in_marsh(0.07, 51.46)
        assert not topography.in_marsh(0.02, 51.49)

    def test_in_forest(self, topography):
        assert topography.in_forest(0.02, 51.49)
        assert not topography.in_forest(0.07, 51.42)
