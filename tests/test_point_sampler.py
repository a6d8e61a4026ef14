"""Tests for jittered grid sampling."""

import pytest

from before_humans.core.mulberry_prng import MulberryPRNG
from before_humans.core.point_sampler import SamplingOptions, get_jittered_grid, sample_points
from before_humans.utils.geo import point_in_ring

from conftest import SQUARE

TRIANGLE = [(0.0, 51.40), (0.1, 51.40), (0.0, 51.50), (0.0, 51.40)]
BBOX = (0.0, 51.40, 0.1, 51.50)


class TestSamplingOptions:
    """Test option validation."""

    @pytest.mark.parametrize("spacing", [0, -0.01, float("nan")])
    def test_invalid_spacing(self, spacing):
        """Test that a non-positive spacing is rejected before any grid walk."""
        with pytest.raises(ValueError):
            SamplingOptions(spacing=spacing)

    @pytest.mark.parametrize("jitter", [-0.1, 0.5, 1.0])
    def test_invalid_jitter(self, jitter):
        with pytest.raises(ValueError):
            SamplingOptions(jitter=jitter)

    def test_defaults(self):
        options = SamplingOptions()
        assert options.spacing == 0.009
        assert options.jitter == 0.4


class TestJitteredGrid:
    """Test jittered grid generation."""

    def test_two_draws_per_node(self):
        """Test that every grid node consumes two random values."""
        prng = MulberryPRNG(42)
        points = get_jittered_grid(BBOX, prng, SamplingOptions())
        assert prng.call_count == 2 * len(points)

    def test_zero_jitter_gives_grid_nodes(self):
        """Test that zero jitter leaves points on the grid."""
        options = SamplingOptions(spacing=0.025, jitter=0.0)
        points = get_jittered_grid(BBOX, MulberryPRNG(1), options)

        # 5 columns (0 .. 0.1) by 4 or 5 rows depending on float accumulation
        assert points[0] == (0.0, 51.40)
        assert points[1] == pytest.approx((0.0, 51.425))
        assert all(p[0] <= 0.1 and p[1] <= 51.5 for p in points)

    def test_jitter_bounds(self):
        """Test that jitter never exceeds the configured fraction of spacing."""
        options = SamplingOptions(spacing=0.01, jitter=0.4)
        jittered = get_jittered_grid(BBOX, MulberryPRNG(3), options)
        nodes = get_jittered_grid(BBOX, MulberryPRNG(3), SamplingOptions(spacing=0.01, jitter=0.0))

        assert len(jittered) == len(nodes)
        for (x, y), (gx, gy) in zip(jittered, nodes):
            assert abs(x - gx) <= 0.004 + 1e-12
            assert abs(y - gy) <= 0.004 + 1e-12

    def test_longitude_outer_loop(self):
        """Test that the walk is column by column."""
        options = SamplingOptions(spacing=0.03, jitter=0.0)
        points = get_jittered_grid(BBOX, MulberryPRNG(1), options)
        assert points[0][0] == points[1][0]
        assert points[0][1] < points[1][1]


class TestSamplePoints:
    """Test boundary-filtered sampling."""

    def test_points_inside_boundary(self):
        """Test that every sample lies inside the ring."""
        points = sample_points(TRIANGLE, MulberryPRNG(42))
        assert len(points) > 0
        assert all(point_in_ring(x, y, TRIANGLE) for x, y in points)

    def test_filter_drops_points(self):
        """Test that points outside the ring are removed."""
        square = sample_points(SQUARE, MulberryPRNG(42))
        triangle = sample_points(TRIANGLE, MulberryPRNG(42))
        assert len(triangle) < len(square)

    def test_determinism(self):
        """Test that the same seed gives the same points."""
        assert sample_points(SQUARE, MulberryPRNG(5)) == sample_points(SQUARE, MulberryPRNG(5))

    def test_different_seeds(self):
        """Test that different seeds give different points."""
        assert sample_points(SQUARE, MulberryPRNG(5)) != sample_points(SQUARE, MulberryPRNG(6))
