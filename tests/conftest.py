"""Shared fixtures."""

import pytest

from before_humans.core.topography import ReferenceData


SQUARE = [(0.0, 51.40), (0.1, 51.40), (0.1, 51.50), (0.0, 51.50), (0.0, 51.40)]

# River strip crossing the square east-west, wider than the square
RIVER_STRIP = [(-0.05, 51.445), (0.15, 51.445), (0.15, 51.455), (-0.05, 51.455), (-0.05, 51.445)]
RIVER_LINE = [(-0.05, 51.45), (0.02, 51.45), (0.05, 51.45), (0.08, 51.45), (0.15, 51.45)]


def make_reference(**overrides) -> ReferenceData:
    records = dict(
        boundary=SQUARE,
        elevation_points=[
            {"lng": 0.05, "lat": 51.45, "elev": 3, "name": "Riverside"},
            {"lng": 0.02, "lat": 51.49, "elev": 45, "name": "North Hill"},
            {"lng": 0.08, "lat": 51.41, "elev": 70, "name": "South Ridge"},
            {"lng": 0.09, "lat": 51.48, "elev": 25, "name": "Terrace"},
        ],
        marshes=[{"lng": 0.07, "lat": 51.46, "radius": 1.0, "name": "Test Marsh"}],
        forests=[{"lng": 0.02, "lat": 51.49, "radius": 1.5, "name": "Test Wood"}],
        river_polygon=RIVER_STRIP,
        river_centerline=RIVER_LINE,
        tributaries=[
            {"name": "Inner Brook", "category": "lost_river",
             "coordinates": [(0.03, 51.49), (0.035, 51.47), (0.04, 51.455)]},
            {"name": "Crossing Brook", "category": "lost_river",
             "coordinates": [(0.06, 51.55), (0.06, 51.52), (0.065, 51.48), (0.07, 51.46)]},
            {"name": "Outside Brook", "category": "lost_river",
             "coordinates": [(0.3, 51.6), (0.31, 51.62)]},
        ],
    )
    records.update(overrides)
    return ReferenceData.from_records(**records)


@pytest.fixture
def reference():
    """Small square study area with a river strip across it."""
    return make_reference()


@pytest.fixture
def reference_factory():
    """Build small reference data with selected records replaced."""
    return make_reference
