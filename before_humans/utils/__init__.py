"""Shared geographic helpers."""

from .geo import (
    KM_PER_DEG_LAT,
    KM_PER_DEG_LNG,
    distance_to_line,
    km_distance,
    point_in_ring,
    ring_bbox,
    segment_distance_sq,
)

__all__ = ['KM_PER_DEG_LNG', 'KM_PER_DEG_LAT', 'point_in_ring', 'ring_bbox',
           'km_distance', 'segment_distance_sq', 'distance_to_line']
