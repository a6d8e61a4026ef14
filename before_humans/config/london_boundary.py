"""
Greater London boundary ring.

Simplified outline of the Greater London administrative area as
(longitude, latitude) pairs. The ring is closed: the last position
repeats the first.
"""

LONDON_BOUNDARY = [
    (-0.510, 51.470),
    (-0.500, 51.530),
    (-0.490, 51.580),
    (-0.460, 51.620),
    (-0.400, 51.630),
    (-0.330, 51.640),
    (-0.260, 51.650),
    (-0.190, 51.670),
    (-0.110, 51.690),
    (-0.040, 51.685),
    (0.010, 51.660),
    (0.060, 51.640),
    (0.130, 51.630),
    (0.200, 51.625),
    (0.260, 51.600),
    (0.320, 51.570),
    (0.330, 51.530),
    (0.300, 51.500),
    (0.250, 51.480),
    (0.210, 51.460),
    (0.180, 51.430),
    (0.160, 51.390),
    (0.150, 51.340),
    (0.110, 51.300),
    (0.050, 51.290),
    (-0.010, 51.300),
    (-0.060, 51.290),
    (-0.120, 51.286),
    (-0.170, 51.310),
    (-0.230, 51.330),
    (-0.290, 51.350),
    (-0.330, 51.370),
    (-0.370, 51.390),
    (-0.440, 51.410),
    (-0.490, 51.430),
    (-0.510, 51.470),
]
