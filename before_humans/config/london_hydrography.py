"""
London hydrography reference data.

The River Thames is given both as a centerline (west to east, longitude
increasing) and as a closed bank outline. The lost rivers are the historical
tributaries, most of them culverted today, as source-to-mouth polylines.
"""

THAMES_CENTERLINE = [
    (-0.520, 51.450),
    (-0.460, 51.445),
    (-0.400, 51.448),
    (-0.340, 51.452),
    (-0.310, 51.460),
    (-0.290, 51.472),
    (-0.265, 51.482),
    (-0.240, 51.488),
    (-0.215, 51.470),
    (-0.190, 51.474),
    (-0.170, 51.481),
    (-0.145, 51.485),
    (-0.122, 51.497),
    (-0.110, 51.508),
    (-0.085, 51.508),
    (-0.060, 51.503),
    (-0.035, 51.505),
    (-0.020, 51.497),
    (0.000, 51.487),
    (0.010, 51.500),
    (0.040, 51.500),
    (0.070, 51.495),
    (0.100, 51.505),
    (0.130, 51.505),
    (0.160, 51.495),
    (0.200, 51.480),
    (0.250, 51.465),
    (0.300, 51.460),
    (0.350, 51.455),
]

# North bank west to east, then south bank east to west.
THAMES_POLYGON = [
    (-0.520, 51.4512),
    (-0.460, 51.4462),
    (-0.400, 51.4492),
    (-0.340, 51.4532),
    (-0.310, 51.4612),
    (-0.290, 51.4732),
    (-0.265, 51.4832),
    (-0.240, 51.4892),
    (-0.215, 51.4712),
    (-0.190, 51.4758),
    (-0.170, 51.4828),
    (-0.145, 51.4868),
    (-0.122, 51.4988),
    (-0.110, 51.5098),
    (-0.085, 51.5098),
    (-0.060, 51.5048),
    (-0.035, 51.5068),
    (-0.020, 51.4988),
    (0.000, 51.4895),
    (0.010, 51.5025),
    (0.040, 51.5025),
    (0.070, 51.4975),
    (0.100, 51.5085),
    (0.130, 51.5085),
    (0.160, 51.4985),
    (0.200, 51.4835),
    (0.250, 51.4685),
    (0.300, 51.4635),
    (0.350, 51.4585),
    (0.350, 51.4515),
    (0.300, 51.4565),
    (0.250, 51.4615),
    (0.200, 51.4765),
    (0.160, 51.4915),
    (0.130, 51.5015),
    (0.100, 51.5015),
    (0.070, 51.4925),
    (0.040, 51.4975),
    (0.010, 51.4975),
    (0.000, 51.4845),
    (-0.020, 51.4952),
    (-0.035, 51.5032),
    (-0.060, 51.5012),
    (-0.085, 51.5062),
    (-0.110, 51.5062),
    (-0.122, 51.4952),
    (-0.145, 51.4832),
    (-0.170, 51.4792),
    (-0.190, 51.4722),
    (-0.215, 51.4688),
    (-0.240, 51.4868),
    (-0.265, 51.4808),
    (-0.290, 51.4708),
    (-0.310, 51.4588),
    (-0.340, 51.4508),
    (-0.400, 51.4468),
    (-0.460, 51.4438),
    (-0.520, 51.4488),
    (-0.520, 51.4512),
]

LOST_RIVERS = [
    {
        "name": "River Fleet",
        "category": "lost_river",
        "coordinates": [
            (-0.165, 51.560), (-0.150, 51.548), (-0.135, 51.540), (-0.120, 51.530),
            (-0.110, 51.522), (-0.105, 51.515), (-0.104, 51.510), (-0.104, 51.508),
        ],
    },
    {
        "name": "River Tyburn",
        "category": "lost_river",
        "coordinates": [
            (-0.170, 51.545), (-0.160, 51.530), (-0.150, 51.518), (-0.145, 51.508),
            (-0.140, 51.500), (-0.135, 51.490),
        ],
    },
    {
        "name": "River Westbourne",
        "category": "lost_river",
        "coordinates": [
            (-0.190, 51.555), (-0.188, 51.540), (-0.180, 51.525), (-0.170, 51.510),
            (-0.160, 51.495), (-0.155, 51.486),
        ],
    },
    {
        "name": "Counter's Creek",
        "category": "lost_river",
        "coordinates": [
            (-0.215, 51.530), (-0.205, 51.510), (-0.195, 51.495), (-0.185, 51.478),
        ],
    },
    {
        "name": "Walbrook",
        "category": "lost_river",
        "coordinates": [
            (-0.085, 51.530), (-0.087, 51.520), (-0.090, 51.512), (-0.092, 51.509),
        ],
    },
    {
        "name": "River Effra",
        "category": "lost_river",
        "coordinates": [
            (-0.085, 51.425), (-0.100, 51.445), (-0.110, 51.460), (-0.115, 51.475),
            (-0.122, 51.486),
        ],
    },
    {
        "name": "River Neckinger",
        "category": "lost_river",
        "coordinates": [
            (-0.090, 51.490), (-0.080, 51.497), (-0.070, 51.502),
        ],
    },
    {
        "name": "River Peck",
        "category": "lost_river",
        "coordinates": [
            (-0.060, 51.450), (-0.065, 51.465), (-0.070, 51.475), (-0.045, 51.490),
            (-0.035, 51.495),
        ],
    },
    {
        "name": "River Ravensbourne",
        "category": "lost_river",
        "coordinates": [
            (0.010, 51.380), (0.000, 51.410), (-0.015, 51.440), (-0.020, 51.465),
            (-0.015, 51.480),
        ],
    },
    {
        "name": "River Wandle",
        "category": "lost_river",
        "coordinates": [
            (-0.150, 51.360), (-0.165, 51.390), (-0.180, 51.420), (-0.190, 51.445),
            (-0.195, 51.462),
        ],
    },
    {
        "name": "Beverley Brook",
        "category": "lost_river",
        "coordinates": [
            (-0.240, 51.390), (-0.245, 51.420), (-0.240, 51.450), (-0.225, 51.468),
        ],
    },
    {
        "name": "Stamford Brook",
        "category": "lost_river",
        "coordinates": [
            (-0.255, 51.515), (-0.250, 51.500), (-0.245, 51.490),
        ],
    },
    {
        "name": "Hackney Brook",
        "category": "lost_river",
        "coordinates": [
            (-0.110, 51.565), (-0.080, 51.558), (-0.050, 51.550), (-0.035, 51.545),
        ],
    },
    {
        "name": "River Lea",
        "category": "lost_river",
        "coordinates": [
            (-0.030, 51.700), (-0.035, 51.650), (-0.035, 51.600), (-0.030, 51.570),
            (-0.020, 51.540), (0.005, 51.510), (0.008, 51.503),
        ],
    },
    {
        "name": "River Brent",
        "category": "lost_river",
        "coordinates": [
            (-0.230, 51.590), (-0.270, 51.560), (-0.310, 51.530), (-0.320, 51.505),
            (-0.305, 51.485),
        ],
    },
]
