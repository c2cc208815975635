"""Earth heliocentric ecliptic coordinates, truncated VSOP87 (dynamical frame of date).

Argument `t` is Julian millennia from J2000; results are radians.
"""
from __future__ import annotations

from .series import CosineSeries, TieredSeries, frozen_table

# Longitude tiers L0..L5, rows (a, b, c) with a in 1e-11 rad

_E10 = (
    (175347045673, 0, 0),
    (3341656456, 4.66925680417, 6283.0758499914),
    (34894275, 4.62610241759, 12566.1516999828),
    (3417571, 2.82886579606, 3.5231183490),
    (3497056, 2.74411800971, 5753.3848848968),
    (3135896, 3.62767041758, 77713.7714681205),
    (2676218, 4.41808351397, 7860.4193924392),
    (2342687, 6.13516237631, 3930.2096962196),
    (1273166, 2.03709655772, 529.6909650946),
    (1324292, 0.74246356352, 11506.7697697936),
    (901855, 2.04505443513, 26.2983197998),
    (1199167, 1.10962944315, 1577.3435424478),
    (857223, 3.50849156957, 398.1490034082),
    (779786, 1.17882652114, 5223.6939198022),
    (990250, 5.23268129594, 5884.9268465832),
    (753141, 2.53339053818, 5507.5532386674),
    (505264, 4.58292563052, 18849.2275499742),
    (492379, 4.20506639861, 775.5226113240),
    (356655, 2.91954116867, 0.0673103028),
    (284125, 1.89869034186, 796.2980068164),
    (242810, 0.34481140906, 5486.7778431750),
    (317087, 5.84901952218, 11790.6290886588),
    (271039, 0.31488607649, 10977.0788046990),
    (206160, 4.80646606059, 2544.3144198834),
    (205385, 1.86947813692, 5573.1428014331),
    (202261, 2.45767795458, 6069.7767545534),
    (126184, 1.08302630210, 20.7753954924),
    (155516, 0.83306073807, 213.2990954380),
    (115132, 0.64544911683, 0.9803210682),
    (102851, 0.63599846727, 4694.0029547076),
    (101724, 4.26679821365, 7.1135470008),
    (99206, 6.20992940258, 2146.1654164752),
    (132212, 3.41118275555, 2942.4634232916),
    (97607, 0.68101272270, 155.4203994342),
    (85128, 1.29870743025, 6275.9623029906),
    (74651, 1.75508916159, 5088.6288397668),
    (101895, 0.97569221824, 15720.8387848784),
    (84711, 3.67080093025, 71430.6956181291),
    (73547, 4.67926565481, 801.8209311238),
    (73874, 3.50319443167, 3154.6870848956),
    (78756, 3.03698313141, 12036.4607348882),
    (79637, 1.80791330700, 17260.1546546904),
    (85803, 5.98322631256, 161000.6857376741),
    (56963, 2.78430398043, 6286.5989683404),
    (61148, 1.81839811024, 7084.8967811152),
    (69627, 0.83297596966, 9437.7629348870),
    (56116, 4.38694880779, 14143.4952424306),
    (62449, 3.97763880587, 8827.3902698748),
    (51145, 0.28306864501, 5856.4776591154),
    (55577, 3.47006009062, 6279.5527316424),
    (41036, 5.36817351402, 8429.2412664666),
    (51605, 1.33282746983, 1748.0164130670),
    (51992, 0.18914945834, 12139.5535091068),
    (49000, 0.48735065033, 1194.4470102246),
    (39200, 6.16832995016, 10447.3878396044),
    (35566, 1.77597314691, 6812.7668150860),
    (36770, 6.04133859347, 10213.2855462110),
    (36596, 2.56955238628, 1059.3819301892),
    (33291, 0.59309499459, 17789.8456197850),
    (35954, 1.70876111898, 2352.8661537718),
)

_E11 = (
    (628331966747491, 0, 0),
    (206058863, 2.67823455584, 6283.0758499914),
    (4303430, 2.63512650414, 12566.1516999828),
    (425264, 1.59046980729, 3.5231183490),
    (108977, 2.96618001993, 1577.3435424478),
    (93478, 2.59212835365, 18849.2275499742),
    (119261, 5.79557487799, 26.2983197998),
    (72122, 1.13846158196, 529.6909650946),
    (67768, 1.87472304791, 398.1490034082),
    (67327, 4.40918235168, 5507.5532386674),
    (59027, 2.88797038460, 5223.6939198022),
    (55976, 2.17471680261, 155.4203994342),
    (45407, 0.39803079805, 796.2980068164),
    (36369, 0.46624739835, 775.5226113240),
    (28958, 2.64707383882, 7.1135470008),
    (19097, 1.84628332577, 5486.7778431750),
    (20844, 5.34138275149, 0.9803210682),
    (18508, 4.96855124577, 213.2990954380),
    (16233, 0.03216483047, 2544.3144198834),
    (17293, 2.99116864949, 6275.9623029906),
)

_E12 = (
    (52918870, 0, 0),
    (8719837, 1.07209665242, 6283.0758499914),
    (309125, 0.86728818832, 12566.1516999828),
    (27339, 0.05297871691, 3.5231183490),
    (16334, 5.18826691036, 26.2983197998),
    (15752, 3.68457889430, 155.4203994342),
    (9541, 0.75742297675, 18849.2275499742),
    (8937, 2.05705419118, 77713.7714681205),
    (6952, 0.82673305410, 775.5226113240),
    (5064, 4.66284525271, 1577.3435424478),
)

_E13 = (
    (289226, 5.84384198723, 6283.0758499914),
    (34955, 0, 0),
    (16819, 5.48766912348, 12566.1516999828),
)

_E14 = (
    (114084, 3.14159265359, 0),
    (7717, 4.13446589358, 6283.0758499914),
    (765, 3.83803776214, 12566.1516999828),
)

_E15 = (
    (878, 3.14159265359, 0),
)

# Latitude tiers B0..B1
_E20 = (
    (279620, 3.19870156017, 84334.6615813083),
    (101643, 5.42248619256, 5507.5532386674),
    (80445, 3.88013204458, 5223.6939198022),
    (43806, 3.70444689758, 2352.8661537718),
    (31933, 4.00026369781, 1577.3435424478),
    (22724, 3.98473831560, 1047.7473117547),
    (16392, 3.56456119782, 5856.4776591154),
    (18141, 4.98367470263, 6283.0758499914),
    (14443, 3.70275614914, 9437.7629348870),
    (14304, 3.41117857525, 10213.2855462110),
)

_E21 = (
    (9030, 3.89729061890, 5507.5532386674),
    (6177, 1.73038850355, 5223.6939198022),
)

EARTH_LONGITUDE = TieredSeries(
    "earth_longitude",
    tuple(
        CosineSeries(f"L{k}", frozen_table(rows, 3))
        for k, rows in enumerate((_E10, _E11, _E12, _E13, _E14, _E15))
    ),
    scale=1e-11,
)

EARTH_LATITUDE = TieredSeries(
    "earth_latitude",
    tuple(CosineSeries(f"B{k}", frozen_table(rows, 3)) for k, rows in enumerate((_E20, _E21))),
    scale=1e-11,
)


def earth_longitude(t: float) -> float:
    """Heliocentric longitude (rad, unwrapped) at `t` Julian millennia from J2000."""
    return EARTH_LONGITUDE(t)


def earth_latitude(t: float) -> float:
    return EARTH_LATITUDE(t)
