""" Transform between the CORSIKA and GrIsu reference frames

CORSIKA coordinates:
- x: to the north.
- y: to the west.
- z: upwards, with z = 0 at the observation level.
- azimuth: angle in the x,y-plane, rotating counterclockwise.

GrIsu (KASCADE) coordinates:
- x: to the east.
- y: to the south.
- z: downwards.
- azimuth: angle in the x,y-plane, rotating clockwise.

The same transformation is used for shower cores, photon positions and
photon directions.

"""
from math import pi

from .angles import reduce_angle


def corsika_to_grisu(azimuth, x, y):
    """Transform an azimuth and position from CORSIKA to GrIsu coordinates

    :param azimuth: azimuth in radians in the CORSIKA frame.
    :param x,y: position in the CORSIKA frame.
    :return: tuple (azimuth, x, y) in the GrIsu frame, with the azimuth
             in radians in the interval [0, 2pi).

    """
    azimuth = reduce_angle(1.5 * pi - reduce_angle(azimuth))
    return azimuth, -y, -x
