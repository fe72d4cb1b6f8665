""" Perform various angle related transformations

    Reduce angles to a canonical range.

"""
from math import fmod, pi

#: One full turn in radians.
TWO_PI = 2. * pi


def reduce_angle(angle):
    """Reduce an angle to the interval [0, 2pi)

    Angles already in the interval are returned unchanged and whole turns
    (``k * TWO_PI`` for integer k) reduce to exactly 0.

    :param angle: angle in radians, any finite value.
    :return: equivalent angle in radians in the interval [0, 2pi).

    """
    if round(angle / TWO_PI) * TWO_PI == angle:
        return 0.
    reduced = fmod(angle, TWO_PI)
    if reduced < 0:
        reduced += TWO_PI
    if reduced >= TWO_PI:
        # adding a full turn to a tiny negative angle rounds up
        reduced = 0.
    return reduced
