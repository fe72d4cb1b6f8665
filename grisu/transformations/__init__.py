"""Convert between coordinate systems.

:mod:`~grisu.transformations.angles`
    reduction of angles to a canonical range

:mod:`~grisu.transformations.frames`
    conversion from the CORSIKA frame to the GrIsu frame

"""
from . import angles, frames

__all__ = ['angles',
           'frames']
