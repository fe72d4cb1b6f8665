"""Write CORSIKA Cherenkov photons as GrIsu photon lists

GrIsu simplifies the step from CORSIKA air shower simulations to the
`GrIsu <https://www.physics.utah.edu/gammaray/GrISU/>`_ detector
simulation.  It transforms showers and photons from the CORSIKA reference
frame to the frame used by GrIsu and writes them in the GrIsu ASCII photon
list format.

The following packages and modules are included:

:mod:`~grisu.convert`
    command line tool to convert stored CORSIKA runs

:mod:`~grisu.corsika`
    package containing CORSIKA related modules

:mod:`~grisu.output`
    file and console destinations for photon lists

:mod:`~grisu.storage`
    HDF5 storage of CORSIKA runs

:mod:`~grisu.tests`
    code tests

:mod:`~grisu.transformations`
    transformations between coordinate systems

:mod:`~grisu.utils`
    commonly used functions such as a progressbar

:mod:`~grisu.writer`
    the GrIsu photon list writer

"""
__version__ = '1.0.0'

from . import corsika, output, storage, transformations, utils, writer
from .corsika.atmosphere import AtmosphereModel
from .corsika.blocks import PhotonBunch, RunHeader, Shower
from .output import open_sink
from .tests import run_tests
from .transformations.angles import reduce_angle
from .transformations.frames import corsika_to_grisu
from .writer import GrisuWriter

__all__ = [
    'AtmosphereModel',
    'GrisuWriter',
    'PhotonBunch',
    'RunHeader',
    'Shower',
    'corsika',
    'corsika_to_grisu',
    'open_sink',
    'output',
    'reduce_angle',
    'run_tests',
    'storage',
    'transformations',
    'utils',
    'writer',
]
