""" Atmospheric profiles for slant depth calculations

    The GrIsu writer can add the atmospheric depth of the first interaction
    of a shower to the output.  This requires a model of the atmosphere,
    which is read from the tabulated atmospheric profiles distributed with
    the CORSIKA IACT package (``atmprof<id>.dat``).  Each profile lists per
    altitude the density, the vertical thickness (depth) and the index of
    refraction::

        # Alt [km]    rho [g/cm^3] thick [g/cm^2]    n-1
             0.000     0.11668E-02  0.10203E+04  0.28815E-03

    The thickness is interpolated linearly in its logarithm between the
    rows of the table.

    Example::

        >>> from grisu.corsika.atmosphere import AtmosphereModel
        >>> atmosphere = AtmosphereModel.initialize(6, path='/data/atmprof')
        >>> depth = atmosphere.thickness(100000.)  # at 1 km, height in cm

"""
import logging
import os

import numpy as np
from scipy.interpolate import interp1d

from . import units

logger = logging.getLogger('grisu.atmosphere')

#: Environment variable with the directory containing the profiles.
ATMPROF_PATH_ENV = 'GRISU_ATMPROF_PATH'
ATMPROF_FILENAME = 'atmprof{model_id}.dat'


class AtmosphereModel(object):

    """Tabulated atmospheric profile

    :param altitudes: altitudes of the table rows in km.
    :param thicknesses: vertical thickness at those altitudes in g/cm2.
    :param observation_height: requested observation height in m.

    """

    def __init__(self, altitudes, thicknesses, observation_height=100.):
        altitudes = np.asarray(altitudes, dtype=float) * units.km / units.cm
        thicknesses = np.asarray(thicknesses, dtype=float)

        # the top rows may have zero thickness
        positive = thicknesses > 0
        log_thickness = np.log(thicknesses[positive])
        self._log_thickness = interp1d(altitudes[positive], log_thickness,
                                       bounds_error=False,
                                       fill_value=(log_thickness[0], -np.inf))

        bottom = altitudes.min() * units.cm / units.m
        self.observation_height = max(observation_height, bottom)

    @classmethod
    def initialize(cls, model_id, observation_height=100., path=None):
        """Load the atmospheric profile for an atmosphere model number

        :param model_id: number of the atmosphere model, the profile is
                         read from ``atmprof<model_id>.dat``.
        :param observation_height: requested observation height in m.
        :param path: directory containing the profiles, defaults to the
                     ``GRISU_ATMPROF_PATH`` environment variable or the
                     current directory.

        """
        if model_id < 0:
            raise ValueError('Invalid atmosphere model: %d' % model_id)
        if path is None:
            path = os.environ.get(ATMPROF_PATH_ENV, os.curdir)
        filename = os.path.join(path,
                                ATMPROF_FILENAME.format(model_id=model_id))
        return cls.from_file(filename, observation_height)

    @classmethod
    def from_file(cls, filename, observation_height=100.):
        """Load an atmospheric profile from a table file

        :param filename: path to a profile in the ``atmprof`` format.
        :param observation_height: requested observation height in m.

        """
        altitudes, thicknesses = np.loadtxt(filename, usecols=(0, 2),
                                            unpack=True, ndmin=2)
        logger.info('Read atmospheric profile %s (%d rows)',
                    filename, len(altitudes))
        return cls(altitudes, thicknesses, observation_height)

    def thickness(self, height):
        """Vertical thickness of the atmosphere above a height

        :param height: height above sea level in cm.
        :return: atmospheric depth in g/cm2.

        """
        return float(np.exp(self._log_thickness(height)))
