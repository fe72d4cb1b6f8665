"""Work with CORSIKA simulation data.

This package contains modules for preparing CORSIKA simulations for GrIsu:

:mod:`~grisu.corsika.atmosphere`
    tabulated atmospheric profiles for slant depth calculations

:mod:`~grisu.corsika.blocks`
    records for the run header, showers and photon bunches

:mod:`~grisu.corsika.particles`
    convert CORSIKA particle codes to names and KASCADE codes

:mod:`~grisu.corsika.units`
    convert values in units used by CORSIKA to other units

"""
from . import atmosphere
from . import blocks
from . import particles
from . import units


__all__ = ['atmosphere',
           'blocks',
           'particles',
           'units']
