""" Write CORSIKA Cherenkov photons in the GrIsu photon list format

    The GrIsu detector simulation (grisudet) reads photons from an ASCII
    photon list.  The list starts with a header block, followed by one
    ``S`` line per shower and one ``P`` line per photon of that shower::

        * HEADF  <-- Start of header flag
        ...
        * DATAF  <-- end of header flag
        R 1.0000
        H 100.0000
        S 1.0000000 0.0000000 0.0000000 0.0000000 0.0000000 10.0000000 -1 -1 -1
        P +12.5000000 -3.2500000 +0.0100000 -0.0200000 +9000.0000000 ...

    All coordinates are transformed from the CORSIKA frame to the GrIsu
    frame, see :mod:`~grisu.transformations.frames`.

    Example usage::

        >>> from grisu.writer import GrisuWriter
        >>> with GrisuWriter('grisu 1.0') as writer:
        ...     writer.set_output('photons.cph')
        ...     writer.write_run_header(run_header)
        ...     for shower, photons in showers:
        ...         writer.write_shower(shower)
        ...         for photon in photons:
        ...             writer.write_photon(photon, photon.telescope)

"""
import logging

from numpy import sin, cos, arctan2, arccos, sqrt, radians

from .corsika import particles, units
from .corsika.atmosphere import AtmosphereModel
from .output import open_sink
from .transformations.frames import corsika_to_grisu

logger = logging.getLogger('grisu.writer')

#: Precision (number of decimals) of the shower and photon fields.
PRECISION = 7

#: Direction cosines smaller than this are rounding errors.
MIN_DIRECTION_COSINE = 1e-8

#: Placeholder for the three unused fields of the shower line.
UNUSED = -1

#: Particle type of the photon emitter, not known from CORSIKA.
EMITTER_UNKNOWN = 3


def snap_to_zero(value):
    """Replace rounding errors around zero by zero"""

    if abs(value) < MIN_DIRECTION_COSINE:
        return 0.
    return value


class GrisuWriter(object):

    """Write the run header, showers and photons of CORSIKA runs

    :param version: version tag of the program, written in the header.
    :param atmosphere_id: number of the atmosphere model, if non-negative
                          the atmospheric profile is loaded and it sets
                          the observation height.
    :param observation_height: observation height in m.
    :param atmosphere_path: directory containing the atmospheric profiles.

    """

    def __init__(self, version, atmosphere_id=-1, observation_height=100.,
                 atmosphere_path=None):
        self.version = version
        self.qeff = 1.
        self.observation_height = observation_height
        self.atmosphere = None
        if atmosphere_id >= 0:
            self.atmosphere = AtmosphereModel.initialize(
                atmosphere_id, observation_height, atmosphere_path)
            self.observation_height = self.atmosphere.observation_height
        self.core_offset = (0., 0.)
        self.sink = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def set_output(self, destination):
        """Select the output, only once per writer

        :param destination: ``'stdout'`` or the path of the file to create.

        """
        if self.sink is not None:
            raise RuntimeError('The output has already been selected.')
        self.sink = open_sink(destination)

    def close(self):
        if self.sink is not None:
            self.sink.close()

    def _get_sink(self):
        if self.sink is None:
            raise RuntimeError('No output selected, call set_output first.')
        return self.sink

    def write_run_header(self, header, print_header=None):
        """Write the header block

        :param header: :class:`~grisu.corsika.blocks.RunHeader` instance.
        :param print_header: optional callable which is called with the
                             output sink to add the CORSIKA run header.

        """
        sink = self._get_sink()
        particle_id = int(header.particle_id)
        kascade_id = particles.kascade_id(particle_id)
        zenith = header.zenith / units.degree
        azimuth, _, _ = corsika_to_grisu(header.azimuth, 0., 0.)
        logger.info('Writing header for run %d, primary: %s',
                    header.run_number, particles.name(particle_id))

        sink.write('* HEADF  <-- Start of header flag')
        sink.write()
        sink.write('photon list created with %s' % self.version)
        sink.write()
        sink.write('       Photons generated by CORSIKA  (date: %d)' %
                   header.date)
        sink.write()
        sink.write('\t CORSIKA run number: %d' % header.run_number)
        sink.write('\t CORSIKA version: %s' % sink.format(header.version))
        sink.write()
        sink.write()

        sink.write(' TITLE OF RUN: ')
        energies = [header.min_energy * units.GeV / units.TeV,
                    header.max_energy * units.GeV / units.TeV]
        sink.write('\t\t\t Primary energy<min.,max.> TeV = %s' %
                   '\t'.join(sink.format(e) for e in energies))
        sink.write('\t\t\t Slope of energy spectrum: %s' %
                   sink.format(header.spectral_slope))
        sink.write('\t\t\t Type code for primary particle (CORSIKA ID) %d' %
                   particle_id)
        sink.write('PTYPE: %d' % particle_id)
        if kascade_id is not None:
            sink.write('\t\t\t Type code for primary particle (kascade ID) %d'
                       % kascade_id)
        else:
            logger.debug('No KASCADE code for particle %d', particle_id)
            sink.write('\t\t\t Type code for primary particle (kascade ID) '
                       '\t unknown particle (for kascade)')
        sink.write('\t\t\t Primary zenith angle  (CORSIKA coord.): %s' %
                   sink.format(zenith))
        sink.write('\t\t\t Primary azimuth angle (CORSIKA coord.): %s' %
                   sink.format(header.azimuth / units.degree))
        sink.write('\t\t\t Primary zenith angle  (kascade coord.): %s' %
                   sink.format(zenith))
        sink.write('\t\t\t Primary azimuth angle (kascade coord.): %s' %
                   sink.format(azimuth / units.degree))
        sink.write('\t\t\t Magnetic field (x/z): %s\t%s' %
                   (sink.format(header.magnetic_field_x),
                    sink.format(header.magnetic_field_z)))
        sink.write('\t\t\t Observation height [m]: %s' %
                   sink.format(header.observation_height * units.cm / units.m))
        cutoffs = [header.cutoff_hadrons, header.cutoff_muons,
                   header.cutoff_electrons, header.cutoff_photons]
        sink.write('\t\t\t Energy cuts (hadr./muon/el./phot.) [GeV]: %s' %
                   '\t'.join(sink.format(cutoff) for cutoff in cutoffs))

        sink.write('CORSIKA RUN HEADER (START)')
        if print_header is not None:
            print_header(sink)
        sink.write('CORSIKA RUN HEADER (END)')

        sink.write()
        sink.write('* DATAF  <-- end of header flag')
        sink.write_record('R', float(self.qeff))
        sink.write_record('H', float(self.observation_height))

    def write_shower(self, shower, more_info=False):
        """Write the shower line (``S``)

        :param shower: :class:`~grisu.corsika.blocks.Shower` instance.
        :param more_info: if True also write a ``C`` line with the height
                          and slant depth of the first interaction and the
                          shower id, this requires an atmosphere model.

        """
        sink = self._get_sink()
        zenith = radians(90. - float(shower.altitude))
        azimuth, x, y = corsika_to_grisu(radians(float(shower.azimuth)),
                                         float(shower.x), float(shower.y))
        self.core_offset = (x, y)

        dcos = snap_to_zero(sin(zenith) * cos(azimuth))
        dsin = snap_to_zero(sin(zenith) * sin(azimuth))
        first_interaction = float(shower.first_interaction)
        if more_info:
            slant_depth = self.slant_depth(first_interaction, zenith)
        logger.debug('Shower %d: %.2f TeV', shower.shower_id, shower.energy)

        sink.write_record('S', float(shower.energy), x, y, dcos, dsin,
                          first_interaction, UNUSED, UNUSED, UNUSED,
                          precision=PRECISION)

        if more_info:
            sink.write_record('C', first_interaction, slant_depth,
                              int(shower.shower_id), precision=PRECISION)

    def slant_depth(self, height, zenith):
        """Atmospheric depth along the shower axis

        :param height: height in m.
        :param zenith: zenith angle of the shower in radians.
        :return: slant depth in g/cm2.

        """
        if self.atmosphere is None:
            raise RuntimeError('Slant depth requires an atmosphere model.')
        return self.atmosphere.thickness(100. * height) / cos(zenith)

    def write_photon(self, bunch, telescope):
        """Write a photon line (``P``)

        The arrival time is written as given, it is the time since the
        first interaction and not the time since emission.

        :param bunch: :class:`~grisu.corsika.blocks.PhotonBunch` instance.
        :param telescope: index of the telescope hit (starting at 0).

        """
        sink = self._get_sink()
        cx, cy = float(bunch.cx), float(bunch.cy)
        azimuth = arctan2(cy, cx)
        zenith = arccos(sqrt(max(0., 1. - cx * cx - cy * cy)))
        azimuth, x, y = corsika_to_grisu(azimuth, float(bunch.x),
                                         float(bunch.y))

        with sink.signed():
            sink.write_record('P', x, y,
                              sin(zenith) * cos(azimuth),
                              sin(zenith) * sin(azimuth),
                              float(bunch.zem), float(bunch.time),
                              int(bunch.wavelength), EMITTER_UNKNOWN,
                              int(telescope) + 1, precision=PRECISION)
