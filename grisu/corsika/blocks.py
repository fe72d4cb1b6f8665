"""
Records passed from CORSIKA to the GrIsu writer

:class:`RunHeader` holds the run information that goes into the GrIsu
header.  It can be created from the CORSIKA event header sub-block, as
specified in the CORSIKA users manual (Table 8), which is the only place
where the positional layout of that sub-block is used.

:class:`Shower` and :class:`PhotonBunch` are the per-shower and
per-photon records.  Photon bunches are produced in large numbers and are
not kept after writing.

"""
from collections import namedtuple


class RunHeader(namedtuple('RunHeader', ['run_number', 'date', 'version',
                                         'particle_id', 'zenith', 'azimuth',
                                         'spectral_slope', 'min_energy',
                                         'max_energy', 'observation_height',
                                         'cutoff_hadrons', 'cutoff_muons',
                                         'cutoff_electrons', 'cutoff_photons',
                                         'magnetic_field_x',
                                         'magnetic_field_z'])):

    """Run information for the GrIsu header

    All values are kept in the units used by CORSIKA: angles in radians
    (CORSIKA frame), energies and cutoffs in GeV, observation height in
    cm and the magnetic field in uT.

    """

    __slots__ = ()

    @classmethod
    def from_event_header(cls, subblock):
        """Create a RunHeader from a CORSIKA event header sub-block

        :param subblock: sequence of the (at least 72) fields of the
                         event header, starting with the 'EVTH' id.

        """
        return cls(run_number=subblock[43],
                   date=subblock[44],
                   version=subblock[45],
                   particle_id=subblock[2],
                   zenith=subblock[10],
                   azimuth=subblock[11],
                   spectral_slope=subblock[57],
                   min_energy=subblock[58],
                   max_energy=subblock[59],
                   observation_height=subblock[47],
                   cutoff_hadrons=subblock[60],
                   cutoff_muons=subblock[61],
                   cutoff_electrons=subblock[62],
                   cutoff_photons=subblock[63],
                   magnetic_field_x=subblock[70],
                   magnetic_field_z=subblock[71])


#: A simulated shower. Energy in TeV, core position (x, y) in m, azimuth
#: and altitude in degrees in the CORSIKA frame, first interaction height.
Shower = namedtuple('Shower', ['energy', 'x', 'y', 'azimuth', 'altitude',
                               'first_interaction', 'shower_id'])

#: A single Cherenkov photon. Position (x, y) and direction cosines
#: (cx, cy) in the CORSIKA frame, emission height, arrival time since the
#: first interaction, wavelength in nm and the index of the telescope hit.
PhotonBunch = namedtuple('PhotonBunch', ['x', 'y', 'cx', 'cy', 'zem', 'time',
                                         'wavelength', 'telescope'])
