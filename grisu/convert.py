""" Convert CORSIKA Cherenkov photons to a GrIsu photon list

    This module reads a CORSIKA run stored in a HDF5 file (see
    :mod:`~grisu.storage`) and writes it as a GrIsu photon list, either to
    a file or to stdout.

    The syntax and options for calling this script can be seen with::

        $ corsika_to_grisu --help

    For example to convert the run in run.h5 to photons.cph, including the
    slant depth of the first interactions using atmosphere model 6 with a
    progress bar run::

        $ corsika_to_grisu --progress --more-info --atmosphere 6 \\
                --atmprof-path /data/atmprof run.h5 photons.cph

"""
import argparse
import logging

import tables

from . import __version__
from .storage import (read_run_header, read_header_text, iter_showers,
                      iter_photons, count_showers)
from .utils import pbar
from .writer import GrisuWriter

logger = logging.getLogger('grisu.convert')

VERSION = 'grisu %s' % __version__


def convert(source, destination, atmosphere_id=-1, atmosphere_path=None,
            observation_height=100., more_info=False, progress=False,
            version=VERSION):
    """Write the run in a HDF5 file as GrIsu photon list

    :param source: path to the HDF5 file with the CORSIKA run.
    :param destination: ``'stdout'`` or path of the photon list to create.
    :param atmosphere_id: atmosphere model number, -1 for none.
    :param atmosphere_path: directory containing the atmospheric profiles.
    :param observation_height: observation height in m.
    :param more_info: if True, add a ``C`` line for each shower.
    :param progress: if True, show a progressbar over the showers.
    :param version: version tag written in the header.
    :return: tuple with the number of showers and photons written.

    """
    n_showers = 0
    n_photons = 0
    with tables.open_file(source, 'r') as data, \
            GrisuWriter(version, atmosphere_id, observation_height,
                        atmosphere_path) as writer:
        writer.set_output(destination)

        header_text = read_header_text(data)

        def print_header(sink):
            for line in header_text:
                sink.write(line)

        writer.write_run_header(read_run_header(data), print_header)

        for shower in pbar(iter_showers(data), length=count_showers(data),
                           show=progress):
            writer.write_shower(shower, more_info)
            n_showers += 1
            for photon in iter_photons(data, shower.shower_id):
                writer.write_photon(photon, photon.telescope)
                n_photons += 1

    logger.info('Wrote %d showers and %d photons to %s',
                n_showers, n_photons, destination)
    return n_showers, n_photons


def main():
    parser = argparse.ArgumentParser(description='Convert a CORSIKA run '
                                     'stored in HDF5 to a GrIsu photon list.')
    parser.add_argument('source', help="path of the HDF5 file with the run")
    parser.add_argument('destination',
                        help="path of the photon list to create, or 'stdout'")
    parser.add_argument('--atmosphere', type=int, default=-1,
                        help="atmosphere model number (atmprof<number>.dat)")
    parser.add_argument('--atmprof-path',
                        help="directory containing the atmospheric profiles")
    parser.add_argument('--observation-height', type=float, default=100.,
                        help="observation height in m, default: 100")
    parser.add_argument('--more-info', action='store_true',
                        help="add first interaction and slant depth lines")
    parser.add_argument('--progress', action='store_true',
                        help="show progressbar during conversion")
    parser.add_argument('--verbose', action='store_true',
                        help="log progress information")
    args = parser.parse_args()

    if args.more_info and args.atmosphere < 0:
        parser.error('--more-info requires an atmosphere model')

    logging.basicConfig(level=logging.INFO if args.verbose
                        else logging.WARNING)
    convert(args.source, args.destination, args.atmosphere,
            args.atmprof_path, args.observation_height, args.more_info,
            args.progress)


if __name__ == '__main__':
    main()
