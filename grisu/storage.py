""" Store CORSIKA Cherenkov photons in HDF5 files

    The GrIsu converter reads decoded CORSIKA runs from a HDF5 file, using
    PyTables.  One file contains a single run:

    - ``run_header``: root attribute, dictionary with the fields of a
      :class:`~grisu.corsika.blocks.RunHeader`.
    - ``header_text``: optional root attribute, list of lines with the
      text dump of the original CORSIKA run header.
    - ``/showers``: table with one row per shower (:class:`Showers`).
    - ``/photons``: table with one row per photon (:class:`Photons`),
      linked to the showers by the ``shower_id`` column.

    Example::

        >>> import tables
        >>> with tables.open_file('run.h5', 'r') as data:
        ...     header = read_run_header(data)
        ...     for shower in iter_showers(data):
        ...         photons = list(iter_photons(data, shower.shower_id))

"""
import tables

from .corsika.blocks import RunHeader, Shower, PhotonBunch

SHOWERS = 'showers'
PHOTONS = 'photons'


class Showers(tables.IsDescription):
    """Store information about the simulated showers"""

    shower_id = tables.UInt32Col(pos=0)
    energy = tables.Float32Col(pos=1)
    x = tables.Float32Col(pos=2)
    y = tables.Float32Col(pos=3)
    azimuth = tables.Float32Col(pos=4)
    altitude = tables.Float32Col(pos=5)
    first_interaction = tables.Float32Col(pos=6)


class Photons(tables.IsDescription):
    """Store information about Cherenkov photons reaching a telescope"""

    shower_id = tables.UInt32Col(pos=0)
    telescope = tables.UInt16Col(pos=1)
    x = tables.Float32Col(pos=2)
    y = tables.Float32Col(pos=3)
    cx = tables.Float32Col(pos=4)
    cy = tables.Float32Col(pos=5)
    zem = tables.Float32Col(pos=6)
    time = tables.Float32Col(pos=7)
    wavelength = tables.Float32Col(pos=8)


def store_run_header(data, header, header_text=None):
    """Store the run header as attributes of the root node

    :param data: writeable PyTables file handle.
    :param header: :class:`~grisu.corsika.blocks.RunHeader` instance.
    :param header_text: optional list of lines describing the run.

    """
    data.set_node_attr('/', 'run_header', dict(header._asdict()))
    if header_text is not None:
        data.set_node_attr('/', 'header_text', list(header_text))


def store_showers(data, showers):
    """Store showers in a new table

    :param data: writeable PyTables file handle.
    :param showers: iterable of :class:`~grisu.corsika.blocks.Shower`.

    """
    table = data.create_table('/', SHOWERS, Showers, 'Simulated showers')
    _append_rows(table, showers)
    return table


def store_photons(data, shower_id, photons):
    """Store the photons of a shower

    The photon table is created when it does not exist yet.

    :param data: writeable PyTables file handle.
    :param shower_id: id of the shower which produced the photons.
    :param photons: iterable of :class:`~grisu.corsika.blocks.PhotonBunch`.

    """
    try:
        table = data.get_node('/', PHOTONS)
    except tables.NoSuchNodeError:
        table = data.create_table('/', PHOTONS, Photons, 'Cherenkov photons')
    _append_rows(table, photons, shower_id=shower_id)
    return table


def _append_rows(table, records, **extra):
    row = table.row
    for record in records:
        for key, value in record._asdict().items():
            row[key] = value
        for key, value in extra.items():
            row[key] = value
        row.append()
    table.flush()


def read_run_header(data):
    """Get the run header from the root attributes

    :param data: PyTables file handle.
    :return: :class:`~grisu.corsika.blocks.RunHeader` instance.

    """
    return RunHeader(**data.get_node_attr('/', 'run_header'))


def read_header_text(data):
    """Get the text dump of the run header, empty if not available"""

    try:
        return list(data.get_node_attr('/', 'header_text'))
    except AttributeError:
        return []


def iter_showers(data):
    """Generator over the showers in the file

    :yield: :class:`~grisu.corsika.blocks.Shower` instances.

    """
    for row in data.get_node('/', SHOWERS):
        yield Shower(energy=row['energy'], x=row['x'], y=row['y'],
                     azimuth=row['azimuth'], altitude=row['altitude'],
                     first_interaction=row['first_interaction'],
                     shower_id=int(row['shower_id']))


def iter_photons(data, shower_id):
    """Generator over the photons of a shower

    :param shower_id: id of the shower.
    :yield: :class:`~grisu.corsika.blocks.PhotonBunch` instances.

    """
    try:
        table = data.get_node('/', PHOTONS)
    except tables.NoSuchNodeError:
        return
    for row in table.where('shower_id == %d' % shower_id):
        yield PhotonBunch(x=row['x'], y=row['y'], cx=row['cx'], cy=row['cy'],
                          zem=row['zem'], time=row['time'],
                          wavelength=row['wavelength'],
                          telescope=int(row['telescope']))


def count_showers(data):
    """Number of showers in the file"""

    return data.get_node('/', SHOWERS).nrows
