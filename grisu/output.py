""" Destinations for GrIsu photon lists

    All lines of a photon list are written through a single
    :class:`OutputSink`, either a file (:class:`FileSink`) or the console
    (:class:`ConsoleSink`).  Both apply the same formatting to numeric
    fields: fixed-point notation with 4 decimals, unless a different
    precision is requested for a field.  Inside a :meth:`OutputSink.signed`
    block all numbers are written with an explicit sign.

    Use :func:`open_sink` to select the destination::

        >>> sink = open_sink('stdout')
        >>> sink.write_record('R', 1.)
        R 1.0000

"""
from contextlib import contextmanager
import logging
import numbers
import sys

logger = logging.getLogger('grisu.output')

#: Destination name which selects the console instead of a file.
STDOUT = 'stdout'

#: Number of decimals used for fields without an explicit precision.
DEFAULT_PRECISION = 4


class OutputSink(object):

    """Write formatted lines to a text stream

    :param stream: writable text stream.

    """

    def __init__(self, stream):
        self._stream = stream
        self.precision = DEFAULT_PRECISION
        self.showpos = False

    def format(self, value, precision=None):
        """Format a single numeric field

        Integers are written as integers, all other values in fixed-point
        notation.  Negative zero is written as zero.

        :param value: the number to format.
        :param precision: number of decimals, defaults to the sink
                          precision.

        """
        sign = '+' if self.showpos else ''
        if isinstance(value, numbers.Integral):
            return format(value, sign + 'd')
        if precision is None:
            precision = self.precision
        value = float(value)
        if value == 0:
            value = 0.
        return format(value, '%s.%df' % (sign, precision))

    def fields(self, *values, precision=None):
        """Format values and join them with single spaces

        :param precision: number of decimals for all non-integer values.

        """
        return ' '.join(self.format(value, precision) for value in values)

    def write(self, line=''):
        """Write a line, the line terminator is added"""

        self._stream.write(line + '\n')

    def write_record(self, tag, *values, precision=None):
        """Write a record: a tag followed by formatted fields"""

        self.write(' '.join([tag, self.fields(*values, precision=precision)]))

    @contextmanager
    def signed(self):
        """Write all numbers with an explicit sign inside this block"""

        showpos = self.showpos
        self.showpos = True
        try:
            yield self
        finally:
            self.showpos = showpos

    def close(self):
        self._stream.flush()


class FileSink(OutputSink):

    """Write lines to a new file

    If the file can not be created the process is terminated, nothing has
    been written at that point.

    :param path: path of the file to create, an existing file is
                 overwritten.

    """

    def __init__(self, path):
        try:
            stream = open(path, 'w')
        except OSError as exc:
            logger.error('Error opening output file: %s', path)
            sys.exit('Error opening output file: %s (%s)' %
                     (path, exc.strerror))
        super().__init__(stream)
        self.path = path

    def close(self):
        self._stream.close()


class ConsoleSink(OutputSink):

    """Write lines to standard output"""

    def __init__(self):
        super().__init__(sys.stdout)


def open_sink(destination):
    """Select the destination for the output

    :param destination: ``'stdout'`` for the console, otherwise the path
                        of the file to create.
    :return: an :class:`OutputSink` instance.

    """
    if destination == STDOUT:
        sink = ConsoleSink()
    else:
        sink = FileSink(destination)
    logger.info('Writing output to %s', destination)
    return sink
