import os
import shutil
import tempfile
import unittest
from io import StringIO
from unittest.mock import Mock, patch

from grisu import writer
from grisu.corsika.blocks import RunHeader, Shower, PhotonBunch


def run_header(**kwargs):
    fields = dict(run_number=1234., date=240101., version=7.56,
                  particle_id=14., zenith=0.35, azimuth=0.,
                  spectral_slope=-2.7, min_energy=100., max_energy=1e5,
                  observation_height=183400., cutoff_hadrons=0.3,
                  cutoff_muons=0.3, cutoff_electrons=0.003,
                  cutoff_photons=0.003, magnetic_field_x=20.4,
                  magnetic_field_z=43.2)
    fields.update(kwargs)
    return RunHeader(**fields)


class WriterTestCase(unittest.TestCase):

    def setUp(self):
        patcher = patch('sys.stdout', new_callable=StringIO)
        self.stdout = patcher.start()
        self.addCleanup(patcher.stop)
        self.writer = writer.GrisuWriter('test 1.0')
        self.writer.set_output('stdout')

    def get_lines(self):
        return self.stdout.getvalue().split('\n')[:-1]


class GrisuWriterSetupTests(unittest.TestCase):

    def test_defaults(self):
        grisu_writer = writer.GrisuWriter('test 1.0')
        self.assertEqual(grisu_writer.qeff, 1.)
        self.assertEqual(grisu_writer.observation_height, 100.)
        self.assertIsNone(grisu_writer.atmosphere)
        self.assertIsNone(grisu_writer.sink)

    @patch('grisu.writer.AtmosphereModel')
    def test_atmosphere(self, mock_model):
        """The atmosphere model sets the observation height"""

        mock_model.initialize.return_value.observation_height = 1800.
        grisu_writer = writer.GrisuWriter('test 1.0', atmosphere_id=6,
                                          atmosphere_path='/data')
        mock_model.initialize.assert_called_once_with(6, 100., '/data')
        self.assertEqual(grisu_writer.observation_height, 1800.)
        self.assertIs(grisu_writer.atmosphere,
                      mock_model.initialize.return_value)

    @patch('grisu.writer.AtmosphereModel')
    def test_no_atmosphere(self, mock_model):
        writer.GrisuWriter('test 1.0', atmosphere_id=-1)
        self.assertFalse(mock_model.initialize.called)

    def test_write_without_output(self):
        grisu_writer = writer.GrisuWriter('test 1.0')
        shower = Shower(1., 0., 0., 0., 90., 10., 1)
        self.assertRaises(RuntimeError, grisu_writer.write_shower, shower)

    @patch('sys.stdout', new_callable=StringIO)
    def test_select_output_once(self, mock_stdout):
        grisu_writer = writer.GrisuWriter('test 1.0')
        grisu_writer.set_output('stdout')
        self.assertRaises(RuntimeError, grisu_writer.set_output, 'stdout')

    def test_file_output(self):
        path = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, path)
        filename = os.path.join(path, 'photons.cph')
        with writer.GrisuWriter('test 1.0') as grisu_writer:
            grisu_writer.set_output(filename)
            grisu_writer.write_shower(Shower(1., 0., 0., 0., 90., 10., 1))
        with open(filename) as photons:
            self.assertEqual(photons.read(), 'S 1.0000000 0.0000000 '
                             '0.0000000 0.0000000 0.0000000 10.0000000 '
                             '-1 -1 -1\n')


class RunHeaderTests(WriterTestCase):

    def test_header(self):
        self.writer.write_run_header(run_header())
        self.assertEqual(self.get_lines(), [
            '* HEADF  <-- Start of header flag',
            '',
            'photon list created with test 1.0',
            '',
            '       Photons generated by CORSIKA  (date: 240101)',
            '',
            '\t CORSIKA run number: 1234',
            '\t CORSIKA version: 7.5600',
            '',
            '',
            ' TITLE OF RUN: ',
            '\t\t\t Primary energy<min.,max.> TeV = 0.1000\t100.0000',
            '\t\t\t Slope of energy spectrum: -2.7000',
            '\t\t\t Type code for primary particle (CORSIKA ID) 14',
            'PTYPE: 14',
            '\t\t\t Type code for primary particle (kascade ID) 13',
            '\t\t\t Primary zenith angle  (CORSIKA coord.): 20.0535',
            '\t\t\t Primary azimuth angle (CORSIKA coord.): 0.0000',
            '\t\t\t Primary zenith angle  (kascade coord.): 20.0535',
            '\t\t\t Primary azimuth angle (kascade coord.): 270.0000',
            '\t\t\t Magnetic field (x/z): 20.4000\t43.2000',
            '\t\t\t Observation height [m]: 1834.0000',
            '\t\t\t Energy cuts (hadr./muon/el./phot.) [GeV]: '
            '0.3000\t0.3000\t0.0030\t0.0030',
            'CORSIKA RUN HEADER (START)',
            'CORSIKA RUN HEADER (END)',
            '',
            '* DATAF  <-- end of header flag',
            'R 1.0000',
            'H 100.0000'])

    def test_unknown_particle(self):
        self.writer.write_run_header(run_header(particle_id=402.))
        lines = self.get_lines()
        self.assertIn('PTYPE: 402', lines)
        self.assertIn('\t\t\t Type code for primary particle (kascade ID) '
                      '\t unknown particle (for kascade)', lines)

    def test_azimuth_transformed(self):
        """Azimuth pi/2 (west) in CORSIKA is pi (west) in GrIsu"""

        self.writer.write_run_header(run_header(azimuth=1.5707963267948966))
        lines = self.get_lines()
        self.assertIn('\t\t\t Primary azimuth angle (CORSIKA coord.): '
                      '90.0000', lines)
        self.assertIn('\t\t\t Primary azimuth angle (kascade coord.): '
                      '180.0000', lines)

    def test_print_header(self):
        """The printer adds the CORSIKA header between the markers"""

        def print_header(sink):
            sink.write('RUNH 1234')
            sink.write('EVTH 1')

        printer = Mock(side_effect=print_header)
        self.writer.write_run_header(run_header(), printer)
        printer.assert_called_once_with(self.writer.sink)
        lines = self.get_lines()
        start = lines.index('CORSIKA RUN HEADER (START)')
        self.assertEqual(lines[start + 1:start + 4],
                         ['RUNH 1234', 'EVTH 1', 'CORSIKA RUN HEADER (END)'])


class ShowerTests(WriterTestCase):

    def test_vertical_shower(self):
        shower = Shower(energy=1., x=0., y=0., azimuth=0., altitude=90.,
                        first_interaction=10., shower_id=1)
        self.writer.write_shower(shower)
        self.assertEqual(self.get_lines(), [
            'S 1.0000000 0.0000000 0.0000000 0.0000000 0.0000000 '
            '10.0000000 -1 -1 -1'])

    def test_inclined_shower(self):
        """Core and direction are transformed to the GrIsu frame"""

        shower = Shower(energy=2.5, x=100., y=-50., azimuth=0., altitude=60.,
                        first_interaction=12000., shower_id=2)
        self.writer.write_shower(shower)
        self.assertEqual(self.get_lines(), [
            'S 2.5000000 50.0000000 -100.0000000 0.0000000 -0.5000000 '
            '12000.0000000 -1 -1 -1'])
        self.assertEqual(self.writer.core_offset, (50., -100.))

    def test_shower_from_west(self):
        shower = Shower(energy=2.5, x=0., y=0., azimuth=90., altitude=60.,
                        first_interaction=12000., shower_id=2)
        self.writer.write_shower(shower)
        self.assertEqual(self.get_lines(), [
            'S 2.5000000 0.0000000 0.0000000 -0.5000000 0.0000000 '
            '12000.0000000 -1 -1 -1'])

    def test_snap_to_zero(self):
        self.assertEqual(writer.snap_to_zero(5e-9), 0.)
        self.assertEqual(writer.snap_to_zero(-9.9e-9), 0.)
        self.assertEqual(writer.snap_to_zero(2e-8), 2e-8)
        self.assertEqual(writer.snap_to_zero(-0.5), -0.5)

    def test_more_info(self):
        """Add the first interaction and slant depth"""

        self.writer.atmosphere = Mock()
        self.writer.atmosphere.thickness.return_value = 500.
        shower = Shower(energy=1., x=0., y=0., azimuth=0., altitude=30.,
                        first_interaction=20000., shower_id=17)
        self.writer.write_shower(shower, more_info=True)
        self.writer.atmosphere.thickness.assert_called_once_with(2000000.)
        lines = self.get_lines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith('S 1.0000000 '))
        self.assertEqual(lines[1], 'C 20000.0000000 1000.0000000 17')

    def test_more_info_without_atmosphere(self):
        shower = Shower(1., 0., 0., 0., 90., 10., 1)
        self.assertRaises(RuntimeError, self.writer.write_shower, shower,
                          more_info=True)
        self.assertEqual(self.stdout.getvalue(), '')


class PhotonTests(WriterTestCase):

    def test_vertical_photon(self):
        photon = PhotonBunch(x=1., y=2., cx=0., cy=0., zem=9000., time=12.5,
                             wavelength=350.7, telescope=0)
        self.writer.write_photon(photon, 0)
        self.assertEqual(self.get_lines(), [
            'P -2.0000000 -1.0000000 +0.0000000 +0.0000000 +9000.0000000 '
            '+12.5000000 +350 +3 +1'])

    def test_direction(self):
        """Direction towards the west in CORSIKA is -x in GrIsu"""

        photon = PhotonBunch(x=-3., y=0.5, cx=0., cy=0.6, zem=12000.,
                             time=-1.25, wavelength=420.9, telescope=4)
        self.writer.write_photon(photon, 4)
        self.assertEqual(self.get_lines(), [
            'P -0.5000000 +3.0000000 -0.6000000 +0.0000000 +12000.0000000 '
            '-1.2500000 +420 +3 +5'])

    def test_clamped_direction(self):
        """Direction cosines outside the unit circle are horizontal"""

        photon = PhotonBunch(x=0., y=0., cx=0.8, cy=0.8, zem=100.,
                             time=0., wavelength=300., telescope=1)
        self.writer.write_photon(photon, 1)
        fields = self.get_lines()[0].split()
        self.assertEqual(fields[3:5], ['-0.7071068', '-0.7071068'])
        self.assertEqual(fields[-1], '+2')

    def test_sign_only_on_photon_lines(self):
        photon = PhotonBunch(x=1., y=2., cx=0., cy=0., zem=9000., time=12.5,
                             wavelength=350.7, telescope=0)
        self.writer.write_photon(photon, 0)
        self.writer.write_shower(Shower(1., 0., 0., 0., 90., 10., 1))
        self.assertEqual(self.get_lines()[1], 'S 1.0000000 0.0000000 '
                         '0.0000000 0.0000000 0.0000000 10.0000000 -1 -1 -1')


if __name__ == '__main__':
    unittest.main()
