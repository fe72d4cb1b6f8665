""" Defines units in terms of the base units used by the GrIsu writer

Use the units defined in this file whenever a dimensional quantity from
CORSIKA is converted for output.  For example, CORSIKA stores heights in
centimeter, the GrIsu header lists them in meter:

.. code-block:: python

    >>> height = 10000. * cm
    >>> print('%.1f m' % (height / m))
    100.0 m

The base units are:

- meter (meter)
- electron Volt (eV)
- radian (radian)

This is a reduced version of the units definitions written by the Geant4
collaboration.

"""

#
# Prefixes
#
nano = 1.e-9
micro = 1.e-6
milli = 1.e-3
centi = 1.e-2
kilo = 1.e+3
mega = 1.e+6
giga = 1.e+9
tera = 1.e+12
peta = 1.e+15

#
# Length [L]
#
meter = 1.0
centimeter = centi * meter
kilometer = kilo * meter
nanometer = nano * meter

# symbols
cm = centimeter
m = meter
km = kilometer

#
# Angle
#
radian = 1.
degree = (3.14159265358979323846 / 180.0) * radian

# symbols
rad = radian
deg = degree

#
# Energy [E]
#
electronvolt = 1.
gigaelectronvolt = giga * electronvolt
teraelectronvolt = tera * electronvolt
petaelectronvolt = peta * electronvolt

# symbols
eV = electronvolt
GeV = gigaelectronvolt
TeV = teraelectronvolt
PeV = petaelectronvolt

