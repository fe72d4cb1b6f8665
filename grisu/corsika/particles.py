"""
Particle identification for particles in CORSIKA and GrIsu

Particle codes as specified in CORSIKA user manual, Table 4.  GrIsu uses
the KASCADE particle codes, the :data:`KASCADE_ID` table converts between
the two.  Not every CORSIKA particle has a KASCADE counterpart:

.. code-block:: python

    from grisu.corsika import particles

    particles.kascade_id(14)  # proton -> 13
    particles.kascade_id(15)  # anti_proton -> None, unknown for KASCADE

Nuclei are coded as::

    mass number x 100 + atomic number

"""

#: CORSIKA particle code to KASCADE particle code.
KASCADE_ID = {1: 1,     # gamma
              2: 2,     # positron
              3: 3,     # electron
              5: 4,     # muon_p
              6: 5,     # muon_m
              7: 6,     # pion_0
              8: 7,     # pion_p
              9: 8,     # pion_m
              11: 9,    # Kaon_p
              12: 10,   # Kaon_m
              10: 11,   # Kaon_0_long
              16: 12,   # Kaon_0_short
              14: 13,   # proton
              13: 14}   # neutron


def kascade_id(particle_id):
    """Get the KASCADE code for a CORSIKA particle code

    :param particle_id: CORSIKA code for the particle.
    :return: KASCADE code for the particle, or None if the particle
             has no KASCADE code.

    """
    return KASCADE_ID.get(int(particle_id))


def name(particle_id):
    """Get the name for a CORSIKA particle code

    :param particle_id: code for the particle
    :return: name of the particle. In case of atoms the mass number is
             added to the name.

    """
    particle_id = int(particle_id)
    try:
        return ID[particle_id]
    except KeyError:
        atom = ATOMIC_NUMBER.get(particle_id % 100, 'unknown')
        return atom + str(particle_id // 100)


ID = {1: 'gamma',
      2: 'positron',
      3: 'electron',
      5: 'muon_p',
      6: 'muon_m',
      7: 'pion_0',
      8: 'pion_p',
      9: 'pion_m',
      10: 'Kaon_0_long',
      11: 'Kaon_p',
      12: 'Kaon_m',
      13: 'neutron',
      14: 'proton',
      15: 'anti_proton',
      16: 'Kaon_0_short',
      17: 'eta',
      18: 'Lambda',
      25: 'anti_neutron',
      66: 'electron_neutrino',
      67: 'anti_electron_neutrino',
      68: 'muon_neutrino',
      69: 'anti_muon_neutrino',
      201: 'deuteron',
      301: 'tritium',
      302: 'helium3',
      402: 'alpha',
      9900: 'cherenkov'}

ATOMIC_NUMBER = {1: 'hydrogen',
                 2: 'helium',
                 3: 'lithium',
                 4: 'beryllium',
                 5: 'boron',
                 6: 'carbon',
                 7: 'nitrogen',
                 8: 'oxygen',
                 9: 'fluorine',
                 10: 'neon',
                 11: 'sodium',
                 12: 'magnesium',
                 13: 'aluminium',
                 14: 'silicon',
                 15: 'phosphorus',
                 16: 'sulfur',
                 17: 'chlorine',
                 18: 'argon',
                 19: 'potassium',
                 20: 'calcium',
                 21: 'scandium',
                 22: 'titanium',
                 23: 'vanadium',
                 24: 'chromium',
                 25: 'manganese',
                 26: 'iron'}
