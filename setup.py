from pathlib import Path

from setuptools import find_packages, setup

setup(
    name='corsika-grisu',
    version='1.0.0',
    packages=find_packages(include=['grisu', 'grisu.*']),
    license='GPLv3',
    description='Write CORSIKA Cherenkov photons as GrIsu photon lists',
    long_description=(Path(__file__).parent / 'README.rst').read_text(),
    keywords=['CORSIKA', 'GrIsu', 'Cherenkov', 'cosmic rays'],
    classifiers=[
        'Intended Audience :: Science/Research',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Physics',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
    ],
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'corsika_to_grisu = grisu.convert:main',
        ],
    },
    install_requires=['numpy', 'scipy', 'tables>=3.3.0', 'progressbar2>=3.7.0'],
    extras_require={'dev': ['Sphinx', 'ruff', 'coverage'], 'test': ['coverage']},
)
