from setuptools import setup
from glob import glob


desc = """
ncdescr: Describe a time series split over many NetCDF files as a single
         fixed-format descriptor file
"""

install_requires = [
        "docopt>=0.6.2",
        "voluptuous>=0.8.4",
        ]

test_requires = [
        "coverage>=3.7.1",
        "pytest>=7.0",
        ]

scripts = glob('scripts/*.py')

setup(
    name="ncdescr",
    packages=[
        'ncdescr',
        'ncdescr.describe',
        'ncdescr.parse',
        'ncdescr.util',
        ],
    version="0.3.1",
    install_requires=install_requires,
    tests_require=test_requires,
    extras_require={"test": test_requires},
    scripts=scripts,
    entry_points={
        "console_scripts": ["nc2des=ncdescr.cli:run"],
        },
    python_requires=">=3.7",
    description=desc,
    author="The ncdescr developers",
    keywords=["netcdf", "ncdump", "descriptor", "time series", "ferret"],
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Science/Research",
        "Operating System :: POSIX",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
        "License :: OSI Approved :: GNU General Public License v3 or later " +
            "(GPLv3+)",
        ],
    test_suite="tests",
    )
