# Copyright 2015- The ncdescr developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
.. module:: ncdescr.parse.validate
    :platform: Unix
    :synopsis: Validate command line options and extracted metadata

.. moduleauthor:: The ncdescr developers
"""

from voluptuous import Schema, Required, Range, All, Length

from ncdescr.util.validation import (
    v_float_str,
    v_num_str,
    v_opt_str,
)

#: Keys of the option dict produced by the command line parser
OPTION_KEYS = [
    "--f77",
    "--dmget",
    "--modulo",
    "--nodods",
    "--prefix",
    "--suffix",
    "--title",
    "--verbose",
    "--help",
    "FILE",
]

#: Keys of a validated time range
TIME_RANGE_KEYS = [
    "count",
    "start",
    "end",
]


def validate_options(opts):
    """Validates the option dict from ``docopt``, and returns the validated
    ``dict``

    :param dict opts: The raw option dict.
    :returns: The validated option dict, with missing flags defaulted.
    :rtype: dict
    :raises: TypeError, MultipleInvalid
    """
    if not isinstance(opts, dict):
        raise TypeError("Options should be in ``dict`` form.")
    sch = Schema({
        Required("--f77", default=False): bool,
        Required("--dmget", default=False): bool,
        Required("--modulo", default=False): bool,
        Required("--nodods", default=False): bool,
        Required("--prefix", default=None): v_opt_str,
        Required("--suffix", default=None): v_opt_str,
        Required("--title", default=None): v_opt_str,
        Required("--verbose", default=False): bool,
        Required("--help", default=False): bool,
        Required("FILE"): All([str], Length(min=1)),
    })
    return sch(opts)


def validate_time_range(time_range):
    """Validates and type-converts the raw strings describing one file's
    time axis.

    :param dict time_range: ``count``, ``start`` and ``end`` as extracted.
    :returns: The converted ``dict``; ``count`` is an ``int``, ``start`` and
        ``end`` are ``float``.
    :raises: TypeError, MultipleInvalid
    """
    if not isinstance(time_range, dict):
        raise TypeError("Time range should be in ``dict`` form.")
    sch = Schema({
        Required("count"): All(v_num_str, Range(min=1)),
        Required("start"): v_float_str,
        Required("end"): v_float_str,
    })
    return sch(time_range)
