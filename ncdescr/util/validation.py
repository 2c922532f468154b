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
.. module:: ncdescr.util.validation
    :platform: Unix
    :synopsis: Utility functions to aide in validation of things.

.. moduleauthor:: The ncdescr developers
"""

import math

# Functions to parse to Voluptuous Schemas to validate fields
# All are prefixed with v_ to indicate this intended usage


def v_num_str(x):
    """Validate an object that can be coerced to an ``int``."""
    if x is None or isinstance(x, bool):
        raise ValueError("{!r} is not an integer".format(x))
    if isinstance(x, str):
        return int(x.strip())
    if isinstance(x, float) and not x.is_integer():
        raise ValueError("{!r} is not an integer".format(x))
    return int(x)


def v_float_str(x):
    """Validate an object that can be coerced to a finite ``float``.

    ncdump separates values with commas, so a single trailing comma is
    ignored.

    :arg x: String or number to validate.
    :returns:  the parsed number
    :rtype: float
    :raises: ``ValueError``
    """
    if x is None or isinstance(x, bool):
        raise ValueError("{!r} is not a number".format(x))
    if isinstance(x, str):
        x = x.strip()
        if x.endswith(","):
            x = x[:-1]
    val = float(x)
    if math.isnan(val) or math.isinf(val):
        raise ValueError("{!r} is not a finite number".format(x))
    return val


def v_opt_str(x):
    """Validate an optional string option, ``None`` passes through."""
    if x is None or isinstance(x, str):
        return x
    raise ValueError("{!r} is not a string".format(x))
