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
.. module:: ncdescr.util
    :platform: Unix
    :synopsis: Miscelanelous utilities

.. moduleauthor:: The ncdescr developers
"""

import logging
import numbers

# Error string constants
#: String to format when a function is called with a param of invalid type
PARAM_TYPE_ERR = "Param `{param}` to `{func}` must be a `{type}`"

LOG = logging.getLogger("ncdescr")

#: printf format used for every number written to a descriptor
NUMBER_FORMAT = "%.15g"


def format_number(num):
    """Format a number the way descriptor readers expect it.

    Integral values are written without a decimal point, everything else with
    up to 15 significant digits.

    :param num: An ``int`` or ``float``.
    :returns: str -- The formatted number.
    :raises: TypeError
    """
    if isinstance(num, bool) or not isinstance(num, numbers.Real):
        msg = PARAM_TYPE_ERR.format(param="num", func="format_number",
                                    type="int or float")
        LOG.error(msg)
        raise TypeError(msg)
    return NUMBER_FORMAT % num


def fortran_str(value):
    """Quote ``value`` as a Fortran character constant.

    Embedded single quotes are doubled.
    """
    if not isinstance(value, str):
        msg = PARAM_TYPE_ERR.format(param="value", func="fortran_str",
                                    type="str")
        LOG.error(msg)
        raise TypeError(msg)
    return "'{}'".format(value.replace("'", "''"))


def fortran_bool(value):
    """Fortran logical literal, ``.TRUE.`` or ``.FALSE.``"""
    if value:
        return ".TRUE."
    return ".FALSE."
