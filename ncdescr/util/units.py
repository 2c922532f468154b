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
.. module:: ncdescr.util.units
    :platform: Unix
    :synopsis: Convert between CF time notations and descriptor notations

.. moduleauthor:: The ncdescr developers
"""

import logging
import re

from ncdescr.describe import (
    NCDExUnknownUnit,
)
from ncdescr.util import (
    PARAM_TYPE_ERR,
)


LOG = logging.getLogger("ncdescr")

#: Seconds per time unit. Month and year are Gregorian averages.
TIME_UNIT_SECONDS = {
    "second": 1,
    "minute": 60,
    "hour": 3600,
    "day": 86400,
    "month": 2629746,
    "year": 31556952,
}
MONTH_ABBREVS = [
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
]
DEFAULT_TIME_UNITS = "MONTHS"
DEFAULT_ZERO_DATE = (0, 1, 1)
DEFAULT_ZERO_TIME = "00:00:00"
DEFAULT_CALENDAR = "GREGORIAN"

_YMD_RE = re.compile(r'^(-?\d+)-(\d{1,2})-(\d{1,2})$')


def normalise_unit(unit):
    """Lower-case ``unit`` and strip a trailing plural ``s``"""
    if not isinstance(unit, str):
        msg = PARAM_TYPE_ERR.format(param="unit", func="normalise_unit",
                                    type="str")
        LOG.error(msg)
        raise TypeError(msg)
    unit = unit.strip().lower()
    if unit.endswith("s"):
        unit = unit[:-1]
    return unit


def unit_to_seconds(unit):
    """Number of seconds in one ``unit``, e.g. ``"Days"`` gives 86400.

    :param str unit: Free-text unit name, as found in a units attribute.
    :returns: int -- seconds per unit
    :raises: NCDExUnknownUnit, TypeError
    """
    try:
        return TIME_UNIT_SECONDS[normalise_unit(unit)]
    except KeyError:
        raise NCDExUnknownUnit(unit)


def month_abbrev(month):
    """Three letter abbreviation of a 1-based month number"""
    if isinstance(month, bool) or not isinstance(month, int):
        msg = PARAM_TYPE_ERR.format(param="month", func="month_abbrev",
                                    type="int")
        LOG.error(msg)
        raise TypeError(msg)
    if month < 1 or month > 12:
        msg = "Month {} is out of range 1-12".format(month)
        LOG.error(msg)
        raise ValueError(msg)
    return MONTH_ABBREVS[month - 1]


def parse_ymd(ymd):
    """Split a ``Y-M-D`` date string into a tuple of ints.

    Years of any width are accepted, since climatologies are often relative
    to year 0 or 1.
    """
    match = _YMD_RE.match(ymd.strip())
    if match is None:
        msg = "Date '{}' is not in Y-M-D form".format(ymd)
        LOG.error(msg)
        raise ValueError(msg)
    year, month, day = (int(x) for x in match.groups())
    if month < 1 or month > 12 or day < 1 or day > 31:
        msg = "Date '{}' is out of range".format(ymd)
        LOG.error(msg)
        raise ValueError(msg)
    return year, month, day


def parse_hms(hms):
    """Normalise ``h[:m[:s]]`` to ``HH:MM:SS``. Fractional seconds are
    truncated."""
    if hms is None or not hms.strip():
        return DEFAULT_ZERO_TIME
    fields = hms.strip().split(":")
    if len(fields) > 3:
        msg = "Time '{}' is not in h:m:s form".format(hms)
        LOG.error(msg)
        raise ValueError(msg)
    fields.extend(["0"] * (3 - len(fields)))
    try:
        hour, minute, sec = (int(float(x)) for x in fields)
    except ValueError:
        msg = "Time '{}' is not in h:m:s form".format(hms)
        LOG.error(msg)
        raise ValueError(msg)
    return "{:02d}:{:02d}:{:02d}".format(hour, minute, sec)


def format_zero_date(year, month, day, hms=DEFAULT_ZERO_TIME):
    """Format an epoch as ``DD-MMM-YYYY HH:MM:SS``"""
    return "{:02d}-{}-{:04d} {}".format(day, month_abbrev(month), year,
                                        parse_hms(hms))
