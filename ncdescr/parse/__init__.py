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
.. module:: ncdescr.parse
    :platform: Unix
    :synopsis: Submodule which parses the text output of ncdump.

.. moduleauthor:: The ncdescr developers

Each ``parse_*`` function looks at one line (or, for the data section, one
``;``-terminated record) and returns a namedtuple on a match, or ``None``.
The ``extract_*`` functions combine them over a whole dump.
"""

from collections import namedtuple
import logging
import re

from ncdescr.util import (
    PARAM_TYPE_ERR,
)

LOG = logging.getLogger("ncdescr")

#: Line which separates the header from the data section of a dump
DATA_MARKER = "data:"

DimensionMatch = namedtuple("DimensionMatch", ["name", "count"])
UnitsMatch = namedtuple("UnitsMatch", ["units", "date", "time"])
CalendarMatch = namedtuple("CalendarMatch", ["name"])
TitleMatch = namedtuple("TitleMatch", ["title"])
DataRecordMatch = namedtuple("DataRecordMatch", ["name", "values"])

_UNLIMITED_RE = re.compile(
    r'^\s*([^\s=]+)\s*=\s*UNLIMITED\s*;\s*//\s*\(\s*(\d+)\s+currently\s*\)')
_TIME_DIM_RE = re.compile(r'^\s*(time)\s*=\s*(\d+)\s*;', re.IGNORECASE)
_TITLE_RE = re.compile(r'^\s*:title\s*=\s*"(.*)"\s*([,;])\s*$')
_STRING_PART_RE = re.compile(r'^\s*"(.*)"\s*([,;])\s*$')
_ESCAPE_RE = re.compile(r'\\(.)')
_UNITS_FMT = (r'^\s*{}:units\s*=\s*"\s*(\S+)\s+since\s+'
              r'(-?\d+-\d{{1,2}}-\d{{1,2}})'
              r'(?:[T\s]+(\d{{1,2}}(?::\d{{1,2}}(?::\d{{1,2}}(?:\.\d*)?)?)?))?'
              r'[^"]*"')
_CALENDAR_FMT = r'^\s*{}:(?:calendar_type|calendar)\s*=\s*"([^"]*)"'
_VALUE_SPLIT_RE = re.compile(r'[\s,]+')


def _check_str(value, param, func):
    if not isinstance(value, str):
        msg = PARAM_TYPE_ERR.format(param=param, func=func, type="str")
        LOG.error(msg)
        raise TypeError(msg)


def resolve_reference(name, prefix=None, suffix=None):
    """Concatenate ``prefix``, ``name`` and ``suffix`` literally.

    >>> resolve_reference("1990", "http://server/sst_", ".nc")
    'http://server/sst_1990.nc'
    """
    _check_str(name, "name", "resolve_reference")
    return "{}{}{}".format(prefix or "", name, suffix or "")


def parse_unlimited_dim(line):
    """Match an unlimited dimension, ``time = UNLIMITED ; // (12 currently)``
    """
    match = _UNLIMITED_RE.match(line)
    if match is None:
        return None
    return DimensionMatch(*match.groups())


def parse_time_dim(line):
    """Match a fixed length dimension called ``time`` in any case"""
    match = _TIME_DIM_RE.match(line)
    if match is None:
        return None
    return DimensionMatch(*match.groups())


def parse_units(line, axis):
    """Match ``axis:units = "days since 1800-01-01 00:00:00"``.

    The time of day is optional, and may be separated from the date by a
    ``T``. Anything after it (e.g. a time zone) is ignored.
    """
    match = re.match(_UNITS_FMT.format(re.escape(axis)), line)
    if match is None:
        return None
    return UnitsMatch(*match.groups())


def parse_calendar(line, axis):
    """Match the ``calendar`` or ``calendar_type`` attribute of ``axis``"""
    match = re.match(_CALENDAR_FMT.format(re.escape(axis)), line)
    if match is None:
        return None
    return CalendarMatch(match.group(1))


def unescape_cdl(text):
    """Undo the backslash escapes ncdump writes in strings.

    ``\\n``, ``\\r`` and ``\\t`` become spaces, since a descriptor string
    is written on one line.

    >>> unescape_cdl(r'SST \\"OI\\" v2\\n')
    'SST "OI" v2 '
    """
    return _ESCAPE_RE.sub(
        lambda m: " " if m.group(1) in "nrt" else m.group(1), text)


def parse_title(line):
    """Match a global ``:title`` attribute written on a single line"""
    match = _TITLE_RE.match(line)
    if match is None or match.group(2) != ";":
        return None
    return TitleMatch(unescape_cdl(match.group(1)))


def read_title(header):
    """Find the global title among header lines.

    ncdump splits long or multi-line strings into several quoted parts,
    one per line, joined by ``,``. The parts are concatenated.

    :param list header: Header lines, as from :func:`split_dump`.
    :returns: A ``TitleMatch``, or ``None``.
    """
    parts = None
    for line in header:
        if parts is None:
            match = _TITLE_RE.match(line)
            if match is None:
                continue
            parts = [match.group(1)]
        else:
            match = _STRING_PART_RE.match(line)
            if match is None:
                break
            parts.append(match.group(1))
        if match.group(2) == ";":
            return TitleMatch(unescape_cdl("".join(parts)).strip())
    if parts is not None:
        LOG.warning("Title attribute spans lines but never ends, ignoring it")
    return None


def parse_data_record(record, axis):
    """Match a data section record holding the values of ``axis``.

    ``record`` is the text between two ``;`` separators, so it may span
    several lines.
    """
    tokens = record.split()
    if len(tokens) < 3 or tokens[0] != axis or tokens[1] != "=":
        return None
    values = _VALUE_SPLIT_RE.split(" ".join(tokens[2:]).strip())
    values = [val for val in values if val]
    if not values:
        return None
    return DataRecordMatch(axis, values)


def split_dump(text):
    """Split a dump into its header lines and the text of its data section.

    The data section is ``None`` if the dump has no ``data:`` marker.
    """
    _check_str(text, "text", "split_dump")
    lines = text.splitlines()
    for idx, line in enumerate(lines):
        if line.strip() == DATA_MARKER:
            return lines[:idx], "\n".join(lines[idx + 1:])
    return lines, None


def find_time_axis(header):
    """Find the time axis among the header lines of a dump.

    The first unlimited dimension wins. Failing that, a dimension called
    ``time`` is used.

    :param list header: Header lines, as from :func:`split_dump`.
    :returns: A ``DimensionMatch``, or ``None``.
    """
    for line in header:
        dim = parse_unlimited_dim(line)
        if dim is not None:
            return dim
    for line in header:
        dim = parse_time_dim(line)
        if dim is not None:
            return dim
    return None


def extract_header(text, want_title=True):
    """Extracts the time axis and dataset attributes from an ncdump header.

    :param str text: Output of ``ncdump -c``.
    :param bool want_title: Look for the global title too.
    :returns: A ``dict`` with keys ``axis``, ``count``, ``units``, ``date``,
        ``time``, ``calendar`` and ``title``. Each is ``None`` when not
        found. All values are ``str``.
    """
    header, _ = split_dump(text)
    retval = dict.fromkeys(["axis", "count", "units", "date", "time",
                            "calendar", "title"])
    dim = find_time_axis(header)
    if dim is not None:
        retval["axis"] = dim.name
        retval["count"] = dim.count
        for line in header:
            units = parse_units(line, dim.name)
            if units is not None and retval["units"] is None:
                retval["units"] = units.units
                retval["date"] = units.date
                retval["time"] = units.time
            calendar = parse_calendar(line, dim.name)
            if calendar is not None:
                # later attributes override earlier ones
                retval["calendar"] = calendar.name
    if want_title:
        title = read_title(header)
        if title is not None:
            retval["title"] = title.title
    return retval


def extract_time_range(text, axis):
    """Find the coordinate values of ``axis`` in the data section of a dump.

    :param str text: Output of ``ncdump -c -v axis``.
    :param str axis: Name of the time axis.
    :returns: A ``DataRecordMatch`` for the first record of ``axis``, or
        ``None``.
    """
    _check_str(axis, "axis", "extract_time_range")
    _, data = split_dump(text)
    if data is None:
        return None
    for record in data.split(";"):
        match = parse_data_record(record, axis)
        if match is not None:
            return match
    return None
