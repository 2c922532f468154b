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
.. module:: ncdescr
    :platform: Unix
    :synopsis: Describe a time series split over many NetCDF files

.. moduleauthor:: The ncdescr developers
"""

import logging
import os
from sys import stderr
from voluptuous import MultipleInvalid

from ncdescr.describe import (
    NCDExBadValue,
    NCDExNoTimeAxis,
)
from ncdescr.describe.ordering import (
    step_delta,
)
from ncdescr.parse import (
    extract_header,
    extract_time_range,
)
from ncdescr.parse.validate import (
    validate_time_range,
)
from ncdescr.util.units import (
    DEFAULT_CALENDAR,
    DEFAULT_TIME_UNITS,
    DEFAULT_ZERO_DATE,
    DEFAULT_ZERO_TIME,
    format_zero_date,
    parse_hms,
    parse_ymd,
    unit_to_seconds,
)

__version__ = "0.3.1"


def enum(**enums):
    return type("Enum", (), enums)
LOGV = enum(V="V", VV="VV", VVV="VVV", S="S")  # Verbosity
NOEOL = logging.INFO + 1
logging.addLevelName(NOEOL, 'NOEOL')


class NoEOLStreamHandler(logging.StreamHandler):
    """A StreamHandler subclass that optionally doesn't print an EOL."""

    def emit(self, record):
        """
        Emit a record. If level == NOEOL, don't add an EOL.
        """
        if record.levelno != NOEOL:
            return super(NoEOLStreamHandler, self).emit(record)
        try:
            self.stream.write(self.format(record))
            self.flush()
        except Exception:
            self.handleError(record)


def add_log_handler(stream=None, verbosity=None, level=None,
                    handler=NoEOLStreamHandler):
    """Add a logging handler to the ncdescr logger, and return it

    Predefined verbosities
      LOGV.S:: Silent. Remove all handlers from logger
      LOGV.V: No timestamp, INFO if level is None
      LOGV.VV: With timestamp, DEBUG if level is None
      LOGV.VVV: Timestamp and Function name, DEBUG if level is None
      format string: Regular format string. DEBUG if level is None
    """
    log = logging.getLogger("ncdescr")
    log.setLevel(logging.DEBUG)

    if verbosity == LOGV.S:
        log.handlers = []
        return None

    # 1. Init handler
    if stream is None:
        stream = stderr
    elif not hasattr(stream, "write"):
        stream = open(os.devnull, "w")
    cons = handler(stream=stream)

    # 2. Init level
    if level is None or not isinstance(level, int):
        level = {
            LOGV.V: logging.INFO,
            LOGV.VV: logging.DEBUG,
            LOGV.VVV: logging.DEBUG,
        }.get(verbosity, logging.DEBUG)
    cons.setLevel(level)

    # 3. Init format
    if verbosity == LOGV.V:
        fmt = logging.Formatter('%(message)s')
    elif verbosity == LOGV.VV \
            or verbosity is None \
            or not isinstance(verbosity, str):
        fmt = logging.Formatter('%(asctime)s: %(message)s', '%H:%M:%S')
    elif verbosity == LOGV.VVV:
        fmt = logging.Formatter(
            '[%(asctime)s %(filename)s:'
            + '%(lineno)s-%(funcName)20s()] %(message)s',
            '%H:%M:%S')
    else:
        fmt = logging.Formatter(verbosity, '%H:%M:%S')
    cons.setFormatter(fmt)
    log.addHandler(cons)
    return cons


LOG = logging.getLogger("ncdescr")
LOG.addHandler(logging.NullHandler())


class DatasetMetadata(object):

    def __init__(self):
        """Dataset-wide metadata, read from the first file of a series"""
        self.title = ""
        self.axis = None
        self.time_units = DEFAULT_TIME_UNITS
        self.zero_date = DEFAULT_ZERO_DATE
        self.zero_time = DEFAULT_ZERO_TIME
        self._calendar = DEFAULT_CALENDAR

    def __str__(self):
        ret = "DatasetMetadata\n"
        for key in ["title", "axis", "time_units", "t0time", "calendar"]:
            ret += "\t{}: {}\n".format(key, getattr(self, key))
        return ret

    @property
    def calendar(self):
        return self._calendar

    @calendar.setter
    def calendar(self, calendar):
        if not isinstance(calendar, str):
            msg = "Calendar must be a str"
            LOG.error(msg)
            raise TypeError(msg)
        self._calendar = calendar.strip().upper()

    @property
    def seconds_per_unit(self):
        return unit_to_seconds(self.time_units)

    @property
    def t0time(self):
        """Epoch of the time axis, as ``DD-MMM-YYYY HH:MM:SS``"""
        year, month, day = self.zero_date
        return format_zero_date(year, month, day, self.zero_time)

    def load(self, reference, dumper, title=None):
        """Read dataset metadata from the header of ``reference``.

        :param str reference: Path or URL of the first file.
        :param dumper: Object with a ``dump(reference, variable=None)``
            method returning ncdump text, e.g. ``NcDump``.
        :param str title: Use this title instead of the ``:title``
            attribute.
        :returns: self
        :raises: NCDExNoTimeAxis, NCDExBadValue, NCDExUnknownUnit
        """
        header = extract_header(dumper.dump(reference),
                                want_title=title is None)
        if header["axis"] is None:
            raise NCDExNoTimeAxis(reference)
        self.axis = header["axis"]
        if header["units"] is None:
            LOG.warning("No units for time axis {} in {}, assuming {}".format(
                self.axis, reference, DEFAULT_TIME_UNITS))
        else:
            self.time_units = header["units"]
            try:
                self.zero_date = parse_ymd(header["date"])
                self.zero_time = parse_hms(header["time"])
            except ValueError as exc:
                raise NCDExBadValue(reference, "time origin", str(exc))
        # Unknown units must fail before anything is written
        unit_to_seconds(self.time_units)
        if header["calendar"] is not None:
            self.calendar = header["calendar"]
        if title is not None:
            self.title = title
        elif header["title"] is not None:
            self.title = header["title"]
        else:
            LOG.warning("No title in {}".format(reference))
        LOG.debug("Read metadata of {}: {}".format(reference, self))
        return self


class StepFile(object):

    def __init__(self, reference=None):
        """One file of a series and the span of its time axis"""
        self._reference = None
        if reference is not None:
            self.reference = reference
        self.axis = None
        self._count = None
        self.start = None
        self.end = None

    def __str__(self):
        ret = "StepFile {}\n".format(self._reference)
        for key in ["axis", "count", "start", "end"]:
            ret += "\t{}: {}\n".format(key, getattr(self, key))
        return ret

    @property
    def reference(self):
        return self._reference

    @reference.setter
    def reference(self, reference):
        if not isinstance(reference, str) or not reference:
            msg = "StepFile reference must be a non-empty str"
            LOG.error(msg)
            raise TypeError(msg)
        self._reference = reference

    @property
    def count(self):
        return self._count

    @count.setter
    def count(self, count):
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            msg = "Invalid point count {!r}. Must be an int >= 1".format(
                count)
            LOG.error(msg)
            raise ValueError(msg)
        self._count = count

    @property
    def delta(self):
        return step_delta(self.start, self.end, self.count)

    def load(self, dumper, axis=None):
        """Read the time axis of this file.

        :param dumper: Object with a ``dump(reference, variable=None)``
            method returning ncdump text.
        :param str axis: Time axis of the first file of the series. A file
            with another axis is still read, with a warning.
        :returns: self
        :raises: NCDExNoTimeAxis, NCDExBadValue
        """
        if self._reference is None:
            msg = "load() must be called on instance with valid reference"
            LOG.error(msg)
            raise RuntimeError(msg)
        header = extract_header(dumper.dump(self.reference),
                                want_title=False)
        if header["axis"] is None:
            raise NCDExNoTimeAxis(self.reference)
        if axis is not None and header["axis"] != axis:
            LOG.warning("Time axis of {} is {}, not {}".format(
                self.reference, header["axis"], axis))
        # values are dumped under this file's own axis name
        text = dumper.dump(self.reference, variable=header["axis"])
        record = extract_time_range(text, header["axis"])
        if record is None:
            raise NCDExNoTimeAxis(self.reference, header["axis"])
        try:
            time_range = validate_time_range({
                "count": header["count"],
                "start": record.values[0],
                "end": record.values[-1],
            })
        except MultipleInvalid as exc:
            raise NCDExBadValue(self.reference, "time axis", str(exc))
        if len(record.values) != time_range["count"]:
            LOG.warning("{} has {} time points but {} values".format(
                self.reference, time_range["count"], len(record.values)))
        self.axis = header["axis"]
        self.count = time_range["count"]
        self.start = time_range["start"]
        self.end = time_range["end"]
        LOG.debug("Read time axis of {}".format(self))
        return self
