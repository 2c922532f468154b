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
.. module:: ncdescr.describe.writer
    :platform: Unix
    :synopsis: Write descriptor files

.. moduleauthor:: The ncdescr developers

A descriptor is a sequence of Fortran namelist records. By default records
are written as ``&NAME ... /``; FORTRAN 77 readers need ``$NAME ... $END``
and don't know about calendars.
"""

from ncdescr.util import (
    format_number,
    fortran_bool,
    fortran_str,
)

#: Filename of the step record which ends a descriptor
END_OF_STEPFILES = "**END OF STEPFILES**"

FORMAT_RECORD = [
    ("D_TYPE", fortran_str("  MC")),
    ("D_FORMAT", fortran_str("  1A")),
    ("D_SOURCE_CLASS", fortran_str("MODEL OUTPUT")),
]
MESSAGE_RECORD = [
    ("D_MESSAGE", fortran_str(" ")),
    ("D_ALERT_ON_OPEN", "F"),
    ("D_ALERT_ON_OUTPUT", "F"),
]


def record_delimiters(f77=False):
    """Opening prefix and closing line of a record"""
    if f77:
        return " $", " $END"
    return " &", " /"


def format_record(name, entries, f77=False):
    """Lines of one namelist record.

    :param str name: Record name, e.g. ``FORMAT_RECORD``.
    :param list entries: ``(key, formatted value)`` pairs.
    """
    opener, closer = record_delimiters(f77)
    lines = [opener + name]
    for key, val in entries:
        lines.append("   {} = {},".format(key, val))
    lines.append(closer)
    return lines


def background_entries(metadata, f77=False, modulo=False):
    entries = [
        ("D_EXPNUM", fortran_str("0000")),
        ("D_MODNUM", fortran_str("  AA")),
        ("D_TITLE", fortran_str(metadata.title)),
        ("D_T0TIME", fortran_str(metadata.t0time)),
        ("D_TIME_UNIT", format_number(metadata.seconds_per_unit)),
        ("D_TIME_MODULO", fortran_bool(modulo)),
        ("D_ADD_PARM", "15*' '"),
    ]
    if not f77:
        entries.append(("D_CALTYPE", fortran_str(metadata.calendar)))
    return entries


def stepfile_entries(step_file):
    return [
        ("S_FILENAME", fortran_str(step_file.reference)),
        ("S_AUX_SET_NUM", "0"),
        ("S_START", format_number(step_file.start)),
        ("S_END", format_number(step_file.end)),
        ("S_DELTA", format_number(step_file.delta)),
        ("S_NUM_OF_FILES", "1"),
        ("S_REGVARFLAG", fortran_str(" ")),
    ]


def descriptor_lines(metadata, step_files, f77=False, modulo=False):
    """All lines of a descriptor.

    :param metadata: A loaded ``DatasetMetadata``.
    :param list step_files: ``StepFile`` instances, already in time order.
    :param bool f77: Use FORTRAN 77 delimiters and omit the calendar.
    :param bool modulo: Flag the time axis as modulo.
    :returns: list -- lines without line endings
    """
    lines = []
    lines.extend(format_record("FORMAT_RECORD", FORMAT_RECORD, f77))
    lines.extend(format_record("BACKGROUND_RECORD",
                               background_entries(metadata, f77, modulo),
                               f77))
    lines.extend(format_record("MESSAGE_RECORD", MESSAGE_RECORD, f77))
    lines.extend(format_record("EXTRA_RECORD", [], f77))
    for step_file in step_files:
        lines.extend(format_record("STEPFILE_RECORD",
                                   stepfile_entries(step_file), f77))
    lines.extend(format_record(
        "STEPFILE_RECORD", [("S_FILENAME", fortran_str(END_OF_STEPFILES))],
        f77))
    return lines


def write_descriptor(stream, metadata, step_files, f77=False, modulo=False):
    """Write a descriptor to ``stream``, one newline-terminated line each"""
    lines = descriptor_lines(metadata, step_files, f77=f77, modulo=modulo)
    for line in lines:
        stream.write(line + "\n")
