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
.. module:: ncdescr.describe
    :platform: Unix
    :synopsis: Exceptions raised while describing a series

.. moduleauthor:: The ncdescr developers
"""


class NCDException(Exception):
    id = 0
    doc = """Exception: General descriptor generation exception"""
    message = "Unknown error"

    def __str__(self):
        return ("nc2des: %s" % self.message)


class NCDExDumpUtility(NCDException):
    id = 1
    doc = """Exception: ncdump is missing or doesn't work"""

    def __init__(self, utility, msg=None):
        """Raised when the external dump utility can't be run"""
        self.utility = utility
        self.message = "Unable to run %s" % utility
        if msg is not None:
            self.message += ": %s" % msg


class NCDExUnreadableInput(NCDException):
    id = 2
    doc = """Exception: Input file or URL can't be opened"""

    def __init__(self, reference, msg=None):
        """Raised when the dump utility fails on a file"""
        self.reference = reference
        self.message = "Cannot open %s" % reference
        if msg:
            self.message += ": %s" % msg


class NCDExStaging(NCDException):
    id = 3
    doc = """Exception: Bulk staging of input files failed"""

    def __init__(self, command, msg):
        self.message = "Staging files with %s failed: %s" % (command, msg)


class NCDExOverlap(NCDException):
    id = 4
    doc = """Exception: Time ranges of two files overlap"""

    def __init__(self, previous, current):
        """Raised when ``current`` doesn't start after ``previous`` ends"""
        self.previous = previous
        self.current = current
        self.message = ("Time range of %s (starting at %s) overlaps %s "
                        "(ending at %s)" % (current.reference, current.start,
                                            previous.reference, previous.end))


class NCDExNoTimeAxis(NCDException):
    id = 5
    doc = """Exception: No time axis could be found"""

    def __init__(self, reference, axis=None):
        self.reference = reference
        if axis is None:
            self.message = "No time axis found in %s" % reference
        else:
            self.message = "No values for time axis %s found in %s" % (
                axis, reference)


class NCDExUnknownUnit(NCDException):
    id = 6
    doc = """Exception: Time unit isn't one we can convert to seconds"""

    def __init__(self, unit):
        self.unit = unit
        self.message = "Unknown time unit '%s'" % unit


class NCDExBadValue(NCDException):
    id = 7
    doc = """Exception: An extracted value is invalid"""

    def __init__(self, reference, field, msg):
        self.reference = reference
        self.field = field
        self.message = "Invalid %s in %s: %s" % (field, reference, msg)
