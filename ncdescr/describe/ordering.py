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
.. module:: ncdescr.describe.ordering
    :platform: Unix
    :synopsis: Chronological ordering of step files

.. moduleauthor:: The ncdescr developers
"""

import logging

from ncdescr.describe import (
    NCDExOverlap,
)
from ncdescr.util import (
    PARAM_TYPE_ERR,
)

LOG = logging.getLogger("ncdescr")


def step_delta(start, end, count):
    """Time step of a file, assuming its points are evenly spaced.

    Files with a single point have no step; 1 is returned for them.
    """
    if count > 1:
        return (end - start) / (count - 1)
    return 1


def order_step_files(step_files):
    """Sort step files by start time and check they don't overlap.

    :param list step_files: Loaded ``StepFile`` instances.
    :returns: list -- a new, sorted list
    :raises: NCDExOverlap, TypeError
    """
    if not isinstance(step_files, list):
        msg = PARAM_TYPE_ERR.format(param="step_files",
                                    func="order_step_files", type="list")
        LOG.error(msg)
        raise TypeError(msg)
    ordered = sorted(step_files, key=lambda x: x.start)
    for previous, current in zip(ordered, ordered[1:]):
        if not current.start > previous.end:
            raise NCDExOverlap(previous, current)
    LOG.debug("{} step files in order".format(len(ordered)))
    return ordered
