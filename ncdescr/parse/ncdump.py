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
.. module:: ncdescr.parse.ncdump
    :platform: Unix
    :synopsis: Run ncdump and dmget.

.. moduleauthor:: The ncdescr developers

The utilities are configured through the environment:

  NC2DES_NCDUMP:: local ncdump, used alone with ``nodods``
  NC2DES_DODS_NCDUMP:: DODS-capable ncdump, tried first otherwise
  NC2DES_DMGET:: bulk staging command
"""

import logging
import os
import shutil
import subprocess

from ncdescr.describe import (
    NCDExDumpUtility,
    NCDExStaging,
    NCDExUnreadableInput,
)

LOG = logging.getLogger("ncdescr")

#: Default names of the external utilities
LOCAL_NCDUMP = "ncdump"
DODS_NCDUMP = "dncdump"
DMGET = "dmget"


def ncdump_candidates(nodods=False):
    """Names of the ncdump executables to try, in order"""
    local = os.environ.get("NC2DES_NCDUMP", LOCAL_NCDUMP)
    if nodods:
        return [local]
    return [os.environ.get("NC2DES_DODS_NCDUMP", DODS_NCDUMP), local]


def find_ncdump(nodods=False):
    """Path of the first ncdump candidate that is on ``PATH``.

    :raises: NCDExDumpUtility
    """
    candidates = ncdump_candidates(nodods)
    for name in candidates:
        found = shutil.which(name)
        if found is not None:
            LOG.debug("Using {} for ncdump".format(found))
            return found
    raise NCDExDumpUtility(" or ".join(candidates), "not found on PATH")


class NcDump(object):

    def __init__(self, nodods=False, utility=None):
        """Runs ncdump, capturing its text output.

        :param bool nodods: Only use the local ncdump.
        :param str utility: Use this executable instead of searching.
        """
        self.nodods = nodods
        self._utility = utility

    @property
    def utility(self):
        if self._utility is None:
            self._utility = find_ncdump(self.nodods)
        return self._utility

    def command(self, reference, variable=None):
        cmd = [self.utility, "-c"]
        if variable is not None:
            cmd.extend(["-v", variable])
        cmd.append(reference)
        return cmd

    def dump(self, reference, variable=None):
        """Dump the header (and coordinate values) of ``reference``.

        :param str reference: Path or URL of a NetCDF file.
        :param str variable: Also dump the values of this variable.
        :returns: str -- the text output of ncdump
        :raises: NCDExDumpUtility, NCDExUnreadableInput
        """
        cmd = self.command(reference, variable)
        LOG.debug("Running '{}'".format(" ".join(cmd)))
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as exc:
            raise NCDExDumpUtility(cmd[0], str(exc))
        if proc.returncode != 0:
            raise NCDExUnreadableInput(reference, proc.stderr.strip())
        return proc.stdout


def stage_files(references, command=None):
    """Stage all ``references`` with a single dmget call.

    The references are passed as one comma separated argument.

    :raises: NCDExStaging
    """
    if command is None:
        command = os.environ.get("NC2DES_DMGET", DMGET)
    cmd = [command, ",".join(references)]
    LOG.info("Staging {} files with {}".format(len(references), command))
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as exc:
        raise NCDExStaging(command, str(exc))
    if proc.returncode != 0:
        msg = proc.stderr.strip()
        if not msg:
            msg = "exit status {}".format(proc.returncode)
        raise NCDExStaging(command, msg)
