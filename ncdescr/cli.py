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
.. module:: ncdescr.cli
    :platform: Unix
    :synopsis: The nc2des command

.. moduleauthor:: The ncdescr developers
"""

import io
import logging
import sys

from docopt import (docopt, DocoptExit)
from voluptuous import MultipleInvalid

from ncdescr import (
    LOGV,
    NOEOL,
    DatasetMetadata,
    StepFile,
    add_log_handler,
)
from ncdescr.describe import (
    NCDException,
)
from ncdescr.describe.ordering import (
    order_step_files,
)
from ncdescr.describe.writer import (
    write_descriptor,
)
from ncdescr.parse import (
    resolve_reference,
)
from ncdescr.parse.ncdump import (
    NcDump,
    stage_files,
)
from ncdescr.parse.validate import (
    validate_options,
)


CLI = """
USAGE:
    nc2des [options] FILE...
    nc2des -h | --help

Write a descriptor for a time series split over several NetCDF files to
standard output. Files are ordered by the start of their time axis and
must not overlap.

OPTIONS:
    --f77               Use FORTRAN 77 record delimiters, without calendar.
    --dmget             Stage all files with dmget before reading them.
    --modulo            Flag the time axis as modulo.
    --nodods            Only use the local ncdump, never the DODS one.
    --prefix=STRING     Prepend STRING to each FILE.
    --suffix=STRING     Append STRING to each FILE.
    --title=STRING      Dataset title, instead of the first file's title.
    -v --verbose        Report progress on stderr.
    -h --help           Show this help and exit.
"""

LOG = logging.getLogger("ncdescr")


def build_descriptor(opts, dumper=None):
    """Run the whole conversion for validated options.

    :returns: str -- the descriptor text
    :raises: NCDException
    """
    refs = [resolve_reference(name, opts["--prefix"], opts["--suffix"])
            for name in opts["FILE"]]
    if opts["--dmget"]:
        stage_files(refs)
    if dumper is None:
        dumper = NcDump(nodods=opts["--nodods"])
    metadata = DatasetMetadata().load(refs[0], dumper,
                                      title=opts["--title"])
    step_files = []
    for count, ref in enumerate(refs):
        step_files.append(StepFile(ref).load(dumper, axis=metadata.axis))
        LOG.log(NOEOL, "Read {: 5d} of {} files.\r".format(count + 1,
                                                            len(refs)))
    LOG.info("Read {} files. Time axis is {}".format(len(refs),
                                                    metadata.axis))
    step_files = order_step_files(step_files)
    out = io.StringIO()
    write_descriptor(out, metadata, step_files, f77=opts["--f77"],
                     modulo=opts["--modulo"])
    return out.getvalue()


def main(argv=None, dumper=None):
    """Entry point of nc2des. Returns the exit status.

    :param list argv: Arguments, defaults to ``sys.argv[1:]``.
    :param dumper: Replacement for ``NcDump``.
    """
    try:
        opts = docopt(CLI, argv=argv, help=False)
    except DocoptExit as exc:
        print(str(exc), file=sys.stderr)
        return 1
    if opts["--help"]:
        print(CLI.strip(), file=sys.stderr)
        return 1
    try:
        opts = validate_options(opts)
    except MultipleInvalid as exc:
        print("nc2des: invalid options: {}".format(exc), file=sys.stderr)
        return 1

    level = logging.INFO if opts["--verbose"] else logging.WARNING
    handler = add_log_handler(stream=sys.stderr, verbosity=LOGV.V,
                              level=level)
    try:
        descriptor = build_descriptor(opts, dumper)
    except NCDException as exc:
        LOG.error(str(exc))
        return 1
    finally:
        LOG.removeHandler(handler)
    sys.stdout.write(descriptor)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
