import logging
from os import path
import re

from ncdescr.describe import (
    NCDExUnreadableInput,
)


LOG = logging.getLogger("ncdescr")
LGHNDLR = logging.NullHandler()
LGHNDLR.setLevel(logging.INFO)
LOG.addHandler(LGHNDLR)
LOG.setLevel(logging.INFO)

PKG_DIR = path.dirname(path.dirname(__file__))
TESTS_DIR = path.dirname(__file__)
DATA_DIR = path.join(TESTS_DIR, "data")

FILES = {
    "sst_1990": path.join(DATA_DIR, "sst_1990.cdl"),
    "sst_1991": path.join(DATA_DIR, "sst_1991.cdl"),
    "sst_1992": path.join(DATA_DIR, "sst_1992.cdl"),
    "overlap_1991": path.join(DATA_DIR, "overlap_1991.cdl"),
    "single_point": path.join(DATA_DIR, "single_point.cdl"),
    "no_time_axis": path.join(DATA_DIR, "no_time_axis.cdl"),
    "unknown_units": path.join(DATA_DIR, "unknown_units.cdl"),
    "no_units": path.join(DATA_DIR, "no_units.cdl"),
    "t_1993": path.join(DATA_DIR, "t_1993.cdl"),
    "missing": path.join(DATA_DIR, "does_not_exist.cdl"),
}

SST_FILES = [FILES["sst_1990"], FILES["sst_1991"], FILES["sst_1992"]]
SST_TIMES = [(0.0, 335.0), (365.0, 700.0), (730.0, 1065.0)]
SST_DELTAS = [335.0 / 11, 335.0 / 11, 335.0 / 11]

SST_1990_HEADER = {
    "axis": "time",
    "count": "12",
    "units": "days",
    "date": "1990-01-01",
    "time": "00:00:00",
    "calendar": "gregorian",
    "title": "Monthly SST analysis",
}


def read_file(fpath):
    with open(fpath) as fh:
        return fh.read()


class CdlDump(object):
    """Stands in for ``NcDump``: references are paths of saved dumps

    Like ncdump, asking for a variable the file does not declare fails.
    """

    def __init__(self):
        self.calls = []

    def dump(self, reference, variable=None):
        self.calls.append((reference, variable))
        if not path.isfile(reference):
            raise NCDExUnreadableInput(reference, "No such file")
        text = read_file(reference)
        if variable is not None and not re.search(
                r"^\s*\w+\s+{}\(".format(re.escape(variable)), text,
                re.MULTILINE):
            raise NCDExUnreadableInput(
                reference, "ncdump: {}: No such variable".format(variable))
        return text


def descriptor_for(files, title="Monthly SST analysis", f77=False,
                   modulo=False, calendar="GREGORIAN"):
    """Expected descriptor text for sst_* style files, in the given order"""
    if f77:
        opn, cls = " $", " $END"
    else:
        opn, cls = " &", " /"
    lines = [
        opn + "FORMAT_RECORD",
        "   D_TYPE = '  MC',",
        "   D_FORMAT = '  1A',",
        "   D_SOURCE_CLASS = 'MODEL OUTPUT',",
        cls,
        opn + "BACKGROUND_RECORD",
        "   D_EXPNUM = '0000',",
        "   D_MODNUM = '  AA',",
        "   D_TITLE = '{}',".format(title),
        "   D_T0TIME = '01-JAN-1990 00:00:00',",
        "   D_TIME_UNIT = 86400,",
        "   D_TIME_MODULO = {},".format(".TRUE." if modulo else ".FALSE."),
        "   D_ADD_PARM = 15*' ',",
    ]
    if not f77:
        lines.append("   D_CALTYPE = '{}',".format(calendar))
    lines.extend([
        cls,
        opn + "MESSAGE_RECORD",
        "   D_MESSAGE = ' ',",
        "   D_ALERT_ON_OPEN = F,",
        "   D_ALERT_ON_OUTPUT = F,",
        cls,
        opn + "EXTRA_RECORD",
        cls,
    ])
    for fname, (start, end) in files:
        lines.extend([
            opn + "STEPFILE_RECORD",
            "   S_FILENAME = '{}',".format(fname),
            "   S_AUX_SET_NUM = 0,",
            "   S_START = {:.15g},".format(start),
            "   S_END = {:.15g},".format(end),
            "   S_DELTA = 30.4545454545455,",
            "   S_NUM_OF_FILES = 1,",
            "   S_REGVARFLAG = ' ',",
            cls,
        ])
    lines.extend([
        opn + "STEPFILE_RECORD",
        "   S_FILENAME = '**END OF STEPFILES**',",
        cls,
    ])
    return "\n".join(lines) + "\n"
