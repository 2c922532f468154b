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

import io
import logging
from unittest import TestCase

from ncdescr import (
    LOGV,
    NOEOL,
    NoEOLStreamHandler,
    add_log_handler,
)


class TestAddLogHandler(TestCase):

    def setUp(self):
        self.log = logging.getLogger("ncdescr")
        self.saved = list(self.log.handlers), self.log.level
        self.log.handlers = []
        self.stream = io.StringIO()

    def test_preset_levels(self):
        """Each verbosity preset picks a default handler level"""
        for verbosity, level in [(LOGV.V, logging.INFO),
                                 (LOGV.VV, logging.DEBUG),
                                 (LOGV.VVV, logging.DEBUG)]:
            with self.subTest(verbosity=verbosity):
                handler = add_log_handler(self.stream, verbosity)
                self.assertIsInstance(handler, NoEOLStreamHandler)
                self.assertEqual(handler.level, level)
                self.assertEqual(self.log.level, logging.DEBUG)
                self.log.removeHandler(handler)

    def test_level_overrides_preset(self):
        """nc2des runs at WARNING unless --verbose is given"""
        handler = add_log_handler(self.stream, LOGV.V, logging.WARNING)
        self.log.info("Read 3 files. Time axis is time")
        self.log.warning("No title in sst_1990.nc")
        self.assertEqual(self.stream.getvalue(), "No title in sst_1990.nc\n")
        self.assertEqual(handler.level, logging.WARNING)

    def test_timestamped_format(self):
        add_log_handler(self.stream, LOGV.VV)
        self.log.debug("Read time axis")
        self.assertRegex(self.stream.getvalue(),
                         r"^\d\d:\d\d:\d\d: Read time axis\n$")

    def test_silent(self):
        add_log_handler(self.stream, LOGV.V)
        self.assertIsNone(add_log_handler(verbosity=LOGV.S))
        self.assertListEqual(self.log.handlers, [])

    def tearDown(self):
        self.log.handlers, level = self.saved
        self.log.setLevel(level)


class TestNoEOLStreamHandler(TestCase):

    def setUp(self):
        self.stream = io.StringIO()
        self.log = logging.getLogger("ncdescr.test_noeol")
        self.log.propagate = False
        self.log.setLevel(logging.DEBUG)
        self.handler = NoEOLStreamHandler(stream=self.stream)
        self.handler.setFormatter(logging.Formatter('%(message)s'))
        self.log.addHandler(self.handler)

    def test_noeol_record(self):
        """NOEOL records are written without a newline"""
        self.log.log(NOEOL, "Read 1 of 3 files.\r")
        self.log.log(NOEOL, "Read 2 of 3 files.\r")
        self.assertEqual(self.stream.getvalue(),
                         "Read 1 of 3 files.\rRead 2 of 3 files.\r")

    def test_normal_record(self):
        """Other records keep their newline"""
        self.log.info("done")
        self.assertEqual(self.stream.getvalue(), "done\n")

    def tearDown(self):
        self.log.removeHandler(self.handler)
