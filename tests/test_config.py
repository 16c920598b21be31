# SPDX-FileCopyrightText: 2020 Lukas Schrangl <lukas.schrangl@tuwien.ac.at>
#
# SPDX-License-Identifier: BSD-3-Clause

import io
import os
import tempfile
import unittest

import numpy as np

from volbp import config


class TestUseDefaults(unittest.TestCase):
    def setUp(self):
        self.rc = config.rc.copy()

    def tearDown(self):
        config.rc.clear()
        config.rc.update(self.rc)

    def test_function_decorator(self):
        """config.use_defaults: function decorator"""
        @config.use_defaults
        def f(engine=None, other=None):
            return engine, other

        self.assertEqual(f(), (self.rc["engine"], None))
        self.assertEqual(f(None), (self.rc["engine"], None))
        self.assertEqual(f("numba"), ("numba", None))
        config.rc["engine"] = "numba"
        self.assertEqual(f(), ("numba", None))

    def test_method_decorator(self):
        """config.use_defaults: method decorator"""
        class A:
            @config.use_defaults
            def __init__(self, threshold=None):
                self.threshold = threshold

        self.assertEqual(A().threshold, self.rc["threshold"])
        self.assertEqual(A(3.).threshold, 3.)
        config.rc["threshold"] = -np.inf
        self.assertEqual(A().threshold, -np.inf)


class TestRcFile(unittest.TestCase):
    def setUp(self):
        self.rc = config.rc.copy()

    def tearDown(self):
        config.rc.clear()
        config.rc.update(self.rc)

    def test_load(self):
        """config.load_rc: from stream"""
        config.load_rc(io.StringIO("threshold: -.inf\nmask_z: true\n"))
        self.assertEqual(config.rc["threshold"], -np.inf)
        self.assertIs(config.rc["mask_z"], True)
        self.assertEqual(config.rc["engine"], self.rc["engine"])

    def test_load_empty(self):
        """config.load_rc: empty document"""
        config.load_rc(io.StringIO(""))
        self.assertEqual(config.rc, self.rc)

    def test_load_unknown(self):
        """config.load_rc: unknown key"""
        with self.assertRaises(KeyError):
            config.load_rc(io.StringIO("lnoise: 1\n"))
        self.assertEqual(config.rc, self.rc)

    def test_load_no_mapping(self):
        """config.load_rc: document is not a mapping"""
        with self.assertRaises(TypeError):
            config.load_rc(io.StringIO("- 1\n- 2\n"))

    def test_save_load(self):
        """config.save_rc, config.load_rc: file"""
        config.rc["threshold"] = np.float64(2.5)
        config.rc["engine"] = "numba"
        with tempfile.TemporaryDirectory() as td:
            fname = os.path.join(td, "rc.yaml")
            config.save_rc(fname)
            config.rc["threshold"] = 0.
            config.rc["engine"] = "python"
            config.load_rc(fname)
        self.assertEqual(config.rc["threshold"], 2.5)
        self.assertEqual(config.rc["engine"], "numba")

    def test_save_stream(self):
        """config.save_rc: stream"""
        s = io.StringIO()
        config.save_rc(s)
        self.assertIn("engine: python", s.getvalue())


if __name__ == "__main__":
    unittest.main()
