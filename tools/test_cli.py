# Copyright (c) 2026 Signer — MIT License

"""Tests for the ``python -m saph`` command line.

Run from the project root:
    python -m tools.test_cli
"""

import contextlib
import io
import os
import sys
import unittest
from unittest import mock

# Ensure project root is on the import path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from saph.__main__ import main

_VECTOR_1 = "8a6d4f4a170929f264dae967748bf9f8f63ac732093ed439c444b044730109ff"


def _run(argv):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        code = main(argv)
    return code, out.getvalue().strip()


class TestCli(unittest.TestCase):

    def test_text_parts(self):
        self.assertEqual(_run(["-m", "4", "-i", "2", "just", "a", "test"]),
                         (0, _VECTOR_1))

    def test_hex_parts(self):
        argv = ["--memory", "4", "--iterations", "2", "--hex-parts",
                "6a757374", "61", "74657374"]
        self.assertEqual(_run(argv), (0, _VECTOR_1))

    def test_prompted_part(self):
        with mock.patch("getpass.getpass", return_value="test") as prompt:
            code, out = _run(["-m", "4", "-i", "2", "--prompt", "Password",
                              "just", "a"])
        prompt.assert_called_once_with("Password: ")
        self.assertEqual((code, out), (0, _VECTOR_1))

    def test_invalid_memory(self):
        with contextlib.redirect_stderr(io.StringIO()) as err:
            with self.assertRaises(SystemExit) as ctx:
                main(["-m", "0", "x"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("memory_size", err.getvalue())

    def test_invalid_hex(self):
        with contextlib.redirect_stderr(io.StringIO()) as err:
            with self.assertRaises(SystemExit) as ctx:
                main(["-m", "4", "-i", "2", "--hex-parts", "zz"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("invalid hex part", err.getvalue())


if __name__ == "__main__":
    unittest.main(verbosity=2)
