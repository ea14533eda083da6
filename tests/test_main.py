"""Tests for the command line driver.

Files are written to a temporary directory and run through main() with
mocked-out arguments, the way the compiler is invoked from the shell.

"""

import contextlib
import io
import os
import tempfile
import unittest

import signalc.main


class MainTests(unittest.TestCase):
    """Tests of the whole pipeline from file to printed tree."""

    def setUp(self):
        self.dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.dir.cleanup)
        self.original_get_arguments = signalc.main.get_arguments
        self.addCleanup(self.restore_get_arguments)

    def restore_get_arguments(self):
        signalc.main.get_arguments = self.original_get_arguments

    def write(self, name, code):
        path = os.path.join(self.dir.name, name)
        with open(path, "w") as f:
            f.write(code)
        return path

    def run_main(self, files, show_tokens=False, hide_tree=False):
        """Run main() and return (exit status, stdout, stderr)."""
        class MockArguments:
            pass

        MockArguments.files = files
        MockArguments.show_tokens = show_tokens
        MockArguments.hide_tree = hide_tree
        signalc.main.get_arguments = lambda: MockArguments()

        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            status = signalc.main.main()
        return status, out.getvalue(), err.getvalue()

    def test_valid_program(self):
        path = self.write("ok.sig", "PROGRAM TEST;\nBEGIN\nEND.\n")
        status, out, err = self.run_main([path])

        self.assertEqual(status, 0)
        self.assertEqual(err, "")
        lines = out.splitlines()
        self.assertEqual(lines[0], "<signal-program>")
        self.assertIn("........1001 TEST", lines)
        self.assertEqual(lines[-1], "....46 .")

    def test_extension_added(self):
        path = self.write("noext.sig", "PROGRAM A; BEGIN END.")
        status, _, _ = self.run_main([path[:-len(".sig")]])
        self.assertEqual(status, 0)

    def test_syntax_error(self):
        path = self.write("bad.sig", "PROGRAM TEST\nBEGIN\nEND.\n")
        status, out, err = self.run_main([path])

        self.assertEqual(status, 1)
        self.assertIn("<program>", out)
        self.assertEqual(
            err.strip(),
            "Error (line: 2, column: 1): ';' expected but 'BEGIN' found")

    def test_lexer_error_skips_parser(self):
        path = self.write("lex.sig", "PROGRAM TEST;\nBEGIN # END.\n")
        status, out, err = self.run_main([path])

        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertEqual(
            err.strip(),
            "Error (line: 2, column: 7): unrecognized token '#'")

    def test_show_tokens(self):
        path = self.write("tokens.sig", "PROGRAM A; BEGIN END.")
        status, out, _ = self.run_main([path], show_tokens=True,
                                       hide_tree=True)

        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [
            "1\t1\t301\tPROGRAM",
            "1\t9\t1001\tA",
            "1\t10\t59\t;",
            "1\t12\t303\tBEGIN",
            "1\t18\t304\tEND",
            "1\t21\t46\t.",
            "",
        ])

    def test_missing_file(self):
        path = os.path.join(self.dir.name, "missing.sig")
        status, out, err = self.run_main([path])

        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("could not read file", err)

    def test_undecodable_file(self):
        path = os.path.join(self.dir.name, "binary.sig")
        with open(path, "wb") as f:
            f.write(b"PROGRAM \xff; BEGIN END.")
        status, out, err = self.run_main([path])

        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("could not read file", err)

    def test_one_bad_file_fails_run(self):
        good = self.write("good.sig", "PROGRAM A; BEGIN END.")
        bad = self.write("bad.sig", "PROCEDURE P")
        status, _, err = self.run_main([good, bad])

        self.assertEqual(status, 1)
        self.assertIn("Error: '.' expected but EOF found", err)
