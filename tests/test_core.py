import os
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from unittest import TestCase, main

from pendraw.__main__ import main as cli_main
from pendraw.core import check_script, load_program, run_script, save_program
from pendraw.runtime.canvas import RecordingCanvas

SQUARES = """\
var size 20
method Square side
rectangle side side
endmethod
moveto 10 10
Square(size)
if size >= 20
color green
fill on
circle 5
endif
"""


class TestCore(TestCase):
    def test_run_script_success(self):
        canvas = RecordingCanvas()
        result = run_script(SQUARES, canvas=canvas)
        self.assertEqual(result["status"], "success")
        self.assertEqual(result["operations"], 3)
        self.assertEqual(result["state"]["color"], "green")
        self.assertEqual(result["state"]["methods"], ["Square"])
        self.assertEqual([op.name for op in canvas.operations], ["move_cursor", "draw_rect", "fill_ellipse"])

    def test_run_script_error(self):
        result = run_script("moveto 1 1\nset y 2")
        self.assertEqual(result["status"], "error")
        self.assertEqual(result["kind"], "UndefinedVariable")
        self.assertEqual(result["line"], "set y 2")
        self.assertEqual(result["line_number"], 2)

    def test_run_script_strict_endif(self):
        self.assertEqual(run_script("endif")["status"], "success")
        self.assertEqual(run_script("endif", strict_endif=True)["kind"], "MismatchedBlock")

    def test_check_script(self):
        self.assertEqual(check_script(SQUARES)["status"], "success")
        result = check_script("moveto 1 1\ninvalid_command")
        self.assertEqual(result["status"], "error")
        self.assertEqual(result["message"], "Syntax error in command: invalid_command")

    def test_save_and_load(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "prog.txt")
            save_program(path, SQUARES)
            self.assertEqual(load_program(path), SQUARES)


class TestCommandLine(TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def _script(self, text):
        path = os.path.join(self._tmp.name, "script.txt")
        save_program(path, text)
        return path

    def test_run_headless(self):
        out = StringIO()
        with redirect_stdout(out):
            code = cli_main(["run", self._script(SQUARES), "--headless"])
        self.assertEqual(code, 0)
        self.assertIn("draw_rect", out.getvalue())

    def test_run_headless_error(self):
        err = StringIO()
        with redirect_stdout(StringIO()), redirect_stderr(err):
            code = cli_main(["run", self._script("loop\nloop"), "--headless"])
        self.assertEqual(code, 1)
        self.assertIn("NestedBlockNotSupported", err.getvalue())

    def test_check(self):
        with redirect_stdout(StringIO()):
            self.assertEqual(cli_main(["check", self._script(SQUARES)]), 0)
        err = StringIO()
        with redirect_stderr(err):
            self.assertEqual(cli_main(["check", self._script("color nope\nzap"), "--all"]), 1)
        self.assertIn("line 2", err.getvalue())

    def test_missing_file(self):
        with redirect_stderr(StringIO()):
            self.assertEqual(cli_main(["check", os.path.join(self._tmp.name, "missing.txt")]), 2)


if __name__ == '__main__':
    main()
