import logging
from contextlib import contextmanager
from io import StringIO
from unittest import TestCase, main

from pendraw import Interpreter, logger


@contextmanager
def capture_log(level):
    stream = StringIO()
    orig_handlers, orig_level = logger.handlers[:], logger.level
    del logger.handlers[:]
    logger.addHandler(logging.StreamHandler(stream))
    logger.setLevel(level)
    try:
        yield stream
    finally:
        del logger.handlers[:]
        logger.handlers.extend(orig_handlers)
        logger.setLevel(orig_level)


class TestLogger(TestCase):

    def test_debug(self):
        with capture_log(logging.DEBUG) as log:
            Interpreter().execute_program("method M\nreset\nendmethod\nM()")
        log = log.getvalue()
        self.assertIn("line 4: M()", log)
        self.assertIn("defined method M()", log)

    def test_script_error_logged_at_info(self):
        with capture_log(logging.INFO) as log:
            Interpreter().execute_program("set x 1")
        self.assertIn("UndefinedVariable", log.getvalue())

    def test_quiet_by_default_level(self):
        with capture_log(logging.WARNING) as log:
            Interpreter().execute_program("moveto 1 1\nbogus")
        self.assertEqual(log.getvalue(), "")


if __name__ == '__main__':
    main()
