import io
import unittest
from contextlib import redirect_stdout

from minigrep import style
from minigrep.utils import colorize, report_error, report_warning, use_color


class TestStyle(unittest.TestCase):

    def test_codes(self):
        self.assertEqual(style.fg_code(255, 0, 0), "\x1b[38;2;255;0;0;1m")
        self.assertEqual(style.bg_code(0, 0, 255), "\x1b[48;2;0;0;255;1m")
        self.assertEqual(style.style_code(style.UNDERLINE), "\x1b[4;1m")

    def test_add_functions(self):
        self.assertEqual(style.add_fg("hi", 1, 2, 3), "\x1b[38;2;1;2;3;1mhi\x1b[0m")
        self.assertEqual(style.add_bg("hi", 1, 2, 3), "\x1b[48;2;1;2;3;1mhi\x1b[0m")
        self.assertEqual(style.add_style("hi", style.STRIKETHROUGH), "\x1b[9;1mhi\x1b[0m")

    def test_add_style_raw_and_out_of_range(self):
        self.assertEqual(style.add_style("hi", 6), "\x1b[6;1mhi\x1b[0m")
        self.assertEqual(style.add_style("hi", 10), "hi")
        self.assertEqual(style.add_style("hi", 255), "hi")

    def test_emit_writes_same_codes(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            style.fg(10, 20, 30)
            style.bg(10, 20, 30)
            style.style(style.BOLD)
            style.reset()
        self.assertEqual(buf.getvalue(),
                         style.fg_code(10, 20, 30) + style.bg_code(10, 20, 30) + style.style_code(1) + style.RESET)

    def test_rejects_values_outside_a_byte(self):
        with self.assertRaises(ValueError):
            style.fg_code(256, 0, 0)
        with self.assertRaises(ValueError):
            style.add_style("hi", -1)


class TestDiagnostics(unittest.TestCase):

    def test_no_color_when_not_a_tty(self):
        self.assertFalse(use_color(io.StringIO()))
        self.assertEqual(colorize("x", (255, 0, 0), io.StringIO()), "x")

    def test_modes(self):
        self.assertTrue(use_color(io.StringIO(), "always"))
        self.assertFalse(use_color(io.StringIO(), "never"))

    def test_report_error_red(self):
        buf = io.StringIO()
        report_error("boom", stream=buf, mode="always")
        self.assertEqual(buf.getvalue(), "\x1b[38;2;255;0;0;1mError: boom\x1b[0m\n")

    def test_report_warning_yellow(self):
        buf = io.StringIO()
        report_warning("careful", stream=buf, mode="always")
        self.assertEqual(buf.getvalue(), "\x1b[38;2;255;255;0;1mWarning: careful\x1b[0m\n")

    def test_report_plain(self):
        buf = io.StringIO()
        report_warning("careful", stream=buf)
        self.assertEqual(buf.getvalue(), "Warning: careful\n")


if __name__ == '__main__':
    unittest.main()
