from pathlib import Path
import io
import unittest
from unittest.mock import patch

from patter import cmdline, diagnostics
from patter.front_end import parse_file, parse_text
from patter.evaluator import run_program
from patter.adapters.for_test_purposes import ScriptedKeys, KeysExhausted

base_folder = Path(__file__).parent.parent
examples = base_folder/"examples"

def _run_headless(*argv):
	""" Returns the exit status, and whatever went to stdout, as a list of lines. """
	args = cmdline.parser.parse_args(["--headless", *map(str, argv)])
	with patch("sys.stdout", new_callable=io.StringIO) as out:
		with patch("sys.stderr", new_callable=io.StringIO):
			status = cmdline.run(args)
	return status, out.getvalue().splitlines()

class ExampleSmokeTests(unittest.TestCase):
	""" Run all the examples; Test for no smoke. """

	def test_hello(self):
		self.assertEqual((None, ["Hello, World!"]), _run_headless(examples/"hello.pat"))

	def test_arithmetic(self):
		status, lines = _run_headless(examples/"arithmetic.pat")
		self.assertIsNone(status)
		self.assertEqual([
			"x + y = 9",
			"x - y = 5",
			"x * y = 14",
			"x / y = 3",
			"x % y = 1",
			"negative: -3 -1",
			"by zero: 0 0",
			"text plus one: 0",
			"unset: 0",
		], lines)

	def test_countdown(self):
		status, lines = _run_headless(examples/"countdown.pat")
		self.assertEqual(["T minus %d"%n for n in range(5, 0, -1)], lines)

	def test_procedures(self):
		status, lines = _run_headless(examples/"procedures.pat")
		self.assertEqual(["hi", "there", "hi", "there", "a name can be both", "greet is also 3"], lines)

	def test_keys(self):
		report = diagnostics.Report()
		statements = parse_file(examples/"keys.pat", report)
		report.assert_no_issues("Example failed to load.")
		self.assertEqual(0, report.notes())
		out = io.StringIO()
		with self.assertRaises(KeysExhausted):
			run_program(statements, keys=ScriptedKeys(["enter", "a", "enter", "enter", "a"]), out=out, pause=0)
		self.assertEqual([
			"Enter has been pressed 1 time(s) so far.",
			"Enter has been pressed 3 time(s) so far.",
		], out.getvalue().splitlines())

	def test_examples_parse_cleanly(self):
		for each in sorted(examples.glob("*.pat")):
			with self.subTest(each.name):
				report = diagnostics.Report()
				self.assertIsNotNone(parse_file(each, report))
				self.assertEqual(0, report.notes())

class CommandLineTests(unittest.TestCase):

	def test_missing_file(self):
		status, lines = _run_headless(examples/"no_such_program.pat")
		self.assertEqual(1, status)
		self.assertEqual([], lines)

	def test_check_does_not_run(self):
		args = cmdline.parser.parse_args(["--check", str(examples/"hello.pat")])
		with patch("sys.stdout", new_callable=io.StringIO) as out:
			with patch("sys.stderr", new_callable=io.StringIO) as err:
				self.assertIsNone(cmdline.run(args))
		self.assertEqual("", out.getvalue())
		self.assertIn("plausible", err.getvalue())

	def test_interrupt_stops_the_run(self):
		with patch("patter.evaluator.run_program", side_effect=KeyboardInterrupt):
			status, lines = _run_headless(examples/"keys.pat")
		self.assertEqual(130, status)

	def test_stack_exhaustion_is_reported(self):
		args = cmdline.parser.parse_args(["--headless", str(examples/"hello.pat")])
		with patch("patter.evaluator.run_program", side_effect=RecursionError):
			with patch("sys.stderr", new_callable=io.StringIO) as err:
				self.assertEqual(1, cmdline.run(args))
		self.assertIn("nests more deeply", err.getvalue())
		self.assertIn("hello.pat", err.getvalue())

	def test_defaults(self):
		args = cmdline.parser.parse_args(["x.pat"])
		self.assertEqual(10, args.poll_ms)
		self.assertEqual(10, args.pause_ms)
		self.assertFalse(args.headless)
		self.assertFalse(args.check)

class ReportTests(unittest.TestCase):

	def test_skips_are_illustrated(self):
		report = diagnostics.Report()
		parse_text('say "a"\n) say "b"', report, Path("junk.pat"))
		self.assertEqual(1, report.notes())
		self.assertTrue(report.ok())
		with patch("sys.stderr", new_callable=io.StringIO) as err:
			report.explain_skips()
		self.assertIn("Skipped ')'", err.getvalue())

	def test_file_trouble_makes_a_sick_report(self):
		report = diagnostics.Report()
		self.assertIsNone(parse_file(examples/"no_such_program.pat", report))
		self.assertTrue(report.sick())
		with patch("sys.stderr", new_callable=io.StringIO) as err:
			with self.assertRaises(AssertionError):
				report.assert_no_issues("as expected")
		self.assertIn("no_such_program.pat", err.getvalue())

	def test_too_deep(self):
		report = diagnostics.Report()
		report.too_deep(Path("deep.pat"))
		with patch("sys.stderr", new_callable=io.StringIO) as err:
			report.complain_to_console()
		self.assertIn("deep.pat", err.getvalue())
		self.assertIn("recursion", err.getvalue())


if __name__ == '__main__':
	unittest.main()
