"""
This is an interpreter for the Patter scripting language.

{0}

For example:

    patter program.pat

will run program.pat, opening a little window to listen for keys
if the program has a forever-loop in it.

    patter -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="patter",
	description="Interpreter for the Patter scripting language.",
)
parser.add_argument("program", help="try examples/hello.pat for example.")
parser.add_argument('-c', "--check", action="store_true", help="Parse the program and point out anything skipped, but do not run it.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what's going on, on stderr.")
parser.add_argument("--headless", action="store_true", help="Never open a window; forever-loops see no keys.")
parser.add_argument("--poll-ms", type=int, default=10, help="Longest wait for a key on each pass of a forever-loop.")
parser.add_argument("--pause-ms", type=int, default=10, help="Rest between passes of a forever-loop.")

def run(args):
	from .diagnostics import Report
	report = Report(verbose=args.verbose)
	path = Path.cwd() / args.program
	try:
		return _run(args, path, report)
	except RecursionError:
		report.too_deep(path)
		report.complain_to_console()
		return 1
	except KeyboardInterrupt:
		print(file=sys.stderr)
		return 130

def _run(args, path:Path, report):
	from .front_end import parse_file
	statements = parse_file(path, report)
	if statements is None:
		report.complain_to_console()
		return 1
	if args.check:
		report.explain_skips()
		verdict = "Skipped %d token(s)."%report.notes() if report.notes() else "Looks plausible to me."
		print(verdict, file=sys.stderr)
		return
	if args.verbose:
		report.explain_skips()
	from .evaluator import run_program
	keys = _keyboard(args, path)
	try: run_program(statements, keys=keys, pause=args.pause_ms / 1000)
	finally: keys.close()

def _keyboard(args, path:Path):
	if args.headless:
		from .devices import SilentKeys
		return SilentKeys()
	from .adapters.game_adapter import PygameKeys
	return PygameKeys(poll_ms=args.poll_ms, title=path.name)

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
