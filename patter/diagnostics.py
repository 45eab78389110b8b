"""
Everything that ends up in front of a human when something is off.

The core of the language never raises over a bad script. It shrugs and carries on.
But the parser can leave notes here about what it skipped, and the command line
records the things that genuinely stop a run: a missing file, an unreadable file,
or a program nested more deeply than Python's stack allows.
"""
import sys, random
from pathlib import Path
from typing import Optional
from boozetools.support.failureprone import SourceText, illustration

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'Blargh', 'Crud', 'Curses', 'Drat', 'Fiddlesticks',
		'Good Grief', 'Great Scott', 'Jeepers', 'Nuts', 'Rats',
	]
	resignations = [
		'I cannot continue.',
		'I need to ask for help.',
		'The path before me fades into darkness.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Annotation:
	def __init__(self, source:SourceText, where:slice, caption:str=""):
		self.source = source
		self.slice = where
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.slice.start)
		single_line = self.source.line_of_text(row)
		width = max(self.slice.stop - self.slice.start, 1)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self._intro]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

class Report:
	""" Collects issues (which stop a run) and notes (which do not). """
	_issues: list[Pic]
	_notes: list[Pic]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._notes = []
		self._source = SourceText("")

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	def notes(self): return len(self._notes)

	def issue(self, it:Pic):
		self._issues.append(it)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def set_source(self, text:str, path:Optional[Path]=None):
		""" Later annotations refer to this text. """
		self._source = SourceText(text, filename=str(path) if path else None)

	# Methods the parser calls:
	def skipped(self, where:slice, text:str):
		intro = "Skipped %r, which cannot start a statement here." % text
		self._notes.append(Pic(intro, [Annotation(self._source, where)]))

	# Methods the command line calls:
	def _file_error(self, path:Path, prefix:str):
		self.issue(Pic(prefix+" "+str(path), []))

	def no_such_file(self, path:Path):
		self._file_error(path, "I see no file called")

	def broken_file(self, path:Path):
		self._file_error(path, "Something went pear-shaped while trying to read")

	def too_deep(self, path:Path):
		intro = "Something in %s nests more deeply than Python's stack allows." % path
		footer = [
			"Parentheses piled thousands deep will do it.",
			"So will a procedure that calls itself without ever stopping:",
			"there is no built-in limit on recursion.",
		]
		self.issue(Pic(intro, [], footer))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def explain_skips(self):
		""" Emit the parser's notes to the console. """
		for note in self._notes:
			print(note.as_text(), file=sys.stderr)
		sys.stderr.flush()

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
