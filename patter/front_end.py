"""
Text in, statements out. Also the one place that touches the file system on the way in.
"""
from pathlib import Path
from typing import Optional
from .lexer import scan
from .parser import Parser
from .ontology import Statement
from .diagnostics import Report

def parse_text(text:str, report:Optional[Report]=None, path:Optional[Path]=None) -> list[Statement]:
	""" Submit text to the scanner and the scanner's tokens to the parser. """
	tokens = scan(text)
	if report is not None:
		report.set_source(text, path)
		report.info("Scanned", len(tokens), "tokens")
	statements = Parser(tokens, report).parse()
	if report is not None:
		report.info("Parsed", len(statements), "top-level statements")
	return statements

def read_file(path:Path, report:Report) -> Optional[str]:
	report.info("Loading", path)
	try:
		with open(path, "r", encoding="utf-8") as fh:
			return fh.read()
	except FileNotFoundError:
		report.no_such_file(path)
	except OSError:
		report.broken_file(path)

def parse_file(path:Path, report:Report) -> Optional[list[Statement]]:
	text = read_file(path, report)
	if text is None:
		assert report.sick()
		return None
	return parse_text(text, report, path)
