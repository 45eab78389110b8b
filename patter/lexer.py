"""
The scanner. It knows nothing of grammar: it chops text into classified tokens.

Keywords are not rules of their own: scan a word, then check the word against the set of reserved spellings.
That keeps the longest-match rule honest between "make" and "maker".

Anything the scanner cannot classify is quietly dropped.
Detecting nonsense is the parser's problem.
"""
from typing import NamedTuple
from boozetools.scanning import miniscan
from boozetools.scanning.engine import IterableScanner

RESERVED = frozenset([
	"make", "be", "do", "change", "to", "say",
	"if", "repeat", "times", "forever", "pressed",
])

class Token(NamedTuple):
	kind: str
	text: str
	where: slice

def _emit(yy:IterableScanner, kind:str):
	yy.token(kind, Token(kind, yy.match(), yy.slice()))

lexicon = miniscan.Definition()

# Real rules outrank the catch-all, which only ever wins for a single stray character.
REAL = 1

@lexicon.on(r"\s+", rank=REAL)
def _whitespace(yy:IterableScanner): pass

@lexicon.on(r"#[^\n]*", rank=REAL)
def _comment(yy:IterableScanner): pass

@lexicon.on(r"[0-9]+", rank=REAL)
def _number(yy:IterableScanner): _emit(yy, "number")

@lexicon.on(r'"[^"]*"', rank=REAL)
def _text(yy:IterableScanner): _emit(yy, "text")

@lexicon.on(r"[A-Za-z_][A-Za-z0-9_]*", rank=REAL)
def _word(yy:IterableScanner):
	word = yy.match()
	_emit(yy, word if word in RESERVED else "name")

def _punctuation(yy:IterableScanner): _emit(yy, yy.match())

for _glyph in r"\+ \- \* \/ % \( \)".split():
	lexicon.on(_glyph, rank=REAL)(_punctuation)

@lexicon.on(r".")
def _stray(yy:IterableScanner): pass

def scan(text:str) -> list[Token]:
	""" All the tokens in the text, in order. Never fails. """
	return [each[1] for each in lexicon.scan(text)]
