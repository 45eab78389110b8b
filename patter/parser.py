"""
Recursive descent over the token list, with one token of look-ahead and no backtracking
beyond giving up on a statement that cannot be finished.

There are no block delimiters. A block runs until the end of input or until the next
token is a bare name. That boundary is a known ambiguity in the language: a procedure
call cannot sit inside a block, because the call is what ends the block. Scripts in
the wild depend on it, so here it stays.

The parser never fails. A token that cannot start a statement gets skipped (with a
note on the report, if there is one) and parsing resumes at the next token.
An expression with a hole in it gets a zero in the hole.
"""
from typing import Optional
from . import syntax, primitive
from .ontology import Nom, Statement, ValueExpression
from .lexer import Token
from .diagnostics import Report

ADDITIVE = ("+", "-")
MULTIPLICATIVE = ("*", "/", "%")

# Tokens which may continue a `say` statement with another expression.
# Names are absent on purpose: a name after a `say` is the next procedure call.
SAY_MORE = frozenset(["number", "text", "(", "pressed"])

class Parser:
	def __init__(self, tokens:list[Token], report:Optional[Report]=None):
		self.tokens = tokens
		self.report = report
		self.pos = 0

	def parse(self) -> list[Statement]:
		return self._sequence(top=True)

	# Mechanics

	def _current(self) -> Optional[Token]:
		if self.pos < len(self.tokens):
			return self.tokens[self.pos]

	def _kind(self) -> Optional[str]:
		token = self._current()
		return token.kind if token else None

	def _advance(self) -> Token:
		token = self.tokens[self.pos]
		self.pos += 1
		return token

	def _eat(self, kind:str) -> bool:
		if self._kind() == kind:
			self.pos += 1
			return True
		return False

	def _skip(self):
		token = self._advance()
		if self.report is not None:
			self.report.skipped(token.where, token.text)

	def _nowhere(self) -> slice:
		""" A zero-width location at the cursor, for things conjured out of thin air. """
		if self.pos < len(self.tokens):
			at = self.tokens[self.pos].where.start
		elif self.tokens:
			at = self.tokens[-1].where.stop
		else:
			at = 0
		return slice(at, at)

	# Statements

	def _sequence(self, top:bool) -> list[Statement]:
		"""
		The statement-sequence routine serves both for the whole program and for blocks.
		Blocks end at a bare name; the top level just carries on.
		"""
		statements = []
		while self.pos < len(self.tokens):
			if not top and self._kind() == "name":
				break
			stmt = self._statement()
			if stmt is None: self._skip()
			else: statements.append(stmt)
		return statements

	def _block(self) -> list[Statement]:
		self._eat("do")
		return self._sequence(top=False)

	def _statement(self) -> Optional[Statement]:
		""" Returns None, with the cursor where it started, if no statement starts here. """
		start = self.pos
		try: method = getattr(self, "_stmt_"+self._kind())
		except AttributeError: return None
		self.pos += 1
		stmt = method(start)
		if stmt is None: self.pos = start
		return stmt

	def _name(self) -> Optional[Nom]:
		if self._kind() == "name":
			token = self._advance()
			return Nom(token.text, token.where)

	def _stmt_make(self, start):
		nom = self._name()
		if nom is None: return None
		expr = self._expression() if self._eat("be") else None
		body = self._sequence(top=False) if self._eat("do") else []
		return syntax.Make(nom, expr, body)

	def _stmt_change(self, start):
		nom = self._name()
		if nom is None: return None
		self._eat("to")
		return syntax.Change(nom, self._expression())

	def _stmt_say(self, start):
		exprs = [self._expression()]
		while self._kind() in SAY_MORE:
			exprs.append(self._expression())
		return syntax.Say(exprs)

	def _stmt_if(self, start):
		condition = self._expression()
		return syntax.If(condition, self._block())

	def _stmt_repeat(self, start):
		count = self._expression()
		self._eat("times")
		return syntax.Repeat(count, self._block())

	def _stmt_forever(self, start):
		head = self.tokens[start].where
		return syntax.Forever(head, self._block())

	def _stmt_pressed(self, start):
		self.pos = start
		return syntax.ExprStmt(self._primary())

	def _stmt_name(self, start):
		token = self.tokens[start]
		return syntax.ExprStmt(syntax.Call(Nom(token.text, token.where)))

	# Expressions

	def _expression(self) -> ValueExpression:
		return self._binary(ADDITIVE, self._term)

	def _term(self) -> ValueExpression:
		return self._binary(MULTIPLICATIVE, self._primary)

	def _binary(self, glyphs, operand) -> ValueExpression:
		lhs = operand()
		while self._kind() in glyphs:
			glyph = self._advance().kind
			lhs = syntax.BinExp(lhs, glyph, operand())
		return lhs

	def _primary(self) -> ValueExpression:
		token = self._current()
		if token is None:
			return syntax.Literal(0, self._nowhere())
		self.pos += 1
		kind = token.kind
		if kind == "number":
			return syntax.Literal(primitive.literal_number(token.text), token.where)
		elif kind == "text":
			return syntax.Literal(token.text[1:-1], token.where)
		elif kind == "name":
			return syntax.Lookup(Nom(token.text, token.where))
		elif kind == "(":
			inner = self._expression()
			self._eat(")")
			return inner
		elif kind == "-":
			zero = syntax.Literal(0, slice(token.where.start, token.where.start))
			return syntax.BinExp(zero, "-", self._primary())
		elif kind == "pressed":
			if self._kind() == "text":
				key = self._advance()
				return syntax.KeyPressed(key.text[1:-1], slice(token.where.start, key.where.stop))
			return syntax.KeyPressed(syntax.ANY_KEY, token.where)
		else:
			return syntax.Literal(0, token.where)
