"""
Direct interpretation by walking the tree.

One interpreter owns one variable environment and one procedure table.
Both start empty and only ever grow or get overwritten, for as long as the run lasts.
Evaluation is total: a mismatch of types, a missing name, or a zero divisor
each resolves to a plain default value, right where it happens.

Recursion is not limited. A procedure that calls itself forever will exhaust
the Python stack and raise RecursionError, which the command line reports.
"""
import sys, time
from typing import Optional, Sequence, TextIO
from boozetools.support.foundation import Visitor
from . import syntax, primitive
from .ontology import Statement, ValueExpression
from .devices import KeySource, SilentKeys

PAUSE = 0.01  # Seconds between iterations of a forever-loop
NO_KEY = ""

def render(value:syntax.VALUE) -> str:
	if isinstance(value, int): return "%d" % value
	return value

def truthy(value:syntax.VALUE) -> bool:
	""" Only numbers have truth: nonzero ones. Text is always false. """
	return isinstance(value, int) and value != 0

class Interpreter(Visitor):
	environment: dict[str, syntax.VALUE]
	procedures: dict[str, Sequence[Statement]]
	recorded_key: Optional[str]  # None outside of any forever-loop

	def __init__(self, keys:Optional[KeySource]=None, out:Optional[TextIO]=None, pause:float=PAUSE):
		self.environment = {}
		self.procedures = {}
		self.recorded_key = None
		self._keys = SilentKeys() if keys is None else keys
		self._out = sys.stdout if out is None else out
		self._pause = pause

	def run(self, statements:Sequence[Statement]):
		for stmt in statements:
			self.visit(stmt)

	def evaluate(self, expr:ValueExpression) -> syntax.VALUE:
		return self.visit(expr)

	# Statements

	def visit_Make(self, stmt:syntax.Make):
		if stmt.expr is not None:
			self.environment[stmt.nom.text] = self.evaluate(stmt.expr)
		if stmt.body:
			self.procedures[stmt.nom.text] = stmt.body

	def visit_Change(self, stmt:syntax.Change):
		self.environment[stmt.nom.text] = self.evaluate(stmt.expr)

	def visit_Say(self, stmt:syntax.Say):
		line = ''.join(render(self.evaluate(e)) for e in stmt.exprs)
		self._out.write(line + "\n")
		self._out.flush()

	def visit_If(self, stmt:syntax.If):
		if truthy(self.evaluate(stmt.expr)):
			self.run(stmt.body)

	def visit_Repeat(self, stmt:syntax.Repeat):
		count = self.evaluate(stmt.expr)
		if not isinstance(count, int):
			count = 0
		for _ in range(count):
			self.run(stmt.body)

	def visit_Forever(self, stmt:syntax.Forever):
		# The recorded key belongs to this loop. Whatever stops the loop
		# (and only something from outside can) puts the prior state back.
		prior = self.recorded_key
		try:
			while True:
				key = self._keys.poll()
				self.recorded_key = NO_KEY if key is None else key
				self.run(stmt.body)
				time.sleep(self._pause)
		finally:
			self.recorded_key = prior

	def visit_ExprStmt(self, stmt:syntax.ExprStmt):
		expr = stmt.expr
		if isinstance(expr, syntax.Call):
			body = self.procedures.get(expr.nom.text)
			if body is not None:
				self.run(body)
		else:
			self.evaluate(expr)

	# Expressions

	def visit_Literal(self, expr:syntax.Literal):
		return expr.value

	def visit_Lookup(self, expr:syntax.Lookup):
		return self.environment.get(expr.nom.text, 0)

	def visit_BinExp(self, expr:syntax.BinExp):
		lhs = self.evaluate(expr.lhs)
		rhs = self.evaluate(expr.rhs)
		if isinstance(lhs, int) and isinstance(rhs, int):
			return primitive.binary(expr.glyph, lhs, rhs)
		return 0

	def visit_Call(self, expr:syntax.Call):
		return 0

	def visit_KeyPressed(self, expr:syntax.KeyPressed):
		key = self.recorded_key or NO_KEY
		if expr.is_wildcard():
			return key
		return 1 if key and key == expr.key else 0

def run_program(statements:Sequence[Statement], **kwargs) -> Interpreter:
	interpreter = Interpreter(**kwargs)
	interpreter.run(statements)
	return interpreter
