"""
The set of parse-nodes in simple form.
The parser calls these constructors from the top down, and nothing mutates them afterward.
Bodies are plain lists of statements in evaluation order.
"""
from typing import Optional, Sequence, Union
from .ontology import ValueExpression, Statement, Nom

VALUE = Union[int, str]

ANY_KEY = "any"

class Literal(ValueExpression):
	def __init__(self, value:VALUE, where:slice):
		assert isinstance(value, (int, str)), type(value)
		self.value = value
		self.where = where
	def __repr__(self): return "<Literal %r>" % (self.value,)
	def left(self): return self.where.start
	def right(self): return self.where.stop

class Lookup(ValueExpression):
	""" A variable reference. """
	def __init__(self, nom:Nom): self.nom = nom
	def __repr__(self): return "<ref:%s>" % self.nom.text
	def left(self): return self.nom.left()
	def right(self): return self.nom.right()

class BinExp(ValueExpression):
	def __init__(self, lhs:ValueExpression, glyph:str, rhs:ValueExpression):
		self.lhs, self.glyph, self.rhs = lhs, glyph, rhs
	def __repr__(self): return "(%r %s %r)" % (self.lhs, self.glyph, self.rhs)
	def left(self): return self.lhs.left()
	def right(self): return self.rhs.right()

class Call(ValueExpression):
	""" Names a zero-argument procedure. As a value, it's always zero. """
	def __init__(self, nom:Nom): self.nom = nom
	def __repr__(self): return "<call:%s>" % self.nom.text
	def left(self): return self.nom.left()
	def right(self): return self.nom.right()

class KeyPressed(ValueExpression):
	def __init__(self, key:str, where:slice):
		self.key = key
		self.where = where
	def __repr__(self): return "<pressed %r>" % self.key
	def is_wildcard(self): return self.key == ANY_KEY
	def left(self): return self.where.start
	def right(self): return self.where.stop

class Make(Statement):
	def __init__(self, nom:Nom, expr:Optional[ValueExpression], body:Sequence[Statement]):
		self.nom = nom
		self.expr = expr
		self.body = body
	def left(self): return self.nom.left()
	def right(self):
		if self.body: return self.body[-1].right()
		if self.expr: return self.expr.right()
		return self.nom.right()

class Change(Statement):
	def __init__(self, nom:Nom, expr:ValueExpression):
		self.nom = nom
		self.expr = expr
	def left(self): return self.nom.left()
	def right(self): return self.expr.right()

class Say(Statement):
	def __init__(self, exprs:Sequence[ValueExpression]):
		assert exprs
		self.exprs = exprs
	def left(self): return self.exprs[0].left()
	def right(self): return self.exprs[-1].right()

class _Guarded(Statement):
	""" Common shape of the statements that own an expression and a body. """
	def __init__(self, expr:ValueExpression, body:Sequence[Statement]):
		self.expr = expr
		self.body = body
	def left(self): return self.expr.left()
	def right(self): return (self.body[-1] if self.body else self.expr).right()

class If(_Guarded): pass

class Repeat(_Guarded): pass

class Forever(Statement):
	def __init__(self, head:slice, body:Sequence[Statement]):
		self.head = head
		self.body = body
	def left(self): return self.head.start
	def right(self): return self.body[-1].right() if self.body else self.head.stop

class ExprStmt(Statement):
	""" A bare procedure call, or an expression evaluated only for its side effects. """
	def __init__(self, expr:ValueExpression): self.expr = expr
	def left(self): return self.expr.left()
	def right(self): return self.expr.right()
