"""
These most-fundamental classes in the syntax class hierarchy
are separate from the rest so that the scanner, the parser,
and the diagnostics can all share them without circular imports.

A phrase knows the slice of source text it came from.
That's all the diagnostics need in order to draw a picture.
"""

class Phrase:
	def left(self) -> int:
		""" Return the offset of the leftmost character of this phrase """
		raise NotImplementedError(type(self))
	def right(self) -> int:
		""" Return the offset just past the rightmost character of this phrase """
		raise NotImplementedError(type(self))
	def span(self) -> slice: return slice(self.left(), self.right())

class Nom(Phrase):
	""" Representing the occurrence of a name anywhere. """
	def __init__(self, text:str, where:slice=None):
		assert isinstance(text, str)
		self.text = text
		self.where = where or slice(0, 0)
	def __repr__(self): return "<Name %r>" % self.text
	def left(self): return self.where.start
	def right(self): return self.where.stop

class ValueExpression(Phrase): pass

class Statement(Phrase): pass
