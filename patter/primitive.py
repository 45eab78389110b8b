"""
Arithmetic over the one numeric type: the signed 64-bit integer.

Every operation here is total. Division and remainder by zero come out zero,
and results that overflow wrap around the way a 64-bit machine word does.
Mismatched operands are the evaluator's business, not ours.
"""

WIDTH = 64
_MODULUS = 1 << WIDTH
_HALF = 1 << (WIDTH - 1)
SMALLEST, LARGEST = -_HALF, _HALF - 1

def wrap(n:int) -> int:
	return (n + _HALF) % _MODULUS - _HALF

def quotient(a:int, b:int) -> int:
	""" Integer division truncating toward zero, as opposed to Python's floor. """
	if b == 0: return 0
	q = abs(a) // abs(b)
	return q if (a < 0) == (b < 0) else -q

def remainder(a:int, b:int) -> int:
	""" The remainder to go with `quotient`: it takes the sign of the dividend. """
	if b == 0: return 0
	return a - b * quotient(a, b)

PRIMITIVE_BINARY = {
	"+" : lambda a, b: a + b,
	"-" : lambda a, b: a - b,
	"*" : lambda a, b: a * b,
	"/" : quotient,
	"%" : remainder,
}

def binary(glyph:str, a:int, b:int) -> int:
	try: fn = PRIMITIVE_BINARY[glyph]
	except KeyError: return 0
	return wrap(fn(a, b))

def literal_number(digits:str) -> int:
	""" Out-of-range literals read as zero rather than wrapping. """
	n = int(digits)
	return n if n <= LARGEST else 0
