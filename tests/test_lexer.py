import unittest

from patter.lexer import scan, RESERVED

def kinds(text):
	return [t.kind for t in scan(text)]

class ScannerTests(unittest.TestCase):

	def test_every_reserved_word(self):
		for word in sorted(RESERVED):
			with self.subTest(word):
				self.assertEqual([word], kinds(word))

	def test_keywords_only_on_exact_match(self):
		self.assertEqual(["make", "name", "be", "number"], kinds("make maker be 12"))
		self.assertEqual(["name", "name", "name"], kinds("Make say_ _if"))

	def test_names(self):
		for name in ["x", "_", "_x1", "count2", "CamelCase"]:
			with self.subTest(name):
				self.assertEqual(["name"], kinds(name))

	def test_text_slices_are_exact(self):
		text = 'say "hi there"  # greeting\nsay 42'
		tokens = scan(text)
		self.assertEqual(["say", "text", "say", "number"], [t.kind for t in tokens])
		for t in tokens:
			self.assertEqual(t.text, text[t.where])
		self.assertEqual('"hi there"', tokens[1].text)

	def test_operators_and_parentheses(self):
		self.assertEqual(
			["(", "number", "+", "number", ")", "-", "number", "*", "number", "/", "number", "%", "number"],
			kinds("(1+2)-3*4/5%6"),
		)

	def test_division_is_an_operator(self):
		self.assertEqual(["number", "/", "number"], kinds("8/2"))
		self.assertEqual(["/"], [t.text for t in scan(" / ")])

	def test_whitespace_and_comments_vanish(self):
		self.assertEqual([], kinds(""))
		self.assertEqual([], kinds(" \t\n\f  # nothing to see here"))
		self.assertEqual(["say", "number"], kinds("say # a remark\n 1"))

	def test_unrecognized_characters_are_skipped(self):
		self.assertEqual(["number", "number", "number"], kinds("1 @ 2 $;! 3"))
		self.assertEqual(["say"], kinds("say é"))

	def test_unterminated_text(self):
		# The stray quote goes away; what follows scans as usual.
		self.assertEqual(["say", "name"], kinds('say "oops'))

	def test_text_may_span_lines(self):
		self.assertEqual(["text"], kinds('"one\ntwo"'))


if __name__ == '__main__':
	unittest.main()
