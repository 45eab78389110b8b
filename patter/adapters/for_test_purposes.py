"""
A stand-in keyboard for test cases: it replays a script of key events,
then raises KeysExhausted, which is the only way a test can get out of a forever-loop.
"""
from typing import Iterable, Optional
from ..devices import KeySource

class KeysExhausted(Exception):
	pass

class ScriptedKeys(KeySource):
	def __init__(self, sequence:Iterable[Optional[str]]):
		self._pending = list(sequence)
		self.polls = 0

	def poll(self) -> Optional[str]:
		if not self._pending:
			raise KeysExhausted(self.polls)
		self.polls += 1
		return self._pending.pop(0)
