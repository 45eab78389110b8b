"""
The keyboard, as far as the interpreter is concerned, is one operation:
poll once, wait a little while at most, and report at most one key.

Key names are canonical: a single printable character, or one of the NAMED_KEYS,
or UNKNOWN for anything else. No key at all is None.
"""
from typing import Optional
import abc

NAMED_KEYS = frozenset(["enter", "escape", "tab", "backspace", "left", "right", "up", "down"])
UNKNOWN = "unknown"

class KeySource(abc.ABC):
	@abc.abstractmethod
	def poll(self) -> Optional[str]:
		pass

	def close(self):
		""" Give back whatever the source holds. Most hold nothing. """

class SilentKeys(KeySource):
	""" For running without a keyboard: nobody ever presses anything. """
	def poll(self) -> Optional[str]:
		return None
