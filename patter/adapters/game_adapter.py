"""
Native keyboard for Patter via PyGame.

SDL only delivers key events to a window with focus, so the first poll opens a small window.
Each poll then waits a bounded number of milliseconds for at most one event.
Anything that is not a key going down counts as no key at all.

Closing the window (or alt-F4) comes across as a quit event. A forever-loop has no way out
of its own, so that gets treated the same as an interrupt from the terminal.
"""
import os
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
import pygame
from typing import Optional

from ..devices import KeySource, UNKNOWN

_NAMED = {
	pygame.K_RETURN: "enter",
	pygame.K_KP_ENTER: "enter",
	pygame.K_ESCAPE: "escape",
	pygame.K_TAB: "tab",
	pygame.K_BACKSPACE: "backspace",
	pygame.K_LEFT: "left",
	pygame.K_RIGHT: "right",
	pygame.K_UP: "up",
	pygame.K_DOWN: "down",
}

def key_name(event) -> str:
	""" Canonical name for a KEYDOWN event. """
	if event.key in _NAMED:
		return _NAMED[event.key]
	text = event.unicode
	if len(text) == 1 and text.isprintable():
		return text
	return UNKNOWN

class PygameKeys(KeySource):
	def __init__(self, poll_ms:int=10, title:str="patter", size=(320, 240)):
		self._poll_ms = poll_ms
		self._title = title
		self._size = size
		self._display = None

	def _open(self):
		pygame.init()
		pygame.display.set_caption(self._title)
		self._display = pygame.display.set_mode(self._size)

	def poll(self) -> Optional[str]:
		if self._display is None:
			self._open()
		event = pygame.event.wait(self._poll_ms)
		if event.type == pygame.QUIT:
			self.close()
			raise KeyboardInterrupt("window closed")
		if event.type == pygame.KEYDOWN:
			return key_name(event)
		return None

	def close(self):
		if self._display is not None:
			pygame.quit()
			self._display = None
