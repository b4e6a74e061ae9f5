"""Keystroke decoding for the typing quiz.

Input is read one burst at a time from the terminal in raw mode and split into
key events. Control codes drive the session, escape sequences are ignored and
every other printable character is something the learner typed.
"""
import codecs
import enum
import logging
import os
import sys
from dataclasses import dataclass

from prompt_toolkit.input.vt100 import raw_mode

log = logging.getLogger(__name__)

ESC = '\x1b'

QUIT = '\x03'           # ctrl-c
SKIP_CHAR = '\x08'      # ctrl-h / backspace
DELETE = '\x7f'         # backspace on most terminals
NEXT_SENTENCE = '\x0e'  # ctrl-n
REPLAY_AUDIO = '\x13'   # ctrl-s

# written to the terminal while drawing the quiz line, never learner input
CURSOR_FORWARD = ESC + '[C'
CURSOR_BACK = ESC + '[D'
DISPLAY_SIGNALS = (CURSOR_FORWARD, CURSOR_BACK)

READ_SIZE = 64


class Key(enum.Enum):
	QUIT = 'quit'
	NEXT_SENTENCE = 'next'
	REPLAY_AUDIO = 'replay'
	SKIP_CHAR = 'skip'
	CHAR = 'char'
	OTHER = 'other'


@dataclass(frozen=True)
class KeyEvent:
	key: Key
	char: str = ''


CONTROL_KEYS = {
	QUIT: Key.QUIT,
	SKIP_CHAR: Key.SKIP_CHAR,
	DELETE: Key.SKIP_CHAR,
	NEXT_SENTENCE: Key.NEXT_SENTENCE,
	REPLAY_AUDIO: Key.REPLAY_AUDIO,
}


def escape_length(text: str, start: int) -> int:
	"""Length of the escape sequence that begins at text[start]."""
	end = len(text)
	if start + 1 >= end:
		return 1

	introducer = text[start + 1]
	if introducer == '[':
		# CSI: parameter and intermediate bytes, then one final byte in 0x40-0x7e
		i = start + 2
		while i < end and not '\x40' <= text[i] <= '\x7e':
			i += 1
		return min(i + 1, end) - start
	if introducer == 'O':
		return min(3, end - start)
	return 2


def split_incomplete(text: str) -> tuple[str, str]:
	"""Split off an escape sequence that the end of text cuts short."""
	start = text.rfind(ESC)
	if start == -1:
		return text, ''

	tail = text[start:]
	if len(tail) == 1:
		complete = False
	elif tail[1] == '[':
		complete = any('\x40' <= ch <= '\x7e' for ch in tail[2:])
	elif tail[1] == 'O':
		complete = len(tail) >= 3
	else:
		complete = True
	return (text, '') if complete else (text[:start], tail)


def decode(text: str) -> list[KeyEvent]:
	events = []
	i = 0
	while i < len(text):
		ch = text[i]
		if ch == ESC:
			length = escape_length(text, i)
			if text[i:i + length] in DISPLAY_SIGNALS:
				log.debug('ignoring display signal %r', text[i:i + length])
			events.append(KeyEvent(Key.OTHER))
			i += length
			continue

		if ch in CONTROL_KEYS:
			events.append(KeyEvent(CONTROL_KEYS[ch]))
		elif ch.isprintable():
			events.append(KeyEvent(Key.CHAR, ch))
		else:
			events.append(KeyEvent(Key.OTHER))
		i += 1
	return events


class KeyReader:
	"""Blocking source of key events.

	A terminal is switched to raw mode only for the duration of each read, so
	it is back in its normal mode whenever control leaves `read`. Streams that
	are not terminals (piped input, tests) are read as they are. An exhausted
	stream reads as a quit.
	"""

	def __init__(self, stream=None):
		self.stream = stream if stream is not None else sys.stdin
		self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
		self._pending: list[KeyEvent] = []
		self._partial = ''

	def read(self) -> KeyEvent:
		while not self._pending:
			data = self._read_bytes()
			if not data:
				log.debug('input exhausted')
				return KeyEvent(Key.QUIT)
			text = self._decoder.decode(data)
			if self._partial == ESC and text and text[0] not in '[O':
				# the escape key on its own
				self._pending.append(KeyEvent(Key.OTHER))
				self._partial = ''
			# an escape sequence can straddle two reads
			text, self._partial = split_incomplete(self._partial + text)
			self._pending.extend(decode(text))
		return self._pending.pop(0)

	def _read_bytes(self) -> bytes:
		if self.stream.isatty():
			fileno = self.stream.fileno()
			with raw_mode(fileno):
				return os.read(fileno, READ_SIZE)

		source = getattr(self.stream, 'buffer', self.stream)
		read = getattr(source, 'read1', source.read)
		return read(READ_SIZE)
