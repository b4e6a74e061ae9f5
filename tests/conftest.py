import io
from types import SimpleNamespace

import pytest
from rich.console import Console

from corpus import Sentence, SentenceStore
from engine import Settings
from keys import Key, KeyEvent


class FakeSpeaker:
	"""Records what would have been spoken."""

	def __init__(self, available=True):
		self.available = available
		self.spoken = []

	def speak(self, text, voice=None, rate=None):
		self.spoken.append((text, voice))

	def probe(self):
		return self.available


class ScriptedKeys:
	"""Key source that replays a fixed list of events, then quits."""

	def __init__(self, events):
		self.events = list(events)
		self.reads = 0

	def read(self):
		self.reads += 1
		if not self.events:
			return KeyEvent(Key.QUIT)
		return self.events.pop(0)


def typed(text):
	return [KeyEvent(Key.CHAR, ch) for ch in text]


@pytest.fixture
def speaker():
	return FakeSpeaker()


@pytest.fixture
def output():
	return io.StringIO()


@pytest.fixture
def console(output):
	return Console(file=output, highlight=False, width=200)


@pytest.fixture
def settings(tmp_path):
	return Settings(str(tmp_path / 'missing.json'))


@pytest.fixture
def store():
	return SentenceStore(
		Sentence(i, f'kalimat {i}', f'sentence {i}')
		for i in range(1, 11)
	)


@pytest.fixture(autouse=True)
def no_pause(monkeypatch):
	import engine
	sleeps = []
	monkeypatch.setattr(engine, 'time', SimpleNamespace(sleep=sleeps.append))
	return sleeps
