import enum
import json
import logging
import os
import re
import time

from rich.cells import cell_len
from rich.console import Console
from rich.control import Control
from rich.text import Text

from corpus import Sentence, SentenceStore
from keys import Key, KeyReader
from utils import DrillConsole, Speaker, path, speak_async, speak_lines

log = logging.getLogger(__name__)

# letters, digits and underscore in any script
WORD_CHAR = re.compile(r'\w')

DEFAULT_SETTINGS = {
	'corpus': None,
	'target_voice': 'Amira',
	'base_voice': 'Samantha',
	'voice_speed': 200,
	'pause': 0.5,
	'mask': '_',
}


class Settings:
	def __init__(self, settings_path: str | None = None):
		self.path = settings_path or path('settings.json')
		self.data = dict(DEFAULT_SETTINGS)

		if os.path.exists(self.path):
			with open(self.path, 'r', encoding='utf-8') as f:
				self.data.update(json.load(f))
		else:
			log.debug('no settings at %s, using defaults', self.path)

	def __getitem__(self, key):
		return self.data[key]

	@staticmethod
	def create(settings_path: str | None = None):
		fpath = settings_path or path('settings.json')
		if not os.path.exists(fpath):
			# create file with default contents
			with open(fpath, 'w', encoding='utf-8') as f:
				json.dump(DEFAULT_SETTINGS, f, indent=2)
		return fpath


def is_word_char(ch: str) -> bool:
	return WORD_CHAR.match(ch) is not None


def mask(text: str, glyph: str = '_') -> str:
	"""Hide every word character, keeping spaces and punctuation in place."""
	# wide characters get a placeholder as wide as themselves
	return WORD_CHAR.sub(lambda m: glyph * cell_len(m.group()), text)


class QuizState(enum.Enum):
	PRESENTING = 'presenting'
	AWAITING_MATCH = 'awaiting'
	REVEALED = 'revealed'
	SKIPPED = 'skipped'
	ABORTED = 'aborted'


class QuizSession:
	"""Reveal one sentence as the learner types it.

	Word characters have to be typed (case does not matter), everything else
	is revealed on its own. The learner can replay the audio, give away a
	single character, move on to the next sentence or quit.
	"""

	def __init__(self, sentence: Sentence, keys: KeyReader, speaker: Speaker, console: Console, settings: Settings):
		self.sentence = sentence
		self.keys = keys
		self.speaker = speaker
		self.console = console
		self.settings = settings
		self.cursor = 0
		self.state = QuizState.PRESENTING
		self.audio_tasks = []

	@property
	def revealed(self) -> str:
		return self.sentence.target[:self.cursor]

	def run(self) -> QuizState:
		self.present()
		try:
			return self.drive()
		except KeyboardInterrupt:
			# ctrl-c while the terminal is between raw reads
			self.state = QuizState.ABORTED
			self.spoil()
			return self.state

	def drive(self) -> QuizState:
		target = self.sentence.target

		while True:
			if self.cursor == len(target):
				self.state = QuizState.REVEALED
				self.confirm()
				return self.state

			if not is_word_char(target[self.cursor]):
				self.advance()
				continue

			self.state = QuizState.AWAITING_MATCH
			event = self.keys.read()

			if event.key is Key.QUIT:
				self.state = QuizState.ABORTED
				self.spoil()
				return self.state
			elif event.key is Key.NEXT_SENTENCE:
				self.state = QuizState.SKIPPED
				self.spoil()
				return self.state
			elif event.key is Key.REPLAY_AUDIO:
				self.speak(target_only=True)
			elif event.key is Key.SKIP_CHAR:
				self.advance()
			elif event.key is Key.CHAR and event.char.casefold() == target[self.cursor].casefold():
				self.advance()

	def present(self):
		self.console.print(Text(self.sentence.translation, style='cyan'))
		self.speak()
		self.render()

	def speak(self, target_only: bool = False):
		lines = [(self.sentence.target, self.settings['target_voice'])]
		if not target_only:
			lines.append((self.sentence.translation, self.settings['base_voice']))
		self.audio_tasks.append(speak_async(self.speaker, lines, rate=self.settings['voice_speed']))

	def advance(self):
		self.cursor += 1
		if self.console.is_terminal:
			self.render()

	def render(self):
		hidden = mask(self.sentence.target[self.cursor:], self.settings['mask'])
		self.console.control(Control.move_to_column(0))
		self.console.print(Text.assemble((self.revealed, 'yellow'), (hidden, 'dim')), end='')
		self.console.control(Control.move_to_column(cell_len(self.revealed)))

	def confirm(self):
		# same width as the quiz line, so it is drawn over it
		if self.console.is_terminal:
			self.console.control(Control.move_to_column(0))
		else:
			self.console.print()
		self.console.print(Text(self.sentence.target, style='bold green'))

	def spoil(self):
		self.console.print()
		self.console.print(Text(self.sentence.target, style='red'))


class Playback:
	"""Show and speak sentences with no input, pausing between them.

	Unlike the quiz, each sentence waits for its `say` calls to finish before
	the pause, so consecutive sentences never talk over each other.
	"""

	def __init__(self, speaker: Speaker, console: Console, settings: Settings):
		self.speaker = speaker
		self.console = console
		self.settings = settings

	def announce(self, sentence: Sentence):
		self.console.print(f'[dim]{sentence.id}[/] ', end='')
		self.console.print(Text(sentence.target, style='yellow'))
		self.console.print(Text(sentence.translation, style='cyan'))
		speak_lines(
			self.speaker,
			[(sentence.target, self.settings['target_voice']), (sentence.translation, self.settings['base_voice'])],
			rate=self.settings['voice_speed']
		)

	def run(self, sentences):
		for sentence in sentences:
			self.announce(sentence)
			time.sleep(self.settings['pause'])


class Engine:

	def __init__(self, store: SentenceStore, speaker: Speaker, settings: Settings, console: Console | None = None, keys: KeyReader | None = None):
		self.store = store
		self.speaker = speaker
		self.settings = settings
		self.console = console or DrillConsole(highlight=False)
		self.keys = keys or KeyReader()

	def print(self, *args, **kwargs):
		self.console.print(*args, **kwargs)

	def do_list(self):
		for sentence in self.store:
			self.print(f'{sentence.id}, {sentence.target}, {sentence.translation}', markup=False)

	def do_play(self, sentences):
		Playback(self.speaker, self.console, self.settings).run(sentences)

	def do_quiz(self, sentences) -> bool:
		"""Quiz each sentence in turn; False once the learner quits."""
		self.print('[blue]ctrl-s replay, ctrl-h reveal a letter, ctrl-n next sentence, ctrl-c quit[/]')
		for sentence in sentences:
			self.print(f'\n[dim]{sentence.id}[/]')
			state = QuizSession(sentence, self.keys, self.speaker, self.console, self.settings).run()
			log.debug('sentence %d ended %s', sentence.id, state.value)
			if state is QuizState.ABORTED:
				return False
		return True
