import logging
import os
import re
import subprocess
import sys
import threading
from typing import Protocol

from rich.console import Console
from rich.logging import RichHandler

from errors import SpeechUnavailable

CUR_FILE = os.path.abspath(__file__)
CUR_DIR = os.path.dirname(CUR_FILE)

log = logging.getLogger(__name__)


def path(path: str):
	return os.path.join(CUR_DIR, path)


def setup_logging(verbose: bool = False):
	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.WARNING,
		format='%(message)s',
		datefmt='[%X]',
		handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
	)


class DrillConsole(Console):
	"""Learner-facing console; a reader that stops reading stdout ends the drill cleanly."""

	def on_broken_pipe(self):
		self.quiet = True
		devnull = os.open(os.devnull, os.O_WRONLY)
		os.dup2(devnull, sys.stdout.fileno())
		raise SystemExit(0)


class Speaker(Protocol):
	def speak(self, text: str, voice: str | None = None, rate: int | None = None) -> None: ...

	def probe(self) -> bool: ...


class SaySpeaker:
	"""Text-to-speech through the system's `say` utility."""

	def __init__(self, voices: tuple[str, ...] = (), binary: str = 'say'):
		self.voices = voices
		self.binary = binary

	def speak(self, text: str, voice: str | None = None, rate: int | None = None):
		command = [self.binary]
		if voice:
			command += ['-v', voice]
		if rate:
			command += ['-r', str(rate)]
		command.append(text)

		log.debug('speaking %r with voice %s', text, voice)
		try:
			subprocess.run(command, check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
		except (OSError, subprocess.CalledProcessError) as e:
			raise SpeechUnavailable(f'{self.binary} failed: {e}') from e

	def installed_voices(self) -> set[str]:
		try:
			result = subprocess.run(
				[self.binary, '-v', '?'],
				check=True,
				capture_output=True,
				text=True
			)
		except (OSError, subprocess.CalledProcessError) as e:
			raise SpeechUnavailable(f'{self.binary} failed: {e}') from e

		# "Amira               ms_MY    # Selamat pagi, ..." : names may hold single spaces
		return {
			re.split(r'\s{2,}', line.strip())[0]
			for line in result.stdout.splitlines()
			if line.strip()
		}

	def probe(self) -> bool:
		try:
			installed = self.installed_voices()
		except SpeechUnavailable as e:
			log.debug('speech probe failed: %s', e)
			return False

		missing = [voice for voice in self.voices if voice not in installed]
		if missing:
			log.debug('voices not installed: %s', ', '.join(missing))
			return False
		return True


def speak_lines(speaker: Speaker, lines, rate=None):
	"""Speak (text, voice) pairs one after another."""
	for text, voice in lines:
		speaker.speak(text, voice=voice, rate=rate)


def speak_async(speaker: Speaker, lines, rate=None) -> threading.Thread:
	"""Start background playback of (text, voice) pairs; the caller never waits on it."""
	lines = list(lines)

	def play():
		try:
			speak_lines(speaker, lines, rate=rate)
		except SpeechUnavailable as e:
			log.warning('audio playback failed: %s', e)

	thread = threading.Thread(target=play, daemon=True)
	thread.start()
	return thread
