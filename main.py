import argparse
import logging
import os
import re
import sys

from corpus import IdRange, load_corpus
from engine import Engine, Settings
from errors import InvalidArgument, SentenceNotFound
from utils import DrillConsole, SaySpeaker, setup_logging

log = logging.getLogger(__name__)

RANGE = re.compile(r'^(\d+)-(\d+)$')
NUMBER = re.compile(r'^\d+$')


def cast_value(value: str):
	"""`12` -> 12, `3-7` -> IdRange(3, 7), anything else stays text."""
	if NUMBER.match(value):
		return int(value)
	match = RANGE.match(value)
	if match:
		return IdRange(int(match.group(1)), int(match.group(2)))
	return value


def build_parser():
	parser = argparse.ArgumentParser(prog='kalimat', description='Type Malay sentences as you hear them.')
	modes = parser.add_argument_group('modes', 'checked in this order, the first one given wins')
	modes.add_argument('--list', action='store_true', help='print every sentence')
	modes.add_argument('--play', nargs='?', const=True, type=cast_value, metavar='N|A-B', help='play sentences without a quiz')
	modes.add_argument('--test', nargs='?', const=True, type=cast_value, metavar='A-B', help='quiz every sentence in order')
	modes.add_argument('--number', type=cast_value, metavar='N', help='quiz one sentence')
	modes.add_argument('--random', nargs='?', const=True, type=cast_value, metavar='A-B', help='quiz one random sentence')
	parser.add_argument('--corpus', help='line-pair corpus file, target line then translation line')
	parser.add_argument('--settings', help='settings json (see init.py)')
	parser.add_argument('--verbose', '-v', action='store_true', help='debug logging on stderr')
	return parser


def run(argv=None, speaker=None, console=None, keys=None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	setup_logging(args.verbose)

	settings = Settings(args.settings)
	store = load_corpus(args.corpus or settings['corpus'])
	log.debug('loaded %d sentences', len(store))

	speaker = speaker or SaySpeaker(voices=(settings['target_voice'], settings['base_voice']))
	console = console or DrillConsole(highlight=False)
	if not speaker.probe():
		console.print(f'[red]Text to speech is not available (needs `say` with voice {settings["target_voice"]}).[/]')
		return 1

	engine = Engine(store, speaker, settings, console=console, keys=keys)
	try:
		if args.list:
			engine.do_list()
		elif args.play is not None:
			engine.do_play(select(store, '--play', args.play, allow_number=True))
		elif args.test is not None:
			engine.do_quiz(select(store, '--test', args.test))
		elif args.number is not None:
			if not isinstance(args.number, int):
				raise InvalidArgument('--number', args.number)
			engine.do_quiz([store.get(args.number)])
		elif args.random is not None:
			if args.random is True:
				engine.do_quiz([store.sample()])
			elif isinstance(args.random, IdRange):
				engine.do_quiz([store.sample(ordered('--random', args.random))])
			else:
				raise InvalidArgument('--random', args.random)
		else:
			engine.do_quiz([store.sample()])
	except InvalidArgument as e:
		parser.error(str(e))
	except SentenceNotFound as e:
		console.print(f'[red]{e}[/]')
		return 2
	return 0


def select(store, flag, value, allow_number=False):
	"""Sentences named by a mode's value: all of them, a range or a single id."""
	if value is True:
		return list(store)
	if isinstance(value, IdRange):
		return store.get(ordered(flag, value))
	if allow_number and isinstance(value, int):
		return [store.get(value)]
	raise InvalidArgument(flag, value)


def ordered(flag, id_range):
	if id_range.start > id_range.end:
		raise InvalidArgument(flag, str(id_range))
	return id_range


def main_entry():
	try:
		code = run()
		sys.stdout.flush()
	except KeyboardInterrupt:
		# ctrl-c outside a quiz read, e.g. during --play
		code = 0
	except BrokenPipeError:
		# output went to a pager or `head` that stopped reading
		devnull = os.open(os.devnull, os.O_WRONLY)
		os.dup2(devnull, sys.stdout.fileno())
		code = 0
	raise SystemExit(code)


if __name__ == '__main__':
	main_entry()
