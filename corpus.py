import logging
import random
from dataclasses import dataclass
from typing import Iterable, NamedTuple

from errors import SentenceNotFound

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sentence:
	id: int
	target: str
	translation: str


class IdRange(NamedTuple):
	"""Inclusive range of sentence ids, as given on the command line (`3-7`)."""
	start: int
	end: int

	def __str__(self):
		return f'{self.start}-{self.end}'


class SentenceStore:
	"""Sentences ordered by id, fixed once constructed."""

	def __init__(self, sentences: Iterable[Sentence]):
		self._sentences: dict[int, Sentence] = {}
		last_id = 0
		for sentence in sentences:
			if sentence.id <= last_id:
				raise ValueError(f'sentence ids must increase: {sentence.id} after {last_id}')
			self._sentences[sentence.id] = sentence
			last_id = sentence.id

	def __len__(self):
		return len(self._sentences)

	def __iter__(self):
		return iter(self._sentences.values())

	def get(self, key: int | IdRange):
		if isinstance(key, IdRange):
			return self.get_range(*key)
		try:
			return self._sentences[key]
		except KeyError:
			raise SentenceNotFound(key) from None

	def get_range(self, start: int, end: int) -> list[Sentence]:
		return [sentence for sentence in self if start <= sentence.id <= end]

	def sample(self, id_range: IdRange | None = None, rng: random.Random | None = None) -> Sentence:
		# ids are assumed dense from 1, so drawing an id is a uniform draw over sentences
		rng = rng or random
		if id_range is None:
			if not self._sentences:
				raise SentenceNotFound(1)
			id_range = IdRange(1, len(self))
		return self.get(rng.randint(id_range.start, id_range.end))


def parse_corpus(lines: Iterable[str]) -> SentenceStore:
	"""Build a store from alternating target / translation lines."""
	lines = [line.strip() for line in lines]
	sentences = []
	for i in range(0, len(lines) - 1, 2):
		target, translation = lines[i], lines[i + 1]
		if not target or not translation:
			log.debug('skipping incomplete pair at line %d', i + 1)
			continue
		sentences.append(Sentence(len(sentences) + 1, target, translation))
	return SentenceStore(sentences)


def load_corpus(corpus_path: str | None = None) -> SentenceStore:
	if corpus_path is None:
		from sentences import CORPUS
		return parse_corpus(CORPUS.splitlines())

	with open(corpus_path, encoding='utf-8') as f:
		return parse_corpus(f)
