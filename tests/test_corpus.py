import random
from collections import Counter

import pytest

from corpus import IdRange, Sentence, SentenceStore, load_corpus, parse_corpus
from errors import SentenceNotFound


def test_parse_pairs_lines_in_order():
	store = parse_corpus(['Selamat pagi.\n', 'Good morning.\n', 'Apa khabar?\n', 'How are you?\n'])
	assert list(store) == [
		Sentence(1, 'Selamat pagi.', 'Good morning.'),
		Sentence(2, 'Apa khabar?', 'How are you?'),
	]


def test_parse_ignores_partial_and_blank_trailing_pairs():
	store = parse_corpus(['Satu.', 'One.', '', '', 'Dua.'])
	assert [s.id for s in store] == [1]
	assert len(store) == 1


def test_ids_must_increase():
	with pytest.raises(ValueError):
		SentenceStore([Sentence(2, 'a', 'b'), Sentence(2, 'c', 'd')])
	with pytest.raises(ValueError):
		SentenceStore([Sentence(3, 'a', 'b'), Sentence(1, 'c', 'd')])


def test_get_missing_id():
	store = SentenceStore(Sentence(i, f't{i}', f'e{i}') for i in range(1, 81))
	with pytest.raises(SentenceNotFound) as exc:
		store.get(9999)
	assert exc.value.sentence_id == 9999
	assert '9999' in str(exc.value)


def test_get_range_is_inclusive_and_ordered(store):
	assert [s.id for s in store.get_range(3, 5)] == [3, 4, 5]
	assert [s.id for s in store.get(IdRange(9, 20))] == [9, 10]
	assert store.get_range(11, 20) == []


def test_sample_is_uniform_over_ids():
	store = SentenceStore(Sentence(i, str(i), str(i)) for i in range(1, 7))
	rng = random.Random(1234)
	counts = Counter(store.sample(rng=rng).id for _ in range(6000))
	assert set(counts) == {1, 2, 3, 4, 5, 6}
	assert all(850 < n < 1150 for n in counts.values())


def test_sample_within_range(store):
	rng = random.Random(7)
	ids = {store.sample(IdRange(4, 6), rng=rng).id for _ in range(200)}
	assert ids == {4, 5, 6}


def test_sample_range_outside_store(store):
	with pytest.raises(SentenceNotFound):
		store.sample(IdRange(50, 60))


def test_sample_empty_store():
	with pytest.raises(SentenceNotFound):
		SentenceStore([]).sample()


def test_bundled_corpus():
	store = load_corpus()
	assert len(store) == 40
	assert [s.id for s in store] == list(range(1, 41))
	assert store.get(6) == Sentence(6, 'Tulis nama awak.', 'Write your name.')


def test_load_corpus_file(tmp_path):
	corpus = tmp_path / 'corpus.txt'
	corpus.write_text('Terima kasih.\nThank you.\nJumpa lagi!\nSee you again!\n', encoding='utf-8')
	store = load_corpus(str(corpus))
	assert store.get(2).target == 'Jumpa lagi!'
