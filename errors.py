class DrillError(Exception):
	"""Base class for errors the drill reports to the learner."""


class SentenceNotFound(DrillError, KeyError):
	def __init__(self, sentence_id: int):
		super().__init__(sentence_id)
		self.sentence_id = sentence_id

	def __str__(self):
		return f'no sentence with id {self.sentence_id}'


class InvalidArgument(DrillError, ValueError):
	def __init__(self, flag: str, value):
		super().__init__(flag, value)
		self.flag = flag
		self.value = value

	def __str__(self):
		return f'invalid value for {self.flag}: {self.value!r}'


class SpeechUnavailable(DrillError):
	"""The text-to-speech engine (or a voice it needs) cannot be invoked."""
