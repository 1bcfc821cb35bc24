from enum import Enum
from .helpers import OPENAI_URL, join_url

class Model(Enum):
	'''
	The GPT-3 engines a request can be sent to.

	The value is the name the service uses for the model in request
	bodies (eg. answers' search_model), the engine is what goes in the url.
	'''

	ADA = "ada"
	'''
	Capable of very simple tasks, usually the fastest model in the GPT-3 series, and lowest cost.

	Good at parsing text, simple classification, address correction and keywords.
	'''

	BABBAGE = "babbage"
	'''
	Capable of straightforward tasks, very fast, and lower cost.

	Good at moderate classification and semantic search ranking.
	'''

	CURIE = "curie"
	'''
	Very capable, but faster and lower cost than Davinci.

	Good at language translation, complex classification, sentiment and summarization.
	'''

	DAVINCI = "davinci"
	'''
	Most capable GPT-3 model. Can do any task the other models can do, often with less context.

	Good at complex intent, cause and effect and summarization for an audience.
	'''

	@property
	def engine(self) -> str:
		return _ENGINES[self]

	@property
	def edit_engine(self) -> str:
		return _EDIT_ENGINES[self]

	def url(self, action:str, base_url:str=OPENAI_URL) -> str:
		'''
		Full url for an action (eg. '/completions') on this model's engine.
		'''
		return join_url(base_url, "engines", self.engine, action)

	def edit_url(self, action:str, base_url:str=OPENAI_URL) -> str:
		'''
		Full url for an action on the engine that serves edits for this model.
		'''
		return join_url(base_url, "engines", self.edit_engine, action)

_ENGINES = {
	Model.ADA: "text-ada-001",
	Model.BABBAGE: "text-babbage-001",
	Model.CURIE: "text-curie-001",
	Model.DAVINCI: "text-davinci-002",
}

# There is a single text edit engine, every model edits through it.
_EDIT_ENGINES = {
	Model.ADA: "text-davinci-edit-001",
	Model.BABBAGE: "text-davinci-edit-001",
	Model.CURIE: "text-davinci-edit-001",
	Model.DAVINCI: "text-davinci-edit-001",
}

assert set(_ENGINES) == set(Model), "Every model needs an engine."
assert set(_EDIT_ENGINES) == set(Model), "Every model needs an edit engine."
