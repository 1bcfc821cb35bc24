"""
Create completions for a prompt.

Given a prompt, the model will return one or more predicted completions,
and can also return the probabilities of alternative tokens at each position.
"""

from typing import List, Dict, Any, Optional, Union
from ..json_dataclass import *
from ..Model import Model
from . import Action, RequestBuilder

@json_dataclass(frozen=True)
class Choice:
	text: str
	'''The text generated by the model.'''

	index: int

	logprobs: Optional[Dict[str, Any]] = None
	'''Tokens, their log probabilities and offsets, when logprobs was requested.'''

	finish_reason: Optional[str] = None
	'''Why the model stopped, eg. "stop" or "length".'''

@json_dataclass(frozen=True)
class Usage:
	prompt_tokens: int
	total_tokens: int
	completion_tokens: Optional[int] = None

@json_dataclass(frozen=True)
class Response:
	id: str
	object: str
	created: int
	'''Unix time the completion was created.'''

	model: str
	choices: List[Choice]
	usage: Optional[Usage] = None

@json_dataclass(frozen=True)
class Request(Action):
	model: Model = wire_excluded()
	'''Engine to complete with, this only picks the url and is not sent in the body.'''

	prompt: Optional[Union[str, List[str]]] = None
	'''
	The prompt(s) to generate completions for.

	If a prompt is not specified the model will generate as if from the beginning of a new document.
	'''

	suffix: Optional[str] = None
	'''The suffix that comes after a completion of inserted text.'''

	max_tokens: Optional[int] = None
	'''Maximum number of tokens to generate. The service defaults to 16.'''

	temperature: Optional[float] = None
	'''Sampling temperature, higher means more risks. The service defaults to 1.0.'''

	top_p: Optional[float] = None
	'''Nucleus sampling mass, alter this or temperature but not both. The service defaults to 1.0.'''

	n: Optional[int] = None
	'''How many completions to generate for each prompt. The service defaults to 1.'''

	stream: Optional[bool] = None
	logprobs: Optional[int] = None
	'''Include the log probabilities of this many most likely tokens (max 5).'''

	echo: Optional[bool] = None
	'''Echo back the prompt in addition to the completion.'''

	stop: Optional[Union[str, List[str]]] = None
	'''Up to 4 sequences where the service will stop generating.'''

	presence_penalty: Optional[float] = None
	frequency_penalty: Optional[float] = None
	best_of: Optional[int] = None
	'''Generate this many completions server side and return the best, must be greater than n.'''

	logit_bias: Optional[Dict[str, int]] = None
	'''Token id to bias (-100 to 100) applied to the logits before sampling.'''

	user: Optional[str] = None
	'''A unique identifier representing your end-user.'''

	response_type = Response

	def url(self, base_url: str) -> str:
		return self.model.url("/completions", base_url)

class Builder(RequestBuilder[Request]):
	request_type = Request
