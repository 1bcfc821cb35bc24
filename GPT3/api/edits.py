"""
Edit text based off of an instruction.

Given a prompt and an instruction, the model will return an edited version of the prompt.
"""

from typing import List, Optional
from ..json_dataclass import *
from ..Model import Model
from . import Action, RequestBuilder
from .completions import Usage

@json_dataclass(frozen=True)
class Choice:
	text: str
	index: int

@json_dataclass(frozen=True)
class Response:
	object: str
	created: int
	choices: List[Choice]
	usage: Optional[Usage] = None

@json_dataclass(frozen=True)
class Request(Action):
	model: Model = wire_excluded()
	instruction: str
	'''The instruction that tells the model how to edit the input.'''

	input: Optional[str] = None
	'''The text to use as a starting point for the edit.'''

	temperature: Optional[float] = None
	top_p: Optional[float] = None
	n: Optional[int] = None

	response_type = Response

	def url(self, base_url: str) -> str:
		return self.model.edit_url("/edits", base_url)

class Builder(RequestBuilder[Request]):
	request_type = Request
