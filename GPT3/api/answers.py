"""
Answers questions from provided context.

The endpoint first searches over provided documents or files to find relevant context.
The relevant context is combined with the provided examples and question to create
the prompt for completion.
"""

from typing import List, Dict, Any, Optional, Union
from ..json_dataclass import *
from ..Model import Model
from . import Action, RequestBuilder

@json_dataclass(frozen=True)
class SelectedDocument:
	document: int
	'''Index of the document.'''

	text: str
	metadata: Optional[Any] = None

@json_dataclass(frozen=True)
class Response:
	answers: List[str]
	completion: str
	'''Id of the completion that produced the answers.'''

	model: str
	object: str
	search_model: str
	selected_documents: List[SelectedDocument] = field(default_factory=list)
	prompt: Optional[str] = None
	'''The final prompt, only present when return_prompt was set.'''

@json_dataclass(frozen=True)
class Request(Action):
	model: Model
	'''Model used for completion.'''

	question: str
	examples: List[List[str]]
	'''
	(question, answer) pairs that will help steer the model towards the tone and answer format you'd like.

	2 to 3 examples are recommended.
	'''

	examples_context: str
	'''A text snippet containing the contextual information used to generate the answers for the examples.'''

	documents: Optional[List[str]] = None
	'''
	Documents from which the answer should be derived.

	Specify either documents or a file, but not both.
	'''

	file: Optional[str] = None
	'''Id of an uploaded file (purpose "answers") to search over.'''

	search_model: Optional[Model] = None
	max_rerank: Optional[int] = None
	'''Maximum number of documents to be ranked by search when using file.'''

	temperature: Optional[float] = None
	logprobs: Optional[int] = None
	max_tokens: Optional[int] = None
	'''Maximum number of tokens for the generated answer. The service defaults to 16.'''

	stop: Optional[Union[str, List[str]]] = None
	n: Optional[int] = None
	logit_bias: Optional[Dict[str, int]] = None
	return_metadata: Optional[bool] = None
	'''Include each document's metadata in the response, only when file is set.'''

	return_prompt: Optional[bool] = None
	expand: Optional[List[str]] = None
	'''Objects ("completion", "file") to return in full rather than by id.'''

	user: Optional[str] = None

	path = "/answers"
	response_type = Response

class Builder(RequestBuilder[Request]):
	request_type = Request
