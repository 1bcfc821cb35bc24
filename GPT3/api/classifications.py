"""
Classify a query using labeled examples.

The endpoint first searches over the labeled examples to select the ones most
relevant for the query, then combines them with the query to construct a prompt
that produces the final label via the completions endpoint.
"""

from typing import List, Dict, Any, Optional
from ..json_dataclass import *
from ..Model import Model
from . import Action, RequestBuilder

@json_dataclass(frozen=True)
class SelectedExample:
	document: int
	label: str
	text: str
	metadata: Optional[Any] = None

@json_dataclass(frozen=True)
class Response:
	completion: str
	label: str
	'''The label chosen for the query.'''

	model: str
	object: str
	search_model: str
	selected_examples: List[SelectedExample] = field(default_factory=list)
	prompt: Optional[str] = None

@json_dataclass(frozen=True)
class Request(Action):
	model: Model
	query: str
	'''Query to be classified.'''

	examples: Optional[List[List[str]]] = None
	'''
	(text, label) pairs to classify against.

	Specify either examples or a file, but not both.
	'''

	file: Optional[str] = None
	'''Id of an uploaded file (purpose "classifications") holding the labeled examples.'''

	labels: Optional[List[str]] = None
	'''The set of categories being classified, inferred from the examples when absent.'''

	search_model: Optional[Model] = None
	temperature: Optional[float] = None
	logprobs: Optional[int] = None
	max_examples: Optional[int] = None
	'''Maximum number of examples to be ranked by search when using file.'''

	logit_bias: Optional[Dict[str, int]] = None
	return_prompt: Optional[bool] = None
	return_metadata: Optional[bool] = None
	expand: Optional[List[str]] = None
	user: Optional[str] = None

	path = "/classifications"
	response_type = Response

class Builder(RequestBuilder[Request]):
	request_type = Request
