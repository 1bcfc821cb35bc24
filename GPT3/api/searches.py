"""
Rank documents against a query.

Given a query and a set of documents, the model ranks each document
based on its semantic similarity to the query.
"""

from typing import List, Any, Optional
from ..json_dataclass import *
from ..Model import Model
from . import Action, RequestBuilder

@json_dataclass(frozen=True)
class Data:
	document: int
	'''Index of the document that matched.'''

	object: str
	score: float
	'''Similarity of the document to the query, higher is closer.'''

	text: Optional[str] = None
	metadata: Optional[Any] = None

@json_dataclass(frozen=True)
class Response:
	data: List[Data]
	object: Optional[str] = None
	model: Optional[str] = None

@json_dataclass(frozen=True)
class Request(Action):
	model: Model = wire_excluded()
	query: str
	documents: Optional[List[str]] = None
	'''Up to 200 documents to search over. Specify either documents or a file, but not both.'''

	file: Optional[str] = None
	'''Id of an uploaded file (purpose "search") to search over.'''

	max_rerank: Optional[int] = None
	return_metadata: Optional[bool] = None
	user: Optional[str] = None

	response_type = Response

	def url(self, base_url: str) -> str:
		return self.model.url("/search", base_url)

class Builder(RequestBuilder[Request]):
	request_type = Request
