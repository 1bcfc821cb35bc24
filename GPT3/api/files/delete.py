"""
Delete a file.
"""

from ...json_dataclass import *
from .. import Action, RequestBuilder

@json_dataclass(frozen=True)
class Response:
	id: str
	object: str
	deleted: bool
	'''Whether the deletion was successful.'''

@json_dataclass(frozen=True)
class Request(Action):
	file_id: str

	method = "DELETE"
	path = "/files/{file_id}"
	response_type = Response

class Builder(RequestBuilder[Request]):
	request_type = Request
