"""
Returns the contents of the specified file.
"""

from ...json_dataclass import *
from .. import Action, RequestBuilder

@json_dataclass(frozen=True)
class Response:
	content: str
	'''The raw file content, newline delimited json.'''

@json_dataclass(frozen=True)
class Request(Action):
	file_id: str

	method = "GET"
	path = "/files/{file_id}/content"
	response_type = Response

	def decode(self, body: str) -> Response:
		# The body is the file itself, not a json document.
		return Response(content=body)

class Builder(RequestBuilder[Request]):
	request_type = Request
