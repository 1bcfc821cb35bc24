"""
Returns information about a specific file.
"""

from ...json_dataclass import *
from .. import Action, RequestBuilder
from . import Purpose

@json_dataclass(frozen=True)
class FileMetadata:
	'''What the api knows about a stored file.'''

	id: str
	'''The file id used to identify the file.'''

	object: str
	bytes: int
	'''Size of the file in bytes.'''

	created_at: int
	'''Unix time the file was uploaded.'''

	filename: str
	purpose: Purpose

Response = FileMetadata

@json_dataclass(frozen=True)
class Request(Action):
	file_id: str

	method = "GET"
	path = "/files/{file_id}"
	response_type = FileMetadata

class Builder(RequestBuilder[Request]):
	request_type = Request
