"""
Returns a list of files that belong to the user's organization.
"""

from typing import List
from ...json_dataclass import *
from .. import Action
from .metadata import FileMetadata

@json_dataclass(frozen=True)
class Response:
	data: List[FileMetadata]
	'''Metadata of every uploaded file.'''

	object: str

@json_dataclass(frozen=True)
class Request(Action):
	method = "GET"
	path = "/files"
	response_type = Response
