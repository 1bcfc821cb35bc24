"""
Upload a file that contains records to be used across various endpoints.

The file is sent as multipart form data with two parts, 'purpose'
and 'file' (the newline delimited json content, named by the file's name).
"""

from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass
from .. import Action, RequestBuilder
from . import File
from .metadata import FileMetadata

Response = FileMetadata

@dataclass(frozen=True)
class Request(Action):
	file: File

	method = "POST"
	path = "/files"
	response_type = FileMetadata

	def payload(self) -> Optional[Dict[str, Any]]:
		return None

	def multipart(self) -> Tuple[Dict[str, str], Dict[str, Tuple[str, str]]]:
		data = {"purpose": self.file.purpose.value}
		files = {"file": (self.file.name, self.file.to_json_lines())}
		return data, files

class Builder(RequestBuilder[Request]):
	request_type = Request
