"""
Returns the contents of the specified file, decoded according to its purpose.

This differs from `content` in that it makes 2 requests instead of 1. The first
gets the metadata of the file, the second gets the content and decodes each line
into the record type for the purpose the metadata declares.
"""

from typing import Optional, TYPE_CHECKING
import logging

from ...json_dataclass import *
from .. import Action, RequestBuilder
from . import File
from . import content, metadata

if TYPE_CHECKING:
	from ...client import Client

logger = logging.getLogger(__name__)

Response = File

@json_dataclass(frozen=True)
class Request(Action):
	file_id: str

	method = "GET"
	path = "/files/{file_id}/content"
	response_type = File

	def execute(self, client: 'Client', timeout: Optional[float] = None) -> File:
		"""
		Fetch the file's metadata, then its content, and decode the content
		as the record type of the metadata's purpose.

		The purpose always comes from the metadata, never from what the
		content happens to look like.

		Raises:
			TransportError: if either request fails.
			DecodeError: if the metadata can not be decoded.
			LineDecodeError: for the first line that is not a valid record.
		"""
		logger.debug("Resolving content of file '%s': fetching metadata", self.file_id)
		file_metadata = client.execute(metadata.Request(self.file_id), timeout=timeout)

		logger.debug("File '%s' is '%s' for '%s': fetching content", self.file_id, file_metadata.filename, file_metadata.purpose)
		text = client.execute_raw(content.Request(self.file_id), timeout=timeout)

		return resolve(file_metadata, text)

def resolve(file_metadata: metadata.FileMetadata, text: str) -> File:
	'''Build the typed file for fetched metadata and content.'''
	return File.from_json_lines(file_metadata.filename, file_metadata.purpose, text)

class Builder(RequestBuilder[Request]):
	request_type = Request
