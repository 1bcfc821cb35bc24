"""
Errors raised by the GPT3 client.

Every public operation either returns its typed value or raises
one of these, nothing is retried or swallowed inside the library.
"""

from typing import Optional
from .helpers import code_block_text, error_message

class GPT3Error(Exception):
	"""Base class for everything this package raises."""

class TransportError(GPT3Error):
	"""The http call itself failed (connection, dns, timeout, ...)."""
	def __init__(self, method:str, url:str, exception:Optional[Exception]=None, message:Optional[str]=None):
		self.method = method
		self.url = url
		self.exception = exception
		if message is None:
			message = f"{method} {url} failed with exception:\n{code_block_text(str(exception))}"
		super().__init__(message)

class APIError(TransportError):
	"""The service answered, but with a non 2xx status."""
	def __init__(self, method:str, url:str, status_code:int, body:str, exception:Optional[Exception]=None):
		self.status_code = status_code
		self.body = body
		super().__init__(method, url, exception,
			f"{method} {url} returned http {status_code}:\n{code_block_text(error_message(body))}"
		)

class DecodeError(GPT3Error):
	"""A response body could not be parsed into the expected type."""
	def __init__(self, response_type:str, body:str, exception:Optional[Exception]=None, message:Optional[str]=None):
		self.response_type = response_type
		self.body = body
		self.exception = exception
		if message is None:
			message = f"Could not decode '{response_type}' from response with exception:\n{code_block_text(str(exception))}\n\nResponse body:\n{code_block_text(body[:800], 'json')}"
		super().__init__(message)

class LineDecodeError(DecodeError):
	"""One line of a newline delimited json file could not be decoded."""
	def __init__(self, response_type:str, line_index:int, line:str, exception:Optional[Exception]=None):
		self.line_index = line_index
		self.line = line
		super().__init__(response_type, line, exception,
			f"Line {line_index} is not a valid '{response_type}' record:\n{code_block_text(line, 'json')}\n\nException:\n{code_block_text(str(exception))}"
		)

class BuilderError(GPT3Error):
	"""A request was built without one of its required fields."""
	def __init__(self, field_name:str, request_type:str):
		self.field_name = field_name
		self.request_type = request_type
		super().__init__(f"Missing required field '{field_name}' for '{request_type}'.")
