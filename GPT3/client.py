"""
Client API for GPT3.
"""

from typing import Any, Optional
import logging
import requests

from .ClientConfig import ClientConfig
from .errors import TransportError, APIError
from .helpers import OPENAI_URL
from .api import Action
from .api.files import File
from .api.files import upload, list as file_list, metadata, content, content_checked, delete

logger = logging.getLogger(__name__)

class Client:
	"""
	Client for making requests to the OpenAI api.

	```python
	client = Client(token)
	request = completions.Builder().model(Model.BABBAGE).prompt("what is 1 + 2?").build()
	response = client.execute(request)
	```
	"""

	def __init__(self, token: str, base_url: str = OPENAI_URL, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
		"""
		Initialize the client.

		Args:
			token: The bearer token sent with every request
			base_url: The url every request path is appended to
			timeout: Default seconds to wait for a response, None for no limit
			session: A requests session to send with, a new one if not given
		"""
		self._token = token
		self.base_url = base_url.rstrip('/')
		self.timeout = timeout
		self.session = session or requests.Session()

	@staticmethod
	def from_config(config: ClientConfig, session: Optional[requests.Session] = None) -> 'Client':
		return Client(config.token, config.base_url, config.timeout, session)

	@property
	def token(self) -> str:
		return self._token

	def execute_raw(self, request: Action, timeout: Optional[float] = None) -> str:
		"""
		Send a request and return the response body without decoding it.

		Args:
			request: The request to send
			timeout: Seconds to wait for this call, overriding the client's default

		Returns:
			The response body as text

		Raises:
			TransportError: if the request could not be sent or no response arrived
			APIError: if the service responded with a non 2xx status
		"""
		url = request.url(self.base_url)
		headers = {"Authorization": f"Bearer {self._token}"}
		kwargs = {}

		multipart = request.multipart()
		if multipart is not None:
			# requests sets the multipart content type and boundary itself.
			kwargs["data"], kwargs["files"] = multipart
		else:
			payload = request.payload()
			if payload is not None:
				headers["Content-Type"] = "application/json"
				kwargs["json"] = payload

		logger.debug("%s %s", request.method, url)
		try:
			response = self.session.request(
				request.method, url,
				headers=headers,
				timeout=timeout if timeout is not None else self.timeout,
				**kwargs
			)
		except requests.RequestException as e:
			raise TransportError(request.method, url, e) from e

		try:
			response.raise_for_status()
		except requests.HTTPError as e:
			logger.warning("%s %s returned http %s", request.method, url, response.status_code)
			raise APIError(request.method, url, response.status_code, response.text, e) from e

		return response.text

	def execute(self, request: Action, timeout: Optional[float] = None) -> Any:
		"""
		Send a request and decode the response into the request's response type.

		Args:
			request: The request to send
			timeout: Seconds to wait for each http call, overriding the client's default

		Returns:
			The decoded response

		Raises:
			TransportError: if the request could not be sent or no response arrived
			APIError: if the service responded with a non 2xx status
			DecodeError: if the response body does not fit the response type
		"""
		return request.execute(self, timeout=timeout)

	def upload_file(self, file: File) -> metadata.FileMetadata:
		"""
		Upload a file of records.

		Args:
			file: The file to upload, its purpose is sent along with it

		Returns:
			The metadata the api created for the file
		"""
		return self.execute(upload.Request(file))

	def list_files(self) -> file_list.Response:
		return self.execute(file_list.Request())

	def retrieve_file(self, file_id: str) -> metadata.FileMetadata:
		return self.execute(metadata.Request(file_id))

	def file_content(self, file_id: str) -> str:
		return self.execute(content.Request(file_id)).content

	def file_content_checked(self, file_id: str) -> File:
		"""
		Get a file's content decoded into the records for its purpose.

		Args:
			file_id: Id of the file to fetch

		Returns:
			The file with its name, purpose and records
		"""
		return self.execute(content_checked.Request(file_id))

	def delete_file(self, file_id: str) -> delete.Response:
		return self.execute(delete.Request(file_id))
