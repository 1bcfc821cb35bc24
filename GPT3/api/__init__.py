"""
Request/response types for every api action.

Each action module holds a `Request` (what gets sent), a `Response`
(what comes back) and a `Builder` for assembling the request field by field.
"""

from typing import Dict, Type, Any, Optional, TypeVar, Generic, Tuple, TYPE_CHECKING
from dataclasses import fields, MISSING
import json
from urllib.parse import quote

from ..errors import BuilderError, DecodeError
from ..helpers import join_url

if TYPE_CHECKING:
	from ..client import Client

R = TypeVar('R')

class Action:
	"""Base class for all api requests."""

	# Http method and path (formatted with the request's fields) of the action:
	method = "POST"
	path = ""
	# json_dataclass the response body decodes to:
	response_type: Type = None

	@classmethod
	def request_name(cls) -> str:
		return f"{cls.__module__.rsplit('.', 1)[-1]}.{cls.__name__}"

	@classmethod
	def build(cls: Type[R], **values: Any) -> R:
		"""
		Construct the request, checking every required field was supplied.

		Raises:
			BuilderError: naming the first required field that is missing or None.
		"""
		for f in fields(cls):
			if not f.init:
				continue
			required = f.default is MISSING and f.default_factory is MISSING
			if required and values.get(f.name) is None:
				raise BuilderError(f.name, cls.request_name())
		return cls(**values)

	@classmethod
	def builder(cls: Type[R]) -> 'RequestBuilder[R]':
		return RequestBuilder(cls)

	def url(self, base_url: str) -> str:
		params = {f.name: quote(str(getattr(self, f.name)), safe='') for f in fields(self)}
		return join_url(base_url, self.path.format(**params))

	def payload(self) -> Optional[Dict[str, Any]]:
		"""The json body of the request, or None if it has none."""
		if self.method in ("GET", "DELETE"):
			return None
		return self.to_dict(encode_json=True)

	def multipart(self) -> Optional[Tuple[Dict[str, str], Dict[str, Tuple[str, str]]]]:
		"""(data, files) for multipart requests, or None for json ones."""
		return None

	def decode(self, body: str) -> Any:
		"""
		Parse a response body into this action's response type.

		Raises:
			DecodeError: if the body is not json or does not fit the response type.
		"""
		try:
			return self.response_type.from_dict(json.loads(body))
		except (ValueError, KeyError, TypeError, AttributeError) as e:
			raise DecodeError(self.response_type.__name__, body, e) from e

	def execute(self, client: 'Client', timeout: Optional[float] = None) -> Any:
		"""Send this request with client and decode the response."""
		return self.decode(client.execute_raw(self, timeout=timeout))

class RequestBuilder(Generic[R]):
	"""
	Accumulates field values with chained setters, then builds an immutable request.

	```python
	request = completions.Builder().model(Model.CURIE).prompt("Say this is a test").max_tokens(5).build()
	```
	"""

	request_type: Type[R] = None

	def __init__(self, request_type: Optional[Type[R]] = None):
		if request_type is not None:
			self.request_type = request_type
		self._values: Dict[str, Any] = {}

	def __getattr__(self, name: str):
		if name.startswith('_'):
			raise AttributeError(name)
		if name not in {f.name for f in fields(self.request_type) if f.init}:
			raise AttributeError(f"'{self.request_type.request_name()}' has no field '{name}'")

		def setter(value: Any) -> 'RequestBuilder[R]':
			self._values[name] = value
			return self
		return setter

	def build(self) -> R:
		return self.request_type.build(**self._values)
