from typing import Optional
from .json_dataclass import *
from .helpers import OPENAI_URL

@json_dataclass(frozen=True)
class ClientConfig:
	'''
	Everything a Client needs to talk to the api.
	'''

	token: str
	'''Bearer token sent with every request.'''

	base_url: str = OPENAI_URL
	'''Origin and version prefix every request path is appended to.'''

	timeout: Optional[float] = None
	'''Seconds to wait for the service before giving up. None leaves it to requests (no timeout).'''

	def __repr__(self) -> str:
		return f"ClientConfig(token='***', base_url={self.base_url!r}, timeout={self.timeout!r})"
