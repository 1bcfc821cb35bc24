"""
GPT3 - A client for OpenAI's GPT-3 api.
"""

__version__ = "0.1.0"

from .Model import Model
from .ClientConfig import ClientConfig
from .client import Client
from .errors import (
	GPT3Error,
	TransportError,
	APIError,
	DecodeError,
	LineDecodeError,
	BuilderError
)
from .api import completions, edits, answers, classifications, searches, files
from .api.files import (
	Purpose,
	File,
	SearchRecord,
	AnswersRecord,
	ClassificationsRecord,
	FineTuningRecord
)
