"""
Files stored with the api and the records they hold.

A file is newline delimited json, one record per line. Which record type
the lines are depends on the purpose the file was uploaded for.
"""

from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, Type, TypeVar
from dataclasses import dataclass, fields, MISSING
from enum import Enum
import json

from ...json_dataclass import *
from ...errors import LineDecodeError
from ...helpers import to_json_lines, split_json_lines

T = TypeVar('T')

class Purpose(Enum):
	'''What a stored file is for, which decides the shape of its lines.'''
	SEARCH = "search"
	ANSWERS = "answers"
	CLASSIFICATIONS = "classifications"
	FINE_TUNING = "fine-tune"

	def __str__(self) -> str:
		return self.value

# Registry to store the record type for each purpose
_RECORD_REGISTRY: Dict[Purpose, Type] = {}

def record(purpose: Purpose) -> Callable[[T], T]:
	"""
	Decorator to register a record class as the line type of files with purpose.

	Args:
		purpose: The purpose to register the record under

	Returns:
		The decorated class
	"""
	def decorator(cls: T) -> T:
		cls.purpose = purpose
		_RECORD_REGISTRY[purpose] = cls
		return cls
	return decorator

def record_type(purpose: Purpose) -> Type:
	return _RECORD_REGISTRY[purpose]

@record(Purpose.SEARCH)
@json_dataclass(frozen=True)
class SearchRecord:
	text: str
	metadata: Optional[Any] = None
	'''Free form value returned alongside the document when return_metadata is set.'''

@record(Purpose.ANSWERS)
@json_dataclass(frozen=True)
class AnswersRecord:
	text: str
	metadata: Optional[Any] = None

@record(Purpose.CLASSIFICATIONS)
@json_dataclass(frozen=True)
class ClassificationsRecord:
	text: str
	label: Optional[str] = None
	metadata: Optional[Any] = None

@record(Purpose.FINE_TUNING)
@json_dataclass(frozen=True)
class FineTuningRecord:
	prompt: str
	completion: str

assert set(_RECORD_REGISTRY) == set(Purpose), "Every purpose needs a record type."

def _check_required(line: Any) -> Any:
	'''Raises ValueError if a field without a default decoded to None.'''
	for f in fields(line):
		required = f.default is MISSING and f.default_factory is MISSING
		if required and getattr(line, f.name) is None:
			raise ValueError(f"required field '{f.name}' is null")
	return line

@dataclass(frozen=True)
class File(Generic[T]):
	'''
	A named collection of records that all share one purpose.

	The purpose is taken from the record type when not given, a file with
	no lines has to be given one.
	'''

	name: str
	lines: Sequence[T]
	purpose: Optional[Purpose] = None

	def __post_init__(self):
		lines = tuple(self.lines)
		object.__setattr__(self, 'lines', lines)

		purpose = self.purpose
		if purpose is None:
			if not lines:
				raise ValueError(f"File '{self.name}' has no lines, so its purpose must be given.")
			purpose = getattr(type(lines[0]), 'purpose', None)
			if purpose is None:
				raise ValueError(f"File '{self.name}' holds {type(lines[0]).__name__}, which is not a record type.")
			object.__setattr__(self, 'purpose', purpose)

		expected = record_type(purpose)
		for index, line in enumerate(lines):
			if type(line) is not expected:
				raise ValueError(f"Line {index} of file '{self.name}' is a {type(line).__name__}, but files for '{purpose}' hold {expected.__name__}.")

	def to_json_lines(self) -> str:
		'''The file's content as uploaded, one json record per line.'''
		return to_json_lines(line.to_dict(encode_json=True) for line in self.lines)

	@staticmethod
	def from_json_lines(name: str, purpose: Purpose, text: str) -> 'File':
		"""
		Decode newline delimited json into a file of purpose's record type.

		Blank lines are skipped. Decoding stops at the first bad line.

		Raises:
			LineDecodeError: with the 0 based index and text of the first line that
				is not json, or not a valid record for purpose.
		"""
		cls = record_type(purpose)
		lines: List[Any] = []
		for index, line in split_json_lines(text):
			try:
				data = json.loads(line)
				if not isinstance(data, dict):
					raise TypeError(f"expected a json object, got {type(data).__name__}")
				lines.append(_check_required(cls.from_dict(data)))
			except (ValueError, KeyError, TypeError, AttributeError) as e:
				raise LineDecodeError(cls.__name__, index, line, e) from e
		return File(name, lines, purpose)
