from dataclasses import dataclass, Field, field, MISSING
from dataclasses_json import dataclass_json, config
from typing import List, Dict, Any, Type, TypeVar, Generic, Callable, Union, overload
from typing import get_origin, get_args
import collections.abc
import inspect
import types

T = TypeVar('T')

def is_none(value:Any) -> bool:
	return value is None

def always(_:Any) -> bool:
	return True

def is_optional(field_type:Any) -> bool:
	'''
	True for Optional[X], Union[X, None] and X | None annotations.
	'''
	origin = get_origin(field_type)
	if origin is Union or origin is types.UnionType:
		return type(None) in get_args(field_type)
	return False

def wire_excluded() -> Field:
	'''
	A field that is never serialized, for values that only
	shape the request (like the url) and are not part of its body.
	'''
	return field(metadata=config(exclude=always))

class _JSON_DataclassMixin(Generic[T]):
	'''
	Used to type hint dataclass_json methods.

	This is not used at runtime, and you will never get an actual instance of this.
	'''
	def to_dict(self, encode_json:bool=False) -> Dict[str, Any]:
		pass
	def to_json(self, indent:int=None) -> str:
		pass
	@staticmethod
	def from_dict(dict:Dict[str,Any]) -> T:
		pass
	@staticmethod
	def from_json(j:str) -> T:
		pass

@overload
def json_dataclass(frozen:bool=False, omit_none:bool=True, exclude:List[str|Type]=[collections.abc.Callable]) -> Callable[[Type[T]], Type[T] | Type[_JSON_DataclassMixin[T]]]:
	pass

@overload
def json_dataclass(_cls: Type[T]) -> Type[T] | Type[_JSON_DataclassMixin[T]]:
	pass
def json_dataclass(*args, **kwargs) -> Callable[[Type[T]], Type[T] | Type[_JSON_DataclassMixin[T]]] | Type[T] | Type[_JSON_DataclassMixin[T]]:
	def wrap(cls:Type[T]) -> Type[T]:
		return _process_class(cls, *args, **kwargs)

	if len(args)==1 and len(kwargs)==0 and isinstance(args[0], type):
		#if the only argument we have is a type, it's the thing we're decorating:
		return _process_class(args[0])
	# if not, we'll assume _cls is an arg and return a decorator that will treat it like one:
	return wrap

def _process_class(cls: Type[T], frozen:bool=False, omit_none:bool=True, exclude:List[str|Type]=[collections.abc.Callable]) -> Type[T] | Type[_JSON_DataclassMixin[T]]:
	# Organize what things we're to exclude:
	field_exclusion = set()
	type_exclusion = set()
	for item in exclude:
		if isinstance(item, str):
			field_exclusion.add(item)
		else:
			type_exclusion.add(item)

	def set_exclude(field_name:str, predicate:Callable[[Any], bool]):
		'''
		Attach an exclude predicate to this field, keeping
		whatever default and metadata it already had.
		'''
		default = getattr(cls, field_name, MISSING)
		if default is MISSING:
			setattr(cls, field_name, field(metadata=config(exclude=predicate)))
		elif isinstance(default, Field):
			existing = dict(default.metadata)
			if 'dataclasses_json' in existing:
				# Already configured (eg. wire_excluded), leave it alone.
				return
			default.metadata = config(metadata=existing, exclude=predicate)
		else:
			setattr(cls, field_name, field(default=default, metadata=config(exclude=predicate)))

	for field_name, field_type in list(inspect.get_annotations(cls).items()):
		if field_name in field_exclusion:
			set_exclude(field_name, always)
			continue

		type_origin = get_origin(field_type)
		if type_origin in type_exclusion or field_type in type_exclusion:
			set_exclude(field_name, always)
			continue

		# Absent optional values are left out of the wire form, never sent as null:
		if omit_none and is_optional(field_type):
			set_exclude(field_name, is_none)

	cls = dataclass(cls, frozen=frozen)
	cls = dataclass_json(cls)

	return cls
