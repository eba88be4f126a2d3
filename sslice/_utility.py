from collections.abc import Sequence
from typing import Any, List, TypeVar, Union, cast
from typing_extensions import Protocol

import builtins

NOTHING = cast(Any, object())

T = TypeVar('T')

class Combiner(Protocol[T]):
	def __call__(self, accumulator:T, item:T) -> T: ...

def as_items(other:Any) -> Union[List[Any], Any]:
	'''
	The items of a comparison operand, as a list.

	Only sequences take part in comparisons, and text is not a sequence
	of items here. Anything else yields ``NotImplemented``.
	'''
	if isinstance(other, list):
		return other
	if isinstance(other, (str, bytes, bytearray)) or not isinstance(other, Sequence):
		return NotImplemented
	return list(other)

def check_index(length:int, index:int) -> int:
	idx = index + length if index < 0 else index
	if not (0 <= idx < length):
		raise IndexError('index out of range: ' + str(index))
	return idx

sphinx_build: bool = getattr(builtins, '__sphinx_build__', False)
