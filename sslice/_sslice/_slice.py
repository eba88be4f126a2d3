from __future__ import annotations
from typing import Generic, Iterable, Iterator, TypeVar, Callable, \
	Any, List, Set, Tuple, Optional, overload, cast

import itertools
import operator
import warnings

from .._utility import NOTHING, Combiner, as_items, check_index, sphinx_build

T = TypeVar('T')

class SSlice(Generic[T]):
	r'''
	Mutable sequence with functional helpers

	Owns an ordered list of items and adds a handful of functional-style
	operations on top of the usual list interface:

		- :meth:`clone` creates an independent copy
		- :meth:`filter` drops, in place, the items failing a predicate
		- :meth:`unique` drops, in place, repeated items
		- :meth:`reduce` folds the items from left to right

	Do not instantiate directly, instead use the factory
	functions :func:`sl` or :func:`sslice` to create an instance.

	The SSlice implements the MutableSequence protocol. Being mutable,
	it is not hashable.

	An optional ``zero`` factory names the zero value of the element type
	(for example :class:`int` or :class:`str`). It is what :meth:`reduce`
	returns for an empty sequence, and it is carried over to every
	sequence derived from this one.

	>>> seq1 = sslice([1, 2, 3, 4, 5])
	>>> seq2 = seq1.clone()
	>>> seq2.filter(lambda x: x % 2 == 0)
	>>> seq1
	sslice([1, 2, 3, 4, 5])
	>>> seq2
	sslice([2, 4])
	>>> sslice([1, 2, 2, 3, 1]).unique()
	sslice([1, 2, 3])
	>>> seq1.reduce(lambda x, y: x + y)
	15
	>>> sslice([], zero=int).reduce(lambda x, y: x + y)
	0
	'''

	__slots__ = ('_items', '_zero')

	if not sphinx_build:
		_items: List[T]
		_zero: Optional[Callable[[], T]]

	def __init__(self, items:Optional[Iterable[T]]=None,
			zero:Optional[Callable[[], T]]=None):
		self._items = [] if items is None else list(items)
		self._zero = zero

	@staticmethod
	def _fromitems(iterable:Optional[Iterable[T]]=None,
			zero:Optional[Callable[[], T]]=None) -> SSlice[T]:
		return SSlice(iterable, zero)

	@property
	def zero(self) -> Optional[Callable[[], T]]:
		'''
		The zero value factory, or ``None``.

		>>> sslice([1, 2], zero=int).zero
		<class 'int'>
		'''
		return self._zero

	def clone(self) -> SSlice[T]:
		r'''
		:math:`O(n)`. Create an independent copy of the sequence.

		The items themselves are shared, not copied; use
		:func:`copy.deepcopy` for that.

		>>> seq1 = sslice([1, 2, 3])
		>>> seq2 = seq1.clone()
		>>> seq2.append(4)
		>>> seq1, seq2
		(sslice([1, 2, 3]), sslice([1, 2, 3, 4]))
		>>> sslice().clone()
		sslice([])
		'''
		return SSlice(self._items, self._zero)

	copy = clone
	__copy__ = clone

	def filter(self, predicate:Callable[[T], Any]) -> None:
		r'''
		:math:`O(n)`. Keep only the items satisfying the predicate.

		Modifies the sequence in place, preserving the relative order of
		the retained items. The predicate is called once per item,
		from left to right.

		>>> seq = sslice([1, 2, 3, 4, 5])
		>>> seq.filter(lambda x: x % 2 == 0)
		>>> seq
		sslice([2, 4])
		>>> seq.filter(lambda x: False)
		>>> seq
		sslice([])
		'''
		self._items = [item for item in self._items if predicate(item)]

	def unique(self, key:Optional[Callable[[T], Any]]=None) -> SSlice[T]:
		r'''
		Remove repeated items, keeping the first occurrence of each.

		Modifies the sequence in place and returns it. Items are compared
		with ``==``, or by the result of ``key`` when given.

		:math:`O(n)` when the items (or keys) are hashable,
		:math:`O(n^2)` in the worst case otherwise.

		>>> sslice([1, 2, 2, 3, 4, 4, 5]).unique()
		sslice([1, 2, 3, 4, 5])
		>>> sslice(['a', 'b', 'a', 'c']).unique()
		sslice(['a', 'b', 'c'])
		>>> sslice([[1], [2], [1]]).unique()
		sslice([[1], [2]])
		>>> sslice(['a', 'B', 'A', 'b']).unique(key=str.lower)
		sslice(['a', 'B'])
		'''
		hashed: Set[Any] = set()
		unhashed: List[Any] = []
		kept: List[T] = []
		for item in self._items:
			mark = item if key is None else key(item)
			try:
				if mark in hashed: continue
			except TypeError:
				if any(mark == other for other in itertools.chain(hashed, unhashed)):
					continue
				unhashed.append(mark)
			else:
				if any(mark == other for other in unhashed): continue
				hashed.add(mark)
			kept.append(item)
		self._items = kept
		return self

	def reduce(self, combine:Combiner[T], default:Any=NOTHING) -> T:
		r'''
		:math:`O(n)`. Fold the items from left to right.

		Starting from the first item, ``combine(accumulator, item)`` is
		applied to each following item in order, so it is called exactly
		``len(self) - 1`` times. A single item is returned unchanged.

		An empty sequence returns ``default`` if given, otherwise the
		result of the zero factory. Without either, a :class:`RuntimeWarning`
		is emitted and ``None`` is returned.

		>>> sslice([1, 2, 3, 4]).reduce(operator.mul)
		24
		>>> sslice([1, 5, 3, 4]).reduce(max)
		5
		>>> sslice([7]).reduce(operator.add)
		7
		>>> sslice([], zero=str).reduce(operator.add)
		''
		>>> sslice().reduce(operator.add, default=-1)
		-1
		'''
		if not self._items:
			if default is not NOTHING: return default
			if self._zero is not None: return self._zero()
			warnings.warn('reduce() of empty sslice with no zero or default',
				RuntimeWarning, stacklevel=2)
			return cast(T, None)
		items = iter(self._items)
		result = next(items)
		for item in items:
			result = combine(result, item)
		return result

	@overload
	def __getitem__(self, index:int) -> T: ...
	@overload
	def __getitem__(self, index:slice) -> SSlice[T]: ...
	def __getitem__(self, index):
		r'''
		>>> seq = sslice([1, 2, 3, 4])
		>>> seq[1], seq[-1]
		(2, 4)
		>>> seq[1:3]
		sslice([2, 3])
		>>> seq[4]
		Traceback (most recent call last):
		...
		IndexError: index out of range: 4
		'''
		if isinstance(index, slice):
			return SSlice(self._items[index], self._zero)
		return self._items[check_index(len(self._items), operator.index(index))]

	@overload
	def __setitem__(self, index:int, value:T) -> None: ...
	@overload
	def __setitem__(self, index:slice, value:Iterable[T]) -> None: ...
	def __setitem__(self, index, value):
		if isinstance(index, slice):
			self._items[index] = list(value)
		else:
			self._items[check_index(len(self._items), operator.index(index))] = value

	def __delitem__(self, index:Any) -> None:
		if isinstance(index, slice):
			del self._items[index]
		else:
			del self._items[check_index(len(self._items), operator.index(index))]

	def __len__(self) -> int:
		return len(self._items)

	def __iter__(self) -> Iterator[T]:
		return iter(self._items)

	def __reversed__(self) -> Iterator[T]:
		return reversed(self._items)

	def __contains__(self, value:Any) -> bool:
		return value in self._items

	def append(self, value:T) -> None:
		self._items.append(value)

	def extend(self, other:Iterable[T]) -> None:
		if isinstance(other, SSlice):
			other = other._items
		self._items.extend(other)

	def insert(self, index:int, value:T) -> None:
		self._items.insert(index, value)

	def pop(self, index:int=-1) -> T:
		r'''
		Remove and return the item at ``index`` (default last).

		>>> seq = sslice([1, 2, 3])
		>>> seq.pop(), seq.pop(0), seq
		(3, 1, sslice([2]))
		>>> sslice().pop()
		Traceback (most recent call last):
		...
		IndexError: pop from empty sslice
		'''
		if not self._items:
			raise IndexError('pop from empty sslice')
		return self._items.pop(check_index(len(self._items), operator.index(index)))

	def remove(self, value:T) -> None:
		del self._items[self.index(value)]

	def clear(self) -> None:
		self._items = []

	def index(self, value:Any, start:int=0, stop:Optional[int]=None) -> int:
		if stop is None:
			stop = len(self._items)
		return self._items.index(value, start, stop)

	def count(self, value:Any) -> int:
		return self._items.count(value)

	def reverse(self) -> None:
		self._items.reverse()

	def sort(self, *, key:Optional[Callable[[T], Any]]=None, reverse:bool=False) -> None:
		r'''
		:math:`O(n\log{n})`. Sort the sequence in place.

		Arguments are the same as :meth:`python:list.sort`.

		>>> seq = sslice([3, 1, 4, 2])
		>>> seq.sort()
		>>> seq
		sslice([1, 2, 3, 4])
		'''
		self._items.sort(key=key, reverse=reverse)

	def tolist(self) -> List[T]:
		return list(self._items)

	def totuple(self) -> Tuple[T, ...]:
		return tuple(self._items)

	def __add__(self, other:Iterable[T]) -> SSlice[T]:
		r'''
		>>> sslice([1, 2]) + [3, 4]
		sslice([1, 2, 3, 4])
		>>> [1, 2] + sslice([3, 4])
		sslice([1, 2, 3, 4])
		'''
		result = self.clone()
		result.extend(other)
		return result

	def __radd__(self, other:Iterable[T]) -> SSlice[T]:
		result = SSlice(other, self._zero)
		result.extend(self)
		return result

	def __iadd__(self, other:Iterable[T]) -> SSlice[T]:
		self.extend(other)
		return self

	def __mul__(self, times:int) -> SSlice[T]:
		return SSlice(self._items * times, self._zero)

	__rmul__ = __mul__

	def __imul__(self, times:int) -> SSlice[T]:
		self._items *= times
		return self

	def _compared(self, other):
		if isinstance(other, SSlice): return other._items
		return as_items(other)

	def __eq__(self, other) -> bool:
		r'''
		Compare against another sequence, the same way lists compare.

		>>> sslice([1, 2]) == [1, 2] == sslice([1, 2])
		True
		>>> sslice([1, 2]) == (1, 2)
		True
		>>> sslice(['a', 'b']) == 'ab'
		False
		'''
		items = self._compared(other)
		if items is NotImplemented: return NotImplemented
		return self._items == items
	def __ne__(self, other) -> bool:
		items = self._compared(other)
		if items is NotImplemented: return NotImplemented
		return self._items != items
	def __gt__(self, other) -> bool:
		items = self._compared(other)
		if items is NotImplemented: return NotImplemented
		return self._items > items
	def __ge__(self, other) -> bool:
		items = self._compared(other)
		if items is NotImplemented: return NotImplemented
		return self._items >= items
	def __lt__(self, other) -> bool:
		items = self._compared(other)
		if items is NotImplemented: return NotImplemented
		return self._items < items
	def __le__(self, other) -> bool:
		items = self._compared(other)
		if items is NotImplemented: return NotImplemented
		return self._items <= items
	__hash__ = None # type: ignore

	def __reduce__(self):
		return SSlice._fromitems, (list(self._items), self._zero)

	def __repr__(self) -> str:
		r'''
		>>> sslice([1, 2, 3])
		sslice([1, 2, 3])
		>>> sslice([], zero=int)
		sslice([], zero=int)
		'''
		if self._zero is None:
			return 'sslice({})'.format(self._items)
		zero = getattr(self._zero, '__qualname__', self._zero)
		return 'sslice({}, zero={})'.format(self._items, zero)

	__str__ = __repr__

# for doctest
def sslice(*args, **kwargs):
	from sslice import sslice as make
	return make(*args, **kwargs)

__all__ = ('SSlice',)
