from __future__ import annotations
from collections.abc import MutableSequence
from typing import TypeVar, Tuple, Optional, Iterable, Callable

from ._slice import SSlice

T = TypeVar('T')

MutableSequence.register(SSlice)

def sslice(iterable:Optional[Iterable[T]]=None,
		zero:Optional[Callable[[], T]]=None) -> SSlice[T]:
	r'''
	Create a :class:`SSlice` from the given items

	The items are copied, the sequence never shares storage with
	``iterable``. ``zero`` is an optional factory for the zero value
	of the element type, see :meth:`SSlice.reduce`.

	:math:`O(n)`

	>>> sslice()
	sslice([])
	>>> sslice([1,2,3,4])
	sslice([1, 2, 3, 4])
	>>> sslice([], zero=int)
	sslice([], zero=int)
	'''
	return SSlice._fromitems(iterable, zero)

def sl(*elements:T) -> SSlice[T]:
	'''
	Shorthand for :func:`sslice`

	>>> sl(1,2,3,4)
	sslice([1, 2, 3, 4])
	'''
	return sslice(elements)

__all__: Tuple[str, ...] = ('sl', 'sslice', 'SSlice')
