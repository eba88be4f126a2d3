from __future__ import annotations

from typing import *

from ._sslice import SSlice, sslice

from lenses import hooks

T = TypeVar('T')

# Lenses must not modify their focus, every hook works on a clone.

@hooks.setitem.register(SSlice)
def _sslice_setitem(self:SSlice[T], index:int, value:T) -> SSlice[T]:
	result = self.clone()
	result[index] = value
	return result
@hooks.contains_add.register(SSlice)
def _sslice_contains_add(self:SSlice[T], item:T) -> SSlice[T]:
	result = self.clone()
	result.append(item)
	return result
@hooks.contains_remove.register(SSlice)
def _sslice_contains_remove(self:SSlice[T], item:T) -> SSlice[T]:
	result = self.clone()
	result.filter(lambda i: item != i)
	return result
@hooks.from_iter.register(SSlice)
def _sslice_from_iter(self:SSlice[T], items:Iterator[T]) -> SSlice[T]:
	return sslice(items, self.zero)
