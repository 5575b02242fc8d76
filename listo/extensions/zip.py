from __future__ import annotations
import typing
from itertools import zip_longest
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import OrderedList


class ZipAccessor(Generic[T]):
    def __init__(self, list_instance: 'OrderedList[T]'):
        self._list = list_instance

    def __call__(self, other: Iterable[U]) -> 'OrderedList[Tuple[T, U]]':
        """lst.zip(other) is lst.zip.pairs(other)"""
        return self.pairs(other)

    def pairs(self, other: Iterable[U]) -> 'OrderedList[Tuple[T, U]]':
        """index-wise pairs, truncated to the shorter sequence"""
        from ..container import OrderedList
        return OrderedList(zip(self._list._get_data(), other))

    def interleave(self, other: Iterable[T]) -> 'OrderedList[T]':
        """alternate elements by index, then append the longer sequence's tail"""
        from ..container import OrderedList
        # use a sentinel object to distinguish from a none element
        sentinel = object()
        result = []
        for mine, theirs in zip_longest(self._list._get_data(), other, fillvalue=sentinel):
            if mine is not sentinel: result.append(mine)
            if theirs is not sentinel: result.append(theirs)
        return OrderedList(result)

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'OrderedList[V]':
        """zip two sequences with custom result selector"""
        from ..container import OrderedList
        return OrderedList(result_selector(t, u) for t, u in zip(self._list._get_data(), other))

    def zip_longest_with(self, other: Iterable[U],
                         result_selector: Callable[[Optional[T], Optional[U]], V],
                         default_self: Optional[T] = None, default_other: Optional[U] = None) -> 'OrderedList[V]':
        """zip sequences padding shorter with defaults"""
        from ..container import OrderedList
        sentinel = object()
        result = []
        for t, u in zip_longest(self._list._get_data(), other, fillvalue=sentinel):
            s_item = t if t is not sentinel else default_self
            o_item = u if u is not sentinel else default_other
            result.append(result_selector(s_item, o_item))
        return OrderedList(result)
